from typing import Dict, List, Set

from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.crud.document import get_documents_by_ids
from docsearch.models.document import Document
from docsearch.services.calculation import compute_tf_idf_score, normalize_by_length
from docsearch.services.indexer import InvertedIndex

def find_candidates(query_terms: List[str], index: InvertedIndex) -> Set[int]:
    candidates = set()
    for term in query_terms:
        candidates |= index.doc_ids(term)
    return candidates

def score_documents(
    query_terms: List[str],
    documents: List[Document],
    index: InvertedIndex
) -> Dict[int, float]:
    scores = {}
    for doc in documents:
        raw = compute_tf_idf_score(query_terms, doc.term_frequency or {}, index.idf)
        scores[doc.id] = normalize_by_length(raw, len(doc.terms or []))
    return scores

async def calculate_relevance(
    db: AsyncSession,
    query_terms: List[str],
    index: InvertedIndex
) -> Dict[int, float]:
    """Normalized TF-IDF score for every document sharing a term with the query.

    Scores can be negative when a query term occurs in most of the collection.
    """
    candidates = find_candidates(query_terms, index)
    if not candidates:
        return {}

    documents = await get_documents_by_ids(db, candidates)
    return score_documents(query_terms, documents, index)

import logging
import time
from dataclasses import dataclass
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.core.exceptions import InvalidInput
from docsearch.crud.document import get_documents_by_ids
from docsearch.models.document import Document
from docsearch.services.calculation import rank_by_score
from docsearch.services.indexer import load_inverted_index
from docsearch.services.preprocessor import preprocess_text
from docsearch.services.relevance import calculate_relevance
from docsearch.services.search_cache import SearchCache

logger = logging.getLogger(__name__)

@dataclass
class SearchResult:
    results: List[Document]
    scores: Dict[int, float]
    cached: bool
    elapsed_time: float = 0.0

async def resolve_documents(db: AsyncSession, ranked_ids: List[int]) -> List[Document]:
    """Documents for ``ranked_ids`` in that order; ids that no longer exist are dropped."""
    documents = await get_documents_by_ids(db, ranked_ids)
    by_id = {doc.id: doc for doc in documents}
    return [by_id[doc_id] for doc_id in ranked_ids if doc_id in by_id]

async def search_query(db: AsyncSession, query: str, cache: SearchCache = None) -> SearchResult:
    if query is None or not query.strip():
        raise InvalidInput("Search query is required")

    cache = cache or SearchCache(db)
    start_time = time.time()

    cached = await cache.get(query)
    if cached is not None:
        ranked_ids, scores = cached
        results = await resolve_documents(db, ranked_ids)
        logger.info("Returning cached results for query %r", query)
        return SearchResult(results=results, scores=scores, cached=True, elapsed_time=time.time() - start_time)

    index = await load_inverted_index(db)
    query_terms = preprocess_text(query)
    scores = await calculate_relevance(db, query_terms, index)

    ranked_ids = rank_by_score(scores)
    results = await resolve_documents(db, ranked_ids)

    # Empty result sets are never cached
    if results:
        await cache.put(query, [doc.id for doc in results], scores)

    elapsed_time = time.time() - start_time
    logger.debug("Search %r: %d results in %.3fs", query, len(results), elapsed_time)

    return SearchResult(results=results, scores=scores, cached=False, elapsed_time=elapsed_time)

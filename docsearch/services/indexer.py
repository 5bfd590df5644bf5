import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.core.exceptions import InvalidInput, NotFound
from docsearch.crud.document import create_document, get_all_documents, get_document_by_id
from docsearch.models.document import Document
from docsearch.services.calculation import compute_idf
from docsearch.services.preprocessor import preprocess_text, calculate_term_frequency

logger = logging.getLogger(__name__)

@dataclass
class InvertedIndex:
    postings: Dict[str, Set[int]] = field(default_factory=dict)
    idf: Dict[str, float] = field(default_factory=dict)
    document_count: int = 0

    def doc_ids(self, term: str) -> Set[int]:
        return self.postings.get(term, set())

def build_inverted_index(documents: Iterable[Document]) -> InvertedIndex:
    postings: Dict[str, Set[int]] = {}
    N = 0

    for doc in documents:
        N += 1
        for term in doc.terms:
            postings.setdefault(term, set()).add(doc.id)

    idf = {term: compute_idf(len(doc_ids), N) for term, doc_ids in postings.items()}
    return InvertedIndex(postings=postings, idf=idf, document_count=N)

async def load_inverted_index(db: AsyncSession) -> InvertedIndex:
    start = time.time()
    documents = await get_all_documents(db)
    index = build_inverted_index(documents)
    logger.debug(
        "Inverted index built: %d documents, %d terms in %.3fs",
        index.document_count, len(index.postings), time.time() - start
    )
    return index

def _check_fields(title, content, where: str = ""):
    if not isinstance(title, str) or not title.strip():
        raise InvalidInput(f"{where}Title is required and must be text")
    if not isinstance(content, str):
        raise InvalidInput(f"{where}Content is required and must be text")

async def index_document(db: AsyncSession, title: str, content: str) -> Document:
    _check_fields(title, content)

    terms = preprocess_text(content)
    term_frequency = calculate_term_frequency(terms)

    doc = await create_document(db, title.strip(), content, terms, term_frequency)
    logger.info("Indexed document %d (%d terms)", doc.id, len(terms))
    return doc

async def index_multiple_documents(db: AsyncSession, documents: List[dict]) -> List[Document]:
    # Validate the whole batch before writing any of it
    for i, doc in enumerate(documents):
        if not isinstance(doc, dict):
            raise InvalidInput(f"Document at position {i} must be an object with title and content")
        _check_fields(doc.get("title"), doc.get("content"), f"Document at position {i}: ")

    indexed = []
    for doc in documents:
        indexed.append(await index_document(db, doc["title"], doc["content"]))
    return indexed

async def get_indexed_document(db: AsyncSession, id: int) -> Document:
    doc = await get_document_by_id(db, id)
    if doc is None:
        raise NotFound("Document", id)
    return doc

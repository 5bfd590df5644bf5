import glob
import logging
import os
from typing import Dict, List, Optional

import aiofiles
from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.core.config import SAMPLE_DOCS_DIR
from docsearch.crud.document import delete_all_documents
from docsearch.crud.search_cache import clear_cache
from docsearch.models.document import Document
from docsearch.services.indexer import index_multiple_documents

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENTS = [
    {
        "title": "Introduction to Information Retrieval",
        "content": "Information retrieval is the activity of obtaining information system resources that are relevant to an information need from a collection of those resources. Searches can be based on full-text or other content-based indexing."
    },
    {
        "title": "Search Engines",
        "content": "Search engines are software systems that are designed to carry out web searches. They search the World Wide Web in a systematic way for particular information specified in a textual web search query."
    },
    {
        "title": "TF-IDF Ranking",
        "content": "TF-IDF stands for term frequency-inverse document frequency. It is a numerical statistic that is intended to reflect how important a word is to a document in a collection or corpus."
    },
    {
        "title": "Document Indexing",
        "content": "Indexing in the context of search engines refers to the process of collecting, parsing, and storing data to facilitate fast and accurate information retrieval."
    },
    {
        "title": "Query Processing",
        "content": "Query processing is one of the most important tasks in a search engine. It involves transforming the user query into a form that the search engine can understand and use to retrieve relevant documents."
    },
]

async def read_sample_directory(documents_dir: str) -> List[Dict[str, str]]:
    """Every ``.txt`` file in the directory, titled by its file name."""
    documents = []
    for path in sorted(glob.glob(os.path.join(documents_dir, "*.txt"))):
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            content = await f.read()
        title = os.path.splitext(os.path.basename(path))[0]
        documents.append({"title": title, "content": content})
    return documents

async def load_sample_documents(db: AsyncSession, documents_dir: Optional[str] = SAMPLE_DOCS_DIR) -> List[Document]:
    documents = SAMPLE_DOCUMENTS
    if documents_dir and os.path.isdir(documents_dir):
        from_dir = await read_sample_directory(documents_dir)
        if from_dir:
            documents = from_dir
        else:
            logger.warning("No .txt documents in %s, using built-in samples", documents_dir)

    # Replacing the corpus makes every cached ranking meaningless
    await delete_all_documents(db)
    await clear_cache(db)

    indexed = await index_multiple_documents(db, documents)
    logger.info("Loaded %d sample documents", len(indexed))
    return indexed

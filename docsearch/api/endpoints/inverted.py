from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.api.deps import get_db
from docsearch.schemas.inverted import InvertedEntry
from docsearch.services.indexer import load_inverted_index
from docsearch.services.preprocessor import preprocess_text

router = APIRouter(prefix="/api", tags=["Index"])

@router.get("/inverted/", response_model=list[InvertedEntry])
async def read_inverted_entries(
    term: str = Query(None),
    db: AsyncSession = Depends(get_db)
):
    """Postings and IDF for each normalized term of ``term``."""
    if not term:
        raise HTTPException(status_code=400, detail="Term is required")

    terms = preprocess_text(term)
    if not terms:
        raise HTTPException(status_code=400, detail=f"'{term}' has no indexable terms")

    index = await load_inverted_index(db)
    entries = []
    for t in dict.fromkeys(terms):
        doc_ids = sorted(index.doc_ids(t))
        entries.append(InvertedEntry(term=t, doc_ids=doc_ids, df=len(doc_ids), idf=index.idf.get(t, 0.0)))
    return entries

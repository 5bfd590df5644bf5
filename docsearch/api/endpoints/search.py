from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.api.deps import get_db
from docsearch.core.exceptions import InvalidInput
from docsearch.schemas.search import SearchResponse
from docsearch.services.search_engine import search_query

router = APIRouter(prefix="/api", tags=["Search"])

@router.get("/search", response_model=SearchResponse)
async def search(
    query: str = Query(None),
    db: AsyncSession = Depends(get_db),
):
    try:
        result = await search_query(db, query)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "results": result.results,
        "scores": result.scores,
        "cached": result.cached,
        "elapsed_time": result.elapsed_time,
    }

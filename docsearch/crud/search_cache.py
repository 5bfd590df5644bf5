from datetime import datetime, timedelta, timezone
from typing import Dict, List

from sqlalchemy import delete
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from docsearch.models.search_cache import SearchCacheEntry

def _cutoff(ttl_seconds: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(seconds=ttl_seconds)

async def get_cache_entry(db: AsyncSession, query: str, ttl_seconds: int):
    result = await db.execute(
        select(SearchCacheEntry)
        .where(SearchCacheEntry.query == query, SearchCacheEntry.created_at > _cutoff(ttl_seconds))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()

async def upsert_cache_entry(
    db: AsyncSession,
    query: str,
    results: List[int],
    scores: Dict[int, float]
):
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        insert = pg_insert
    elif dialect == "sqlite":
        insert = sqlite_insert
    else:
        raise ValueError(f"Unsupported database dialect for cache upsert: {dialect}")

    values = {
        "query": query,
        "results": list(results),
        # JSON object keys are strings
        "relevance_scores": {str(doc_id): score for doc_id, score in scores.items()},
        "created_at": datetime.now(timezone.utc),
    }
    stmt = insert(SearchCacheEntry).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=[SearchCacheEntry.query],
        set_={
            "results": stmt.excluded.results,
            "relevance_scores": stmt.excluded.relevance_scores,
            "created_at": stmt.excluded.created_at,
        },
    )
    await db.execute(stmt)
    await db.commit()

async def purge_expired_cache(db: AsyncSession, ttl_seconds: int) -> int:
    result = await db.execute(
        delete(SearchCacheEntry).where(SearchCacheEntry.created_at <= _cutoff(ttl_seconds))
    )
    await db.commit()
    return result.rowcount

async def clear_cache(db: AsyncSession):
    await db.execute(delete(SearchCacheEntry))
    await db.commit()

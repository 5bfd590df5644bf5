import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.core.config import CACHE_TTL_SECONDS
from docsearch.crud.search_cache import get_cache_entry, upsert_cache_entry, purge_expired_cache

logger = logging.getLogger(__name__)

class SearchCache:
    """Ranked results keyed by the exact raw query string.

    Entries are not invalidated when documents are added, so a cached query
    can miss new documents until its entry expires.
    """

    def __init__(self, db: AsyncSession, ttl_seconds: int = CACHE_TTL_SECONDS):
        self.db = db
        self.ttl_seconds = ttl_seconds

    async def get(self, query: str) -> Optional[Tuple[List[int], Dict[int, float]]]:
        entry = await get_cache_entry(self.db, query, self.ttl_seconds)
        if entry is None:
            return None
        scores = {int(doc_id): score for doc_id, score in (entry.relevance_scores or {}).items()}
        return list(entry.results or []), scores

    async def put(self, query: str, ranked_ids: List[int], scores: Dict[int, float]):
        await upsert_cache_entry(self.db, query, ranked_ids, scores)

    async def purge_expired(self) -> int:
        removed = await purge_expired_cache(self.db, self.ttl_seconds)
        if removed:
            logger.info("Purged %d expired cache entries", removed)
        return removed

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, JSON, DateTime, UniqueConstraint

from docsearch.db.base import Base

class SearchCacheEntry(Base):
    __tablename__ = "search_cache"

    id = Column(Integer, primary_key=True, index=True)
    query = Column(String, nullable=False)

    # Ranked document ids and the id -> score map they were sorted by
    results = Column(JSON, nullable=False, default=list)
    relevance_scores = Column(JSON, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), nullable=False, index=True, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint('query', name='uq_search_cache_query'),
    )

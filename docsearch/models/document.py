from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, JSON, DateTime

from docsearch.db.base import Base

class Document(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)

    # Both derived from content by the same normalizer, written together
    terms = Column(JSON, nullable=False, default=list)
    term_frequency = Column(JSON, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

class DocumentCreate(BaseModel):
    title: str = Field(..., min_length=1)
    content: str

class DocumentBatchCreate(BaseModel):
    documents: List[DocumentCreate]

class DocumentSummary(BaseModel):
    id: int
    title: str
    content: str

    model_config = ConfigDict(from_attributes=True)

class DocumentOut(DocumentSummary):
    terms: List[str]
    term_frequency: Dict[str, int]
    created_at: datetime

class DocumentListOut(BaseModel):
    count: int
    documents: List[DocumentSummary]

class DocumentBatchOut(BaseModel):
    count: int
    documents: List[DocumentOut]

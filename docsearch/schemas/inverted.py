from typing import List

from pydantic import BaseModel

class InvertedEntry(BaseModel):
    term: str
    doc_ids: List[int]
    df: int
    idf: float

from typing import Dict, List

from pydantic import BaseModel

from docsearch.schemas.document import DocumentSummary

class SearchResponse(BaseModel):
    results: List[DocumentSummary]
    scores: Dict[int, float]
    cached: bool
    elapsed_time: float

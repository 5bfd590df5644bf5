from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.api.deps import get_db
from docsearch.core.exceptions import InvalidInput, NotFound
from docsearch.crud.document import get_all_documents
from docsearch.schemas.document import (
    DocumentCreate,
    DocumentBatchCreate,
    DocumentOut,
    DocumentListOut,
    DocumentBatchOut,
)
from docsearch.services.indexer import get_indexed_document, index_document, index_multiple_documents
from docsearch.services.sample_data import load_sample_documents

router = APIRouter(prefix="/api", tags=["Document"])

@router.get("/documents", response_model=DocumentListOut)
async def fetch_all_documents(db: AsyncSession = Depends(get_db)):
    documents = await get_all_documents(db)
    return {"count": len(documents), "documents": documents}

@router.get("/documents/{id}", response_model=DocumentOut)
async def fetch_document_by_id(
    id: int,
    db: AsyncSession = Depends(get_db)
):
    try:
        return await get_indexed_document(db, id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("/documents", response_model=DocumentOut, status_code=201)
async def upload_document(
    document: DocumentCreate,
    db: AsyncSession = Depends(get_db)
):
    try:
        return await index_document(db, document.title, document.content)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.post("/documents/upload-multiple", response_model=DocumentBatchOut, status_code=201)
async def upload_multiple_documents(
    batch: DocumentBatchCreate,
    db: AsyncSession = Depends(get_db)
):
    try:
        documents = await index_multiple_documents(db, [d.model_dump() for d in batch.documents])
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"count": len(documents), "documents": documents}

@router.post("/documents/load-sample", response_model=DocumentBatchOut, status_code=201)
async def load_sample(db: AsyncSession = Depends(get_db)):
    documents = await load_sample_documents(db)
    return {"count": len(documents), "documents": documents}

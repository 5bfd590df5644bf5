from fastapi import APIRouter, UploadFile, File, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.api.deps import get_db
from docsearch.core.exceptions import InvalidInput
from docsearch.schemas.document import DocumentBatchOut
from docsearch.services.indexer import index_multiple_documents
from docsearch.services.parser import parse_documents_file

router = APIRouter(prefix="/api", tags=["Document"])

@router.post("/upload/", response_model=DocumentBatchOut, status_code=201)
async def upload_file(
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db)
):
    raw = await file.read()
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Uploaded file must be UTF-8 text")

    try:
        parsed_docs = parse_documents_file(content, file.filename or "")
        documents = await index_multiple_documents(db, parsed_docs)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"count": len(documents), "documents": documents}

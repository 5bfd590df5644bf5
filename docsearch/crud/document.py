from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from docsearch.models.document import Document
from typing import Dict, Iterable, List

async def create_document(
    db: AsyncSession,
    title: str,
    content: str,
    terms: List[str],
    term_frequency: Dict[str, int]
) -> Document:
    doc = Document(title=title, content=content, terms=terms, term_frequency=term_frequency)
    db.add(doc)
    await db.commit()
    await db.refresh(doc)
    return doc

async def get_document_by_id(db: AsyncSession, id: int):
    result = await db.execute(
        select(Document).where(Document.id == id)
    )
    return result.scalar_one_or_none()

async def get_all_documents(db: AsyncSession) -> List[Document]:
    result = await db.execute(select(Document).order_by(Document.id))
    return result.scalars().all()

async def get_documents_by_ids(db: AsyncSession, ids: Iterable[int]) -> List[Document]:
    # Order is not guaranteed, callers re-sort
    ids = list(ids)
    if not ids:
        return []
    result = await db.execute(
        select(Document).where(Document.id.in_(ids))
    )
    return result.scalars().all()

async def count_documents(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(Document.id)))
    return result.scalar_one()

async def delete_all_documents(db: AsyncSession):
    await db.execute(delete(Document))
    await db.commit()

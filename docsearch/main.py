import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from docsearch.core.config import LOG_LEVEL, CORS_ORIGINS
from docsearch.services.nltk_data import ensure_nltk_data

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

from docsearch.api.endpoints import search, document, upload, inverted
from docsearch.db.session import init_models, AsyncSessionLocal
from docsearch.services.search_cache import SearchCache

@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_nltk_data()
    await init_models()
    async with AsyncSessionLocal() as session:
        await SearchCache(session).purge_expired()
    yield

app = FastAPI(title="docsearch", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(SQLAlchemyError)
async def store_failure_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": f"Store failure: {exc}"})

@app.get("/health")
async def health():
    return {"status": "ok"}

app.include_router(search.router)
app.include_router(document.router)
app.include_router(upload.router)
app.include_router(inverted.router)

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.exception_handlers import register_exception_handlers
from app.logging_config import setup_logging
from app.news.router import legacy_router as news_legacy_router
from app.news.router import router as news_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(
    title="Crypto News Signal",
    description="Crypto news aggregation with keyword sentiment and trading signals",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.include_router(news_router, prefix="/api/v1/news", tags=["news"])
app.include_router(news_legacy_router, prefix="/functions/v1", tags=["news"])


@app.get("/api/v1/health")
async def health():
    return {"status": "healthy"}

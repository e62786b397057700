"""
Blog Search - FastAPI application serving articles and full-text search

- Articles: plain files in <SITE_PATH>/articles
- Search: BM25 over a persisted JSON index refreshed on every query
- Configuration: environment variables (see blogsearch.config)
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import __version__
from .articles import ArticleStore
from .config import Settings
from .errors import SearchError
from .logging_config import setup_logging
from .search import ArticleSearch

logger = logging.getLogger(__name__)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    articles_dir: str
    started_at: str
    uptime_seconds: float


class SearchRequest(BaseModel):
    terms: str = Field(
        default="",
        description="Search terms separated by spaces. Omitted or empty terms score every article 0 (no default query is substituted)"
    )
    top_k: Optional[int] = Field(
        default=None,
        ge=1,
        description="Return only the best k articles (default: every article)"
    )


class ArticleSummary(BaseModel):
    name: str = Field(..., description="Article file name")
    title: str = Field(..., description="Display name: extension dropped, underscores as spaces")
    preview: Optional[str] = Field(None, description="First 200 characters followed by \"...\", null if unreadable")


class SearchResultItem(ArticleSummary):
    doc_id: str = Field(..., description="Document id in the search index (file path)")
    score: int = Field(..., description="BM25 score x 1000")


class SearchResponse(BaseModel):
    terms: List[str]
    results: List[SearchResultItem]
    total: int


class ArticleResponse(BaseModel):
    name: str
    content: str


class ArticleListResponse(BaseModel):
    total: int
    articles: List[ArticleSummary]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around one Settings instance"""
    settings = settings or Settings.from_env()
    article_search = ArticleSearch.from_settings(settings)
    article_store = ArticleStore(settings.articles_dir)
    started_at = datetime.now(timezone.utc)

    def _search_results(terms: List[str], top_k: Optional[int]) -> List[SearchResultItem]:
        """Rank, then read each hit back through the article store for its preview"""
        results = []
        for hit in article_search.search(terms, top_k):
            mini = article_store.mini_article(hit.doc_id)
            results.append(SearchResultItem(
                name=mini.name,
                title=mini.title,
                preview=mini.preview,
                doc_id=hit.doc_id,
                score=hit.score,
            ))
        return results

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Configure logging on startup"""
        setup_logging(
            log_file=settings.log_file,
            console_level=getattr(logging, settings.log_level, logging.INFO),
            file_level=logging.DEBUG
        )
        logger.info(f"Serving articles from {settings.articles_dir}, index cache {settings.index_path}")
        yield
        logger.info("Shutting down...")

    app = FastAPI(
        title="Blog Search API",
        description="Personal article corpus with BM25 full-text search",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.article_search = article_search
    app.state.article_store = article_store

    @app.get("/", response_model=dict)
    async def root():
        """Root endpoint"""
        return {
            "service": "Blog Search API",
            "version": __version__,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health", response_model=HealthResponse)
    async def health():
        uptime = (datetime.now(timezone.utc) - started_at).total_seconds()
        return HealthResponse(
            status="healthy",
            version=__version__,
            articles_dir=str(settings.articles_dir),
            started_at=started_at.isoformat(),
            uptime_seconds=round(uptime, 2),
        )

    @app.post("/api/search", response_model=SearchResponse)
    async def search(request: SearchRequest):
        """
        Rank articles against the search terms

        Terms are split on single spaces. An empty query scores every
        article 0 and returns them in document id order.

        Example:
            POST /api/search {"terms": "rust async", "top_k": 5}
        """
        logger.info(f"Handling search with query: {request.terms!r}")
        terms = [term for term in request.terms.split(" ") if term]

        results = await asyncio.to_thread(_search_results, terms, request.top_k)
        return SearchResponse(terms=terms, results=results, total=len(results))

    @app.get("/api/articles/{name}", response_model=ArticleResponse)
    async def article_by_name(name: str):
        logger.info(f"Handling article_by_name: {name}")
        content = await asyncio.to_thread(article_store.read_article, name)
        return ArticleResponse(name=name, content=content)

    @app.get("/api/last-articles", response_model=ArticleListResponse)
    async def last_articles():
        """All articles sorted by file name, with title and preview"""
        minis = await asyncio.to_thread(article_store.list_mini_articles)
        articles = [ArticleSummary(name=m.name, title=m.title, preview=m.preview) for m in minis]
        return ArticleListResponse(total=len(articles), articles=articles)

    @app.exception_handler(SearchError)
    async def search_error_handler(request: Request, exc: SearchError):
        logger.info(f"Responding {exc.status_code}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(f"Unhandled error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "detail": str(exc),
            },
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blogsearch.main:app",
        host="0.0.0.0",
        port=app.state.settings.port,
    )

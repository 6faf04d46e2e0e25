"""
FastAPI + Strawberry GraphQL API over an in-memory set of users and posts.

Supports:
- Dev mode: console logs, GraphiQL at /graphql
- Prod mode: JSON logs, GraphiQL disabled

The store is seeded with sample data on startup and lives only as long as
the process does.

Usage:
    # Development (default)
    uvicorn blog_graph.main:app --reload

    # Production (via module)
    python -m blog_graph.main --mode prod --host 0.0.0.0 --port 8000
"""
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_graph.core.init_settings import settings, args
from blog_graph.core.logging import configure_logging, get_logger
from blog_graph.core.store import DataStore, get_store, store
from blog_graph.db.seed import seed_if_empty
from blog_graph.graphql.schema import graphql_router

configure_logging(debug=settings.DEBUG)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown logic."""
    if seed_if_empty(store):
        logger.info("store_seeded", mode=settings.ENV_MODE)

    logger.info(
        "server_starting",
        mode=settings.ENV_MODE,
        users=len(store.list_users()),
        posts=len(store.list_posts()),
    )

    yield

    logger.info("server_stopped", mode=settings.ENV_MODE)


app = FastAPI(
    title=settings.APP_NAME,
    description="GraphQL API with FastAPI and Strawberry over in-memory users and posts",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(graphql_router, prefix="/graphql")


@app.get("/health")
async def health(data: DataStore = Depends(get_store)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "mode": settings.ENV_MODE,
        "version": settings.APP_VERSION,
        "users": len(data.list_users()),
        "posts": len(data.list_posts()),
    }


# Allow running as module: python -m blog_graph.main --mode prod
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog_graph.main:app",
        host=args.host,
        port=args.port,
        reload=settings.is_dev,
    )

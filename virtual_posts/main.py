"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from virtual_posts.config import get_settings
from virtual_posts.infrastructure.database import Base, engine
from virtual_posts.infrastructure.dependencies import get_site_context, get_virtual_page_registry
from virtual_posts.infrastructure.loaders.yaml_virtual_page_loader import YamlVirtualPageLoader
from virtual_posts.infrastructure.logging.log_config import setup_logging
from virtual_posts.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    prefix = "sqlite:///"
    if not database_url.startswith(prefix):
        return
    db_path = database_url[len(prefix):]
    if db_path and db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, load virtual pages."""
    settings = get_settings()
    setup_logging()

    # 1. Create all database tables
    _ensure_sqlite_directory(settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Register virtual pages declared in YAML
    registry = get_virtual_page_registry()
    loader = YamlVirtualPageLoader(settings.virtual_pages_file, site=get_site_context())
    total = loader.load_into(registry)
    logger.info("Virtual pages ready: %d registered", total)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "virtual_posts.main:app",
        host="0.0.0.0",
        port=8030,
        reload=True,
    )

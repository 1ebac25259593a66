"""
Main FastAPI application for the Bookshelf GraphQL server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..catalog import Catalog, default_catalog
from ..config import Settings, settings
from ..logging import get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Bookshelf API...", books=len(app.state.catalog))
    yield
    logger.info("Shutting down Bookshelf API...")


def create_app(catalog: Catalog | None = None, config: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        catalog: Books to serve; the built-in catalog when omitted
        config: Settings to use; the process-wide settings when omitted
    """
    config = config or settings
    catalog = catalog if catalog is not None else default_catalog()

    app = FastAPI(
        title="Bookshelf API",
        description="GraphQL API over a fixed catalog of books",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )
    app.state.catalog = catalog

    app.add_middleware(LoggingContextMiddleware, graphql_path=config.graphql_path)

    # Credentials cannot be combined with a wildcard origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials="*" not in config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server must not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    graphql_router = create_graphql_router(
        catalog=catalog,
        path=config.graphql_path,
        graphiql=config.graphiql,
    )
    app.include_router(graphql_router, prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint=config.graphql_path)

    return app

"""
Main FastAPI application for the Book Catalog service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..catalog import BookCatalog, create_catalog
from ..config import get_server_url, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info(
        "Server ready",
        url=get_server_url(),
        environment=settings.environment,
        books=len(app.state.catalog),
    )

    yield

    # Shutdown
    logger.info("Shutting down Book Catalog API...")


def create_app(catalog: BookCatalog | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        catalog: Catalog to serve. A fresh one is seeded from settings when omitted.
    """
    if catalog is None:
        catalog = create_catalog(settings.seed_data_path)

    app = FastAPI(
        title="Book Catalog API",
        description="GraphQL API over an in-memory book catalog",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.catalog = catalog

    # Add logging context middleware
    app.add_middleware(LoggingContextMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health")
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "books": len(request.app.state.catalog),
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Validate schema at startup so a broken schema never serves requests
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(catalog)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookcatalog.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )

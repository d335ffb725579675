"""
Main FastAPI application for the Registrar backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import settings
from ..database.connection import (
    check_database_connection,
    dispose_database,
    init_database,
)
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..repository import Repository

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Registrar API...")
    init_database()

    ok, error = await check_database_connection()
    if not ok:
        logger.warning("Database is not reachable yet", error=error)

    logger.info("Server ready", url=f"http://localhost:{settings.api_port}/graphql")

    yield

    logger.info("Shutting down Registrar API...")
    await dispose_database()


def create_app(repository: Repository | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        repository: Data access used by the resolvers; defaults to the
            SQLAlchemy repository on the shared engine.
    """
    configure_logging(debug=settings.debug)

    app = FastAPI(
        title="Registrar API",
        description="GraphQL API for students, departments, courses and teachers",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(repository), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .repositories import Repository, get_repository
from .routers.graphql import create_graphql_router
from .schemas import HealthOut
from .settings import Settings, configure_logging, get_settings

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "graphql",
        "description": "GraphQL endpoint serving the getTodos and getAllUsers queries.",
    },
]


# PUBLIC_INTERFACE
def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[Repository] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Settings to use; loaded from the environment when omitted.
        repository: Data source for the GraphQL schema; the bundled fixtures when omitted.

    Returns:
        A FastAPI app exposing the health check at '/' and GraphQL at settings.graphql_path.
    """
    settings = settings or get_settings()
    repo = repository if repository is not None else get_repository()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("Server is running on port %d", settings.port)
        yield

    app = FastAPI(
        title="Todo GraphQL API",
        description="GraphQL API serving static todo and user collections.",
        version="0.1.0",
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )

    # Configure CORS based on settings (.env -> CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # PUBLIC_INTERFACE
    @app.get("/", summary="Health Check", tags=["health"], response_model=HealthOut)
    def health_check() -> HealthOut:
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health and the size of the served collections.
        """
        return HealthOut(
            message="Healthy",
            todos=len(repo.list_todos()),
            users=len(repo.list_users()),
        )

    app.include_router(
        create_graphql_router(repo, graphiql_enabled=settings.graphiql_enabled),
        prefix=settings.graphql_path,
    )
    return app


app = create_app()


# PUBLIC_INTERFACE
def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())

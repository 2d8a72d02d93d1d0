from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from .client import GraphQLClient
from .settings import Settings, configure_logging, get_settings
from .views import TodoListView, render_page

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def create_web_app(
    settings: Optional[Settings] = None,
    client: Optional[GraphQLClient] = None,
) -> FastAPI:
    """
    Build the app serving the todo list page.

    Args:
        settings: Settings to use; loaded from the environment when omitted.
        client: GraphQL client the page queries through; one pointed at
            settings.api_url is created when omitted. It is shared by every
            request, so its cache is too.
    """
    settings = settings or get_settings()
    gql = client if client is not None else GraphQLClient(settings.api_url)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            if client is None:
                gql.close()

    app = FastAPI(
        title="Todo List",
        description="Server-rendered todo list backed by the Todo GraphQL API.",
        version="0.1.0",
        lifespan=lifespan,
    )

    # PUBLIC_INTERFACE
    @app.get("/", response_class=HTMLResponse, summary="Todo List")
    def todo_page() -> HTMLResponse:
        """
        Render the todo list page: one query on mount, then one card per todo.
        """
        view = TodoListView(gql)
        view.mount()
        try:
            body = view.render()
        finally:
            view.unmount()
        return HTMLResponse(render_page(body))

    return app


# PUBLIC_INTERFACE
def run_web() -> None:
    """Serve the todo list page with uvicorn on the configured web port."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Todo list page querying %s", settings.api_url)
    uvicorn.run(create_web_app(settings), host=settings.host, port=settings.web_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run_web()

"""
GraphQL client used by the todo page.

Responses are cached in memory keyed by the query text and its variables, so
repeated queries are answered without another request. Every failure, whether
the request never reached the server, came back with a bad status or carried
GraphQL errors, is raised as a single QueryError.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Tuple

import httpx
from graphql import GraphQLSyntaxError, parse, print_ast

from .schemas import GraphQLResponse
from .settings import DEFAULT_API_URL

logger = logging.getLogger(__name__)

GET_TODOS = """
query {
  getTodos {
    id
    todo
    completed
    fullName
  }
}
"""

CacheKey = Tuple[str, str]


class QueryError(Exception):
    """Raised when a query fails for any reason; `message` is what the UI shows."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _normalize(document: str) -> str:
    try:
        return print_ast(parse(document))
    except GraphQLSyntaxError:
        # Sent as-is so the server reports the syntax error.
        return document


def _cache_key(document: str, variables: Optional[Dict[str, Any]]) -> CacheKey:
    return _normalize(document), json.dumps(variables or {}, sort_keys=True)


def _status_message(response: httpx.Response) -> str:
    return f"Response not successful: Received status code {response.status_code}"


# PUBLIC_INTERFACE
class GraphQLClient:
    """
    Minimal GraphQL-over-HTTP client with an in-memory result cache.

    Args:
        uri: The GraphQL endpoint. Defaults to http://localhost:8000/graphql.
        http_client: httpx.Client to send requests with. One is created (and
            owned, i.e. closed by close()) when omitted.
    """

    def __init__(self, uri: str = DEFAULT_API_URL, http_client: Optional[httpx.Client] = None) -> None:
        self.uri = uri
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=None)
        self._cache: Dict[CacheKey, Dict[str, Any]] = {}

    def __enter__(self) -> "GraphQLClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def clear_cache(self) -> None:
        self._cache.clear()

    def query(self, document: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a query and return its `data`.

        Raises:
            QueryError: on transport failures, non-2xx responses and GraphQL errors.
        """
        key = _cache_key(document, variables)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key[0][:60])
            return cached

        data = self._execute(document, variables)
        self._cache[key] = data
        return data

    def _execute(self, document: str, variables: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        body: Dict[str, Any] = {"query": document}
        if variables:
            body["variables"] = variables

        logger.debug("POST %s", self.uri)
        try:
            response = self._http.post(self.uri, json=body)
        except httpx.HTTPError as exc:
            logger.warning("GraphQL request to %s failed: %s", self.uri, exc)
            raise QueryError(f"Network error: {exc}") from exc

        try:
            payload = GraphQLResponse.model_validate(response.json())
        except ValueError as exc:
            if response.is_error:
                raise QueryError(_status_message(response)) from exc
            raise QueryError(f"Invalid GraphQL response: {exc}") from exc

        if payload.errors:
            message = "\n".join(e.message for e in payload.errors)
            logger.warning("GraphQL query rejected: %s", message)
            raise QueryError(message)
        if response.is_error:
            raise QueryError(_status_message(response))
        if payload.data is None:
            raise QueryError("GraphQL response contained no data")
        return payload.data

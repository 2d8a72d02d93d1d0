from __future__ import annotations

from typing import Any, Dict, Optional

from strawberry.fastapi import GraphQLRouter

from ..graphql_schema import build_context, schema
from ..repositories import Repository


# PUBLIC_INTERFACE
def create_graphql_router(
    repository: Optional[Repository] = None,
    graphiql_enabled: bool = True,
) -> GraphQLRouter:
    """
    Build the router serving the todo schema.

    POSTed queries (and GET queries) are executed against the given repository,
    or the bundled fixtures when none is passed. Malformed queries are answered
    with the standard GraphQL error payload produced by strawberry.
    """
    context = build_context(repository)

    async def get_context() -> Dict[str, Any]:
        return dict(context)

    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql_enabled else None,
        tags=["graphql"],
    )

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# PUBLIC_INTERFACE
class HealthOut(BaseModel):
    """
    Schema returned by the health check endpoint.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "Healthy", "todos": 15, "users": 8}}
    )

    message: str = Field(..., description="Service status message")
    todos: int = Field(..., description="Number of todos served")
    users: int = Field(..., description="Number of users served")


# PUBLIC_INTERFACE
class GraphQLErrorOut(BaseModel):
    """
    A single entry of the 'errors' list of a GraphQL response.
    """

    model_config = ConfigDict(extra="allow")

    message: str = Field(..., description="Human readable error message")
    path: Optional[List[Any]] = Field(default=None, description="Response path of the failing field")


# PUBLIC_INTERFACE
class GraphQLResponse(BaseModel):
    """
    Envelope of a GraphQL-over-HTTP response body.
    """

    model_config = ConfigDict(extra="allow")

    data: Optional[Dict[str, Any]] = Field(default=None, description="Query result")
    errors: Optional[List[GraphQLErrorOut]] = Field(default=None, description="Errors raised while executing")


# PUBLIC_INTERFACE
class TodoSummary(BaseModel):
    """
    A todo as returned by the getTodos list query and shown on a card.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "todo": "Memorize a poem",
                "completed": True,
                "fullName": "Michael Williams",
            }
        },
    )

    id: str = Field(..., description="Todo identifier")
    todo: str = Field(..., description="Todo text")
    completed: bool = Field(..., description="Completion status flag")
    full_name: str = Field(default="", alias="fullName", description="Assignee full name; empty when unassigned")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """
        GraphQL IDs are strings on the wire; accept ints as well.
        """
        return str(v)

    @field_validator("full_name", mode="before")
    @classmethod
    def default_full_name(cls, v: Optional[str]) -> str:
        """
        fullName is nullable in the schema; treat null as no assignee.
        """
        return "" if v is None else v

from __future__ import annotations

from typing import Optional, TypedDict


# PUBLIC_INTERFACE
class UserEntity(TypedDict):
    """
    A user record as bundled in the static fixtures.

    Keys use the same camelCase names the GraphQL schema exposes.

    Fields:
    - id: Unique integer identifier
    - firstName / lastName: Name parts, joined by a space for a todo's fullName
    - age: Optional age in years
    - gender, email, phone: Free-form contact details
    """

    id: int
    firstName: str
    lastName: str
    age: Optional[int]
    gender: str
    email: str
    phone: str


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A todo record as bundled in the static fixtures.

    Fields:
    - id: Unique integer identifier
    - todo: The todo text
    - completed: Boolean completion flag
    - userId: Reference to UserEntity.id; not guaranteed to match any user
    """

    id: int
    todo: str
    completed: bool
    userId: int

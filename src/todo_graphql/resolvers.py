"""
Resolver functions backing the GraphQL schema.

All of them are pure reads over a Repository: nothing is mutated and a todo
whose userId matches no user degrades to an absent user and an empty name
instead of raising.
"""
from __future__ import annotations

from typing import Mapping, Optional, Sequence

from .models import TodoEntity, UserEntity
from .repositories import Repository


# PUBLIC_INTERFACE
def get_todos(repo: Repository) -> Sequence[TodoEntity]:
    """Return the full todo collection, unfiltered and in source order."""
    return repo.list_todos()


# PUBLIC_INTERFACE
def get_all_users(repo: Repository) -> Sequence[UserEntity]:
    """Return the full user collection, unfiltered and in source order."""
    return repo.list_users()


# PUBLIC_INTERFACE
def resolve_user(todo: Mapping, repo: Repository) -> Optional[UserEntity]:
    """Return the user referenced by todo['userId'], or None when there is no match."""
    return repo.get_user(todo["userId"])


# PUBLIC_INTERFACE
def resolve_full_name(todo: Mapping, repo: Repository) -> str:
    """
    Return "<firstName> <lastName>" of the user referenced by the todo.

    Returns an empty string when no user matches.
    """
    user = resolve_user(todo, repo)
    if user is None:
        return ""
    return f"{user['firstName']} {user['lastName']}"

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple, Union

from .fixtures import TODOS, USERS
from .models import TodoEntity, UserEntity

logger = logging.getLogger(__name__)

UserId = Union[int, str]


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract read-only contract for the todo/user data source."""

    @abstractmethod
    def list_todos(self) -> Sequence[TodoEntity]:
        """Return every todo in source order."""

    @abstractmethod
    def list_users(self) -> Sequence[UserEntity]:
        """Return every user in source order."""

    @abstractmethod
    def get_user(self, user_id: UserId) -> Optional[UserEntity]:
        """Return the user with the given id, or None if there is no such user."""


class FixtureRepository(Repository):
    """
    Repository over immutable in-memory collections (the bundled fixtures by default).

    Users are indexed by id once at construction. Ids are compared by their
    string form since GraphQL IDs travel as strings. When the same id appears
    more than once the first user wins.
    """

    def __init__(
        self,
        users: Sequence[UserEntity] = USERS,
        todos: Sequence[TodoEntity] = TODOS,
    ) -> None:
        self._users: Tuple[UserEntity, ...] = tuple(users)
        self._todos: Tuple[TodoEntity, ...] = tuple(todos)
        self._users_by_id: Dict[str, UserEntity] = {}
        for user in self._users:
            self._users_by_id.setdefault(str(user["id"]), user)
        logger.debug(
            "Loaded %d todos and %d users (%d distinct user ids)",
            len(self._todos),
            len(self._users),
            len(self._users_by_id),
        )

    def list_todos(self) -> Sequence[TodoEntity]:
        return self._todos

    def list_users(self) -> Sequence[UserEntity]:
        return self._users

    def get_user(self, user_id: UserId) -> Optional[UserEntity]:
        return self._users_by_id.get(str(user_id))


# PUBLIC_INTERFACE
@lru_cache(maxsize=1)
def get_repository() -> Repository:
    """Return the process-wide repository over the bundled fixtures."""
    return FixtureRepository()

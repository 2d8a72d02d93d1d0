"""
Code-first GraphQL schema for the todo API.

Printed as SDL this is:

    type Todo {
      id: ID!
      todo: String!
      completed: Boolean!
      userId: ID!
      fullName: String
      user: User
    }

    type User {
      id: ID!
      firstName: String!
      lastName: String!
      age: Int
      gender: String!
      email: String!
      phone: String!
    }

    type Query {
      getTodos: [Todo]!
      getAllUsers: [User]
    }

Resolvers read the Repository from the execution context under the
"repository" key, so callers (the HTTP router, tests) decide which data the
schema serves.
"""
from typing import Any, Dict, List, Optional

import strawberry
from strawberry.types import Info

from . import resolvers
from .models import TodoEntity, UserEntity
from .repositories import Repository, get_repository


def _repository(info: Info) -> Repository:
    context = info.context
    repo = context.get("repository") if isinstance(context, dict) else getattr(context, "repository", None)
    return repo if repo is not None else get_repository()


@strawberry.type
class User:
    id: strawberry.ID
    first_name: str
    last_name: str
    age: Optional[int]
    gender: str
    email: str
    phone: str

    @classmethod
    def from_entity(cls, entity: UserEntity) -> "User":
        return cls(
            id=strawberry.ID(str(entity["id"])),
            first_name=entity["firstName"],
            last_name=entity["lastName"],
            age=entity.get("age"),
            gender=entity["gender"],
            email=entity["email"],
            phone=entity["phone"],
        )


@strawberry.type
class Todo:
    id: strawberry.ID
    todo: str
    completed: bool
    user_id: strawberry.ID
    entity: strawberry.Private[TodoEntity]

    @classmethod
    def from_entity(cls, entity: TodoEntity) -> "Todo":
        return cls(
            id=strawberry.ID(str(entity["id"])),
            todo=entity["todo"],
            completed=entity["completed"],
            user_id=strawberry.ID(str(entity["userId"])),
            entity=entity,
        )

    @strawberry.field
    def full_name(self, info: Info) -> Optional[str]:
        return resolvers.resolve_full_name(self.entity, _repository(info))

    @strawberry.field
    def user(self, info: Info) -> Optional[User]:
        entity = resolvers.resolve_user(self.entity, _repository(info))
        return None if entity is None else User.from_entity(entity)


@strawberry.type
class Query:
    @strawberry.field
    def get_todos(self, info: Info) -> List[Optional[Todo]]:
        return [Todo.from_entity(t) for t in resolvers.get_todos(_repository(info))]

    @strawberry.field
    def get_all_users(self, info: Info) -> Optional[List[Optional[User]]]:
        return [User.from_entity(u) for u in resolvers.get_all_users(_repository(info))]


schema = strawberry.Schema(query=Query)


# PUBLIC_INTERFACE
def build_context(repository: Optional[Repository] = None) -> Dict[str, Any]:
    """Return an execution context serving the given repository (the fixtures by default)."""
    return {"repository": repository if repository is not None else get_repository()}

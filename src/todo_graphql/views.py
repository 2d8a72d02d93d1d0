"""
Todo list presentation.

The list view's state is a three-variant tagged union (Loading, Failed,
Loaded) and rendering is a pure mapping from that state to HTML.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from jinja2 import Environment, PackageLoader, select_autoescape

from .client import GET_TODOS, GraphQLClient, QueryError
from .schemas import TodoSummary

logger = logging.getLogger(__name__)

_env = Environment(
    loader=PackageLoader("todo_graphql", "templates"),
    autoescape=select_autoescape(["html"]),
)


@dataclass(frozen=True)
class Loading:
    """The list query is in flight."""


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Loaded:
    todos: Tuple[TodoSummary, ...]


QueryState = Union[Loading, Failed, Loaded]


# PUBLIC_INTERFACE
def render_card(todo: TodoSummary) -> str:
    """Render a single todo card."""
    return _env.get_template("todo_card.html").render(todo=todo)


# PUBLIC_INTERFACE
def render(state: QueryState) -> str:
    """Map a list view state to its HTML."""
    if isinstance(state, Failed):
        return _env.get_template("error.html").render(message=state.message)
    if isinstance(state, Loaded):
        return _env.get_template("todo_list.html").render(loading=False, todos=state.todos)
    return _env.get_template("todo_list.html").render(loading=True, todos=())


# PUBLIC_INTERFACE
def render_page(body: str, title: str = "Todo List") -> str:
    """Wrap rendered view markup in a full HTML document."""
    return _env.get_template("page.html").render(body=body, title=title)


class TodoListView:
    """
    The todo list screen.

    mount() issues the getTodos query once and moves the view from Loading to
    Loaded or Failed. After unmount() results are dropped, and a view that has
    failed never moves to Loaded.
    """

    def __init__(self, client: GraphQLClient) -> None:
        self._client = client
        self._state: QueryState = Loading()
        self._mounted = False

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> QueryState:
        self._mounted = True
        try:
            data = self._client.query(GET_TODOS)
        except QueryError as exc:
            self._set_state(Failed(exc.message))
        else:
            todos = tuple(TodoSummary.model_validate(t) for t in data.get("getTodos") or () if t is not None)
            self._set_state(Loaded(todos))
        return self._state

    def unmount(self) -> None:
        self._mounted = False

    def render(self) -> str:
        return render(self._state)

    def _set_state(self, state: QueryState) -> None:
        if not self._mounted:
            logger.debug("Dropping %s for unmounted view", type(state).__name__)
            return
        if isinstance(self._state, Failed):
            return
        logger.debug("Todo list: %s -> %s", type(self._state).__name__, type(state).__name__)
        self._state = state

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from todo_graphql.client import GET_TODOS, GraphQLClient, QueryError
from todo_graphql.main import create_app
from todo_graphql.repositories import FixtureRepository
from todo_graphql.schemas import TodoSummary
from todo_graphql.views import Failed, Loaded, Loading, TodoListView, render, render_card
from todo_graphql import web as web_module
from todo_graphql.web import create_web_app

API_URL = "http://api.test/graphql"


def todo_payload(todo_id, text="Water the plants", completed=False, full_name="Ann Lee"):
    return {"id": str(todo_id), "todo": text, "completed": completed, "fullName": full_name}


class RecordingHandler:
    """MockTransport handler replaying canned responses and recording requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses[0] if len(self.responses) == 1 else self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return httpx.Response(response.status_code, headers=response.headers, content=response.content)


def mock_client(*responses):
    handler = RecordingHandler(*responses)
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return GraphQLClient(API_URL, http_client=http), handler


def ok(data):
    return httpx.Response(200, json={"data": data})


def scenario_client():
    repo = FixtureRepository(
        users=[
            {
                "id": 1,
                "firstName": "Ann",
                "lastName": "Lee",
                "age": 41,
                "gender": "female",
                "email": "ann.lee@example.com",
                "phone": "+1 555-0101",
            }
        ],
        todos=[
            {"id": 10, "todo": "Plan the offsite", "completed": True, "userId": 1},
            {"id": 11, "todo": "Book a venue", "completed": False, "userId": 999},
        ],
    )
    return GraphQLClient("http://testserver/graphql", http_client=TestClient(create_app(repository=repo)))


class TestGraphQLClient:
    def test_posts_query_and_returns_data(self):
        gql, handler = mock_client(ok({"getTodos": [todo_payload(1)]}))
        data = gql.query(GET_TODOS)
        assert data == {"getTodos": [todo_payload(1)]}
        request = handler.requests[0]
        assert request.method == "POST"
        assert str(request.url) == API_URL
        assert json.loads(request.content)["query"] == GET_TODOS

    def test_results_are_cached_per_query(self):
        gql, handler = mock_client(ok({"getTodos": []}))
        gql.query(GET_TODOS)
        gql.query("  query {\n getTodos { id todo completed fullName } }")
        assert len(handler.requests) == 1
        gql.query(GET_TODOS, {"first": 1})
        assert len(handler.requests) == 2
        gql.clear_cache()
        gql.query(GET_TODOS)
        assert len(handler.requests) == 3

    def test_comments_do_not_merge_distinct_queries(self):
        gql = scenario_client()
        first = gql.query("query { getTodos { id # note\n todo } }")
        second = gql.query("query { getTodos { id # note todo } }")
        assert set(first["getTodos"][0]) == {"id", "todo"}
        assert set(second["getTodos"][0]) == {"id"}

    def test_string_literal_whitespace_is_significant(self):
        gql, handler = mock_client(ok({"getTodos": []}))
        gql.query('query { getTodos @include(if: true) { id } } # "a  b"')
        gql.query('query Named($q: String = "a  b") { getTodos { id } }')
        gql.query('query Named($q: String = "a b") { getTodos { id } }')
        assert len(handler.requests) == 3

    def test_unparseable_query_is_still_sent(self):
        gql, handler = mock_client(
            httpx.Response(200, json={"data": None, "errors": [{"message": "Syntax Error: Expected Name"}]})
        )
        with pytest.raises(QueryError, match="Syntax Error"):
            gql.query("query { getTodos { id ")
        assert json.loads(handler.requests[0].content)["query"] == "query { getTodos { id "

    def test_variables_are_sent(self):
        gql, handler = mock_client(ok({"getTodos": []}))
        gql.query(GET_TODOS, {"first": 1})
        assert json.loads(handler.requests[0].content)["variables"] == {"first": 1}

    def test_network_error(self):
        gql, _ = mock_client(httpx.ConnectError("Connection refused"))
        with pytest.raises(QueryError) as excinfo:
            gql.query(GET_TODOS)
        assert excinfo.value.message == "Network error: Connection refused"
        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    def test_bad_status_without_graphql_body(self):
        gql, _ = mock_client(httpx.Response(500, text="Internal Server Error"))
        with pytest.raises(QueryError) as excinfo:
            gql.query(GET_TODOS)
        assert excinfo.value.message == "Response not successful: Received status code 500"

    def test_graphql_errors_are_raised_and_not_cached(self):
        gql, handler = mock_client(
            httpx.Response(200, json={"data": None, "errors": [{"message": "Boom"}]}),
            ok({"getTodos": []}),
        )
        with pytest.raises(QueryError, match="Boom"):
            gql.query(GET_TODOS)
        assert gql.query(GET_TODOS) == {"getTodos": []}
        assert len(handler.requests) == 2

    def test_several_graphql_errors_are_joined_by_newlines(self):
        gql, _ = mock_client(
            httpx.Response(200, json={"data": None, "errors": [{"message": "First"}, {"message": "Second"}]})
        )
        with pytest.raises(QueryError) as excinfo:
            gql.query(GET_TODOS)
        assert excinfo.value.message == "First\nSecond"

    def test_partial_data_is_not_returned(self):
        gql, _ = mock_client(
            httpx.Response(200, json={"data": {"getTodos": []}, "errors": [{"message": "Partial"}]})
        )
        with pytest.raises(QueryError, match="Partial"):
            gql.query(GET_TODOS)

    def test_against_api_app(self):
        gql = scenario_client()
        data = gql.query(GET_TODOS)
        assert data["getTodos"] == [
            {"id": "10", "todo": "Plan the offsite", "completed": True, "fullName": "Ann Lee"},
            {"id": "11", "todo": "Book a venue", "completed": False, "fullName": ""},
        ]

    def test_schema_rejection_from_api_app(self):
        gql = scenario_client()
        with pytest.raises(QueryError) as excinfo:
            gql.query("query { getTodos { id nope } }")
        assert "nope" in excinfo.value.message


class TestRendering:
    def test_loading(self):
        html = render(Loading())
        assert "Loading ..." in html
        assert "todo-grid" not in html

    def test_error(self):
        html = render(Failed("Network error: Connection refused"))
        assert "Error: Network error: Connection refused" in html
        assert "todo-grid" not in html
        assert "Loading ..." not in html

    def test_zero_todos_renders_empty_grid(self):
        html = render(Loaded(()))
        assert "todo-grid" in html
        assert "todo-card" not in html
        assert "Loading ..." not in html

    def test_one_card_per_todo_keyed_by_id(self):
        todos = tuple(TodoSummary.model_validate(todo_payload(i)) for i in (3, 1, 2))
        html = render(Loaded(todos))
        assert html.count('class="todo-card ') == 3
        positions = [html.index(f'data-key="{i}"') for i in (3, 1, 2)]
        assert positions == sorted(positions)

    def test_completed_card(self):
        html = render_card(TodoSummary.model_validate(todo_payload(1, completed=True)))
        assert "Water the plants" in html
        assert "Assigned to: Ann Lee" in html
        assert "Completed ✅" in html
        assert "text-green-400" in html
        assert "width: 100%" in html

    def test_card_scales_on_hover_and_tap(self):
        html = render_card(TodoSummary.model_validate(todo_payload(1)))
        assert "hover:scale-105" in html
        assert "active:scale-95" in html

    def test_open_card(self):
        html = render_card(TodoSummary.model_validate(todo_payload(1, completed=False)))
        assert "Not Completed ❌" in html
        assert "text-red-400" in html
        assert "width: 0%" in html

    def test_unassigned_card(self):
        html = render_card(TodoSummary.model_validate(todo_payload(11, full_name=None)))
        assert "Assigned to: </p>" in html

    def test_todo_text_is_escaped(self):
        html = render_card(TodoSummary.model_validate(todo_payload(1, text="<script>x</script>")))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestTodoListView:
    def test_starts_loading(self):
        gql, handler = mock_client(ok({"getTodos": []}))
        view = TodoListView(gql)
        assert isinstance(view.state, Loading)
        assert handler.requests == []

    def test_mount_loads_todos(self):
        gql, handler = mock_client(ok({"getTodos": [todo_payload(1), None, todo_payload(2)]}))
        view = TodoListView(gql)
        state = view.mount()
        assert isinstance(state, Loaded)
        assert [t.id for t in state.todos] == ["1", "2"]
        assert len(handler.requests) == 1

    def test_zero_todos(self):
        gql, _ = mock_client(ok({"getTodos": []}))
        view = TodoListView(gql)
        assert view.mount() == Loaded(())
        assert "todo-grid" in view.render()

    def test_remount_uses_cache(self):
        gql, handler = mock_client(ok({"getTodos": [todo_payload(1)]}))
        TodoListView(gql).mount()
        TodoListView(gql).mount()
        assert len(handler.requests) == 1

    def test_rejected_query_renders_error_and_stays_failed(self):
        message = 'Cannot query field "fullName" on type "Todo".'
        gql, _ = mock_client(
            httpx.Response(200, json={"data": None, "errors": [{"message": message}]}),
            ok({"getTodos": [todo_payload(1)]}),
        )
        view = TodoListView(gql)
        assert view.mount() == Failed(message)
        assert "Error: Cannot query field &#34;fullName&#34; on type &#34;Todo&#34;." in view.render()
        view.mount()
        assert view.state == Failed(message)
        assert "todo-grid" not in view.render()

    def test_result_after_unmount_is_dropped(self):
        view = None

        class UnmountingClient:
            def query(self, document, variables=None):
                view.unmount()
                return {"getTodos": [todo_payload(1)]}

        view = TodoListView(UnmountingClient())
        view.mount()
        assert isinstance(view.state, Loading)
        assert not view.mounted

    def test_end_to_end_scenario(self):
        view = TodoListView(scenario_client())
        view.mount()
        html = view.render()
        assert html.count('class="todo-card ') == 2
        assert "Assigned to: Ann Lee" in html
        assert "Assigned to: </p>" in html


class TestWebApp:
    def test_page_renders_cards(self):
        gql, handler = mock_client(ok({"getTodos": [todo_payload(1, completed=True), todo_payload(2)]}))
        web = TestClient(create_web_app(client=gql))
        res = web.get("/")
        assert res.status_code == 200
        assert res.headers["content-type"].startswith("text/html")
        assert "<!doctype html>" in res.text
        assert res.text.count('class="todo-card ') == 2
        web.get("/")
        assert len(handler.requests) == 1

    def test_page_renders_error(self):
        gql, _ = mock_client(httpx.ConnectError("Connection refused"))
        web = TestClient(create_web_app(client=gql))
        res = web.get("/")
        assert res.status_code == 200
        assert "Error: Network error: Connection refused" in res.text

    def test_owned_client_closed_on_shutdown(self, monkeypatch):
        closed = []

        class RecordingClient(GraphQLClient):
            def close(self):
                closed.append(self)
                super().close()

        monkeypatch.setattr(web_module, "GraphQLClient", RecordingClient)
        with TestClient(create_web_app()):
            assert closed == []
        assert len(closed) == 1

    def test_injected_client_left_open(self):
        gql, _ = mock_client(ok({"getTodos": []}))
        closed = []
        gql.close = lambda: closed.append(gql)
        with TestClient(create_web_app(client=gql)) as web:
            web.get("/")
        assert closed == []

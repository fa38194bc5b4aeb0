"""Contract tests shared by TrieRouter and RegexRouter."""

import pytest

from warble.errors import RouteDefinitionError
from warble.routing.contract import Router
from warble.routing.regex import RegexRouter
from warble.routing.trie import TrieRouter


def handler() -> str:
    return "handler"


def other_handler() -> str:
    return "other"


@pytest.fixture(params=[TrieRouter, RegexRouter], ids=["trie", "regex"])
def router(request) -> Router:
    return request.param()


class TestContract:
    def test_satisfies_protocol(self, router: Router) -> None:
        assert isinstance(router, Router)

    def test_empty_router_matches_nothing(self, router: Router) -> None:
        assert router.match("GET", "/missing") is None

    @pytest.mark.parametrize("method", ["GET", "POST", "DELETE", "OPTIONS"])
    def test_root(self, router: Router, method: str) -> None:
        router.add(method, "/", handler)

        match = router.match(method, "/")
        assert match is not None
        assert match.handler is handler
        assert match.params == {}

    def test_static(self, router: Router) -> None:
        router.add("GET", "/users/me", handler)

        assert router.match("GET", "/users/me").handler is handler
        assert router.match("GET", "/users/you") is None

    def test_static_case_sensitive(self, router: Router) -> None:
        router.add("GET", "/Users", handler)

        assert router.match("GET", "/users") is None

    def test_param(self, router: Router) -> None:
        router.add("GET", "/users/:id", handler)

        match = router.match("GET", "/users/123")
        assert match.handler is handler
        assert match.params == {"id": "123"}

    def test_multiple_params(self, router: Router) -> None:
        router.add("GET", "/users/:userId/posts/:postId", handler)

        assert router.match("GET", "/users/1/posts/2").params == {"userId": "1", "postId": "2"}

    def test_optional_param(self, router: Router) -> None:
        router.add("GET", "/users/:id?", handler)

        omitted = router.match("GET", "/users")
        assert omitted.handler is handler
        assert omitted.params == {}

        present = router.match("GET", "/users/123")
        assert present.handler is handler
        assert present.params == {"id": "123"}

    def test_custom_constraint(self, router: Router) -> None:
        router.add("GET", r"/users/:id(\d+)", handler)

        assert router.match("GET", "/users/123").params == {"id": "123"}
        assert router.match("GET", "/users/abc") is None

    def test_slug_constraint(self, router: Router) -> None:
        router.add("GET", "/posts/:slug([a-z0-9-]+)", handler)

        assert router.match("GET", "/posts/hello-world-123").params == {
            "slug": "hello-world-123"
        }

    def test_wildcard(self, router: Router) -> None:
        router.add("GET", "/assets/*path", handler)

        assert router.match("GET", "/assets/img/a.png").params == {"path": "img/a.png"}

    def test_params_and_wildcard(self, router: Router) -> None:
        router.add("GET", "/a/:p1/b/:p2/*rest", handler)

        assert router.match("GET", "/a/one/b/two/c/d/e").params == {
            "p1": "one",
            "p2": "two",
            "rest": "c/d/e",
        }

    def test_method_isolation(self, router: Router) -> None:
        router.add("GET", "/x", handler)

        assert router.match("POST", "/x") is None

    def test_method_case_insensitive(self, router: Router) -> None:
        router.add("get", "/x", handler)

        assert router.match("GET", "/x").handler is handler
        assert router.match("get", "/x").handler is handler

    def test_params_immutable(self, router: Router) -> None:
        router.add("GET", "/users/:id", handler)

        match = router.match("GET", "/users/1")
        with pytest.raises(TypeError):
            match.params["id"] = "2"  # type: ignore[index]

    def test_params_fresh_per_match(self, router: Router) -> None:
        router.add("GET", "/users/:id", handler)

        first = router.match("GET", "/users/1")
        second = router.match("GET", "/users/2")
        assert first.params == {"id": "1"}
        assert second.params == {"id": "2"}

    def test_routes_in_registration_order(self, router: Router) -> None:
        router.add("GET", "/b", handler)
        router.add("POST", "/a", other_handler)

        assert [(r.method, r.pattern) for r in router.routes] == [("GET", "/b"), ("POST", "/a")]


class TestStructuralErrors:
    def test_wildcard_not_last(self, router: Router) -> None:
        with pytest.raises(RouteDefinitionError):
            router.add("GET", "/assets/*path/more", handler)

    def test_invalid_constraint(self, router: Router) -> None:
        with pytest.raises(RouteDefinitionError):
            router.add("GET", "/users/:id(\\d+[)", handler)

    def test_failed_add_registers_nothing(self, router: Router) -> None:
        with pytest.raises(RouteDefinitionError):
            router.add("GET", "/assets/*path/more", handler)

        assert router.routes == []
        assert router.match("GET", "/assets/x") is None

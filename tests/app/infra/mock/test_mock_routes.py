"""Testes do casamento de rotas do backend simulado."""

from __future__ import annotations

import pytest

from app.infra.mock.routes import ROUTES, match_path, resolve_route


class TestMatchPath:
    def test_extracts_params(self) -> None:
        assert match_path("/projects/:projectId/uploads", "/projects/p1/uploads") == {
            "projectId": "p1"
        }

    def test_ignores_query_string(self) -> None:
        assert match_path("/organizations", "/organizations?limit=10") == {}

    @pytest.mark.parametrize(
        "path",
        ["/projects/p1", "/projects/p1/uploads/extra", "/jobs/p1/uploads"],
    )
    def test_no_match(self, path: str) -> None:
        assert match_path("/projects/:projectId/uploads", path) is None


class TestResolveRoute:
    def test_current_user_before_user_by_id(self) -> None:
        route, params = resolve_route("GET", "/users/me")
        assert route.handler == "get_current_user"
        assert params == {}

    def test_method_is_part_of_match(self) -> None:
        route, params = resolve_route("patch", "/uploads/u1")
        assert route.handler == "update_upload"
        assert params == {"uploadId": "u1"}

    def test_unknown_route(self) -> None:
        assert resolve_route("GET", "/billing/invoices") is None
        assert resolve_route("PUT", "/projects/p1") is None

    def test_routes_unique(self) -> None:
        keys = [(route.method, route.pattern) for route in ROUTES]
        assert len(keys) == len(set(keys))

"""Tests for page routing: per-visit controllers, the landing-to-explore
query hand-off and the ``?query=`` URL parameter."""

from __future__ import annotations

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from src.controllers.explore import ExploreController
from src.controllers.home import HomeController
from src.ui import navigation, views
from src.ui.navigation import (
    EXPLORE,
    PENDING_QUERY,
    go,
    page_controller,
    sync_query_param,
    take_pending_query,
)
from tests.helpers import RICH_ROWS, FakeBackend


@pytest.fixture
def session(monkeypatch):
    state: dict = {}
    monkeypatch.setattr(st, "session_state", state)
    return state


@pytest.fixture
def params(monkeypatch):
    query: dict = {}
    monkeypatch.setattr(st, "query_params", query)
    return query


def _visit(backend) -> HomeController:
    ctrl = page_controller("home", lambda: HomeController(backend))
    if ctrl.loading:
        ctrl.load()
    return ctrl


# ── page controllers ─────────────────────────────────────────────────


class TestPageController:
    def test_rerun_reuses_controller(self, session, backend):
        first = _visit(backend)
        assert _visit(backend) is first
        assert [c[0] for c in backend.calls] == ["list"]

    def test_every_page_entry_refetches(self, session, backend):
        first = _visit(backend)
        page_controller("login", object)
        second = _visit(backend)
        assert second is not first
        assert [c[0] for c in backend.calls] == ["list", "list"]
        assert session["current_page"] == "home"


# ── query hand-off ───────────────────────────────────────────────────


class TestGo:
    @pytest.fixture
    def switched(self, monkeypatch):
        pages: list = []
        monkeypatch.setattr(st, "switch_page", pages.append)
        monkeypatch.setitem(navigation.ROUTES, EXPLORE, "explore-page")
        return pages

    def test_hands_query_to_explore(self, session, switched):
        go(EXPLORE, query="sea view")
        assert switched == ["explore-page"]
        assert session[PENDING_QUERY] == "sea view"

    def test_without_query(self, session, switched):
        go(EXPLORE)
        assert switched == ["explore-page"]
        assert PENDING_QUERY not in session


class TestQueryParam:
    def test_pending_query_moves_to_url(self, session, params):
        session[PENDING_QUERY] = "pune"
        assert take_pending_query() == "pune"
        assert params == {"query": "pune"}
        assert PENDING_QUERY not in session

    def test_nothing_pending(self, session, params):
        params["query"] = "old"
        assert take_pending_query() is None
        assert params == {"query": "old"}

    def test_sync_sets_and_clears(self, params):
        sync_query_param("villa")
        assert params == {"query": "villa"}
        sync_query_param("   ")
        assert params == {}
        sync_query_param("")
        assert params == {}

    def test_explore_starts_from_url(self, session, params, backend):
        session["backend"] = backend
        params["query"] = "mumbai"
        ctrl = views._explore_controller()
        assert ctrl.filters.query == "mumbai"

    def test_landing_search_replaces_open_explore(self, session, params, backend):
        session["backend"] = backend
        stale = page_controller("explore", lambda: ExploreController(backend, initial_query="old"))
        session[PENDING_QUERY] = "villa"
        ctrl = views._explore_controller()
        assert ctrl is not stale
        assert ctrl.filters.query == "villa"
        assert params == {"query": "villa"}


# ── rendered pages ───────────────────────────────────────────────────


def _home_script():
    from src.ui.views import home_page

    home_page()


def _explore_script():
    from src.ui.views import explore_page

    explore_page()


def _captions(at: AppTest) -> list[str]:
    return [c.value for c in at.caption]


class TestRenderedPages:
    def test_home_live_search_and_clear(self):
        at = AppTest.from_function(_home_script, default_timeout=30)
        at.session_state["backend"] = FakeBackend(RICH_ROWS)
        at.run()
        assert not at.exception
        assert f"{len(RICH_ROWS)} properties found" in _captions(at)

        at.text_input(key="home_search").input("mumbai").run()
        assert '2 properties found for "mumbai"' in _captions(at)

        at.text_input(key="home_search").input("castle").run()
        assert at.info[0].value == "No properties found matching your search"

        at.button(key="home_clear").click().run()
        assert at.text_input(key="home_search").value == ""
        assert f"{len(RICH_ROWS)} properties found" in _captions(at)

    def test_explore_reads_query_param(self):
        at = AppTest.from_function(_explore_script, default_timeout=30)
        at.session_state["backend"] = FakeBackend(RICH_ROWS)
        at.query_params["query"] = "mumbai"
        at.run()
        assert not at.exception
        assert at.text_input(key="explore_search").value == "mumbai"
        titles = [s.value for s in at.subheader]
        assert "City studio" in titles
        assert "Penthouse" in titles
        assert "Garden villa" not in titles

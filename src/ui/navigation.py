from __future__ import annotations

from typing import Any, Callable

import streamlit as st

from src.db import Backend

HOME = "/"
EXPLORE = "/explore"
LOGIN = "/login"
UPLOAD = "/upload"

# Filled by the app entry point once the pages exist
ROUTES: dict[str, Any] = {}

PENDING_QUERY = "pending_query"


def go(path: str, query: str | None = None) -> None:
    """Switch to the page registered for ``path``.

    ``query`` is handed to the explore page, which puts it back in the URL.
    """
    if query:
        st.session_state[PENDING_QUERY] = query
    st.switch_page(ROUTES[path])


def backend() -> Backend:
    if "backend" not in st.session_state:
        st.session_state["backend"] = Backend()
    return st.session_state["backend"]


def page_controller(name: str, factory: Callable[[], Any]) -> Any:
    """Controller for the page being rendered.

    A new controller is built whenever the visitor arrives on the page, so
    every page visit fetches fresh data; reruns within the page reuse it.
    """
    if st.session_state.get("current_page") != name or name not in st.session_state:
        st.session_state[name] = factory()
    st.session_state["current_page"] = name
    return st.session_state[name]


def take_pending_query() -> str | None:
    """Move a query handed over by ``go()`` into the URL and return it."""
    pending = st.session_state.pop(PENDING_QUERY, None)
    if pending:
        st.query_params["query"] = pending
    return pending


def sync_query_param(query: str) -> None:
    """Keep ``?query=`` in step with the explore search box."""
    if query.strip():
        st.query_params["query"] = query
    elif "query" in st.query_params:
        del st.query_params["query"]

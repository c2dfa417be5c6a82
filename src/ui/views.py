"""Streamlit page bodies. Each one renders a controller; no logic lives here."""

from __future__ import annotations

import streamlit as st

from src.config import settings
from src.controllers.base import LoadState
from src.controllers.explore import ExploreController, View
from src.controllers.home import HomeController
from src.controllers.login import LoginController
from src.controllers.upload import UploadController
from src.models import ImageFile, SortOption
from src.search.intents import ApplyFilter, Dimension, ToggleFilter
from src.ui.components import card_grid, house_card
from src.ui.navigation import (
    EXPLORE,
    HOME,
    backend,
    go,
    page_controller,
    sync_query_param,
    take_pending_query,
)


def _load(ctrl) -> None:
    if ctrl.state is LoadState.LOADING:
        with st.spinner("Loading properties…"):
            ctrl.load()


# ── home ───────────────────────────────────────────────────────────────


def home_page() -> None:
    ctrl: HomeController = page_controller("home", lambda: HomeController(backend()))

    st.title("Find your property in days, not years")
    st.write(
        f"With {settings.SITE_NAME} you can launch your property in days, not years. "
        "Say goodbye to long delays and endless paperwork."
    )

    def searched() -> None:
        ctrl.search = st.session_state["home_search"]

    st.session_state["home_search"] = ctrl.search
    search_col, clear_col, explore_col = st.columns([6, 1, 1])
    search_col.text_input(
        "Search",
        key="home_search",
        placeholder="Search properties by title, location, or name...",
        label_visibility="collapsed",
        on_change=searched,
    )
    clear_col.button("Clear search", key="home_clear", on_click=ctrl.clear_search, disabled=not ctrl.searching)
    if explore_col.button("Explore", key="home_explore", type="primary"):
        go(EXPLORE, query=ctrl.explore_query)

    st.header("Available Properties")
    _load(ctrl)
    if ctrl.state is LoadState.ERROR:
        st.error(ctrl.error)
        return
    st.caption(ctrl.results_heading)
    if not ctrl.results:
        st.info(ctrl.empty_message)
        return
    card_grid(ctrl.results)


# ── explore ────────────────────────────────────────────────────────────


def _explore_controller() -> ExploreController:
    if take_pending_query():
        st.session_state.pop("explore", None)
    initial = st.query_params.get("query", "")
    return page_controller("explore", lambda: ExploreController(backend(), initial_query=initial))


def _checkbox(ctrl: ExploreController, key: str, label: str, checked: bool, dimension: Dimension, value=None) -> None:
    st.session_state[key] = checked
    st.checkbox(label, key=key, on_change=ctrl.dispatch, args=(ToggleFilter(dimension, value),))


def _bound(ctrl: ExploreController, key: str, label: str, current: float, ceiling: int, dimension: Dimension) -> None:
    def changed() -> None:
        ctrl.dispatch(ApplyFilter(dimension, st.session_state[key]))

    st.session_state[key] = float(current)
    st.number_input(label, min_value=0.0, max_value=float(ceiling), step=1.0, key=key, on_change=changed)


def _plural(n: int, word: str) -> str:
    return f"{n} {word}{'s' if n > 1 else ''}"


def _sidebar(ctrl: ExploreController) -> None:
    facets = ctrl.facets
    f = ctrl.filters

    st.subheader("Filters")

    st.caption(f"Price Range ({settings.CURRENCY_SYMBOL})")
    lo, hi = st.columns(2)
    with lo:
        _bound(ctrl, "price_min", "Min", f.price_min, settings.PRICE_CEILING, Dimension.PRICE_MIN)
    with hi:
        _bound(ctrl, "price_max", "Max", f.price_max, settings.PRICE_CEILING, Dimension.PRICE_MAX)

    st.caption("Location")
    for loc, count in facets.locations:
        _checkbox(ctrl, f"loc-{loc}", f"{loc} ({count})", loc in f.locations, Dimension.LOCATIONS, loc)

    st.caption("Bedrooms")
    for b, count in facets.beds:
        _checkbox(ctrl, f"bed-{b}", f"{_plural(b, 'Bedroom')} ({count})", b in f.beds, Dimension.BEDS, b)

    st.caption("Bathrooms")
    for b, count in facets.baths:
        _checkbox(ctrl, f"bath-{b}", f"{_plural(b, 'Bathroom')} ({count})", b in f.baths, Dimension.BATHS, b)

    st.caption("Finance Type")
    for ft, count in facets.finance_types:
        _checkbox(ctrl, f"ft-{ft}", f"{ft} ({count})", ft in f.finance_types, Dimension.FINANCE_TYPES, ft)

    st.caption("Area (sqft)")
    lo, hi = st.columns(2)
    with lo:
        _bound(ctrl, "sqft_min", "Min", f.sqft_min, settings.SQFT_CEILING, Dimension.SQFT_MIN)
    with hi:
        _bound(ctrl, "sqft_max", "Max", f.sqft_max, settings.SQFT_CEILING, Dimension.SQFT_MAX)

    st.caption("Status")
    _checkbox(
        ctrl, "new_listing_only", f"New Listing ({facets.new_listing_count})",
        f.new_listing_only, Dimension.NEW_LISTING,
    )
    _checkbox(
        ctrl, "trending_only", f"Trending ({facets.trending_count})",
        f.trending_only, Dimension.TRENDING,
    )

    if ctrl.active_tags:
        st.button("Clear all filters", key="sidebar_clear", on_click=ctrl.clear_all)


def explore_page() -> None:
    ctrl = _explore_controller()
    _load(ctrl)

    with st.sidebar:
        _sidebar(ctrl)

    search_col, sort_col = st.columns([3, 1])
    with search_col:
        def searched() -> None:
            ctrl.dispatch(ApplyFilter(Dimension.QUERY, st.session_state["explore_search"]))

        st.session_state["explore_search"] = ctrl.filters.query
        st.text_input(
            "Search",
            key="explore_search",
            placeholder="Search by title, location, or name…",
            label_visibility="collapsed",
            on_change=searched,
        )
    with sort_col:
        def sorted_by() -> None:
            ctrl.set_sort(st.session_state["explore_sort"])

        st.session_state["explore_sort"] = ctrl.sort
        st.selectbox(
            "Sort",
            options=list(SortOption),
            format_func=lambda opt: opt.label,
            key="explore_sort",
            on_change=sorted_by,
        )

    sync_query_param(ctrl.filters.query)

    tags = ctrl.active_tags
    chips = st.columns(len(tags) + 2)
    chips[0].caption(ctrl.result_count_label)
    for col, tag in zip(chips[1:], tags):
        col.button(f"{tag.label} ✕", key=f"tag-{tag.key}", on_click=ctrl.remove_tag, args=(tag,))
    if tags:
        chips[-1].button("Clear all", key="chips_clear", on_click=ctrl.clear_all)

    view = ctrl.view
    if view is View.ERROR:
        st.error(ctrl.error)
    elif view is View.EMPTY:
        st.info("No properties match your filters. Try adjusting or removing some filters.")
    elif view is View.RESULTS:
        card_grid(ctrl.results)


# ── login ──────────────────────────────────────────────────────────────


def login_page() -> None:
    def build() -> LoginController:
        ctrl = LoginController(backend())
        ctrl.check_session()
        return ctrl

    ctrl: LoginController = page_controller("login", build)
    if ctrl.redirect_to:
        go(ctrl.redirect_to)

    st.title("Welcome back" if ctrl.mode == "login" else "Create your account")
    st.caption(
        "Sign in to manage and list your properties."
        if ctrl.mode == "login"
        else f"Join {settings.SITE_NAME} and start listing properties today."
    )

    sign_in, register = st.columns(2)
    sign_in.button("Sign In", on_click=ctrl.set_mode, args=("login",), disabled=ctrl.mode == "login")
    register.button("Register", on_click=ctrl.set_mode, args=("register",), disabled=ctrl.mode == "register")

    if ctrl.error:
        st.error(ctrl.error)
    if ctrl.success:
        st.success(ctrl.success)

    with st.form(f"auth_{ctrl.mode}", clear_on_submit=False):
        email = st.text_input("Email", placeholder="you@example.com")
        password = st.text_input("Password", type="password")
        confirm = ""
        if ctrl.mode == "register":
            confirm = st.text_input("Confirm password", type="password")
        label = "Sign In" if ctrl.mode == "login" else "Create Account"
        if st.form_submit_button(label, disabled=ctrl.loading):
            ctrl.submit(email, password, confirm)
            if ctrl.redirect_to:
                go(ctrl.redirect_to)
            st.rerun()


# ── upload ─────────────────────────────────────────────────────────────


UPLOAD_KEY = "upload-{}"


def _reset_upload(ctrl: UploadController) -> None:
    ctrl.reset()
    for key in [k for k in st.session_state if str(k).startswith("upload-")]:
        del st.session_state[key]


def _upload_success(ctrl: UploadController) -> None:
    st.success(f'Property Listed! Your property "{ctrl.form.title}" has been successfully added.')
    again, view_all = st.columns(2)
    again.button("List Another", on_click=_reset_upload, args=(ctrl,))
    if view_all.button("View All"):
        go(HOME)


def _pick_image(ctrl: UploadController) -> None:
    uploaded = st.file_uploader("Property image", type=["png", "jpg", "jpeg", "webp", "gif"], key="upload-image")
    if uploaded is None:
        if ctrl.image is not None:
            ctrl.remove_image()
        return
    if ctrl.image is None or ctrl.image.name != uploaded.name:
        ctrl.pick_image(ImageFile(name=uploaded.name, content=uploaded.getvalue(), content_type=uploaded.type or ""))


def _field(ctrl: UploadController, widget, label: str, name: str, **kwargs):
    key = UPLOAD_KEY.format(name)
    if key not in st.session_state:
        st.session_state[key] = getattr(ctrl.form, name)
    return widget(label, key=key, **kwargs)


def upload_page() -> None:
    def build() -> UploadController:
        ctrl = UploadController(backend())
        ctrl.require_user()
        return ctrl

    ctrl: UploadController = page_controller("upload", build)
    if ctrl.redirect_to:
        go(ctrl.redirect_to)

    if ctrl.success:
        _upload_success(ctrl)
        return

    who, out = st.columns([4, 1])
    who.caption(ctrl.user.email if ctrl.user and ctrl.user.email else "")
    if out.button("Sign out") and ctrl.sign_out():
        go(ctrl.redirect_to)

    st.title("List a property")
    st.caption("Fill in the details below. A live preview updates on the right.")

    form_col, preview_col = st.columns([3, 2])
    with form_col:
        _pick_image(ctrl)
        text = st.text_input
        ctrl.update(
            title=_field(ctrl, text, "Title *", "title"),
            subtitle=_field(ctrl, text, "Subtitle", "subtitle"),
            name=_field(ctrl, text, "Property name", "name"),
            location=_field(ctrl, text, "Location *", "location"),
            finance_type=_field(ctrl, st.selectbox, "Finance type", "finance_type", options=["", *settings.FINANCE_TYPES]),
            price=_field(ctrl, text, "Price *", "price"),
            beds=_field(ctrl, text, "Beds", "beds"),
            baths=_field(ctrl, text, "Baths", "baths"),
            kitchens=_field(ctrl, text, "Kitchens", "kitchens"),
            sqft=_field(ctrl, text, "Area (sqft)", "sqft"),
            agent_name=_field(ctrl, text, "Agent name", "agent_name"),
            agent_phone=_field(ctrl, text, "Agent phone", "agent_phone"),
            youtube_video_url=_field(ctrl, text, "YouTube video URL", "youtube_video_url"),
            use_embed_player=_field(ctrl, st.toggle, "Use embedded player", "use_embed_player"),
            new_listing=_field(ctrl, st.toggle, "New listing", "new_listing"),
            trending=_field(ctrl, st.toggle, "Trending", "trending"),
        )

        if ctrl.error:
            st.error(ctrl.error)
        if st.button("Publish Property", type="primary", disabled=ctrl.uploading):
            with st.spinner("Uploading…"):
                ctrl.submit()
            st.rerun()

    with preview_col:
        st.caption("Live preview")
        if ctrl.image is not None:
            st.image(ctrl.image.content)
        house_card(ctrl.preview())

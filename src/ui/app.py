"""Streamlit entry point: ``streamlit run src/ui/app.py``."""

import streamlit as st

from src.config import settings, setup_logging
from src.ui import views
from src.ui.navigation import EXPLORE, HOME, LOGIN, ROUTES, UPLOAD

setup_logging()

st.set_page_config(page_title=settings.SITE_NAME, page_icon="🏠", layout="wide")

ROUTES.update(
    {
        HOME: st.Page(views.home_page, title="Home", icon="🏠", default=True),
        EXPLORE: st.Page(views.explore_page, title="Explore", icon="🔎", url_path="explore"),
        LOGIN: st.Page(views.login_page, title="Sign in", icon="🔑", url_path="login"),
        UPLOAD: st.Page(views.upload_page, title="List a property", icon="⬆️", url_path="upload"),
    }
)

st.navigation(list(ROUTES.values())).run()

# streamlit_app.py
# run with: streamlit run streamlit_app.py

import logging

import streamlit as st

from smartfin import config
from smartfin.navigation import current_path, set_path
from smartfin.routes import resolve
from smartfin.session import get_session
from smartfin.views import PAGES
from smartfin.views.navbar import render_sidebar

# ---------------- Page config ----------------
st.set_page_config(page_title="SmartFin", layout="wide", page_icon="📊")

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(config.LOGGER_NAME)

# ---------------- CSS ----------------
st.markdown("""
<style>
[data-testid="stSidebar"] {
    background: linear-gradient(180deg, #4f46e5, #7c3aed);
}

[data-testid="stSidebar"] .stMarkdown,
[data-testid="stSidebar"] label {
    color: #ffffff !important;
}

h1, h2, h3 {
    color: #1e293b !important;
    font-weight: 700;
}

.stMetric {
    background: #f8fafc;
    padding: 15px;
    border-radius: 12px;
    box-shadow: 0 2px 10px rgba(79, 70, 229, 0.12);
}
</style>
""", unsafe_allow_html=True)


# ---------------- Main App ----------------
def main():
    session = get_session()

    requested = current_path()
    path = resolve(requested, session.is_authenticated)
    if path != requested:
        logger.info(f"Redirecting {requested} -> {path}")
        set_path(path)

    render_sidebar(session, path)
    PAGES[path](session)


if __name__ == "__main__":
    main()

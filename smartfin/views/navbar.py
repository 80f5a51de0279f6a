# smartfin/views/navbar.py
import streamlit as st

from smartfin import routes
from smartfin.navigation import navigate


def _nav_button(path, active_path):
    route = routes.ROUTES[path]
    button_type = "primary" if path == active_path else "secondary"
    if st.button(f"{route.icon} {route.title}", key=f"nav_{route.title.lower()}",
                 use_container_width=True, type=button_type):
        navigate(path)


def render_sidebar(session, active_path):
    with st.sidebar:
        if st.button("📊 SmartFin", key="nav_brand", use_container_width=True):
            navigate(routes.HOME)
        st.markdown("---")

        if session.is_authenticated:
            st.success(f"Logged in as **{session.user.username}**")
            for path in routes.NAV_AUTHENTICATED:
                _nav_button(path, active_path)
            st.markdown("---")
            if st.button("🚪 Logout", key="logout_btn", use_container_width=True):
                session.logout()
        else:
            for path in routes.NAV_ANONYMOUS:
                _nav_button(path, active_path)

# smartfin/views/login.py
import logging

import streamlit as st

from smartfin import config, routes, services
from smartfin.errors import SmartFinError
from smartfin.navigation import navigate, pop_flash
from smartfin.validation import validate_login

logger = logging.getLogger(config.LOGGER_NAME)


def handle_login(session, email, password):
    """Returns an error message, or None once the session is signed in"""
    credentials, error = validate_login(email, password)
    if error:
        return error
    try:
        token, user = services.login(credentials["email"], credentials["password"])
        session.login(token, user)
    except SmartFinError as e:
        logger.warning(f"Login failed for {credentials['email']}: {e}")
        return str(e)
    return None


def render(session):
    st.header("🔐 Welcome Back!")
    st.caption("Log in to manage your finances.")

    flash = pop_flash()
    if flash:
        st.success(flash)

    with st.form("login_form"):
        email = st.text_input("📧 Email address", placeholder="you@example.com", key="login_email")
        password = st.text_input("🔒 Password", type="password", key="login_password")
        submitted = st.form_submit_button("Log In", use_container_width=True)

    if submitted:
        with st.spinner("Logging in..."):
            error = handle_login(session, email, password)
        if error:
            st.error(f"❌ {error}")
        else:
            navigate(routes.DASHBOARD)

    st.markdown("Don't have an account?")
    if st.button("Register", key="login_to_register"):
        navigate(routes.REGISTER)

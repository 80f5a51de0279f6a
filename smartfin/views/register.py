# smartfin/views/register.py
import logging

import streamlit as st

from smartfin import config, routes, services
from smartfin.errors import ApiError
from smartfin.navigation import navigate
from smartfin.validation import validate_registration

logger = logging.getLogger(config.LOGGER_NAME)

REGISTERED_MESSAGE = "Registration successful! Please log in."


def handle_register(username, email, password):
    """Returns an error message, or None when the account was created"""
    data, error = validate_registration(username, email, password)
    if error:
        return error
    try:
        services.register(data["username"], data["email"], data["password"])
    except ApiError as e:
        return str(e)
    logger.info(f"Registered new account for {data['email']}")
    return None


def render(session):
    st.header("📝 Create an Account")
    st.caption("Join SmartFin and start tracking today.")

    with st.form("register_form"):
        username = st.text_input("👤 Username", placeholder="yourusername", key="register_username")
        email = st.text_input("📧 Email address", placeholder="you@example.com", key="register_email")
        password = st.text_input("🔒 Password", type="password", key="register_password",
                                 help="At least 6 characters")
        submitted = st.form_submit_button("Register", use_container_width=True)

    if submitted:
        with st.spinner("Creating account..."):
            error = handle_register(username, email, password)
        if error:
            st.error(f"❌ {error}")
        else:
            navigate(routes.LOGIN, flash=REGISTERED_MESSAGE)

    st.markdown("Already have an account?")
    if st.button("Log In", key="register_to_login"):
        navigate(routes.LOGIN)

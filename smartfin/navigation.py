# smartfin/navigation.py
import streamlit as st

from smartfin.routes import HOME, normalize_path

PAGE_PARAM = "page"
FLASH_KEY = "flash_message"


def current_path():
    return normalize_path(st.query_params.get(PAGE_PARAM, ""))


def set_path(path):
    """Point the address bar at ``path`` without rerunning"""
    path = normalize_path(path)
    if path == HOME:
        st.query_params.clear()
    else:
        st.query_params[PAGE_PARAM] = path.lstrip("/")


def navigate(path, flash=None):
    """Switch to ``path`` and rerun the script; ``flash`` is shown once there"""
    if flash:
        st.session_state[FLASH_KEY] = flash
    set_path(path)
    st.rerun()


def pop_flash():
    return st.session_state.pop(FLASH_KEY, None)

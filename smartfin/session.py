# smartfin/session.py
import hashlib
import json
import logging

import streamlit as st

from smartfin import config
from smartfin.errors import StorageError
from smartfin.models import User
from smartfin.navigation import navigate
from smartfin.routes import HOME
from smartfin.storage import LocalStorage

logger = logging.getLogger(config.LOGGER_NAME)

TOKEN_KEY = "token"
USER_KEY = "user"
SESSION_STATE_KEY = "smartfin_session"


class Session:
    """Authenticated-user context held between login and logout.

    The credential and user profile are mirrored to ``storage`` (this
    browser's local storage) so a reload restores the session. Without a
    storage the session lives only as long as the browser tab.
    ``on_logout`` is called after logout has cleared everything; the app
    uses it to return to the landing view.
    """

    def __init__(self, storage=None, on_logout=None):
        self.storage = storage
        self.on_logout = on_logout
        self.token = None
        self.user = None
        self.restore()

    @property
    def is_authenticated(self):
        return bool(self.token)

    def restore(self):
        """Load credential and profile from local storage.

        Anything unreadable is thrown away and the session starts logged out.
        """
        if self.storage is None:
            return
        try:
            stored_token = self.storage.get_item(TOKEN_KEY)
            stored_user = self.storage.get_item(USER_KEY)
            if stored_token and stored_user:
                user = User.from_dict(json.loads(stored_user))
                self.token = stored_token
                self.user = user
        except (StorageError, ValueError, TypeError) as e:
            logger.warning(f"Failed to restore session from local storage: {e}")
            self.token = None
            self.user = None
            self._clear_storage()

    def login(self, token, user):
        """Persist the credential, then sign in.

        If local storage cannot be written the session stays signed out and
        the StorageError propagates.
        """
        if self.storage is not None:
            try:
                self.storage.set_item(TOKEN_KEY, token)
                self.storage.set_item(USER_KEY, json.dumps(user.to_dict()))
            except StorageError:
                self._clear_storage()
                raise
        self.token = token
        self.user = user
        logger.info(f"Logged in as {user.username}")

    def logout(self):
        username = self.user.username if self.user else None
        self.token = None
        self.user = None
        self._clear_storage()
        logger.info(f"Logged out {username or 'anonymous session'}")
        if self.on_logout:
            self.on_logout()

    def _clear_storage(self):
        if self.storage is None:
            return
        try:
            self.storage.remove_item(TOKEN_KEY)
            self.storage.remove_item(USER_KEY)
        except StorageError as e:
            logger.error(f"Could not clear local storage: {e}")


def browser_storage():
    """Local storage of the browser behind the current script run.

    The browser is recognised by its ``config.BROWSER_COOKIE`` cookie. When
    the cookie is missing there is nothing to key on, so nothing persists.
    """
    cookie = st.context.cookies.get(config.BROWSER_COOKIE)
    if not cookie:
        logger.warning(f"No {config.BROWSER_COOKIE} cookie; the session will not survive a reload")
        return None
    namespace = hashlib.sha256(cookie.encode("utf-8")).hexdigest()
    return LocalStorage(namespace=namespace)


def get_session():
    """Session for the current browser session, restored on first use"""
    if SESSION_STATE_KEY not in st.session_state:
        st.session_state[SESSION_STATE_KEY] = Session(
            storage=browser_storage(), on_logout=lambda: navigate(HOME))
    return st.session_state[SESSION_STATE_KEY]

# smartfin/storage.py
import json
import logging
import os

from smartfin import config
from smartfin.errors import StorageError

logger = logging.getLogger(config.LOGGER_NAME)


class LocalStorage:
    """String key/value store for one browser, persisted to a JSON file.

    The file is shared by every browser the server has seen; each one only
    reads and writes the entries under its own ``namespace``. Values are
    stored as strings, so structured values (the user profile) are
    serialized by the caller.
    """

    def __init__(self, path=None, namespace="default"):
        self.path = path or config.STORAGE_PATH
        self.namespace = namespace

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Could not read local storage at {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Local storage at {self.path} is not a JSON object")
        return data

    def _save(self, data):
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4)
        except OSError as e:
            raise StorageError(f"Could not write local storage at {self.path}: {e}") from e

    def _entries(self, data):
        entries = data.get(self.namespace)
        return entries if isinstance(entries, dict) else {}

    def get_item(self, key):
        value = self._entries(self._load()).get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key, value):
        data = self._load()
        entries = self._entries(data)
        entries[key] = str(value)
        data[self.namespace] = entries
        self._save(data)

    def remove_item(self, key):
        try:
            data = self._load()
        except StorageError:
            # unreadable file; start over with an empty store
            data = {}
        entries = self._entries(data)
        entries.pop(key, None)
        if entries:
            data[self.namespace] = entries
        else:
            data.pop(self.namespace, None)
        self._save(data)

# smartfin/config.py

import os

API_BASE_URL = os.environ.get("SMARTFIN_API_BASE_URL", "http://localhost:5000")
REQUEST_TIMEOUT = float(os.environ.get("SMARTFIN_REQUEST_TIMEOUT", "10"))

STORAGE_PATH = os.environ.get(
    "SMARTFIN_STORAGE_PATH",
    os.path.join(os.path.expanduser("~"), ".smartfin", "local_storage.json"),
)

LOG_LEVEL = os.environ.get("SMARTFIN_LOG_LEVEL", "INFO").upper()
LOGGER_NAME = "smartfin"

CURRENCY_SYMBOL = os.environ.get("SMARTFIN_CURRENCY_SYMBOL", "₹")

# cookie that identifies a browser; its hash keys that browser's local storage
BROWSER_COOKIE = os.environ.get("SMARTFIN_BROWSER_COOKIE", "_streamlit_xsrf")

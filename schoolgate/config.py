# schoolgate/config.py
from __future__ import annotations
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv(Path(__file__).with_name(".env"))

APP_TITLE = "SchoolGate"

# deployed Apps Script web app (/exec URL)
API_BASE_URL = os.getenv(
    "API_BASE_URL",
    "https://script.google.com/macros/s/AKfycbzDKStsdn6NcxGJdfdTScCClYnlB3iIoCVbMfU34x90Enrez6KjTgE8nSP653dGvt98uQ/exec",
)
REQUEST_TIMEOUT = float(os.getenv("SCHOOLGATE_TIMEOUT", "15"))

# sent as "password" on gated calls when the login password is not kept
API_TOKEN = os.getenv("SCHOOLGATE_API_TOKEN", "token-would-be-better")
STORE_CREDENTIAL = os.getenv("SCHOOLGATE_STORE_CREDENTIAL", "1").strip().lower() in ("1", "true", "yes", "on")

SETTINGS_FILE = os.getenv("SCHOOLGATE_SETTINGS_FILE", os.path.join(os.getcwd(), "schoolgate_settings.json"))
LOG_LEVEL = os.getenv("SCHOOLGATE_LOG_LEVEL", "INFO").upper()

ROLES = ("teacher", "student")

"""Clubhouse API token storage."""

import json
import os
from pathlib import Path
from typing import Optional

TOKEN_ENV_VAR = "CLUBHOUSE_API_TOKEN"

TOKEN_DIR = Path.home() / ".config" / "chticket"
TOKEN_FILE = TOKEN_DIR / "auth.json"


def save_credentials(token: str, default_project_id: int) -> None:
    """Save token and default project to disk with restricted permissions."""
    TOKEN_DIR.mkdir(parents=True, exist_ok=True)
    data = {"token": token, "default_project_id": default_project_id}
    fd = os.open(TOKEN_FILE, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        os.write(fd, json.dumps(data).encode())
    finally:
        os.close(fd)


def load_credentials() -> Optional[dict]:
    """Load stored credentials. Returns None if missing or unreadable."""
    if not TOKEN_FILE.exists():
        return None
    try:
        data = json.loads(TOKEN_FILE.read_text())
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def get_token() -> Optional[str]:
    """Token from CLUBHOUSE_API_TOKEN, else from the stored credentials."""
    token = os.environ.get(TOKEN_ENV_VAR)
    if token:
        return token
    creds = load_credentials()
    if creds and creds.get("token"):
        return str(creds["token"])
    return None

"""Settings loading with layered overrides, and the resolved Configuration.

Priority chain: bundled defaults < ~/.config/chticket/config.yaml < .chticket/config.yaml
Override files may only set keys the bundled defaults declare, with a value of
the same kind (string, number, boolean).
"""

import importlib.resources
import os
from pathlib import Path
from typing import Optional

import yaml

from chticket.auth import TOKEN_FILE, get_token, load_credentials
from chticket.errors import ChticketError, NotConfiguredError
from chticket.models.core import Configuration

_config: Optional[dict] = None
_loaded_sources: list[str] = []

GLOBAL_CONFIG = Path.home() / ".config" / "chticket" / "config.yaml"
PROJECT_CONFIG = Path(".chticket") / "config.yaml"

DEBUG_ENV_VAR = "CHTICKET_DEBUG"


def _load_defaults() -> dict:
    """Load bundled default config."""
    try:
        files = importlib.resources.files("chticket")
        config_path = files / "defaults" / "config.yaml"
        content = config_path.read_text()
        return yaml.safe_load(content)
    except (FileNotFoundError, TypeError):
        dev_path = Path(__file__).parent.parent / "defaults" / "config.yaml"
        if dev_path.exists():
            with open(dev_path) as f:
                return yaml.safe_load(f)
        raise FileNotFoundError("Could not find defaults/config.yaml")


def _read_overrides(path: Path) -> Optional[dict]:
    """Load an override file. None if missing or empty; non-mappings are rejected."""
    if not path.exists():
        return None
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ChticketError(f"{path} must contain a mapping of settings")
    return data


def _same_kind(default, value) -> bool:
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(default, bool) and isinstance(value, bool)
    if isinstance(default, (int, float)):
        return isinstance(value, (int, float))
    return isinstance(value, type(default))


def _apply_overrides(settings: dict, overrides: dict, source: str) -> dict:
    """Return settings with overrides applied. Unknown keys and wrong kinds raise."""
    merged = settings.copy()
    for key, value in overrides.items():
        if key not in settings:
            raise ChticketError(f"Unknown setting '{key}' in {source}")
        if not _same_kind(settings[key], value):
            expected = type(settings[key]).__name__
            raise ChticketError(f"Setting '{key}' in {source} must be of type {expected}")
        merged[key] = value
    return merged


def load_config() -> dict:
    """Load config with layered overrides: defaults < global < project."""
    global _loaded_sources
    _loaded_sources = []

    result = _load_defaults()
    _loaded_sources.append("defaults")

    for path in (GLOBAL_CONFIG, PROJECT_CONFIG):
        overrides = _read_overrides(path)
        if overrides:
            result = _apply_overrides(result, overrides, str(path))
            _loaded_sources.append(str(path))

    if os.environ.get(DEBUG_ENV_VAR, "") not in ("", "0", "false"):
        result["debug"] = True

    return result


def get_config() -> dict:
    """Get cached config (loads on first access)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> dict:
    """Force reload config."""
    global _config
    _config = load_config()
    return _config


def get_config_loaded_sources() -> list[str]:
    """Return list of config sources that were loaded (for logging)."""
    return _loaded_sources


def load_configuration() -> Configuration:
    """Resolve token and default project. Never raises; check `loaded`."""
    settings = get_config()
    token = get_token()
    creds = load_credentials() or {}
    default_project_id = creds.get("default_project_id")

    if not token:
        return Configuration(
            loaded=False,
            error_msg=f"No Clubhouse API token found in {TOKEN_FILE} or $CLUBHOUSE_API_TOKEN",
            settings=settings,
        )
    if default_project_id is None:
        return Configuration(
            loaded=False,
            error_msg=f"No default project configured in {TOKEN_FILE}",
            token=token,
            settings=settings,
        )
    try:
        project_id = int(default_project_id)
    except (TypeError, ValueError):
        return Configuration(
            loaded=False,
            error_msg=f"Invalid default project id: {default_project_id!r}",
            token=token,
            settings=settings,
        )
    return Configuration(
        loaded=True,
        token=token,
        default_project_id=project_id,
        settings=settings,
    )


def require_configuration() -> Configuration:
    """Like load_configuration, but raises NotConfiguredError when incomplete."""
    configuration = load_configuration()
    if not configuration.loaded:
        raise NotConfiguredError(configuration.error_msg)
    return configuration

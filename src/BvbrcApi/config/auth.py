"""Process-wide auth token settings.

Convenience state for callers of the module-level helpers
(``BvbrcApi.query``, ``BvbrcApi.get_client``). It starts empty and changes only
through the functions below; nothing is read from disk unless
``load_config_file`` is called explicitly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from BvbrcApi.config.app import parse_yaml
from BvbrcApi.utils.log import log

_settings: dict[str, Any] = {"auth_token": None}


def set_auth_token(token: str | None) -> None:
    """Set the process-wide auth token (``None`` clears it)."""
    _settings["auth_token"] = token


def get_auth_token() -> str | None:
    return _settings.get("auth_token") or None


def get_config() -> dict[str, Any]:
    """Return a copy of the current settings."""
    return dict(_settings)


def set_config(config: Mapping[str, Any]) -> None:
    """Merge ``config`` into the current settings; given keys win."""
    _settings.update(config)


def reset_config() -> None:
    """Drop every setting and restore the empty token."""
    _settings.clear()
    _settings["auth_token"] = None


def load_config_file(path: Path | str = "config.json") -> dict[str, Any]:
    """Merge settings from a JSON or YAML file, e.g. ``{"auth_token": "..."}``.

    Args:
        path: Settings file path.

    Returns:
        The merged settings.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file root is not a mapping.
    """
    config_path = Path(path)
    data = parse_yaml(config_path.read_text(encoding="utf-8"))
    set_config(data)
    log.debug("Loaded auth settings from %s (keys=%s)", config_path, sorted(data))
    return get_config()

"""Settings storage for the menu tree source and organization name.

Values given on the command line win over stored ones; ``nav-index --save``
stores them for later runs.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from navindex.logging import LoggerFactory


SETTINGS_PATH = Path(
    os.environ.get(
        "NAV_INDEX_SETTINGS_PATH",
        Path.home() / ".config" / "nav-index" / "settings.json",
    )
)

DEFAULT_SETTINGS: dict[str, Any] = {
    "nav_tree_path": None,
    "organization_name": None,
}

log = LoggerFactory.for_config()


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)


settings_store = SettingsStore()


def load_settings() -> None:
    """Reset to defaults, then apply the known string keys from the file."""
    settings_store.values = dict(DEFAULT_SETTINGS)
    if not SETTINGS_PATH.exists():
        return
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return
    if not isinstance(data, dict):
        return
    for key in DEFAULT_SETTINGS:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str) or not value:
            log.debug(f"Ignoring stored {key}: expected a non-empty string")
            continue
        settings_store.values[key] = value


def save_settings() -> None:
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(settings_store.values, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def get_nav_tree_path() -> Path | None:
    value = get_setting("nav_tree_path")
    return Path(value) if value else None


def get_organization_name() -> str | None:
    return get_setting("organization_name") or None


def remember_sources(
    *,
    nav_tree_path: Path | str | None = None,
    organization_name: str | None = None,
) -> None:
    """Store the given tree path and organization name; ``None`` keeps the old value."""
    if nav_tree_path is not None:
        settings_store.values["nav_tree_path"] = str(Path(nav_tree_path).expanduser())
    if organization_name is not None:
        settings_store.values["organization_name"] = organization_name
    save_settings()
    log.info(f"Saved settings to {SETTINGS_PATH}")


load_settings()

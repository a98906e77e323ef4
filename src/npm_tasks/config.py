"""Configuration loader for task discovery.

Settings are read from a JSON file (explicit path or ``NPM_TASKS_CONFIG``).
When neither is given the built-in defaults apply. Recognised keys:
``manifestName``, ``defaultManager`` and ``pnpmWorkspaceFile``.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .models import PackageManager


CONFIG_PATH_ENV_VAR = "NPM_TASKS_CONFIG"
DEFAULT_MANIFEST_NAME = "package.json"

_KNOWN_KEYS = {"manifestName", "defaultManager", "pnpmWorkspaceFile"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    manifest_name: str = DEFAULT_MANIFEST_NAME
    default_manager: PackageManager = PackageManager.NPM
    pnpm_workspace_file: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating each field."""
        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

        manifest_name = data.get("manifestName", DEFAULT_MANIFEST_NAME)
        if not isinstance(manifest_name, str) or not manifest_name:
            raise ConfigError("'manifestName' must be a non-empty string")
        if "/" in manifest_name or "\\" in manifest_name:
            raise ConfigError("'manifestName' must be a file name, not a path")

        default_manager = data.get("defaultManager", PackageManager.NPM.value)
        try:
            manager = PackageManager(default_manager)
        except ValueError as exc:
            known = ", ".join(m.value for m in PackageManager)
            raise ConfigError(
                f"Invalid 'defaultManager' {default_manager!r}. Known managers: {known}"
            ) from exc

        pnpm_workspace_file = data.get("pnpmWorkspaceFile", False)
        if not isinstance(pnpm_workspace_file, bool):
            raise ConfigError("'pnpmWorkspaceFile' must be a boolean")

        return cls(
            manifest_name=manifest_name,
            default_manager=manager,
            pnpm_workspace_file=pnpm_workspace_file,
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. NPM_TASKS_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON file.

    Raises:
        ConfigError: If a configured file is missing, unreadable or invalid.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return Settings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    return Settings.from_dict(data)

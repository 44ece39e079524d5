"""Shared configuration for UI and API scenarios.

Configuration is loaded from a ``config.properties`` file. The file is located by:
- VULCAN_CONFIG environment variable (explicit path)
- config.properties in the current working directory
- config.properties in the repository root

Any key can be overridden from the environment. The variable name is the key
upper-cased with dots and camelCase boundaries turned into underscores, so
``ui.baseUrl`` is overridden by ``UI_BASE_URL``.
"""
from __future__ import annotations

import logging
import os
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.properties"
CONFIG_PATH_ENV = "VULCAN_CONFIG"
REPO_ROOT = Path(__file__).resolve().parents[2]

_MISSING = object()
_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


class ConfigError(RuntimeError):
    """Raised when a configuration key is missing or has an unusable value."""


def env_key(key: str) -> str:
    """Return the environment variable name that overrides ``key``."""
    snake = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", key)
    return re.sub(r"[^A-Za-z0-9]+", "_", snake).upper()


def load_properties(path: Path) -> Dict[str, str]:
    """Parse a ``key=value`` properties file into a dict."""
    properties: Dict[str, str] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line[0] in "#!":
            continue
        match = re.match(r"([^=:\s]+)\s*[=:]\s*(.*)$", line)
        if not match:
            logger.warning(f"Ignoring malformed line in {path.name}: {line!r}")
            continue
        properties[match.group(1)] = match.group(2).strip()
    return properties


class ConfigManager:
    """Lazily loaded properties with environment and in-process overrides."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._explicit_path = Path(path) if path else None
        self._properties: Optional[Dict[str, str]] = None
        self._source: Optional[Path] = None
        self._overrides: Dict[str, str] = {}

    # ---- loading ------------------------------------------------------------
    def resolve_path(self) -> Path:
        if self._explicit_path:
            return self._explicit_path
        from_env = os.getenv(CONFIG_PATH_ENV)
        if from_env:
            return Path(from_env)
        cwd_file = Path.cwd() / CONFIG_FILE_NAME
        if cwd_file.exists():
            return cwd_file
        return REPO_ROOT / CONFIG_FILE_NAME

    def _load(self) -> Dict[str, str]:
        if self._properties is None:
            path = self.resolve_path()
            if not path.exists():
                raise ConfigError(
                    f"Configuration file not found: {path}\n"
                    f"Create {CONFIG_FILE_NAME} or point {CONFIG_PATH_ENV} at one."
                )
            self._properties = load_properties(path)
            self._source = path
            logger.info(f"Configuration loaded from {path} ({len(self._properties)} keys)")
        return self._properties

    def reload(self) -> None:
        """Forget the cached file so the next read resolves and parses it again."""
        self._properties = None
        self._source = None

    @property
    def source(self) -> Optional[Path]:
        return self._source

    # ---- reading ------------------------------------------------------------
    def get(self, key: str, default=_MISSING) -> str:
        if key in self._overrides:
            return self._overrides[key]

        value = os.getenv(env_key(key))
        if value is None:
            value = self._load().get(key)

        if value is None:
            if default is not _MISSING:
                return default
            logger.error(
                f"Configuration property '{key}' not found. "
                f"Define it in {CONFIG_FILE_NAME} or export {env_key(key)}."
            )
            raise ConfigError(f"Property '{key}' not found in configuration")

        value = value.strip()
        logger.debug(f"Reading config property '{key}' = '{value}'")
        return value

    def get_int(self, key: str, default=_MISSING) -> int:
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Property '{key}' is not an integer: {value!r}") from exc

    def get_bool(self, key: str, default=_MISSING) -> bool:
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        lowered = str(value).lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigError(f"Property '{key}' is not a boolean: {value!r}")

    # ---- overrides ----------------------------------------------------------
    @contextmanager
    def override(self, values: Mapping[str, object]) -> Iterator["ConfigManager"]:
        """Temporarily replace keys, e.g. to point API clients at a mock server."""
        previous = dict(self._overrides)
        self._overrides.update({key: str(value) for key, value in values.items()})
        try:
            yield self
        finally:
            self._overrides = previous


# Singleton instance - the file is read on first access
settings = ConfigManager()

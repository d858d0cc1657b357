"""
Configuration management for docker-engine-api.

This module provides a layered configuration system with priority:
1. Explicit arguments (CLI options, constructor parameters)
2. Environment variables
3. TOML config file (~/.config/docker-engine-api/config.toml)
4. Defaults
"""

import os
from copy import deepcopy
from pathlib import Path
from typing import Any, ClassVar

import toml

from docker_engine_api.constants import (
    CONFIG_PATH,
    DEFAULT_DAEMON_URL,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_MAX_BYTES,
    DEFAULT_TIMEOUT,
)


def normalize_daemon_url(url: str) -> str:
    """
    Turn a DOCKER_HOST style address into an HTTP base URL.

    ``tcp://host:2375`` becomes ``http://host:2375``; trailing slashes are
    dropped. Other schemes are returned untouched.
    """
    if url.startswith("tcp://"):
        url = "http://" + url[len("tcp://") :]
    return url.rstrip("/")


def parse_timeout(value: str) -> float | None:
    """Parse a timeout setting; empty, "none" and "0" mean no timeout."""
    if value.strip().lower() in ("", "none", "0"):
        return None
    return float(value)


def _timeout_setting(value: Any) -> float | None:
    if isinstance(value, str):
        return parse_timeout(value)
    return float(value) if value else None


class Config:
    """
    Settings for talking to a daemon and for the CLI's log output.

    Sources, lowest to highest: built-in defaults, the TOML file, then the
    environment. Callers apply explicit arguments on top with ``set`` or by
    passing them to DockerEngineClient directly.
    """

    DEFAULTS: ClassVar[dict[str, Any]] = {
        "daemon": {
            "url": DEFAULT_DAEMON_URL,
            "timeout": DEFAULT_TIMEOUT,
        },
        "logging": {
            "level": "WARNING",
            "format": "text",
            "file": "",
            "max_bytes": DEFAULT_LOG_MAX_BYTES,
            "backup_count": DEFAULT_LOG_BACKUP_COUNT,
        },
    }

    CONFIG_PATH = CONFIG_PATH

    # (environment variable, config key, converter or None)
    ENV_MAPPINGS: ClassVar[list[tuple[str, str, Any]]] = [
        ("DOCKER_HOST", "daemon.url", normalize_daemon_url),
        ("DOCKER_ENGINE_TIMEOUT", "daemon.timeout", parse_timeout),
        ("LOG_LEVEL", "logging.level", None),
    ]

    # Settings that are not strings; values given as text are converted on set
    VALUE_TYPES: ClassVar[dict[str, Any]] = {
        "daemon.timeout": _timeout_setting,
        "logging.max_bytes": int,
        "logging.backup_count": int,
    }

    def __init__(self, config_path: Path | None = None):
        """
        Load defaults, the config file and environment overrides.

        Args:
            config_path: Config file to read and save
                (defaults to ~/.config/docker-engine-api/config.toml)
        """
        self.config_path = config_path or self.CONFIG_PATH
        self._config = _merge(self.DEFAULTS, self._read_file())
        self._convert_file_values()
        self._apply_env_overrides()
        log_file = self.get("logging.file")
        if log_file:
            self.set("logging.file", _expand_path(log_file))

    def _read_file(self) -> dict[str, Any]:
        if not self.config_path.exists():
            return {}
        with self.config_path.open() as f:
            return toml.load(f)

    def _convert_file_values(self) -> None:
        """Convert typed settings read from the file; unusable values revert to defaults."""
        for key, converter in self.VALUE_TYPES.items():
            table, leaf = self._section_for(key, create=False)
            if table is None or table.get(leaf) is None:
                continue
            try:
                table[leaf] = converter(table[leaf])
            except (ValueError, TypeError):
                table[leaf] = _lookup(self.DEFAULTS, key)

    def _apply_env_overrides(self) -> None:
        """
        Override settings from DOCKER_HOST, DOCKER_ENGINE_TIMEOUT and LOG_LEVEL.

        A value its converter rejects leaves the setting untouched.
        """
        for env_var, config_key, converter in self.ENV_MAPPINGS:
            raw = os.environ.get(env_var)
            if raw is None:
                continue
            if converter is None:
                self.set(config_key, raw)
                continue
            try:
                self.set(config_key, converter(raw))
            except (ValueError, TypeError):
                continue

    def _section_for(self, key: str, create: bool) -> tuple[dict[str, Any] | None, str]:
        """
        Walk a dot-separated key down to the table holding its last part.

        Returns:
            (table, last key part); table is None when a parent is missing
            and ``create`` is False
        """
        *parents, leaf = key.split(".")
        table: Any = self._config
        for part in parents:
            if not isinstance(table, dict):
                return None, leaf
            if part not in table:
                if not create:
                    return None, leaf
                table[part] = {}
            table = table[part]
        return (table if isinstance(table, dict) else None), leaf

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a setting such as ``daemon.url``.

        Args:
            key: Dot-separated key
            default: Returned when the key is missing

        Returns:
            The setting, or ``default``
        """
        table, leaf = self._section_for(key, create=False)
        if table is None:
            return default
        return table.get(leaf, default)

    def set(self, key: str, value: Any) -> None:
        """
        Store a setting, creating intermediate tables as needed.

        Numeric settings such as ``logging.max_bytes`` accept text and are
        stored converted.

        Raises:
            ValueError: If a parent key is not a table, or the value cannot
                be converted to the setting's type
        """
        converter = self.VALUE_TYPES.get(key)
        if converter is not None and value is not None:
            try:
                value = converter(value)
            except (ValueError, TypeError) as e:
                raise ValueError(f"Invalid value for {key}: {value!r}") from e
        table, leaf = self._section_for(key, create=True)
        if table is None:
            raise ValueError(f"Cannot set {key}: a parent key is not a table")
        table[leaf] = value

    def delete(self, key: str) -> None:
        """Remove a setting; missing keys are ignored."""
        table, leaf = self._section_for(key, create=False)
        if table is not None:
            table.pop(leaf, None)

    def save(self) -> None:
        """
        Write the current settings to ``config_path``.

        Parent directories are created. TOML has no null, so unset values
        (such as the default timeout) are left out.
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w") as f:
            toml.dump(_drop_none(self._config), f)

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the effective configuration."""
        return deepcopy(self._config)

    @property
    def daemon(self) -> dict[str, Any]:
        """The ``[daemon]`` table."""
        return self._config.get("daemon", {})

    @property
    def logging(self) -> dict[str, Any]:
        """The ``[logging]`` table."""
        return self._config.get("logging", {})


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively overlay ``override`` on a copy of ``base``."""
    merged = deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _merge(current, value)
        else:
            merged[key] = value
    return merged


def _lookup(data: dict[str, Any], key: str) -> Any:
    for part in key.split("."):
        data = data[part]
    return data


def _expand_path(value: str) -> str:
    """Expand ``~`` and ``$VAR`` in a configured file path."""
    return str(Path(os.path.expandvars(value)).expanduser())


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {
        key: _drop_none(value) if isinstance(value, dict) else value
        for key, value in data.items()
        if value is not None
    }


_config: Config | None = None


def get_config() -> Config:
    """
    Return the process-wide Config, loading it on first use.

    Returns:
        Shared Config instance
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the shared Config so the next get_config() reloads it."""
    global _config  # noqa: PLW0603
    _config = None

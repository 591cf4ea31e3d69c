"""Centralized configuration for lengthparse.

:func:`get_settings` returns the display and logging settings. Values can be
customized via environment variables or by pointing
``LENGTHPARSE_CONFIG_FILE`` to a TOML/YAML document such as::

    [display]
    unit_system = "imperial"

    [logging]
    path = "logs/lengthparse.jsonl"
    level = "DEBUG"
"""
from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .units import UnitSystem

try:  # Optional dependency
    import yaml  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - PyYAML is optional at runtime
    yaml = None  # type: ignore[assignment]

__all__ = ["Settings", "get_settings", "reset_settings"]

CONFIG_ENV = "LENGTHPARSE_CONFIG_FILE"

_CONFIG_CACHE: Optional["Settings"] = None
_CONFIG_SOURCE: Optional[Path] = None


class Settings(BaseModel):
    """Resolved runtime settings."""

    unit_system: UnitSystem = Field(default=UnitSystem.METRIC, description="Initial display mode")
    log_path: Optional[Path] = Field(default=None, description="JSONL log file, disabled when unset")
    log_level: str = Field(default="WARNING", description="Level name for the package logger")
    config_file: Optional[Path] = Field(default=None, description="Document the settings were read from")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("unit_system", mode="before")
    @classmethod
    def _lower_unit_system(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as plain JSON values (useful for logging)."""

        return self.model_dump(mode="json")


def _normalize_path(value: Optional[str | Path], *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute() and base is not None:
        candidate = base / candidate
    return candidate.resolve()


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("YAML configuration requires the 'PyYAML' package")
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _build_settings(config_file: Optional[Path]) -> Settings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = _normalize_path(config_file, base=None)
        if config_file is not None:
            config_data = _load_config_file(config_file)
            config_dir = config_file.parent

    display_section = _coalesce_mapping(config_data.get("display"))
    logging_section = _coalesce_mapping(config_data.get("logging"))

    env = os.environ
    values: Dict[str, Any] = {"config_file": config_file}

    unit_system = env.get("LENGTHPARSE_UNIT_SYSTEM") or display_section.get("unit_system")
    if unit_system:
        values["unit_system"] = unit_system

    log_path = _normalize_path(
        env.get("LENGTHPARSE_LOG_PATH") or logging_section.get("path"),
        base=config_dir,
    )
    if log_path is not None:
        values["log_path"] = log_path

    log_level = env.get("LENGTHPARSE_LOG_LEVEL") or logging_section.get("level")
    if log_level:
        values["log_level"] = log_level

    return Settings(**values)


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> Settings:
    """Return the cached :class:`Settings`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached settings are discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally, allowing callers (e.g. tests)
        to override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_settings(Path(config_file).expanduser())

    env_path = os.getenv(CONFIG_ENV)
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached settings (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None

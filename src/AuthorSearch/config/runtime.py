"""Runtime domain configuration (logging)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from AuthorSearch.config.common import expect_bool, expect_str, get_section, read_value

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Logging settings for one process."""

    level: str
    to_file: bool
    dir: str


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Load the ``log`` section.

    ``to_file`` and ``dir`` are optional; file logging is off by default.
    """
    section = get_section(raw, "log", required=True)
    return RuntimeConfig(
        level=read_value(section, "log.level", expect_str).strip().upper(),
        to_file=read_value(section, "log.to_file", expect_bool, False),
        dir=read_value(section, "log.dir", expect_str, "log"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    if config.level not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log.level must be one of {sorted(_ALLOWED_LOG_LEVELS)}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file is true")

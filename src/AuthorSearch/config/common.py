"""Shared helpers for reading and type-checking config values.

Config keys are always passed as full dotted paths (``search.fuzzy.max_edits``)
so that every error message names the offending key.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, TypeVar

_T = TypeVar("_T")
_REQUIRED: Any = object()


def get_section(parent: Mapping[str, Any], config_key: str, *, required: bool) -> Mapping[str, Any]:
    """Return the sub-mapping named by the last part of ``config_key``.

    Raises:
        ValueError: If section is required but missing.
        TypeError: If section is not a mapping.
    """
    section = parent.get(_leaf(config_key))
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {config_key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{config_key} must be an object")
    return section


def _lookup(section: Mapping[str, Any], config_key: str, default: Any = _REQUIRED) -> Any:
    """Return a raw value; the key is required unless a default is given."""
    field = _leaf(config_key)
    if field in section:
        return section[field]
    if default is _REQUIRED:
        raise ValueError(f"Missing required config: {config_key}")
    return default


def read_value(
    section: Mapping[str, Any],
    config_key: str,
    expect: Callable[[Any, str], _T],
    default: Any = _REQUIRED,
) -> _T:
    """Look up ``config_key`` and validate it with one of the ``expect_*`` helpers."""
    return expect(_lookup(section, config_key, default), config_key)


def expect_str(value: Any, config_key: str) -> str:
    return _expect(value, (str,), config_key, "a string")


def expect_bool(value: Any, config_key: str) -> bool:
    return _expect(value, (bool,), config_key, "a boolean")


def expect_int(value: Any, config_key: str) -> int:
    return _expect(value, (int,), config_key, "an integer")


def expect_float(value: Any, config_key: str) -> float:
    return float(_expect(value, (int, float), config_key, "a number"))


def expect_str_tuple(value: Any, config_key: str) -> tuple[str, ...]:
    """Validate a list of strings; entries are stripped, blanks and repeats dropped."""
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    out: list[str] = []
    for idx, item in enumerate(value):
        item = expect_str(item, f"{config_key}[{idx}]").strip()
        if item and item not in out:
            out.append(item)
    return tuple(out)


def _expect(value: Any, types: tuple[type, ...], config_key: str, noun: str) -> Any:
    # bool is an int subclass; only accept it where asked for explicitly.
    if isinstance(value, bool) and bool not in types:
        raise TypeError(f"{config_key} must be {noun}")
    if not isinstance(value, types):
        raise TypeError(f"{config_key} must be {noun}")
    return value


def _leaf(config_key: str) -> str:
    return config_key.rsplit(".", 1)[-1]

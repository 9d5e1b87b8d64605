"""Scalar coercers — typed getters on top of the string-only store.

Environment values are always strings, but callers want numbers,
booleans, and lists.  Each ``get_*`` function resolves a key (falling
back to a default) and converts the result.

The absent rule:
    A resolved value of ``None`` or ``""`` means *no value*.  Scalar
    getters return ``None`` for it instead of guessing a type, so
    ``get_boolean`` on an unset key is ``None``, never ``False``.  A
    default that already has the target type passes through unchanged
    (``get_number(env, "PORT", 0) == 0``).

Conversions never raise: a string that is not a number becomes
``nan``, and any non-empty string other than ``"false"`` is truthy.
"""

import math
import re
from collections.abc import Iterable
from typing import Any

from py_env.env import Environment, to_env_string

ARRAY_SEPARATOR = ","

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_PREFIXED = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_INFINITY = re.compile(r"([+-]?)Infinity")


def _resolve(env: Environment, key: str, default: Any) -> Any:
    """Return the raw value bound to *key*, or *default* when unbound."""
    value = env.get(key)
    return default if value is None else value


def _is_absent(value: object) -> bool:
    """Return True for the values that mean "no value"."""
    return value is None or value == ""


def to_number(value: object) -> int | float:
    """Convert *value* to an int or float, or ``nan`` if it is not numeric.

    Strings are read as numeric literals: surrounding whitespace is
    ignored and a blank string is 0.  Decimal literals
    (``"42"``, ``"-1.5e3"``, ``".5"``), ``0x`` / ``0o`` / ``0b`` prefixed
    integers and ``"Infinity"`` are numbers; anything else, including
    digit separators (``"1_000"``) and ``"inf"``, is ``nan``.  Plain
    integer literals and prefixed integers stay ``int``.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        return value
    text = str(value).strip()
    if not text:
        return 0
    if _INTEGER.fullmatch(text):
        return int(text)
    if _PREFIXED.fullmatch(text):
        return int(text, 0)
    if _DECIMAL.fullmatch(text):
        return float(text)
    infinity = _INFINITY.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return math.nan


def to_boolean(value: object) -> bool | None:
    """Convert *value* to a bool, keeping absent values as ``None``."""
    if _is_absent(value):
        return None
    if isinstance(value, str):
        return value != "false"
    return bool(value)


def get_number(env: Environment, key: str, default: object = None) -> int | float | None:
    """Return *key* as a number, or ``None`` when it has no value."""
    value = _resolve(env, key, default)
    return None if _is_absent(value) else to_number(value)


def get_string(env: Environment, key: str, default: object = None) -> str | None:
    """Return *key* as a string, or ``None`` when it has no value."""
    value = _resolve(env, key, default)
    return None if _is_absent(value) else to_env_string(value)


def get_boolean(env: Environment, key: str, default: object = None) -> bool | None:
    """Return *key* as a bool, or ``None`` when it has no value.

    ``"false"`` and ``"true"`` map to their booleans; any other
    non-empty string (``"yes"``, ``"0"``) counts as ``True``.
    """
    return to_boolean(_resolve(env, key, default))


def get_array(env: Environment, key: str, default: object = None) -> list[str]:
    """Return *key* split on commas, prefixed by the *default* items.

    Every item is stringified and trimmed; empty items and duplicates
    are dropped, keeping the first occurrence.  An empty *key* skips
    the lookup and returns only the defaults.

    Example:
        With ``CATEGORIES="Fashion, Technology, Fashion"``,
        ``get_array(env, "CATEGORIES", ["x"])`` is
        ``["x", "Fashion", "Technology"]``.

    """
    if default is None:
        items: list[object] = []
    elif isinstance(default, str) or not isinstance(default, Iterable):
        items = [default]
    else:
        items = list(default)  # pyright: ignore[reportUnknownArgumentType]

    if key:
        items.extend((env.get(key) or "").split(ARRAY_SEPARATOR))

    trimmed = (to_env_string(item).strip() for item in items if item is not None)
    return list(dict.fromkeys(item for item in trimmed if item))


def get_numbers(env: Environment, key: str, default: object = None) -> list[int | float]:
    """Return ``get_array`` with every item converted by ``to_number``."""
    return [to_number(item) for item in get_array(env, key, default)]


def get_strings(env: Environment, key: str, default: object = None) -> list[str]:
    """Return ``get_array`` as a list of strings."""
    return [str(item) for item in get_array(env, key, default)]

"""Shared environment — module-level shortcuts over one process-wide store.

Most applications want a single environment seeded from the OS and
``.env`` at startup.  This module holds that instance and exposes the
getters without the explicit ``env`` argument::

    from py_env import get_array, is_production, api_version

    categories = get_array("CATEGORIES")
    prefix = f"/{api_version()}"

The instance is created on first use.  ``reset_default_environment``
swaps it out, which tests use to isolate themselves.
"""

import logging
from typing import Any

from py_env import coerce, modes, version
from py_env.env import Environment, load_environment

logger = logging.getLogger(__name__)

_default: Environment | None = None


def default_environment() -> Environment:
    """Return the shared environment, seeding it on first call."""
    global _default  # noqa: PLW0603
    if _default is None:
        _default = load_environment()
        logger.debug("Seeded shared environment with %d variables", len(_default))
    return _default


def reset_default_environment(env: Environment | None = None) -> None:
    """Replace the shared environment (``None`` reseeds it lazily)."""
    global _default  # noqa: PLW0603
    _default = env


def get(key: str, default: Any = None) -> Any:
    """Return the raw value for *key*, or *default* if not set."""
    value = default_environment().get(key)
    return default if value is None else value


def set(key: str, value: Any) -> Any:  # noqa: A001
    """Bind *value* to *key* in the shared environment and return it."""
    return default_environment().set(key, value)


def get_number(key: str, default: object = None) -> int | float | None:
    """Return *key* as a number from the shared environment."""
    return coerce.get_number(default_environment(), key, default)


def get_string(key: str, default: object = None) -> str | None:
    """Return *key* as a string from the shared environment."""
    return coerce.get_string(default_environment(), key, default)


def get_boolean(key: str, default: object = None) -> bool | None:
    """Return *key* as a bool from the shared environment."""
    return coerce.get_boolean(default_environment(), key, default)


def get_array(key: str, default: object = None) -> list[str]:
    """Return *key* as a list of trimmed, unique strings."""
    return coerce.get_array(default_environment(), key, default)


def get_numbers(key: str, default: object = None) -> list[int | float]:
    """Return *key* as a list of numbers."""
    return coerce.get_numbers(default_environment(), key, default)


def get_strings(key: str, default: object = None) -> list[str]:
    """Return *key* as a list of strings."""
    return coerce.get_strings(default_environment(), key, default)


def is_env(mode: str) -> bool:
    """Return True if the shared ``NODE_ENV`` is exactly *mode*."""
    return modes.is_env(default_environment(), mode)


def is_test() -> bool:
    """Return True when the shared environment is in test mode."""
    return modes.is_test(default_environment())


def is_development() -> bool:
    """Return True when the shared environment is in development mode."""
    return modes.is_development(default_environment())


def is_production() -> bool:
    """Return True when the shared environment is in production mode."""
    return modes.is_production(default_environment())


def is_local() -> bool:
    """Return True for the test and development modes."""
    return modes.is_local(default_environment())


def api_version(options: version.ApiVersionOptions | None = None, **overrides: Any) -> str:
    """Return the API version token for the shared environment."""
    return version.api_version(default_environment(), options, **overrides)

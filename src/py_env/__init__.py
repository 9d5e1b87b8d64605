"""py-env — typed access to environment variables.

Re-exports public symbols so callers can write::

    from py_env import Environment, load_environment, get_number, api_version

Functions in ``py_env.coerce``, ``py_env.modes`` and ``py_env.version``
take an explicit ``Environment``; the same names exported here work on
the shared, lazily-seeded environment from ``py_env.shared``.
"""

from py_env.coerce import to_boolean, to_number
from py_env.env import Environment, load_environment
from py_env.modes import ExecutionMode
from py_env.shared import (
    api_version,
    default_environment,
    get,
    get_array,
    get_boolean,
    get_number,
    get_numbers,
    get_string,
    get_strings,
    is_development,
    is_env,
    is_local,
    is_production,
    is_test,
    reset_default_environment,
    set,  # noqa: A004
)
from py_env.version import ApiVersionOptions, ParsedVersion, coerce_version

__all__ = [
    "ApiVersionOptions",
    "Environment",
    "ExecutionMode",
    "ParsedVersion",
    "api_version",
    "coerce_version",
    "default_environment",
    "get",
    "get_array",
    "get_boolean",
    "get_number",
    "get_numbers",
    "get_string",
    "get_strings",
    "is_development",
    "is_env",
    "is_local",
    "is_production",
    "is_test",
    "load_environment",
    "reset_default_environment",
    "set",
    "to_boolean",
    "to_number",
]

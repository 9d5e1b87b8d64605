"""Execution modes — which runtime environment the process is in.

The ``NODE_ENV`` variable names the mode.  ``load_environment`` defaults
it to ``development``; an environment built by hand may leave it unset,
in which case every predicate here is ``False``.

``is_local`` groups the two modes a developer runs on their own machine:
test and development.
"""

from enum import StrEnum

from py_env.env import MODE_KEY, Environment


class ExecutionMode(StrEnum):
    """The known values of ``NODE_ENV``."""

    TEST = "test"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


def is_env(env: Environment, mode: str) -> bool:
    """Return True if ``NODE_ENV`` is exactly *mode*."""
    current = env.get(MODE_KEY)
    return current is not None and current == mode


def is_test(env: Environment) -> bool:
    """Return True when running under the test mode."""
    return is_env(env, ExecutionMode.TEST)


def is_development(env: Environment) -> bool:
    """Return True when running under the development mode."""
    return is_env(env, ExecutionMode.DEVELOPMENT)


def is_production(env: Environment) -> bool:
    """Return True when running under the production mode."""
    return is_env(env, ExecutionMode.PRODUCTION)


def is_local(env: Environment) -> bool:
    """Return True for the test and development modes."""
    return is_test(env) or is_development(env)

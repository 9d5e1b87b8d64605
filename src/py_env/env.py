"""Environment store — the key/value map every other module reads from.

A process environment is a set of ``KEY=VALUE`` string pairs.  This
module keeps a snapshot of those pairs in an explicit ``Environment``
object instead of reading ``os.environ`` directly, so callers (and
tests) can hand around an isolated copy.

Seeding happens once, through ``load_environment``:

1. Snapshot the OS environment.
2. Resolve ``BASE_PATH`` (default: the current working directory).
3. Read ``<BASE_PATH>/.env`` with ``python-dotenv`` if the file exists.
4. Merge file values, then OS values, then explicit overrides, and
   make sure ``NODE_ENV`` has a value.

Key design properties:
    - **Strings only** — ``set`` stores the string form of any value.
    - **Absent is not empty** — an unbound key and ``""`` are different.
    - **Never writes back** — the real ``os.environ`` is left untouched.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

BASE_PATH_KEY = "BASE_PATH"
MODE_KEY = "NODE_ENV"
DEFAULT_MODE = "development"
DEFAULT_ENV_FILE = ".env"


def to_env_string(value: object) -> str:
    """Return the string form *value* takes once stored.

    Booleans use the lowercase ``"true"`` / ``"false"`` spelling so that
    ``get_boolean`` can read them back.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


class Environment:
    """A key-value store for environment variables.

    Each instance is an independent copy — modifying one does not
    affect any other.  Share one instance by reference when several
    consumers must see each other's writes.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def set(self, key: str, value: Any) -> Any:
        """Bind the string form of *value* to *key* and return *value*."""
        self._vars[key] = to_env_string(value)
        return value

    def delete(self, key: str) -> None:
        """Remove *key* from the environment.

        Raises:
            KeyError: If *key* does not exist.

        """
        del self._vars[key]

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs."""
        return list(self._vars.items())

    def copy(self) -> "Environment":
        """Return an independent copy of this environment."""
        return Environment(initial=self._vars)

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is bound (even to an empty string)."""
        return key in self._vars

    def __len__(self) -> int:
        """Return the number of variables."""
        return len(self._vars)


def _read_env_file(path: Path) -> dict[str, str]:
    """Parse a dotenv file verbatim, skipping keys declared without a value.

    ``${VAR}`` references are kept as written; they are not expanded.
    """
    if not path.is_file():
        logger.debug("No env file at %s", path)
        return {}
    parsed = dotenv_values(path, interpolate=False)
    values = {key: value for key, value in parsed.items() if value is not None}
    logger.debug("Loaded %d variables from %s", len(values), path)
    return values


def load_environment(
    overrides: Mapping[str, object] | None = None,
    *,
    base_path: str | os.PathLike[str] | None = None,
    environ: Mapping[str, str] | None = None,
    env_file: str = DEFAULT_ENV_FILE,
) -> Environment:
    """Build an ``Environment`` from the OS, a dotenv file, and overrides.

    Args:
        overrides: Values that win over everything else.
        base_path: Directory holding *env_file*.  Falls back to the
            ``BASE_PATH`` variable, then the current working directory.
        environ: OS environment snapshot (defaults to ``os.environ``).
        env_file: Name of the dotenv file inside the base path.

    Returns:
        A new environment with ``NODE_ENV`` and an absolute ``BASE_PATH``.

    """
    snapshot = dict(os.environ if environ is None else environ)
    snapshot.update({key: to_env_string(value) for key, value in (overrides or {}).items()})
    root = Path(base_path or snapshot.get(BASE_PATH_KEY) or Path.cwd()).resolve()

    env = Environment(_read_env_file(root / env_file))
    for key, value in snapshot.items():
        env.set(key, value)

    if not env.get(MODE_KEY):
        env.set(MODE_KEY, DEFAULT_MODE)
    env.set(BASE_PATH_KEY, str(root))
    return env

"""API version resolver — short version tokens such as ``v1`` or ``v2.3``.

Services often expose only part of their semantic version to clients,
for example as a URL prefix (``/v2/users``).  ``api_version`` derives
that token from the ``API_VERSION`` variable, or from a fallback version
when the variable is unset:

    ``2.3.4`` → ``v2`` (default), ``v2.3`` (``minor=True``),
    ``v2.3.4`` (``patch=True``).

Coercion is lenient and never fails:
    - The first run of 1-16 digits that is not part of a longer digit
      run is the major component; ``.minor`` and ``.patch`` may follow.
      Missing components are 0, so ``"v2"`` → 2.0.0 and
      ``"release-4.5-beta"`` → 4.5.0.  Anything after the patch
      component is ignored (``"1.2.3.4"`` → 1.2.3).
    - Input with no such digit run, or longer than 256 characters,
      coerces to 0.0.0 and logs a warning.
"""

import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import Any

from py_env.coerce import get_string
from py_env.env import Environment, to_env_string

logger = logging.getLogger(__name__)

API_VERSION_KEY = "API_VERSION"
MAX_VERSION_LENGTH = 256

_VERSION_PATTERN = re.compile(r"(?<!\d)(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?!\d)")


@dataclass(frozen=True)
class ParsedVersion:
    """A (major, minor, patch) triple of non-negative integers."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        """Format as ``major.minor.patch``."""
        return f"{self.major}.{self.minor}.{self.patch}"


ZERO_VERSION = ParsedVersion()


@dataclass(frozen=True)
class ApiVersionOptions:
    """Control how ``api_version`` formats its token.

    Attributes:
        version: Fallback version used when ``API_VERSION`` is unset.
        prefix: Text placed directly before the numbers.
        major: Always treated as True; the major component is never
            dropped.
        minor: Include the minor component (``v2.3``).
        patch: Include the minor and patch components (``v2.3.4``);
            wins over *minor*.

    """

    version: str = "1.0.0"
    prefix: str = "v"
    major: bool = True
    minor: bool = False
    patch: bool = False


def coerce_version(text: str | None) -> ParsedVersion:
    """Extract a version triple from *text*, falling back to 0.0.0."""
    too_long = text is not None and len(text) > MAX_VERSION_LENGTH
    match = None if text is None or too_long else _VERSION_PATTERN.search(text)
    if match is None:
        logger.warning("Cannot coerce version %r, using %s", text, ZERO_VERSION)
        return ZERO_VERSION
    major, minor, patch = (int(part) if part else 0 for part in match.groups())
    return ParsedVersion(major=major, minor=minor, patch=patch)


def api_version(
    env: Environment,
    options: ApiVersionOptions | None = None,
    **overrides: Any,
) -> str:
    """Return the prefixed API version token.

    Args:
        env: Environment to read ``API_VERSION`` from.
        options: Base options (defaults to ``ApiVersionOptions()``).
        **overrides: Individual option fields that win over *options*,
            e.g. ``api_version(env, version="2.3.4", minor=True)``.

    Returns:
        ``<prefix><major>[.<minor>[.<patch>]]``.

    """
    opts = dataclasses.replace(options or ApiVersionOptions(), **overrides)
    raw = get_string(env, API_VERSION_KEY) or to_env_string(opts.version)
    parsed = coerce_version(raw)

    if opts.patch:
        number = f"{parsed.major}.{parsed.minor}.{parsed.patch}"
    elif opts.minor:
        number = f"{parsed.major}.{parsed.minor}"
    else:
        number = f"{parsed.major}"
    return f"{opts.prefix}{number}"

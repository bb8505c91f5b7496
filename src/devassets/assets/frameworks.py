"""Target-framework short-name normalization.

Short names come in a few shapes:

- dotted modern names (``net6.0``, ``net8.0-windows``), the canonical form;
- undotted modern names (``net60``, ``net80``) which some tooling still
  reports, normalized to the dotted form;
- legacy names (``netcoreapp3.1``, ``netstandard2.1``, ``net472``) which pass
  through unchanged.

Anything else is an opaque string and is used verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Majors 5-9 are a single digit, 10 and later are two digits starting with 1.
# net45/net472/net48 stay out of the undotted pattern on purpose.
_UNDOTTED_RE = re.compile(r"^net(?P<major>[5-9]|1\d)(?P<minor>\d)(?P<suffix>-.+)?$")
_DOTTED_RE = re.compile(r"^net(?P<major>\d+)\.(?P<minor>\d+)(?P<suffix>-.+)?$")
_NET_FRAMEWORK_RE = re.compile(r"^net[1-4]\d{1,2}$")


@dataclass(frozen=True)
class FrameworkName:
    short_name: str
    display: str
    version: tuple[int, int] | None = None

    @property
    def is_modern(self) -> bool:
        return self.version is not None and self.version[0] >= 5


def normalize_short_name(short_name: str) -> str:
    value = short_name.strip()
    match = _UNDOTTED_RE.match(value)
    if match is None:
        return value
    suffix = match.group("suffix") or ""
    return f"net{match.group('major')}.{match.group('minor')}{suffix}"


def framework_version(short_name: str) -> tuple[int, int] | None:
    """Comparable version for the dotted ``netX.Y`` pattern, else None."""
    match = _DOTTED_RE.match(normalize_short_name(short_name))
    if match is None:
        return None
    return int(match.group("major")), int(match.group("minor"))


def is_net_framework(short_name: str) -> bool:
    """True for classic .NET Framework monikers such as ``net472``."""
    return _NET_FRAMEWORK_RE.match(short_name.strip()) is not None


def describe(short_name: str) -> FrameworkName:
    display = normalize_short_name(short_name)
    return FrameworkName(
        short_name=short_name,
        display=display,
        version=framework_version(display),
    )


def same_framework(left: str, right: str) -> bool:
    return normalize_short_name(left).lower() == normalize_short_name(right).lower()

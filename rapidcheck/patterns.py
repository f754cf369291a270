"""Named regular expressions consumed by ``StringSchema.pattern()`` and the
string rules. Every pattern matches the whole string and accepts ASCII
digits only.
"""
from __future__ import annotations

import re

_DATE = r"[0-9]{4}-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12][0-9]|3[01])"
_TIME = r"(?:[01][0-9]|2[0-3]):[0-5][0-9](?::[0-5][0-9](?:\.[0-9]{1,3})?)?"
_ZONE = r"(?:Z|[+-](?:[01][0-9]|2[0-3])(?::[0-5][0-9])?)"

_EMAIL_ATOM = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+"
_DOMAIN_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"


class Patterns:
    """Catalog of named patterns."""

    alphanumeric = re.compile(r"\A[A-Za-z0-9]+\Z")
    positive_integer = re.compile(r"\A[0-9]+\Z")
    integer = re.compile(r"\A[+-]?[0-9]+\Z")
    float = re.compile(r"\A[+-]?[0-9]+(?:\.[0-9]+)?\Z")
    email = re.compile(
        rf"\A{_EMAIL_ATOM}(?:\.{_EMAIL_ATOM})*@(?:{_DOMAIN_LABEL}\.)+[A-Za-z]{{2,}}\Z"
    )
    date_iso = re.compile(rf"\A{_DATE}\Z")
    time_iso = re.compile(rf"\A{_TIME}{_ZONE}?\Z")
    datetime_iso = re.compile(rf"\A{_DATE}[T ]{_TIME}{_ZONE}?\Z")

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(k for k, v in vars(cls).items() if isinstance(v, re.Pattern))

    @classmethod
    def get(cls, name: str) -> re.Pattern[str]:
        """Look up a pattern by name, e.g. ``Patterns.get("email")``."""
        pattern = getattr(cls, name, None)
        if not isinstance(pattern, re.Pattern):
            raise KeyError(f"Unknown pattern '{name}'. Known patterns: {', '.join(cls.names())}")
        return pattern


def resolve_pattern(pattern: re.Pattern[str] | str) -> re.Pattern[str]:
    """Compiled pattern for a regex object, a catalog name or a regex source."""
    if isinstance(pattern, re.Pattern):
        return pattern
    if pattern in Patterns.names():
        return Patterns.get(pattern)
    return re.compile(pattern)

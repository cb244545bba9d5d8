"""Classification, quoting and normalisation of CSP source values."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Union

from shield_csp.keyword import is_keyword, is_scheme

HASH_PREFIXES = ("sha256-", "sha384-", "sha512-")


class NoValue(enum.Enum):
    """Marker for directives that take no parameters, e.g. ``upgrade-insecure-requests``."""

    NO_VALUE = "no-value"

    def __str__(self) -> str:
        return ""


NO_VALUE = NoValue.NO_VALUE

# What add_directive accepts: one string (possibly space separated),
# any nesting of sequences of strings, or NO_VALUE.
Values = Union[str, Iterable, NoValue]


class ValueKind(enum.Enum):
    KEYWORD = "keyword"
    HASH = "hash"
    LITERAL = "literal"


def is_hash(value: str) -> bool:
    return value.startswith(HASH_PREFIXES)


def classify(value: str) -> ValueKind:
    if is_scheme(value):
        return ValueKind.LITERAL
    if is_keyword(value):
        return ValueKind.KEYWORD
    if is_hash(value):
        return ValueKind.HASH
    return ValueKind.LITERAL


def sanitize(value: str) -> str:
    """Quote keywords and hash sources; return everything else unchanged.

    Example:
        >>> sanitize("self")
        "'self'"
        >>> sanitize("https://example.com")
        'https://example.com'
    """
    if classify(value) is ValueKind.LITERAL:
        return value
    return f"'{value}'"


def unquote(value: str) -> str:
    """Strip the quotes ``sanitize`` would add back, leaving nonces and literals alone."""
    if len(value) > 2 and value[0] == value[-1] == "'":
        inner = value[1:-1]
        if classify(inner) is not ValueKind.LITERAL:
            return inner
    return value


def normalize(values: str | Iterable) -> list[str]:
    """Flatten ``values`` into an ordered list of non-empty tokens.

    Strings are split on whitespace, so ``"'unsafe-inline' 'unsafe-eval'"``
    yields two tokens. Nested sequences are flattened depth-first.
    """
    tokens: list[str] = []
    if isinstance(values, str):
        tokens.extend(values.split())
        return tokens
    for item in values:
        if isinstance(item, NoValue):
            raise TypeError("NO_VALUE cannot be combined with other values")
        if isinstance(item, str):
            tokens.extend(item.split())
        elif isinstance(item, Iterable):
            tokens.extend(normalize(item))
        else:
            raise TypeError(f"CSP values must be strings, got {type(item).__name__}")
    return tokens

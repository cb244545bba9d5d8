"""CSP keyword and scheme source tokens."""

from __future__ import annotations


class Keyword:
    """Special source expressions. Rendered single-quoted on the wire."""

    NONE = "none"
    REPORT_SAMPLE = "report-sample"
    SELF = "self"
    STRICT_DYNAMIC = "strict-dynamic"
    UNSAFE_EVAL = "unsafe-eval"
    UNSAFE_HASHES = "unsafe-hashes"
    UNSAFE_INLINE = "unsafe-inline"


class Scheme:
    """Scheme sources. Rendered as-is."""

    DATA = "data:"
    HTTP = "http:"
    HTTPS = "https:"
    BLOB = "blob:"
    WS = "ws:"


KEYWORDS: frozenset[str] = frozenset({
    Keyword.NONE,
    Keyword.REPORT_SAMPLE,
    Keyword.SELF,
    Keyword.STRICT_DYNAMIC,
    Keyword.UNSAFE_EVAL,
    Keyword.UNSAFE_HASHES,
    Keyword.UNSAFE_INLINE,
})

SCHEMES: frozenset[str] = frozenset({
    Scheme.DATA,
    Scheme.HTTP,
    Scheme.HTTPS,
    Scheme.BLOB,
    Scheme.WS,
})


def is_keyword(value: str) -> bool:
    return value in KEYWORDS


def is_scheme(value: str) -> bool:
    return value in SCHEMES

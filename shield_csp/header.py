"""CSP header names and wire format."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from shield_csp.value import NoValue

HEADER = "Content-Security-Policy"
REPORT_ONLY_HEADER = "Content-Security-Policy-Report-Only"


def build_header(directives: Mapping[str, Sequence[str | NoValue]]) -> str:
    """Build a CSP header value from a {directive: [values]} mapping.

    Directives keep the mapping's order. ``NO_VALUE`` entries render as nothing.

    Example:
        >>> build_header({"default-src": ["'self'"], "upgrade-insecure-requests": [NO_VALUE]})
        "default-src 'self';upgrade-insecure-requests"
    """
    parts = []
    for directive, values in directives.items():
        rendered = " ".join(v for v in values if not isinstance(v, NoValue))
        if rendered:
            parts.append(f"{directive} {rendered}")
        else:
            parts.append(directive)
    return ";".join(parts)


def parse_header(header: str) -> dict[str, list[str]]:
    """Parse a CSP header value into a {directive: [values]} dict.

    Example:
        >>> parse_header("default-src 'self'; script-src 'self' https:")
        {"default-src": ["'self'"], "script-src": ["'self'", "https:"]}
    """
    result: dict[str, list[str]] = {}
    if not header or not header.strip():
        return result
    for part in header.split(";"):
        tokens = part.split()
        if not tokens:
            continue
        result[tokens[0].lower()] = tokens[1:]
    return result

"""Base class for CSP policies."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any

import structlog

from shield_csp.config.loader import CspSettings, get_settings
from shield_csp.directive import Directive, is_valid
from shield_csp.exceptions import InvalidDirective, InvalidValueSet
from shield_csp.header import HEADER, REPORT_ONLY_HEADER, build_header, parse_header
from shield_csp.keyword import Keyword
from shield_csp.nonce import NonceGenerator, RandomString
from shield_csp.value import NO_VALUE, NoValue, Values, normalize, sanitize, unquote

logger = structlog.get_logger()

_QUOTED_NONE = sanitize(Keyword.NONE)


class Policy(abc.ABC):
    """A Content-Security-Policy built from directive calls.

    Subclasses implement ``configure`` and call ``add_directive`` and friends
    from it. Every builder method mutates the policy in place and returns it,
    so calls can be chained:

        policy.add_directive(Directive.SCRIPT, Keyword.SELF).report_only()

    One instance serves one response. ``apply_to`` runs ``configure`` itself,
    so a policy must not be applied twice.
    """

    def __init__(
        self,
        settings: CspSettings | None = None,
        nonce_generator: NonceGenerator | None = None,
    ) -> None:
        self._settings = settings
        self.nonce_generator = nonce_generator or RandomString()
        self._directives: dict[str, list[str | NoValue]] = {}
        self._report_only = False

    @abc.abstractmethod
    def configure(self) -> None:
        """Populate the policy. Called once, right before the header is written."""

    @property
    def settings(self) -> CspSettings:
        return self._settings or get_settings()

    @property
    def directives(self) -> dict[str, list[str | NoValue]]:
        """Copy of the current {directive: [sanitized values]} state."""
        return {directive: list(values) for directive, values in self._directives.items()}

    @property
    def is_report_only(self) -> bool:
        return self._report_only

    @property
    def header_name(self) -> str:
        return REPORT_ONLY_HEADER if self._report_only else HEADER

    # ── Builder ──────────────────────────────────────────────────────────

    def add_directive(self, directive: str, values: Values) -> Policy:
        """Add ``values`` to ``directive``.

        ``values`` may be a string (split on spaces), a nested sequence of
        strings, or ``NO_VALUE`` for parameterless directives. Keywords and
        hash sources are quoted; duplicates are skipped.

        A ``none`` on its own replaces whatever the directive held. Adding any
        other value drops a previously stored ``'none'``.

        Raises:
            InvalidDirective: ``directive`` is not a known directive.
            InvalidValueSet: ``none`` was combined with other values.
        """
        self._guard_against_invalid_directive(directive)

        if values is NO_VALUE:
            existing = self._directives.setdefault(directive, [])
            if NO_VALUE not in existing:
                existing.append(NO_VALUE)
            return self

        tokens = normalize(values)
        self._guard_against_invalid_values(tokens)

        if Keyword.NONE in tokens:
            self._directives[directive] = [_QUOTED_NONE]
            return self

        current = [v for v in self._directives.get(directive, []) if v != _QUOTED_NONE]
        for token in tokens:
            sanitized = sanitize(token)
            if sanitized not in current:
                current.append(sanitized)
        self._directives[directive] = current

        return self

    def add_directives(self, directives: Mapping[str, Values]) -> Policy:
        for directive, values in directives.items():
            self.add_directive(directive, values)
        return self

    def add_directives_from_header(self, header: str) -> Policy:
        """Merge an existing header value, e.g. one an upstream app already sent."""
        for directive, values in parse_header(header).items():
            if not values:
                self.add_directive(directive, NO_VALUE)
            elif directive == Directive.REPORT:
                self.report_to(values[-1])
            else:
                self.add_directive(directive, [unquote(v) for v in values])
        return self

    def add_nonce_for_directive(self, directive: str) -> Policy:
        return self.add_directive(directive, f"'nonce-{self.nonce_generator.generate()}'")

    def report_to(self, uri: str) -> Policy:
        """Set ``report-uri`` to ``uri``, replacing any previous value."""
        self._directives[Directive.REPORT] = [uri]
        return self

    def report_only(self) -> Policy:
        self._report_only = True
        return self

    def enforce(self) -> Policy:
        self._report_only = False
        return self

    # ── Output ───────────────────────────────────────────────────────────

    def should_be_applied(self, request: Any, response: Any) -> bool:
        return self.settings.enabled

    def serialize(self) -> str:
        return build_header(self._directives)

    def __str__(self) -> str:
        return self.serialize()

    def apply_to(self, response: Any) -> None:
        """Configure the policy and write its header unless the response already has it.

        ``response`` is anything with a mutable ``headers`` mapping (a
        starlette ``Response``), or such a mapping itself.
        """
        self.configure()

        headers = getattr(response, "headers", response)
        header_name = self.header_name

        if header_name in headers:
            logger.debug("csp_header_already_present", header=header_name, policy=type(self).__name__)
            return

        headers[header_name] = self.serialize()
        logger.debug("csp_header_applied", header=header_name, policy=type(self).__name__)

    # ── Guards ───────────────────────────────────────────────────────────

    def _guard_against_invalid_directive(self, directive: str) -> None:
        if not is_valid(directive):
            raise InvalidDirective(directive)

    def _guard_against_invalid_values(self, tokens: list[str]) -> None:
        if Keyword.NONE in tokens and any(token != Keyword.NONE for token in tokens):
            raise InvalidValueSet()

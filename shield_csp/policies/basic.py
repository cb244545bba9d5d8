"""Policies shipped with the package."""

from __future__ import annotations

from typing import Any

from shield_csp.config.loader import CspSettings, load_presets
from shield_csp.directive import Directive
from shield_csp.keyword import Keyword
from shield_csp.nonce import NonceGenerator
from shield_csp.policies.policy import Policy
from shield_csp.value import NO_VALUE


class Basic(Policy):
    """Same-origin everything, no plugins, nonces for inline scripts and styles."""

    def configure(self) -> None:
        (
            self.add_directive(Directive.BASE, Keyword.SELF)
            .add_directive(Directive.CONNECT, Keyword.SELF)
            .add_directive(Directive.DEFAULT, Keyword.SELF)
            .add_directive(Directive.FORM_ACTION, Keyword.SELF)
            .add_directive(Directive.IMG, Keyword.SELF)
            .add_directive(Directive.MEDIA, Keyword.SELF)
            .add_directive(Directive.OBJECT, Keyword.NONE)
            .add_directive(Directive.SCRIPT, Keyword.SELF)
            .add_directive(Directive.STYLE, Keyword.SELF)
            .add_nonce_for_directive(Directive.SCRIPT)
            .add_nonce_for_directive(Directive.STYLE)
        )


class PresetPolicy(Policy):
    """Policy read from a named entry of ``policy_presets.yaml``.

    An empty value list in the YAML means the directive takes no value.
    """

    def __init__(
        self,
        preset: str,
        settings: CspSettings | None = None,
        nonce_generator: NonceGenerator | None = None,
    ) -> None:
        super().__init__(settings=settings, nonce_generator=nonce_generator)
        presets = load_presets()
        if preset not in presets:
            raise KeyError(f"Unknown CSP preset `{preset}`")
        self.preset = preset
        self._definition: dict[str, Any] = presets[preset]

    def configure(self) -> None:
        for directive, values in (self._definition.get("directives") or {}).items():
            self.add_directive(directive, values if values else NO_VALUE)
        for directive in self._definition.get("nonce") or []:
            self.add_nonce_for_directive(directive)
        if self._definition.get("report_only"):
            self.report_only()

"""Registry of recognised CSP directive names."""

from __future__ import annotations


class Directive:
    BASE = "base-uri"
    BLOCK_ALL_MIXED_CONTENT = "block-all-mixed-content"
    CHILD = "child-src"
    CONNECT = "connect-src"
    DEFAULT = "default-src"
    FONT = "font-src"
    FORM_ACTION = "form-action"
    FRAME_ANCESTORS = "frame-ancestors"
    FRAME = "frame-src"
    IMG = "img-src"
    MANIFEST = "manifest-src"
    MEDIA = "media-src"
    NAVIGATE_TO = "navigate-to"
    OBJECT = "object-src"
    PLUGIN = "plugin-types"
    PREFETCH = "prefetch-src"
    REPORT = "report-uri"
    REPORT_TO = "report-to"
    REQUIRE_SRI_FOR = "require-sri-for"
    REQUIRE_TRUSTED_TYPES_FOR = "require-trusted-types-for"
    SANDBOX = "sandbox"
    SCRIPT = "script-src"
    SCRIPT_ATTR = "script-src-attr"
    SCRIPT_ELEM = "script-src-elem"
    STYLE = "style-src"
    STYLE_ATTR = "style-src-attr"
    STYLE_ELEM = "style-src-elem"
    TRUSTED_TYPES = "trusted-types"
    UPGRADE_INSECURE_REQUESTS = "upgrade-insecure-requests"
    WORKER = "worker-src"


DIRECTIVES: frozenset[str] = frozenset({
    Directive.BASE,
    Directive.BLOCK_ALL_MIXED_CONTENT,
    Directive.CHILD,
    Directive.CONNECT,
    Directive.DEFAULT,
    Directive.FONT,
    Directive.FORM_ACTION,
    Directive.FRAME_ANCESTORS,
    Directive.FRAME,
    Directive.IMG,
    Directive.MANIFEST,
    Directive.MEDIA,
    Directive.NAVIGATE_TO,
    Directive.OBJECT,
    Directive.PLUGIN,
    Directive.PREFETCH,
    Directive.REPORT,
    Directive.REPORT_TO,
    Directive.REQUIRE_SRI_FOR,
    Directive.REQUIRE_TRUSTED_TYPES_FOR,
    Directive.SANDBOX,
    Directive.SCRIPT,
    Directive.SCRIPT_ATTR,
    Directive.SCRIPT_ELEM,
    Directive.STYLE,
    Directive.STYLE_ATTR,
    Directive.STYLE_ELEM,
    Directive.TRUSTED_TYPES,
    Directive.UPGRADE_INSECURE_REQUESTS,
    Directive.WORKER,
})


def is_valid(directive: str) -> bool:
    """Return True if ``directive`` is a CSP directive name we know about."""
    return directive in DIRECTIVES

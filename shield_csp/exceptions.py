"""Errors raised while building a policy.

These signal programming or configuration mistakes and are never caught
inside the package.
"""

from __future__ import annotations

from typing import Any


class CspError(Exception):
    """Base class for all CSP configuration errors."""


class InvalidDirective(CspError):
    """Raised when a directive name is not in the directive registry."""

    def __init__(self, directive: str) -> None:
        self.directive = directive
        super().__init__(f"The directive `{directive}` is not valid in a CSP header.")


class InvalidValueSet(CspError):
    """Raised when the ``none`` keyword is combined with other values in one call."""

    def __init__(self) -> None:
        super().__init__("The keyword none can only be used on its own")


class InvalidCspPolicy(CspError):
    """Raised when a resolved policy is not a ``Policy`` instance.

    ``obj`` may be the offending instance or, when it was never
    instantiated, the offending class.
    """

    def __init__(self, obj: Any) -> None:
        self.class_name = obj.__name__ if isinstance(obj, type) else type(obj).__name__
        super().__init__(
            f"The CSP class `{self.class_name}` is not valid. "
            "A valid policy extends shield_csp.policies.policy.Policy"
        )

"""Content-Security-Policy header builder."""

from shield_csp.directive import Directive
from shield_csp.exceptions import CspError, InvalidCspPolicy, InvalidDirective, InvalidValueSet
from shield_csp.factory import PolicyFactory
from shield_csp.keyword import Keyword, Scheme
from shield_csp.policies.policy import Policy
from shield_csp.value import NO_VALUE

__version__ = "0.1.0"

__all__ = [
    "CspError",
    "Directive",
    "InvalidCspPolicy",
    "InvalidDirective",
    "InvalidValueSet",
    "Keyword",
    "NO_VALUE",
    "Policy",
    "PolicyFactory",
    "Scheme",
]

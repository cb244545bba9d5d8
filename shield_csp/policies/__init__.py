"""Policy base class and the policies shipped with the package."""

from shield_csp.policies.basic import Basic, PresetPolicy
from shield_csp.policies.policy import Policy

__all__ = ["Basic", "Policy", "PresetPolicy"]

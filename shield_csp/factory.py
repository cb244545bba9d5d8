"""Resolve configured policy names into Policy instances."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from shield_csp.config.loader import CspSettings, get_settings, load_presets
from shield_csp.exceptions import InvalidCspPolicy
from shield_csp.nonce import NonceGenerator, load_generator
from shield_csp.policies.basic import PresetPolicy
from shield_csp.policies.policy import Policy
from shield_csp.utils.imports import import_string

logger = structlog.get_logger()

PolicyRef = str | type


class PolicyFactory:
    """Build policies with the configured settings, nonce generator and report URI.

    ``resolver`` replaces the default name resolution; it receives the policy
    reference and returns the object to use. Whatever it returns must be a
    ``Policy`` instance.
    """

    def __init__(
        self,
        settings: CspSettings | None = None,
        nonce_generator: NonceGenerator | None = None,
        resolver: Callable[[PolicyRef], Any] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.nonce_generator = nonce_generator or load_generator(self.settings.nonce_generator)
        self._resolver = resolver or self._resolve

    def create(self, policy: PolicyRef) -> Policy:
        """Resolve ``policy`` into a Policy, adding the configured report URI.

        ``policy`` is a preset name from ``policy_presets.yaml``, a dotted
        import path, or a class.

        Raises:
            InvalidCspPolicy: the resolved object is not a Policy.
        """
        instance = self._resolver(policy)

        if not isinstance(instance, Policy):
            exc = InvalidCspPolicy(instance)
            logger.error("csp_invalid_policy", policy=str(policy), resolved=exc.class_name)
            raise exc

        if self.settings.report_uri:
            instance.report_to(self.settings.report_uri)

        logger.debug("csp_policy_created", policy=type(instance).__name__)
        return instance

    def create_policies(self, custom: PolicyRef | None = None) -> list[Policy]:
        """Policies for one response: ``custom`` alone, else the configured pair."""
        if custom:
            return [self.create(custom)]

        policies = [self.create(self.settings.policy)]
        if self.settings.report_only_policy:
            policies.append(self.create(self.settings.report_only_policy).report_only())
        return policies

    def _resolve(self, policy: PolicyRef) -> Any:
        if isinstance(policy, str):
            if policy in load_presets():
                return PresetPolicy(policy, settings=self.settings, nonce_generator=self.nonce_generator)
            policy = import_string(policy)
        if isinstance(policy, type) and issubclass(policy, Policy):
            return policy(settings=self.settings, nonce_generator=self.nonce_generator)
        # Other classes are handed back uninstantiated and rejected by create
        return policy

"""CSP header injection middleware."""

from __future__ import annotations

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from shield_csp.config.loader import CspSettings, get_settings
from shield_csp.factory import PolicyFactory, PolicyRef
from shield_csp.logging_config import setup_logging
from shield_csp.nonce import NonceGenerator, StaticNonce, load_generator

logger = structlog.get_logger()


class CspHeadersMiddleware(BaseHTTPMiddleware):
    """Add the configured CSP headers to every response.

    - One nonce is drawn per request and exposed as ``request.state.csp_nonce``
      so templates can tag inline scripts with the value the header allows
    - ``policy`` overrides ``CSP_POLICY`` / ``CSP_REPORT_ONLY_POLICY`` for this app
    - ``configure_logging=True`` sets up the ``shield_csp`` loggers from
      ``CSP_LOG_LEVEL`` / ``CSP_LOG_JSON`` when the middleware is built
    - Headers already set by the endpoint are left alone
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        policy: PolicyRef | None = None,
        settings: CspSettings | None = None,
        configure_logging: bool = False,
    ) -> None:
        super().__init__(app)
        self._policy = policy
        self._settings = settings
        self._generator: NonceGenerator | None = None
        self._generator_settings: CspSettings | None = None
        if configure_logging:
            setup_logging(self.settings)

    @property
    def settings(self) -> CspSettings:
        return self._settings or get_settings()

    def nonce_generator(self, settings: CspSettings) -> NonceGenerator:
        """Generator named by ``settings``, resolved once per settings object."""
        if self._generator is None or self._generator_settings is not settings:
            self._generator = load_generator(settings.nonce_generator)
            self._generator_settings = settings
            logger.debug("csp_nonce_generator_loaded", generator=settings.nonce_generator)
        return self._generator

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        settings = self.settings
        nonce = self.nonce_generator(settings).generate()
        request.state.csp_nonce = nonce

        response = await call_next(request)

        factory = PolicyFactory(settings=settings, nonce_generator=StaticNonce(nonce))
        for policy in factory.create_policies(self._policy):
            if policy.should_be_applied(request, response):
                policy.apply_to(response)

        return response


def csp_nonce(request: Request) -> str:
    """Nonce for the current request, or "" if the middleware did not run."""
    return getattr(request.state, "csp_nonce", "")

"""Nonce generators for ``'nonce-<token>'`` sources."""

from __future__ import annotations

import abc
import secrets
import string

from shield_csp.utils.imports import import_string

_ALPHABET = string.ascii_letters + string.digits


class NonceGenerator(abc.ABC):
    """Produces the random token placed in ``'nonce-<token>'``."""

    @abc.abstractmethod
    def generate(self) -> str:
        ...


class RandomString(NonceGenerator):
    """Alphanumeric token drawn from ``secrets``; safe to share between threads."""

    def __init__(self, length: int = 32) -> None:
        self.length = length

    def generate(self) -> str:
        return "".join(secrets.choice(_ALPHABET) for _ in range(self.length))


class StaticNonce(NonceGenerator):
    """Always returns the same token.

    The middleware draws one nonce per request and hands it to every policy
    through this class, so the header and the rendered page agree.
    """

    def __init__(self, value: str) -> None:
        self.value = value

    def generate(self) -> str:
        return self.value


def load_generator(path: str) -> NonceGenerator:
    """Instantiate the generator class named by ``path``."""
    target = import_string(path)
    generator = target() if isinstance(target, type) else target
    if not isinstance(generator, NonceGenerator):
        raise TypeError(f"`{path}` is not a NonceGenerator")
    return generator

"""Abstract algorithm contract shared by every signing variant."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Algorithm(ABC):
    """Algorithm used to sign or verify the content of a token.

    Instances are immutable once constructed and hold no per-call state, so a
    single instance may be shared freely between threads.

    Side effects: None (pure computation).
    """

    __slots__ = ("_name", "_description")

    def __init__(self, name: str, description: str) -> None:
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_description", description)

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        """Standard identifier carried in token headers, e.g. ``HS256``."""
        return self._name

    @property
    def description(self) -> str:
        """Identifier of the underlying primitive, e.g. ``HmacSHA256``."""
        return self._description

    def get_name(self) -> str:
        return self._name

    @property
    @abstractmethod
    def signature_length(self) -> int:
        """Number of bytes produced by :meth:`sign`."""

    @abstractmethod
    def sign(self, content: bytes) -> bytes:
        """Sign content.

        Args:
            content: Bytes covered by the signature

        Returns:
            Signature bytes

        Raises:
            SignatureGenerationError: If the key or primitive is unusable
        """

    @abstractmethod
    def verify(self, content: bytes, signature: bytes) -> None:
        """Verify ``signature`` against ``content``.

        Args:
            content: Bytes covered by the signature
            signature: Signature to check

        Raises:
            SignatureVerificationError: If the signature does not match or
                could not be checked
        """

    def __str__(self) -> str:
        return self._description

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"

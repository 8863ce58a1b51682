"""HMAC signing variant backed by the ``cryptography`` primitives."""

from __future__ import annotations

import logging

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from tokensign.algorithms.base import Algorithm
from tokensign.errors import (
    InvalidKeyMaterialError,
    SignatureGenerationError,
    SignatureVerificationError,
    UnsupportedEncodingError,
)

logger = logging.getLogger(__name__)

SecretInput = str | bytes | bytearray | memoryview

HASHES_BY_DESCRIPTION: dict[str, type[hashes.HashAlgorithm]] = {
    "HmacSHA256": hashes.SHA256,
    "HmacSHA384": hashes.SHA384,
    "HmacSHA512": hashes.SHA512,
}

# Mismatch and recomputation failures share one message.
_VERIFICATION_FAILED = "Signature verification failed for algorithm {}"


def encode_secret(secret: SecretInput | None) -> bytes:
    """Return an owned ``bytes`` copy of ``secret``.

    Args:
        secret: Textual secret (encoded as UTF-8) or raw key bytes

    Returns:
        Key bytes

    Raises:
        InvalidKeyMaterialError: If the secret is absent, empty, or not text/bytes
        UnsupportedEncodingError: If a textual secret is not encodable as UTF-8
    """
    if secret is None:
        raise InvalidKeyMaterialError("Secret must not be None")

    if isinstance(secret, str):
        try:
            key = secret.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise UnsupportedEncodingError(
                "Secret could not be encoded as UTF-8"
            ) from exc
    elif isinstance(secret, (bytes, bytearray, memoryview)):
        key = bytes(secret)
    else:
        raise InvalidKeyMaterialError(
            f"Secret must be str or bytes, got {type(secret).__name__}"
        )

    if not key:
        raise InvalidKeyMaterialError("Secret must not be empty")
    return key


class HMACAlgorithm(Algorithm):
    """Keyed-hash algorithm (HS256, HS384, HS512).

    Each call builds its own HMAC context from the stored secret; nothing
    mutable is shared between calls.
    """

    __slots__ = ("_secret", "_hash_type")

    def __init__(self, name: str, description: str, secret: SecretInput | None) -> None:
        key = encode_secret(secret)
        super().__init__(name, description)
        hash_type = HASHES_BY_DESCRIPTION.get(description)
        object.__setattr__(self, "_secret", key)
        object.__setattr__(self, "_hash_type", hash_type)

        if hash_type is None:
            logger.debug("No hash primitive registered for %s", description)
        elif len(key) < hash_type.digest_size:
            logger.warning(
                "%s secret is %d bytes; at least %d bytes are recommended",
                name,
                len(key),
                hash_type.digest_size,
            )

    @property
    def signature_length(self) -> int:
        if self._hash_type is None:
            return 0
        return self._hash_type.digest_size

    def _new_mac(self) -> crypto_hmac.HMAC:
        if self._hash_type is None:
            raise UnsupportedAlgorithm(f"Unsupported HMAC primitive: {self.description}")
        return crypto_hmac.HMAC(self._secret, self._hash_type())

    def sign(self, content: bytes) -> bytes:
        try:
            mac = self._new_mac()
            mac.update(content)
            return mac.finalize()
        except (UnsupportedAlgorithm, TypeError, ValueError) as exc:
            raise SignatureGenerationError(
                f"Could not sign content with algorithm {self.description}"
            ) from exc

    def verify(self, content: bytes, signature: bytes) -> None:
        message = _VERIFICATION_FAILED.format(self.description)
        try:
            if not isinstance(signature, (bytes, bytearray, memoryview)):
                raise TypeError("signature must be bytes-like")
            mac = self._new_mac()
            mac.update(content)
            mac.verify(bytes(signature))
        except InvalidSignature:
            logger.debug("%s signature mismatch", self.name)
            raise SignatureVerificationError(message) from None
        except (UnsupportedAlgorithm, TypeError, ValueError) as exc:
            logger.debug("%s verification could not complete: %s", self.name, exc)
            raise SignatureVerificationError(message) from None

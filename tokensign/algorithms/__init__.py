"""Named constructors for signing algorithms.

Text and byte secrets get separate constructors; every HMAC constructor
validates its input, picks the primitive for the requested strength and
builds an :class:`HMACAlgorithm`.
"""

from __future__ import annotations

from tokensign.algorithms.base import Algorithm
from tokensign.algorithms.hmac import HMACAlgorithm
from tokensign.algorithms.none import NONE_NAME, NoneAlgorithm
from tokensign.errors import InvalidKeyMaterialError

__all__ = [
    "Algorithm",
    "HMACAlgorithm",
    "HMAC_ALGORITHMS",
    "NONE_NAME",
    "NoneAlgorithm",
    "SUPPORTED_HMAC_NAMES",
    "hmac256",
    "hmac256_bytes",
    "hmac384",
    "hmac384_bytes",
    "hmac512",
    "hmac512_bytes",
    "hmac_for_name",
    "none",
]

HMAC_ALGORITHMS: dict[str, str] = {
    "HS256": "HmacSHA256",
    "HS384": "HmacSHA384",
    "HS512": "HmacSHA512",
}

SUPPORTED_HMAC_NAMES = tuple(HMAC_ALGORITHMS)


def _require_text(secret: str | None) -> str | None:
    if secret is not None and not isinstance(secret, str):
        raise InvalidKeyMaterialError(
            f"Expected a str secret, got {type(secret).__name__}; use the *_bytes constructor"
        )
    return secret


def _require_bytes(secret: bytes | None) -> bytes | None:
    if secret is not None and not isinstance(secret, (bytes, bytearray, memoryview)):
        raise InvalidKeyMaterialError(
            f"Expected a bytes secret, got {type(secret).__name__}"
        )
    return secret


def _build(name: str, secret: str | bytes | bytearray | memoryview | None) -> Algorithm:
    return HMACAlgorithm(name, HMAC_ALGORITHMS[name], secret)


def hmac256(secret: str) -> Algorithm:
    """HmacSHA256 keyed by a UTF-8 encoded text secret. Tokens call it "HS256".

    Raises:
        InvalidKeyMaterialError: If ``secret`` is None, empty or not a str
        UnsupportedEncodingError: If ``secret`` cannot be encoded as UTF-8
    """
    return _build("HS256", _require_text(secret))


def hmac384(secret: str) -> Algorithm:
    """HmacSHA384 keyed by a UTF-8 encoded text secret. Tokens call it "HS384"."""
    return _build("HS384", _require_text(secret))


def hmac512(secret: str) -> Algorithm:
    """HmacSHA512 keyed by a UTF-8 encoded text secret. Tokens call it "HS512"."""
    return _build("HS512", _require_text(secret))


def hmac256_bytes(secret: bytes) -> Algorithm:
    """HmacSHA256 keyed by raw secret bytes.

    Raises:
        InvalidKeyMaterialError: If ``secret`` is None, empty or not bytes-like
    """
    return _build("HS256", _require_bytes(secret))


def hmac384_bytes(secret: bytes) -> Algorithm:
    return _build("HS384", _require_bytes(secret))


def hmac512_bytes(secret: bytes) -> Algorithm:
    return _build("HS512", _require_bytes(secret))


def none() -> Algorithm:
    """Unsigned algorithm. Its ``verify`` always fails."""
    return NoneAlgorithm()


def hmac_for_name(name: str, secret: str | bytes) -> Algorithm:
    """Build the HMAC algorithm registered under the standard ``name``.

    Only HMAC names resolve here; ``"none"`` is rejected like any unknown name.

    Raises:
        ValueError: If ``name`` is not one of ``SUPPORTED_HMAC_NAMES``
        InvalidKeyMaterialError: If ``secret`` is unusable
    """
    if name not in HMAC_ALGORITHMS:
        raise ValueError(
            f"Unsupported HMAC algorithm {name!r}; expected one of {', '.join(SUPPORTED_HMAC_NAMES)}"
        )
    if isinstance(secret, str):
        return _build(name, secret)
    return _build(name, _require_bytes(secret))

"""tokensign - keyed signing and verification for compact web tokens.

Provides the algorithm abstraction used to sign and verify token content.
"""

__version__ = "0.1.0"
__author__ = "tokensign Contributors"

from tokensign.algorithms import (
    Algorithm,
    hmac256,
    hmac256_bytes,
    hmac384,
    hmac384_bytes,
    hmac512,
    hmac512_bytes,
    none,
)
from tokensign.errors import (
    AlgorithmError,
    InvalidKeyMaterialError,
    SignatureGenerationError,
    SignatureVerificationError,
    UnsupportedEncodingError,
)

__all__ = [
    "Algorithm",
    "AlgorithmError",
    "InvalidKeyMaterialError",
    "SignatureGenerationError",
    "SignatureVerificationError",
    "UnsupportedEncodingError",
    "__version__",
    "hmac256",
    "hmac256_bytes",
    "hmac384",
    "hmac384_bytes",
    "hmac512",
    "hmac512_bytes",
    "none",
]

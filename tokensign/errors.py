"""Exception taxonomy for signing and verification algorithms."""


class AlgorithmError(Exception):
    """Base class for every failure raised by an algorithm."""


class InvalidKeyMaterialError(AlgorithmError, ValueError):
    """Raised when a secret is absent, empty, or of an unusable type."""


class UnsupportedEncodingError(AlgorithmError, ValueError):
    """Raised when a textual secret cannot be encoded as UTF-8."""


class SignatureGenerationError(AlgorithmError):
    """Raised when a signature cannot be produced."""


class SignatureVerificationError(AlgorithmError):
    """Raised when a signature does not verify.

    Covers both a cryptographic mismatch and any failure while recomputing the
    expected signature.
    """

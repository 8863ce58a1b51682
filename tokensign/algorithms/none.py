"""Explicit unsigned algorithm."""

from __future__ import annotations

import logging

from tokensign.algorithms.base import Algorithm
from tokensign.errors import SignatureVerificationError

logger = logging.getLogger(__name__)

NONE_NAME = "none"


class NoneAlgorithm(Algorithm):
    """Represents an unsigned token.

    Signing yields an empty signature and verification never succeeds, so an
    ``alg: none`` token cannot pass verification through this class.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(NONE_NAME, NONE_NAME)
        logger.warning("Unsigned 'none' algorithm created; its verify() always fails")

    @property
    def signature_length(self) -> int:
        return 0

    def sign(self, content: bytes) -> bytes:
        return b""

    def verify(self, content: bytes, signature: bytes) -> None:
        raise SignatureVerificationError(
            "The 'none' algorithm cannot verify signatures"
        )

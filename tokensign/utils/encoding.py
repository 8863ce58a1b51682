"""Base64url helpers for printing and reading signature segments."""

from __future__ import annotations

import base64
import re

_SEGMENT_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def encode_segment(data: bytes) -> str:
    """Encode ``data`` as unpadded base64url, as carried in compact tokens."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode_segment(segment: str) -> bytes:
    """Decode a segment produced by :func:`encode_segment`.

    Only the unpadded base64url alphabet is accepted; ``+``, ``/`` and ``=``
    are rejected.

    Raises:
        ValueError: If ``segment`` is not valid base64url
    """
    segment = segment.strip()
    if not _SEGMENT_ALPHABET.fullmatch(segment):
        raise ValueError("Segment is not unpadded base64url")
    padded = segment + "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))

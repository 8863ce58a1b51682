"""Utility modules for common operations."""

from tokensign.utils.encoding import decode_segment, encode_segment

__all__ = ["decode_segment", "encode_segment"]

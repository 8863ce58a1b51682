"""Shared algorithm instances under concurrent use."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from tokensign.algorithms import hmac256, hmac384_bytes, hmac512
from tokensign.errors import SignatureVerificationError

SECRET = "concurrency-secret-with-enough-length-for-hs512-keys-0123456789"


@pytest.mark.parametrize(
    "algorithm",
    [hmac256(SECRET), hmac384_bytes(SECRET.encode()), hmac512(SECRET)],
    ids=["HS256", "HS384", "HS512"],
)
def test_concurrent_sign_matches_sequential(algorithm) -> None:
    contents = [f"header.payload-{index}".encode() * (index % 7 + 1) for index in range(400)]
    sequential = [algorithm.sign(content) for content in contents]

    with ThreadPoolExecutor(max_workers=8) as pool:
        concurrent = list(pool.map(algorithm.sign, contents))

    assert concurrent == sequential


def test_concurrent_verify_matches_sequential() -> None:
    algorithm = hmac256(SECRET)
    contents = [f"content-{index}".encode() for index in range(300)]
    signatures = [algorithm.sign(content) for content in contents]
    # Every third signature belongs to a different message.
    pairs = [
        (content, signatures[(index + 1) % len(signatures)] if index % 3 == 0 else signatures[index])
        for index, content in enumerate(contents)
    ]

    def check(pair: tuple[bytes, bytes]) -> bool:
        try:
            algorithm.verify(*pair)
        except SignatureVerificationError:
            return False
        return True

    sequential = [check(pair) for pair in pairs]
    with ThreadPoolExecutor(max_workers=8) as pool:
        concurrent = list(pool.map(check, pairs))

    assert concurrent == sequential
    assert sequential.count(False) == 100

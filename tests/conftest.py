"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from tokensign.config import Settings

TEST_SECRET = "a-test-secret-that-is-long-enough-for-hs512-signatures-0123456789"


@pytest.fixture
def content() -> bytes:
    """Sample token signing input (header.payload)."""
    return b"eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.eyJzdWIiOiIxMjM0NTY3ODkwIn0"


@pytest.fixture
def sample_content_file(tmp_path: Path, content: bytes) -> Path:
    """Write the sample content to a file."""
    file_path = tmp_path / "content.txt"
    file_path.write_bytes(content)
    return file_path


@pytest.fixture
def override_settings() -> Generator[Settings, None, None]:
    """Provide isolated tokensign settings scoped to tests."""

    import tokensign.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    settings = config_module.Settings(
        algorithm="HS256",
        secret=TEST_SECRET,
        secret_file=None,
        _env_file=None,
    )

    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings

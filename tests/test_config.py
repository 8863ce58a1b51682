from pathlib import Path

import pytest

from tokensign.config import Settings, get_settings, set_settings
from tokensign.errors import InvalidKeyMaterialError


def _settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


def test_defaults_to_hs256() -> None:
    settings = _settings(secret="configured-secret-with-at-least-32-bytes")

    algorithm = settings.build_algorithm()

    assert algorithm.name == "HS256"


def test_secret_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOKENSIGN_SECRET", "environment-secret-with-at-least-48-bytes-000000")
    monkeypatch.setenv("TOKENSIGN_ALGORITHM", "HS384")

    settings = _settings()
    algorithm = settings.build_algorithm()

    assert algorithm.name == "HS384"
    assert settings.secret is not None
    assert "environment-secret" not in repr(settings)


def test_secret_file_takes_precedence(tmp_path: Path) -> None:
    secret_path = tmp_path / "hmac.key"
    secret_path.write_bytes(b"\x00\x01" * 32)

    settings = _settings(algorithm="HS512", secret="ignored", secret_file=secret_path)
    content = b"header.payload"

    from tokensign.algorithms import hmac512_bytes

    expected = hmac512_bytes(b"\x00\x01" * 32).sign(content)
    assert settings.build_algorithm().sign(content) == expected


def test_missing_secret_file_is_invalid_key_material(tmp_path: Path) -> None:
    settings = _settings(secret_file=tmp_path / "absent.key")

    with pytest.raises(InvalidKeyMaterialError, match="Secret file not found"):
        settings.build_algorithm()


def test_directory_secret_file_is_invalid_key_material(tmp_path: Path) -> None:
    settings = _settings(secret_file=tmp_path)

    with pytest.raises(InvalidKeyMaterialError, match="Secret file unreadable"):
        settings.build_algorithm()


def test_no_secret_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TOKENSIGN_SECRET", raising=False)
    monkeypatch.delenv("TOKENSIGN_SECRET_FILE", raising=False)

    with pytest.raises(InvalidKeyMaterialError, match="No secret configured"):
        _settings().build_algorithm()


def test_empty_secret_file_is_rejected(tmp_path: Path) -> None:
    secret_path = tmp_path / "empty.key"
    secret_path.write_bytes(b"")

    with pytest.raises(InvalidKeyMaterialError):
        _settings(secret_file=secret_path).build_algorithm()


def test_invalid_algorithm_name_rejected() -> None:
    with pytest.raises(ValueError):
        _settings(algorithm="none")


def test_global_settings_round_trip(override_settings: Settings) -> None:
    assert get_settings() is override_settings

    replacement = _settings(secret="replacement-secret-with-at-least-32-bytes")
    set_settings(replacement)

    assert get_settings() is replacement

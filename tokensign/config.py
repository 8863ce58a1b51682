"""Configuration management with Pydantic settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from tokensign.algorithms import Algorithm, hmac_for_name
from tokensign.errors import InvalidKeyMaterialError

HMACName = Literal["HS256", "HS384", "HS512"]


class Settings(BaseSettings):
    """tokensign configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOKENSIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    algorithm: HMACName = Field(
        default="HS256",
        description="HMAC algorithm used for signing and verification",
    )

    secret: SecretStr | None = Field(
        default=None,
        description="Shared secret, encoded as UTF-8 before use",
    )

    secret_file: Path | None = Field(
        default=None,
        description="File holding the raw secret bytes (takes precedence over secret)",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI",
    )

    def load_secret(self) -> str | bytes:
        """Return the configured secret.

        Raises:
            InvalidKeyMaterialError: If no secret is configured or the file cannot be read
        """
        if self.secret_file is not None:
            try:
                return self.secret_file.expanduser().read_bytes()
            except FileNotFoundError as exc:
                raise InvalidKeyMaterialError(
                    f"Secret file not found: {self.secret_file}"
                ) from exc
            except OSError as exc:
                raise InvalidKeyMaterialError(
                    f"Secret file unreadable: {self.secret_file}"
                ) from exc

        if self.secret is not None:
            return self.secret.get_secret_value()

        raise InvalidKeyMaterialError(
            "No secret configured. Set TOKENSIGN_SECRET or TOKENSIGN_SECRET_FILE."
        )

    def build_algorithm(self) -> Algorithm:
        """Build the configured HMAC algorithm."""
        return hmac_for_name(self.algorithm, self.load_secret())


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings

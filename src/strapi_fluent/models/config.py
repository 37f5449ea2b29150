"""Configuration models for strapi-fluent.

Settings are read from keyword arguments, environment variables prefixed
with ``STRAPI_`` or a ``.env`` file, through pydantic-settings.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StrapiConfig(BaseSettings):
    """Connection settings for a Strapi instance.

    Example:
        >>> config = StrapiConfig(
        ...     base_url="http://localhost:1337/api",
        ...     api_token="your-token",
        ... )
        >>> config.get_base_url()
        'http://localhost:1337/api'
    """

    model_config = SettingsConfigDict(
        env_prefix="STRAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(..., description="Base URL requests are resolved against")
    api_token: SecretStr = Field(..., description="Bearer token sent on every request")
    timeout: float = Field(30.0, gt=0, description="Per-request timeout in seconds")
    verify_ssl: bool = Field(True, description="Verify TLS certificates")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Drop trailing slashes so endpoint paths join cleanly."""
        return value.rstrip("/")

    def get_base_url(self) -> str:
        return self.base_url

    def get_api_token(self) -> str:
        return self.api_token.get_secret_value()

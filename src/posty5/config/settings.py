"""Configuration and settings management using pydantic-settings."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Posty5 node settings with environment variable loading."""

    model_config = SettingsConfigDict(
        env_prefix="POSTY5_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Core settings
    env: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Log level")

    # Posty5 API
    base_url: str = Field(
        default="https://api.posty5.com",
        description="Posty5 API base URL (override for testing)",
    )

    # Timeouts
    request_timeout_s: float = Field(
        default=30,
        description="Timeout for API calls in seconds",
    )
    upload_timeout_s: float = Field(
        default=120,
        description="Timeout for pre-signed file uploads in seconds",
    )

    # Pagination
    return_all_page_size: int = Field(
        default=100,
        description="Page size used when fetching every page of a list",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("request_timeout_s", "upload_timeout_s")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate that timeouts are positive."""
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("return_all_page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """The API caps page size at 100."""
        if not 1 <= v <= 100:
            raise ValueError("return_all_page_size must be between 1 and 100")
        return v


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None

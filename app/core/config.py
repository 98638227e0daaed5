"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Ranges (limits, timeouts) are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults. DATABASE_URL may be empty at startup; the
    search endpoint then answers with a store error instead of results.
    """

    # App
    app_name: str = "global-search"
    app_version: str = "1.0.0"
    debug: bool = False

    # Store: any SQLAlchemy async URL (postgresql+asyncpg://... in production)
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"

    # Search
    search_default_limit: int = 150
    search_max_limit: int = 300
    search_min_query_length: int = 2
    # Per-adapter deadline; a slow source is cancelled and contributes nothing.
    search_adapter_timeout_seconds: float = 10.0
    search_rate_limit: str = "120/minute"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_search_limits(self) -> "Settings":
        """Validate search tuning values.

        - search_max_limit >= 1 and search_default_limit within [1, search_max_limit].
        - search_min_query_length >= 1, adapter timeout > 0.
        """
        if self.search_max_limit < 1:
            raise ValueError("SEARCH_MAX_LIMIT must be at least 1.")
        if not 1 <= self.search_default_limit <= self.search_max_limit:
            raise ValueError(
                f"SEARCH_DEFAULT_LIMIT must be between 1 and {self.search_max_limit}, "
                f"got: {self.search_default_limit}"
            )
        if self.search_min_query_length < 1:
            raise ValueError("SEARCH_MIN_QUERY_LENGTH must be at least 1.")
        if self.search_adapter_timeout_seconds <= 0:
            raise ValueError("SEARCH_ADAPTER_TIMEOUT_SECONDS must be positive.")
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError("TELEMETRY_SAMPLE_RATE must be between 0.0 and 1.0.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()

# 📄 File: soundcave/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and hands them to the rest of the SoundCave app in one organized place.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and a startup-time guard against insecure token signing secrets.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
#
# 🔄 Connected Modules / Calls From:
# - soundcave.main (application startup)
# - soundcave.shared.config.database (engine configuration)
# - soundcave.shared.core.security (token signing)
# - soundcave.shared.infrastructure.storage (Supabase credentials)

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from soundcave import __description__, __version__

# Secret used when JWT_SECRET_KEY is unset; only acceptable outside deployed environments
DEVELOPMENT_JWT_SECRET = "soundcave-development-secret"

INSECURE_JWT_SECRETS = {"", DEVELOPMENT_JWT_SECRET, "secret", "changeme"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="SoundCave API", description="Application name")
    APP_VERSION: str = Field(default=__version__, description="Application version")
    APP_DESCRIPTION: str = Field(default=__description__, description="Application description")
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json or text)")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=6002, description="Server port")
    RELOAD: bool = Field(default=False, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: Optional[str] = Field(None, description="Async SQLAlchemy connection URL")
    DB_HOST: str = Field(default="localhost", description="Database host")
    DB_PORT: int = Field(default=5432, description="Database port")
    DB_NAME: str = Field(default="soundcave", description="Database name")
    DB_USER: str = Field(default="postgres", description="Database user")
    DB_PASSWORD: str = Field(default="", description="Database password")

    DB_POOL_SIZE: int = Field(default=10, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Database pool timeout")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Database pool recycle time")
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    JWT_SECRET_KEY: str = Field(default=DEVELOPMENT_JWT_SECRET, description="JWT signing secret")
    JWT_ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    JWT_TOKEN_VALIDITY_DAYS: int = Field(default=30, description="Access token lifetime in days")
    PASSWORD_MIN_LENGTH: int = Field(default=6, description="Minimum password length")
    BCRYPT_ROUNDS: int = Field(default=12, description="BCrypt hash rounds")

    CORS_ORIGINS: str = Field(default="*", description="Comma separated CORS allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=False, description="CORS allow credentials")

    # Google sign-in
    GOOGLE_CLIENT_ID: Optional[str] = Field(None, description="Expected audience of Google ID tokens")
    GOOGLE_TOKENINFO_URL: str = Field(
        default="https://oauth2.googleapis.com/tokeninfo",
        description="Google ID token verification endpoint"
    )
    GOOGLE_HTTP_TIMEOUT: float = Field(default=10.0, description="Google verification timeout (seconds)")

    # =========================================================================
    # SUPABASE STORAGE
    # =========================================================================

    SUPABASE_URL: Optional[str] = Field(None, description="Supabase project URL")
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(None, description="Supabase service role key")
    SUPABASE_STORAGE_BUCKET: str = Field(default="soundcave", description="Supabase storage bucket")

    MAX_IMAGE_SIZE: int = Field(default=10 * 1024 * 1024, description="Max image size (10MB)")
    MAX_AUDIO_SIZE: int = Field(default=5 * 1024 * 1024, description="Max audio size (5MB)")

    # =========================================================================
    # RATE LIMITING
    # =========================================================================

    RATE_LIMIT_ENABLED: bool = Field(default=True, description="Enable slowapi rate limits")
    AUTH_RATE_LIMIT: str = Field(default="10/minute", description="Login and register limit")
    DEFAULT_RATE_LIMIT: str = Field(default="300/minute", description="Default per-client limit")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        """Only HMAC algorithms are supported with a shared secret."""
        allowed_algorithms = ["HS256", "HS384", "HS512"]
        if v not in allowed_algorithms:
            raise ValueError(f"JWT algorithm must be one of {allowed_algorithms}")
        return v

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    @model_validator(mode="after")
    def validate_jwt_secret(self) -> "Settings":
        """Refuse to start a deployed environment with a known signing secret."""
        if self.ENVIRONMENT not in ("development", "test") and self.JWT_SECRET_KEY in INSECURE_JWT_SECRETS:
            raise ValueError(
                f"JWT_SECRET_KEY must be set to a private value in the {self.ENVIRONMENT} environment"
            )
        return self

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def database_url(self) -> str:
        """Get the database URL, preferring explicit DATABASE_URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"

    @property
    def storage_configured(self) -> bool:
        """Whether Supabase storage credentials are present."""
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY)


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()

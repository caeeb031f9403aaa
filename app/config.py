"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="MacroRelay", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")

    # Completion provider (OpenAI-compatible, hosted by Groq)
    groq_api_key: str = Field(
        default="", description="Completion provider API key"
    )
    groq_base_url: str = Field(
        default="https://api.groq.com/openai/v1",
        description="Completion provider base URL",
    )
    groq_model: str = Field(
        default="llama-3.3-70b-versatile", description="Completion model identifier"
    )
    groq_temperature: float = Field(
        default=0.3, ge=0, le=2, description="Sampling temperature"
    )

    # Food database (USDA FoodData Central)
    usda_api_key: str = Field(default="DEMO_KEY", description="USDA API key")
    usda_api_url: str = Field(
        default="https://api.nal.usda.gov/fdc/v1", description="USDA API base URL"
    )
    usda_data_types: str = Field(
        default="Foundation,Survey (FNDDS)",
        description="dataType filter sent with every food search",
    )

    # Rate limiting
    rate_limit_window_sec: float = Field(
        default=60.0, gt=0, description="Fixed window length in seconds"
    )
    rate_limit_max_requests: int = Field(
        default=30, ge=1, description="Requests admitted per client per window"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_title: str = Field(
        default="MacroRelay API", description="API documentation title"
    )
    api_description: str = Field(
        default="Meal macro estimation and food search relay",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def has_completion_credentials(self) -> bool:
        """Check whether the completion provider key is configured"""
        return bool(self.groq_api_key)


# Global settings instance
settings = Settings()

"""
Application configuration management using Pydantic Settings.
Handles environment variables and default values for the service.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host address")
    api_port: int = Field(default=8000, description="API port")
    api_debug: bool = Field(default=False, description="Enable debug mode")
    api_reload: bool = Field(default=False, description="Enable auto-reload")

    # Scheduler Configuration
    run_scheduler: bool = Field(default=True, description="Start the refresh loop with the app")
    refresh_interval_hours: int = Field(default=2, ge=1, description="Hours between refresh cycles")

    # Display Configuration
    display_timezone: str = Field(
        default="Europe/Helsinki",
        description="Timezone used when formatting price hours for display"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json/text)")


# Global settings instance
settings = Settings()

"""
Application configuration settings.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field("Daily Plan Relay", alias="APP_NAME")
    version: str = Field("1.0.0", alias="APP_VERSION")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3001, alias="PORT")

    # Gemini
    gemini_api_key: Optional[str] = Field(None, alias="GEMINI_API_KEY")
    gemini_model: str = Field("gemini-2.5-flash", alias="GEMINI_MODEL")
    gemini_temperature: float = Field(0.7, alias="GEMINI_TEMPERATURE")
    gemini_max_retries: int = Field(0, alias="GEMINI_MAX_RETRIES")
    gemini_timeout: float = Field(60.0, alias="GEMINI_TIMEOUT")

    # Google Sheets
    google_sheet_id: Optional[str] = Field(None, alias="GOOGLE_SHEET_ID")
    google_application_credentials: Optional[str] = Field(
        None, alias="GOOGLE_APPLICATION_CREDENTIALS"
    )
    google_service_account_json: Optional[str] = Field(
        None, alias="GOOGLE_SERVICE_ACCOUNT_JSON"
    )
    google_client_email: Optional[str] = Field(None, alias="GOOGLE_CLIENT_EMAIL")
    google_private_key: Optional[str] = Field(None, alias="GOOGLE_PRIVATE_KEY")
    google_use_default_credentials: bool = Field(
        False, alias="GOOGLE_USE_DEFAULT_CREDENTIALS"
    )
    local_credentials_file: str = Field(
        "credentials.json", alias="LOCAL_CREDENTIALS_FILE"
    )

    sheets_append_range: str = Field("A1:D1", alias="SHEETS_APPEND_RANGE")
    sheets_probe_range: str = Field("A1:D5", alias="SHEETS_PROBE_RANGE")
    sheets_value_input_option: str = Field(
        "USER_ENTERED", alias="SHEETS_VALUE_INPUT_OPTION"
    )
    sheets_append_best_effort: bool = Field(False, alias="SHEETS_APPEND_BEST_EFFORT")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

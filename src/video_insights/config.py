"""Configuration settings for video insights."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gemini API
    api_base_url: str = "https://generativelanguage.googleapis.com"
    api_version: str = "v1beta"
    default_model: str = "gemini-1.5-pro"
    request_timeout: float | None = None  # seconds, None keeps the transport default

    # Paths
    data_dir: Path = Path("data")
    db_path: Path = Path("data/video_insights.db")

    # Logging
    log_level: str = "WARNING"

    @property
    def models_endpoint(self) -> str:
        """Model listing endpoint of the Gemini REST API."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}/models"

    @property
    def data_directory(self) -> Path:
        """Get absolute data directory path."""
        return self.data_dir.resolve()

    @property
    def database_path(self) -> Path:
        """Get absolute database path."""
        return self.db_path.resolve()


settings = Settings()

"""
Configuration settings for pdfpages.
Loads settings from environment variables and .env file.
"""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PDFPAGES_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Thumbnail settings
    thumbnail_scale: float = 0.5  # Low-fidelity preview, not export quality
    thumbnail_jpeg_quality: int = 80

    # Save settings
    download_dir: Path = Path.home() / "Downloads"
    native_save_dialog: bool = True  # Offer "save as" when Tk is available

    # Application settings
    log_level: str = "INFO"


settings = Settings()

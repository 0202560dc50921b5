"""Configuration management for CV Craft."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-software-rasterizer",
    "--disable-extensions",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CV_CRAFT_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage layout
    storage_root: Path = Field(
        default=Path("./storage"),
        description="Root directory for stored assets and exported PDFs",
    )
    assets_dir: str = Field(default="assets", description="Asset folder under storage_root")
    exports_dir: str = Field(default="exports", description="Export folder under storage_root")

    # Headless rendering
    font_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        le=120,
        description="Upper bound on waiting for web fonts before printing with fallbacks",
    )
    settle_delay_ms: int = Field(
        default=500,
        ge=0,
        le=10000,
        description="Pause after fonts are ready so late reflow lands before capture",
    )
    content_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Timeout for loading a document into a browser page",
    )
    headless: bool = True
    browser_executable: Path | None = Field(
        default=None,
        description="Use a system Chrome/Chromium instead of the Playwright bundle",
    )
    browser_args: list[str] = Field(default_factory=lambda: list(DEFAULT_BROWSER_ARGS))

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def assets_path(self) -> Path:
        """Directory probed for photo assets."""
        return self.storage_root / self.assets_dir

    @property
    def exports_path(self) -> Path:
        """Default directory for exported PDFs."""
        return self.storage_root / self.exports_dir


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

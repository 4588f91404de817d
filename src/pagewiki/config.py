"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    templates_dir: Path = Path(__file__).parent / "templates"
    default_title: str = "home"
    placeholder: str = ".gitkeep"
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    app_title: str = "PageWiki"

    model_config = SettingsConfigDict(
        env_prefix="PAGEWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

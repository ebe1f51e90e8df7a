from pathlib import Path

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    POSTS_DIR: str = "posts"
    SKIP_MALFORMED_POSTS: bool = True
    WORDS_PER_MINUTE: PositiveInt = 200

    # Static assets
    ASSETS_DIR: str = "public/assets"
    ASSET_PREFIX: str = "/assets"

    # Site
    SITE_URL: str = "http://localhost:8000"
    SITE_TITLE: str = "Personal Blog"
    SITE_DESCRIPTION: str = "Notes and thoughts about the web."

    # Theme
    THEME_COOKIE_NAME: str = "theme"
    DEFAULT_THEME: str = "light"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def site_url(self) -> str:
        return self.SITE_URL.rstrip("/")

    def canonical_url(self, slug: str) -> str:
        return f"{self.site_url}/{slug}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()

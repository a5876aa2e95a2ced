"""
Application configuration management
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # GitHub API Configuration
    github_token: Optional[str] = Field(None, alias="GITHUB_TOKEN")
    github_api_base_url: str = Field("https://api.github.com", alias="GITHUB_API_BASE_URL")
    github_web_host: str = Field("github.com", alias="GITHUB_WEB_HOST")
    user_agent: str = Field("pr-title-labeler", alias="USER_AGENT")
    request_timeout: Optional[float] = Field(None, alias="REQUEST_TIMEOUT")

    # Application Configuration
    app_name: str = Field("PR Title Labeler", alias="APP_NAME")
    app_version: str = Field("1.0.0", alias="APP_VERSION")
    debug: bool = Field(False, alias="DEBUG")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")

    # Logging Configuration
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("%(asctime)s - %(name)s - %(levelname)s - %(message)s", alias="LOG_FORMAT")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def get_github_headers(access_token: Optional[str] = None) -> dict:
    """Get GitHub API headers with authentication"""
    settings = get_settings()
    headers = {
        "User-Agent": settings.user_agent,
        "Content-Type": "application/json",
    }
    token = access_token or settings.github_token
    if token:
        headers["Authorization"] = f"token {token}"
    return headers

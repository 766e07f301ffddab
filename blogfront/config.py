"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
    ]

    # Upstream WordPress GraphQL endpoint (e.g. https://cms.example.com/graphql)
    wordpress_api_url: str = ""

    # Base URL of this app's own /api endpoints, used by the intermediary client
    app_url: str = ""

    # Pagination
    posts_page_size: int = 6
    slug_batch_size: int = 100
    slug_max_pages: int = 1000

    # Seconds before an upstream request is abandoned
    upstream_timeout: float = 15.0

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()

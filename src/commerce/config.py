"""Runtime settings for the remote commerce API.

Values come from environment variables; a ``.env`` file at the project
root is loaded first when present.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


def _get_list(name: str, fallback: str = "") -> list[str]:
    raw_value = os.getenv(name, fallback)
    if not raw_value:
        return []
    return [item.strip() for item in raw_value.split(",") if item.strip()]


def _default_gateway() -> str:
    explicit = os.getenv("COMMERCE_GATEWAY")
    if explicit:
        return explicit.lower()
    if os.getenv("SHOPIFY_SHOP_DOMAIN") and os.getenv("SHOPIFY_ACCESS_TOKEN"):
        return "graphql"
    return "fake"


@dataclass(frozen=True)
class Settings:
    shop_domain: str | None = field(default_factory=lambda: os.getenv("SHOPIFY_SHOP_DOMAIN"))
    access_token: str | None = field(default_factory=lambda: os.getenv("SHOPIFY_ACCESS_TOKEN"))
    api_version: str = field(default_factory=lambda: os.getenv("SHOPIFY_API_VERSION", "2024-10"))
    http_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("COMMERCE_HTTP_TIMEOUT_SECONDS", "10"))
    )
    gateway: str = field(default_factory=_default_gateway)
    allowed_origins: list[str] = field(default_factory=lambda: _get_list("ALLOWED_ORIGINS", "*"))


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()

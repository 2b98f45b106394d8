"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml


DEFAULT_FEEDS = [
    "https://mastodon.social/@livelakehuron.rss",
    "https://mastodon.social/@livelakemichigan.rss",
    "https://mastodon.social/@livelakesuperior.rss",
    "https://mastodon.social/@livelakeerie.rss",
    "https://mastodon.social/@livelakeontario.rss",
]


@dataclass
class FeedsConfig:
    """Feed sources."""
    urls: list[str] = field(default_factory=lambda: list(DEFAULT_FEEDS))


@dataclass
class HttpConfig:
    """HTTP fetch settings."""
    timeout: float = 30.0
    user_agent: str = "photo-gallery/0.1"
    max_concurrency: int = 5


@dataclass
class OutputConfig:
    """Output page settings."""
    path: Path = Path("index.html")
    title: str = "Great Lakes Live Photos"
    refresh_seconds: int = 1800


@dataclass
class Settings:
    """Application settings."""

    feeds: FeedsConfig = field(default_factory=FeedsConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def sources(self) -> list[str]:
        return self.feeds.urls

    @property
    def output_path(self) -> Path:
        return self.output.path


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings()

    feeds = config.get("feeds") or {}
    urls = feeds.get("urls")
    if urls is not None:
        settings.feeds.urls = [str(url) for url in urls]

    for key, value in (config.get("http") or {}).items():
        setattr(settings.http, key, value)

    for key, value in (config.get("output") or {}).items():
        if key == "path":
            value = Path(value)
        setattr(settings.output, key, value)

    # Comma-separated feed list from environment wins over the file
    env_feeds = os.getenv("PHOTO_GALLERY_FEEDS")
    if env_feeds:
        settings.feeds.urls = [url.strip() for url in env_feeds.split(",") if url.strip()]

    return settings

"""Configuration management for the blog feed."""

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SITE_URL = "https://Flare-Africa-Community.github.io"
SITE_TITLE = "Flare Africa Community Blog"
SITE_DESCRIPTION = (
    "News, guides and stories from the Flare Network community across Africa."
)

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SiteConfig:
    """Site-wide settings passed explicitly into the feed builder."""

    site_url: str = DEFAULT_SITE_URL
    title: str = SITE_TITLE
    description: str = SITE_DESCRIPTION
    language: str = "en-us"
    collection: str = "blog"
    content_dir: Path = Path("src/content")
    categories: tuple[str, ...] = ("Flare Network", "Web3")
    sort_by_date: bool = False
    # Framework plugins enabled for the site; the feed does not use them
    integrations: tuple[str, ...] = field(default=("mdx", "sitemap"))

    @classmethod
    def from_env(cls) -> "SiteConfig":
        """Build the site configuration from environment variables."""
        sort_flag = os.getenv("BLOG_SORT_BY_DATE", "false").strip().lower()
        return cls(
            site_url=os.getenv("BLOG_SITE_URL", DEFAULT_SITE_URL).strip(),
            content_dir=Path(os.getenv("BLOG_CONTENT_DIR", "src/content")),
            sort_by_date=sort_flag in TRUE_VALUES,
        )


def get_log_level() -> str:
    """Get the logging level from the environment."""
    return os.getenv("LOG_LEVEL", "INFO").upper()

"""Unit tests for configuration management."""

import dataclasses
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from blog_feed.config import (
    DEFAULT_SITE_URL,
    SITE_DESCRIPTION,
    SITE_TITLE,
    SiteConfig,
    get_log_level,
)


class TestConfigUnit:
    """Unit tests for SiteConfig."""

    def test_defaults(self):
        """Without environment overrides the deployed site settings apply."""
        with patch.dict(os.environ, {}, clear=True):
            site = SiteConfig.from_env()

        assert site.site_url == DEFAULT_SITE_URL
        assert site.site_url.startswith("https://")
        assert site.title == SITE_TITLE
        assert site.description == SITE_DESCRIPTION
        assert site.language == "en-us"
        assert site.collection == "blog"
        assert site.content_dir == Path("src/content")
        assert site.categories == ("Flare Network", "Web3")
        assert site.sort_by_date is False
        assert site.integrations == ("mdx", "sitemap")

    def test_environment_overrides(self):
        env = {
            "BLOG_SITE_URL": " https://example.com ",
            "BLOG_CONTENT_DIR": "/srv/content",
            "BLOG_SORT_BY_DATE": "TRUE",
        }

        with patch.dict(os.environ, env, clear=True):
            site = SiteConfig.from_env()

        assert site.site_url == "https://example.com"
        assert site.content_dir == Path("/srv/content")
        assert site.sort_by_date is True

    @pytest.mark.parametrize("value", ["false", "0", "no", ""])
    def test_sort_flag_false_values(self, value):
        with patch.dict(os.environ, {"BLOG_SORT_BY_DATE": value}, clear=True):
            assert SiteConfig.from_env().sort_by_date is False

    def test_site_config_is_immutable(self):
        site = SiteConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            site.site_url = "https://other.example"

    def test_log_level(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            assert get_log_level() == "DEBUG"
        with patch.dict(os.environ, {}, clear=True):
            assert get_log_level() == "INFO"

"""Shared fixtures for blog feed tests."""

from pathlib import Path

import pytest

from blog_feed.models import Post

VALID_FRONTMATTER = {
    "title": "Getting Started with Flare",
    "description": "A first look at the Flare Network.",
    "date": "2024-01-15",
    "author": "Amina Okafor",
    "summary": "Introduction to Flare.",
}


def render_post(metadata: dict, body: str = "Post body.") -> str:
    """Render a markdown document with YAML front matter."""
    lines = ["---"]
    for key, value in metadata.items():
        lines.append(f"{key}: {value}")
    lines.extend(["---", "", body, ""])
    return "\n".join(lines)


def quoted(metadata: dict) -> dict:
    """Quote string values so YAML keeps them as strings."""
    return {
        key: f'"{value}"' if isinstance(value, str) else value
        for key, value in metadata.items()
    }


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Empty content directory with a blog collection folder."""
    (tmp_path / "blog").mkdir()
    return tmp_path


@pytest.fixture
def write_post(content_dir: Path):
    """Write a post file into the blog collection."""

    def _write(relative_path: str, metadata: dict | None = None, body: str = "Body.") -> Path:
        path = content_dir / "blog" / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        data = VALID_FRONTMATTER if metadata is None else metadata
        path.write_text(render_post(quoted(data), body), encoding="utf-8")
        return path

    return _write


def make_post(slug: str = "my-post", **overrides) -> Post:
    """Build a validated Post for feed tests."""
    fields = {
        "title": "My Post",
        "description": "What this post is about.",
        "date": "2024-03-01",
        "author": "Kwame Mensah",
        "summary": "Short summary.",
        "slug": slug,
        "entry_id": f"{slug}.md",
    }
    fields.update(overrides)
    return Post(**fields)

"""Data models for the blog feed."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Post:
    """A validated blog post from the content collection."""

    title: str
    description: str
    date: str
    author: str
    summary: str  # Declared by the schema, not used in the feed
    slug: str
    entry_id: str = ""
    body: str = ""


@dataclass
class FeedResponse:
    """HTTP response carrying the rendered feed."""

    body: str
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str:
        return self.headers.get("Content-Type", "")

    def to_dict(self) -> dict:
        """Return the response in serverless handler form."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }

"""Exceptions raised while loading content and building the feed."""


class ContentValidationError(ValueError):
    """Raised when a content entry does not satisfy its collection schema."""

    def __init__(
        self,
        entry_id: str,
        field: str,
        message: str,
        errors: list[tuple[str, str]] | None = None,
    ):
        self.entry_id = entry_id
        self.field = field
        self.errors = errors or [(field, message)]
        super().__init__(f"Invalid entry {entry_id!r}: field {field!r}: {message}")


class FeedGenerationError(ValueError):
    """Raised when the RSS document cannot be produced."""

    def __init__(self, message: str, slug: str | None = None):
        self.slug = slug
        if slug:
            message = f"{message} (post {slug!r})"
        super().__init__(message)

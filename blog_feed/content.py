"""Content store for markdown/MDX collections."""

import re
from pathlib import Path, PurePosixPath

import frontmatter
import yaml
from pydantic import BaseModel

from .exceptions import ContentValidationError
from .logging_config import create_execution_logger
from .models import Post
from .schema import COLLECTIONS, BlogPostSchema, validate_entry

CONTENT_EXTENSIONS = (".md", ".mdx")
FRONTMATTER_FIELD = "<frontmatter>"

_UNSAFE_SLUG_CHARS = re.compile(r"[^\w\- ]", re.UNICODE)


def slugify_segment(segment: str) -> str:
    """Slugify one path segment the way heading anchors are built."""
    segment = _UNSAFE_SLUG_CHARS.sub("", segment.strip().lower())
    return segment.replace(" ", "-")


def derive_slug(relative_path: PurePosixPath) -> str:
    """Derive a post slug from its path inside the collection directory.

    ``2024/Hello World.md`` becomes ``2024/hello-world`` and
    ``guides/index.mdx`` becomes ``guides``.
    """
    parts = list(relative_path.with_suffix("").parts)
    slugs = [slugify_segment(part) for part in parts]
    if len(slugs) > 1 and slugs[-1] == "index":
        slugs.pop()
    return "/".join(slugs)


class ContentStore:
    """Loads and validates the collections under a content directory."""

    def __init__(self, content_dir: Path, execution_id: str | None = None):
        """Initialize the content store.

        Args:
            content_dir: Directory holding one sub-directory per collection
            execution_id: Execution ID for logging context
        """
        self.content_dir = Path(content_dir)
        self.logger = create_execution_logger("content_store", execution_id)

    def discover(self, collection_dir: Path) -> list[Path]:
        """List the content files of a collection in stable path order."""
        files = [
            path
            for path in collection_dir.rglob("*")
            if path.is_file()
            and path.suffix.lower() in CONTENT_EXTENSIONS
            and not path.name.startswith(("_", "."))
        ]
        return sorted(files, key=lambda p: p.relative_to(collection_dir).as_posix())

    def load_entry(
        self,
        path: Path,
        collection_dir: Path,
        schema: type[BaseModel] = BlogPostSchema,
    ) -> Post:
        """Parse and validate a single content file.

        Raises:
            ContentValidationError: If the file is not UTF-8 text or its front
                matter is unreadable or invalid
        """
        relative_path = PurePosixPath(path.relative_to(collection_dir).as_posix())
        entry_id = str(relative_path)

        try:
            document = frontmatter.load(path)
        except UnicodeDecodeError as e:
            raise ContentValidationError(
                entry_id, FRONTMATTER_FIELD, f"file is not valid UTF-8: {e}"
            ) from e
        except yaml.YAMLError as e:
            raise ContentValidationError(entry_id, FRONTMATTER_FIELD, str(e)) from e

        data = validate_entry(entry_id, document.metadata, schema)

        # A "slug" key in the front matter replaces the path-derived slug
        slug = document.metadata.get("slug")
        if not isinstance(slug, str) or not slug.strip():
            slug = derive_slug(relative_path)

        return Post(
            title=data.title,
            description=data.description,
            date=data.date,
            author=data.author,
            summary=data.summary,
            slug=slug.strip().strip("/"),
            entry_id=entry_id,
            body=document.content,
        )

    def get_collection(self, name: str) -> list[Post]:
        """Return every validated entry of a collection.

        Args:
            name: Collection name, e.g. "blog"

        Returns:
            Posts in path order

        Raises:
            ValueError: If the collection is not defined
            ContentValidationError: If any entry fails validation
        """
        if name not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {name}")

        collection_dir = self.content_dir / name
        if not collection_dir.is_dir():
            self.logger.warning(
                f"Collection directory not found: {collection_dir}",
                collection=name,
            )
            return []

        posts: list[Post] = []
        seen_slugs: dict[str, str] = {}

        for path in self.discover(collection_dir):
            try:
                post = self.load_entry(path, collection_dir, COLLECTIONS[name])
            except ContentValidationError as e:
                self.logger.log_entry_validation(
                    e.entry_id, name, success=False, error=str(e)
                )
                raise

            if post.slug in seen_slugs:
                error = ContentValidationError(
                    post.entry_id,
                    "slug",
                    f"slug {post.slug!r} already used by {seen_slugs[post.slug]}",
                )
                self.logger.log_entry_validation(
                    post.entry_id, name, success=False, error=str(error)
                )
                raise error

            seen_slugs[post.slug] = post.entry_id
            self.logger.log_entry_validation(post.entry_id, name, slug=post.slug)
            posts.append(post)

        self.logger.info(
            f"Loaded {len(posts)} entries", collection=name, entries_count=len(posts)
        )
        return posts

"""RSS 2.0 feed generation for the blog collection."""

from datetime import UTC, datetime
from urllib.parse import urljoin, urlparse

from dateutil import parser as date_parser
from feedgen.feed import FeedGenerator
from lxml import etree

from .config import SiteConfig
from .exceptions import FeedGenerationError
from .logging_config import create_execution_logger
from .models import Post

RSS_CONTENT_TYPE = "application/rss+xml"
FEED_PATH = "rss.xml"

# Fills in the parts a partial date leaves out, e.g. "March 2024" is March 1
DEFAULT_DATE = datetime(1970, 1, 1)


def validate_site_url(site_url: str) -> str:
    """Check that the site base URL is an absolute http(s) URL.

    Raises:
        FeedGenerationError: If the URL has no http/https scheme or no host
    """
    parsed = urlparse(site_url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise FeedGenerationError(f"Malformed site URL: {site_url!r}")
    return site_url


def build_permalink(site_url: str, slug: str) -> str:
    """Return the public URL of a post: ``<site>/blog/<slug>/``."""
    return f"{site_url.rstrip('/')}/blog/{slug}/"


def resolve_self_link(site_url: str) -> str:
    """Resolve the feed's own location against the site base URL."""
    return urljoin(site_url, FEED_PATH)


def parse_pub_date(value: str) -> datetime:
    """Parse a post date into a timezone-aware datetime.

    Dates without a timezone are taken as UTC. Missing month or day
    default to the first, never to the day of the build.

    Raises:
        ValueError: If the value cannot be read as a date
    """
    try:
        published = date_parser.parse(value, default=DEFAULT_DATE)
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Unparseable date {value!r}") from e

    if published.tzinfo is None:
        published = published.replace(tzinfo=UTC)
    return published


class FeedBuilder:
    """Builds the RSS document for a set of validated posts."""

    def __init__(self, site: SiteConfig, execution_id: str | None = None):
        """Initialize FeedBuilder with the site configuration.

        Args:
            site: Site settings (base URL, title, description, categories)
            execution_id: Execution ID for logging context
        """
        self.site = site
        self.logger = create_execution_logger("feed_builder", execution_id)

    def build(self, posts: list[Post]) -> str:
        """Render the posts as an RSS 2.0 XML string.

        Args:
            posts: Validated posts, in collection order

        Returns:
            The XML document

        Raises:
            FeedGenerationError: If the site URL is malformed, a post date
                cannot be parsed or a post field cannot be written as XML
        """
        self.logger.log_execution_start(items_count=len(posts))

        try:
            site_url = validate_site_url(self.site.site_url)
        except FeedGenerationError as e:
            self.logger.error(str(e), error=str(e))
            raise

        dated_posts = [(post, self._pub_date(post)) for post in posts]
        if self.site.sort_by_date:
            dated_posts.sort(key=lambda pair: pair[1], reverse=True)

        fg = self._create_feed(site_url)
        for post, published in dated_posts:
            self._add_item(fg, site_url, post, published)

        document = fg.rss_str(pretty=True).decode("utf-8")

        self.logger.log_metrics(
            {
                "posts_received": len(posts),
                "items_written": len(dated_posts),
                "document_size": len(document),
            }
        )
        self.logger.log_execution_end(
            success=True, items_count=len(dated_posts), document_size=len(document)
        )
        return document

    def _pub_date(self, post: Post) -> datetime:
        try:
            return parse_pub_date(post.date)
        except ValueError as e:
            error = FeedGenerationError(str(e), slug=post.slug)
            self.logger.error(str(error), slug=post.slug, entry_id=post.entry_id)
            raise error from e

    def _check_xml_text(self, post: Post) -> None:
        for field in ("title", "description", "author"):
            try:
                etree.Element("check").text = getattr(post, field)
            except ValueError as e:
                error = FeedGenerationError(
                    f"Field {field!r} is not XML compatible: {e}", slug=post.slug
                )
                self.logger.error(str(error), slug=post.slug, entry_id=post.entry_id)
                raise error from e

    def _create_feed(self, site_url: str) -> FeedGenerator:
        fg = FeedGenerator()
        fg.load_extension("dc")
        fg.title(self.site.title)
        fg.description(self.site.description)
        fg.link(
            href=resolve_self_link(site_url), rel="self", type=RSS_CONTENT_TYPE
        )
        # The last link added becomes the channel <link>
        fg.link(href=site_url, rel="alternate")
        fg.language(self.site.language)
        return fg

    def _add_item(
        self, fg: FeedGenerator, site_url: str, post: Post, published: datetime
    ) -> None:
        self._check_xml_text(post)

        permalink = build_permalink(site_url, post.slug)
        categories = [*self.site.categories, post.author]

        # Append keeps collection order; feedgen prepends by default
        fe = fg.add_entry(order="append")
        fe.title(post.title)
        fe.link(href=permalink, rel="alternate")
        fe.guid(permalink, permalink=True)
        fe.description(post.description)
        fe.pubDate(published)
        fe.category([{"term": term} for term in categories])
        fe.dc.dc_creator(post.author)

        self.logger.debug(
            f"Added item: {post.title}", slug=post.slug, entry_id=post.entry_id
        )

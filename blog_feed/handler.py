"""RSS endpoint for the blog feed."""

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from .config import SiteConfig, get_log_level
from .content import ContentStore
from .feed import FEED_PATH, RSS_CONTENT_TYPE, FeedBuilder
from .logging_config import create_execution_logger, setup_structured_logging
from .models import FeedResponse

setup_structured_logging(get_log_level())


def get_rss(
    site: SiteConfig | None = None,
    store: ContentStore | None = None,
    execution_id: str | None = None,
) -> FeedResponse:
    """Render ``/rss.xml`` for the blog collection.

    Args:
        site: Site configuration, read from the environment when omitted
        store: Content store, built from ``site.content_dir`` when omitted
        execution_id: Execution ID for logging context

    Returns:
        Response whose body is the RSS document

    Raises:
        ContentValidationError: If an entry fails its schema
        FeedGenerationError: If the document cannot be built
    """
    site = site or SiteConfig.from_env()
    store = store or ContentStore(site.content_dir, execution_id=execution_id)

    posts = store.get_collection(site.collection)
    body = FeedBuilder(site, execution_id=execution_id).build(posts)

    return FeedResponse(
        body=body,
        headers={"Content-Type": f"{RSS_CONTENT_TYPE}; charset=utf-8"},
    )


def rss_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Serverless entry point serving the RSS feed.

    Args:
        event: Request event data
        context: Runtime context object

    Returns:
        Response dictionary with status, headers and body
    """
    execution_id = f"rss_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"
    main_logger = create_execution_logger("main", execution_id)

    main_logger.log_execution_start(
        request_id=getattr(context, "aws_request_id", "unknown"),
        path=(event or {}).get("path", f"/{FEED_PATH}"),
    )

    try:
        response = get_rss(execution_id=execution_id)
        main_logger.log_execution_end(success=True, body_size=len(response.body))
        return response.to_dict()

    except Exception as e:
        error_msg = f"Failed to build RSS feed: {e}"
        main_logger.error(error_msg, error=str(e), error_type=type(e).__name__)
        main_logger.log_execution_end(success=False, error=error_msg)

        return {
            "statusCode": 500,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(
                {
                    "message": "RSS feed generation failed",
                    "execution_id": execution_id,
                    "error": error_msg,
                }
            ),
        }


def write_feed(
    output_dir: Path,
    site: SiteConfig | None = None,
    store: ContentStore | None = None,
) -> Path:
    """Write the rendered feed to ``<output_dir>/rss.xml``.

    Returns:
        Path of the written file
    """
    response = get_rss(site=site, store=store)

    output_path = Path(output_dir) / FEED_PATH
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(response.body, encoding="utf-8")

    create_execution_logger("build").info(
        f"Wrote feed to {output_path}", body_size=len(response.body)
    )
    return output_path

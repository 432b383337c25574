# inference_gateway/core/content_fetcher.py
import logging
import re

import httpx

from inference_gateway.core.errors import FetchError

logger = logging.getLogger(__name__)

SCRIPT_RE = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
STYLE_RE = re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE)
TAG_RE = re.compile(r"<[^>]*>")


def extract(html: str) -> str:
    """
    Reduce an HTML page to plain text: drop script and style blocks, then
    every remaining tag. Entities and comments are left as they are.
    """
    text = SCRIPT_RE.sub("", html)
    text = STYLE_RE.sub("", text)
    text = TAG_RE.sub("", text)
    return text.strip()


async def fetch_and_extract(url: str, client: httpx.AsyncClient) -> str:
    try:
        response = await client.get(url)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("Fetching %s failed: %s", url, e)
        raise FetchError(f"Failed to fetch content from {url}") from e

    logger.debug("Fetched %s (%d bytes)", url, len(response.content))
    return extract(response.text)

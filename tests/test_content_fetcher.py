import httpx
import pytest

from inference_gateway.core.content_fetcher import extract, fetch_and_extract
from inference_gateway.core.errors import FetchError


def test_extract_drops_script_and_tags():
    assert extract("<script>x</script><p>Hello</p>") == "Hello"


def test_extract_drops_style_blocks_case_insensitive():
    html = "<STYLE type='text/css'>body { color: red }</STYLE><div>Text</div><Script>var a = 1;</SCRIPT>"
    assert extract(html) == "Text"


def test_extract_is_non_greedy_between_blocks():
    html = "<script>a</script>keep<script>b</script>"
    assert extract(html) == "keep"


def test_extract_trims_whitespace():
    assert extract("  <html>\n <body>  Hi there \n</body></html>  ") == "Hi there"


def test_extract_leaves_entities_alone():
    assert extract("<p>Fish &amp; chips</p>") == "Fish &amp; chips"


def test_extract_whitespace_only_page_is_empty():
    assert extract("<html><head><style>p{}</style></head><body>  \n </body></html>") == ""


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_and_extract_returns_plain_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<h1>Title</h1>")

    async with _client(handler) as client:
        assert await fetch_and_extract("https://example.com", client) == "Title"


@pytest.mark.asyncio
async def test_fetch_and_extract_http_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="missing")

    async with _client(handler) as client:
        with pytest.raises(FetchError) as exc:
            await fetch_and_extract("https://example.com/missing", client)
    assert "https://example.com/missing" in exc.value.message


@pytest.mark.asyncio
async def test_fetch_and_extract_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(FetchError):
            await fetch_and_extract("https://example.com", client)

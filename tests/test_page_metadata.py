import httpx
import pytest

from adapters.page_metadata import absolutize_favicon, extract_page_metadata, fetch_page_metadata
from core.domain.errors import PageFetchError

SCRAPED_DEFAULT = "https://fav.farm/📸"


def _extract(html, page_url="https://example.com/path"):
    return extract_page_metadata(html=html, page_url=page_url, default_favicon=SCRAPED_DEFAULT)


@pytest.mark.parametrize(
    "href, page_url, expected",
    [
        ("https://cdn.example/icon.png", "https://example.com/path", "https://cdn.example/icon.png"),
        ("httpfoo", "https://example.com/path", "httpfoo"),
        ("icon.png", "https://example.com/path", "https://example.com/path/icon.png"),
        ("/icon.png", "https://example.com/path", "https://example.com/icon.png"),
        ("/icon.png", "https://example.com", "https://example.com/icon.png"),
        ("/icon.png", "http://example.com:8080/a/b", "http://example.com:8080/icon.png"),
        # the cut happens at the first "/" from index 8, whatever the scheme
        ("/icon.png", "ftp://a/b/c", "ftp://a/b/icon.png"),
    ],
)
def test_absolutize_favicon(href, page_url, expected):
    assert absolutize_favicon(href, page_url) == expected


def test_extracts_title_and_last_matching_icon():
    html = """
    <html><head>
      <title>Example</title>
      <link rel="icon" href="/a.ico">
      <link rel="stylesheet" href="/style.css">
      <link rel="icon" href="/b.ico">
    </head><body></body></html>
    """

    meta = _extract(html)

    assert meta.title == "Example"
    assert meta.favicon == "https://example.com/b.ico"


def test_shortcut_icon_counts_and_later_links_overwrite():
    html = """
    <head>
      <link rel="icon" href="first.png">
      <link rel="shortcut icon" href="https://static.example/favicon.ico">
    </head>
    """

    assert _extract(html).favicon == "https://static.example/favicon.ico"


def test_icon_links_in_body_are_found_too():
    html = '<head><link rel="icon" href="/head.ico"></head><body><div><link rel="icon" href="/body.ico"></div></body>'

    assert _extract(html).favicon == "https://example.com/body.ico"


@pytest.mark.parametrize("rel", ["Icon", "apple-touch-icon", "icon shortcut", "SHORTCUT ICON"])
def test_rel_must_match_exactly(rel):
    html = f'<head><title>T</title><link rel="{rel}" href="/x.ico"></head>'

    assert _extract(html).favicon == SCRAPED_DEFAULT


def test_missing_favicon_uses_scraped_default():
    meta = _extract("<html><head><title>No icon</title></head></html>")

    assert meta.title == "No icon"
    assert meta.favicon == SCRAPED_DEFAULT


def test_icon_without_href_points_at_page():
    assert _extract('<link rel="icon">').favicon == "https://example.com/path/"


def test_first_title_with_text_wins():
    html = "<head><title></title><title>Second</title></head><body><title>Third</title></body>"

    assert _extract(html).title == "Second"


def test_title_text_is_kept_verbatim():
    assert _extract("<title>  Spaced  </title>").title == "  Spaced  "


def test_missing_title_is_none():
    assert _extract("<p>hello</p>").title is None


def test_plain_text_still_yields_default_favicon():
    meta = _extract("just some text & stuff")

    assert meta.title is None
    assert meta.favicon == SCRAPED_DEFAULT


def test_fetch_parses_response_body(settings):
    def handler(request):
        assert request.url == "https://target.example/page"
        return httpx.Response(
            200,
            html='<title>Remote</title><link rel="icon" href="/fav.ico">',
        )

    meta = fetch_page_metadata(
        "https://target.example/page", settings, transport=httpx.MockTransport(handler)
    )

    assert meta.title == "Remote"
    assert meta.favicon == "https://target.example/fav.ico"


def test_fetch_does_not_check_status_code(settings):
    transport = httpx.MockTransport(lambda request: httpx.Response(404, html="<title>Not Found</title>"))

    meta = fetch_page_metadata("https://target.example", settings, transport=transport)

    assert meta.title == "Not Found"
    assert meta.favicon == SCRAPED_DEFAULT


def test_fetch_follows_redirects_but_normalizes_against_requested_url(settings):
    def handler(request):
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://other.example/new"})
        return httpx.Response(200, html='<title>Moved</title><link rel="icon" href="icon.png">')

    meta = fetch_page_metadata(
        "https://target.example/old", settings, transport=httpx.MockTransport(handler)
    )

    assert meta.title == "Moved"
    assert meta.favicon == "https://target.example/old/icon.png"


def test_fetch_sends_no_custom_user_agent_by_default(settings):
    seen = {}

    def handler(request):
        seen["ua"] = request.headers.get("user-agent", "")
        return httpx.Response(200, html="<title>x</title>")

    fetch_page_metadata("https://target.example", settings, transport=httpx.MockTransport(handler))

    assert seen["ua"].startswith("python-httpx/")


def test_fetch_failure_raises_page_fetch_error(settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PageFetchError):
        fetch_page_metadata("https://target.example", settings, transport=httpx.MockTransport(handler))

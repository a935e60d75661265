import pytest

from selgen.core.fetcher import HTMLFetcher
from selgen.models import FetchResult
from selgen.utils import create_console


class FakeFetcher(HTMLFetcher):
    """Serves canned HTML per URL; unknown URLs fail like a 404."""

    def __init__(self, pages: dict[str, str], errors: dict[str, Exception] | None = None):
        self.pages = pages
        self.errors = errors or {}
        self.calls: list[str] = []

    def fetch(self, url: str) -> FetchResult:
        self.calls.append(url)
        if url in self.errors:
            raise self.errors[url]
        if url not in self.pages:
            return FetchResult(url=url, status_code=404, block_reason='unexpected status code: 404')
        return FetchResult(url=url, html=self.pages[url], status_code=200)


@pytest.fixture
def fake_fetcher():
    return FakeFetcher


@pytest.fixture
def console():
    # Wide, colourless console so assertions can match on plain text
    return create_console(record=True, width=200, no_color=True)


@pytest.fixture
def article_html():
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>City council approves budget</title>
        <meta property="og:title" content="City council approves budget">
        <meta property="og:image" content="https://cdn.example.com/budget.jpg">
        <meta property="article:published_time" content="2025-01-15T10:00:00Z">
        <meta property="article:section" content="Local">
    </head>
    <body>
        <nav><a href="/">Home</a></nav>
        <div class="header">Example News</div>
        <article>
            <h1>City council approves budget</h1>
            <span class="author">Jane Doe</span>
            <time datetime="2025-01-15T10:00:00Z">January 15, 2025</time>
            <p>The council voted 7-2 on Tuesday night to approve next year's operating budget.</p>
            <p>Property taxes will rise by two percent under the plan.</p>
        </article>
        <div class="ad">Buy things!</div>
        <div class="footer">&copy; 2025</div>
    </body>
    </html>
    """


@pytest.fixture
def listing_html():
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Example News - Local</title></head>
    <body>
        <nav><a href="/">Home</a></nav>
        <h1 class="page-title">Local News</h1>
        <div class="card"><a class="card-link" href="/news/budget-approved">Budget approved</a></div>
        <div class="card"><a class="card-link" href="/news/road-closures">Road closures</a></div>
        <div class="card"><a class="card-link" href="/news/school-board">School board meets</a></div>
        <a href="/news/weather">Weather</a>
        <img src="/img/placeholder.png">
        <div class="sidebar">Most read</div>
        <script>var tracking = true;</script>
    </body>
    </html>
    """


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""
    for item in items:
        file_path = str(item.path)

        if '/tests/integration/' in file_path:
            item.add_marker(pytest.mark.integration)
        elif '/tests/unit/' in file_path:
            item.add_marker(pytest.mark.unit)

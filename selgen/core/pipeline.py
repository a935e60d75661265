"""Generation pipeline: fetch pages, discover selectors, merge."""

import logging

import logfire
from rich.console import Console
from rich.markup import escape

from selgen.core.discovery import DiscoveryEngine, merge_results, parse_source_url
from selgen.core.document import DocumentHandle
from selgen.core.fetcher import HTMLFetcher, SimpleFetcher, fetch_page
from selgen.exceptions import FetchError, SelgenError
from selgen.models import DiscoveryResult, FetchResult
from selgen.utils.console import create_console


class SourceGenerator:
    """Discovers selectors for a news source from its listing page and, optionally, one article page.

    Attributes:
        fetcher: Fetcher used for both pages
        console: Rich console for progress output
        fetch_attempts: Fetch attempts per page
        logger: Logger instance for detailed run tracking

    """

    def __init__(self, fetcher: HTMLFetcher | None = None, console: Console | None = None, fetch_attempts: int = 1):
        """Initialize the generator.

        Args:
            fetcher: Fetcher to use. Defaults to a SimpleFetcher.
            console: Rich console for progress output. Defaults to a themed console.
            fetch_attempts: Fetch attempts per page. Defaults to 1.

        """
        self.fetcher = fetcher or SimpleFetcher()
        self.console = console or create_console()
        self.fetch_attempts = fetch_attempts
        self.logger = logging.getLogger(__name__)

    def generate(self, source_url: str, article_url: str | None = None) -> DiscoveryResult:
        """Discover selectors for a source.

        Args:
            source_url: Listing/index page of the source
            article_url: Optional article page analyzed for content fields

        Returns:
            DiscoveryResult for the listing page, merged with the article page
            result when one was analyzed successfully.

        Raises:
            InvalidSourceURLError: If source_url is not an absolute http(s) URL.
            FetchError: If the listing page could not be fetched.

        """
        parse_source_url(source_url)

        with logfire.span('generate_source', url=source_url, article_url=article_url):
            self.console.print(f'[step]Analyzing {source_url}...[/step]')
            main_result = self.discover_url(source_url)

            if not article_url:
                return main_result

            self.console.print(f'[step]Analyzing article page {article_url}...[/step]')
            try:
                article_result = self.discover_url(article_url)
            except SelgenError as e:
                self.console.print(f'[warning]⚠ Failed to analyze article page: {escape(str(e))}[/warning]')
                self.console.print('[warning]  Continuing with main page results only...[/warning]')
                logfire.warn('Article page skipped', url=article_url, error=str(e))
                return main_result

            self.console.print('[success]✓ Merged results from both pages[/success]')
            return merge_results(main_result, article_result)

    def discover_url(self, url: str) -> DiscoveryResult:
        """Fetch one page and run discovery on it.

        Raises:
            InvalidSourceURLError: If url is not an absolute http(s) URL.
            FetchError: If the page could not be fetched.

        """
        parse_source_url(url)
        result = self._fetch(url)
        self._warn_unsupported(result)

        document = DocumentHandle.from_html(result.html or '', url=url)
        return DiscoveryEngine(document, url).discover_all()

    def _fetch(self, url: str) -> FetchResult:
        try:
            result = fetch_page(self.fetcher, url, max_attempts=self.fetch_attempts)
        except FetchError as e:
            self.logger.error(f'Fetch failed for {url}: {e.reason}')
            logfire.error('Fetch failed', url=url, error=e.reason)
            raise

        self.console.print(
            f'[success]Fetched {result.metadata.content_length or len(result.html or ""):,} characters '
            f'({result.fetch_time:.2f}s)[/success]'
        )
        return result

    def _warn_unsupported(self, result: FetchResult) -> None:
        """Warn about pages heuristic discovery is not built for."""
        if result.is_rss:
            self.console.print('[warning]⚠ This looks like an RSS/Atom feed, not an HTML page[/warning]')
            logfire.warn('Feed content detected', url=result.url)
        elif result.requires_js:
            framework = result.metadata.js_framework or 'unknown'
            self.console.print(
                f'[warning]⚠ Page appears to be rendered with JavaScript ({framework}); '
                'selectors may be incomplete[/warning]'
            )
            logfire.warn('JS-rendered page detected', url=result.url, framework=framework)

"""Simple HTTP fetcher built on requests."""

import logging
import time

import requests

from selgen.core.fetcher.base import ContentAnalyzer, HTMLFetcher
from selgen.exceptions import BotDetectionError
from selgen.models.results import FetchResult
from selgen.utils.headers import build_headers


class SimpleFetcher(HTMLFetcher):
    """Fetches pages with a single GET request and browser-like headers.

    The fetcher keeps no per-request state, so one instance can be shared by
    the validation worker threads.

    Attributes:
        timeout: Request timeout in seconds
        user_agent: Fixed user agent, or None to rotate per request

    """

    def __init__(self, timeout: float = 30.0, user_agent: str | None = None):
        """Initialize the simple fetcher.

        Args:
            timeout: Request timeout in seconds. Defaults to 30.
            user_agent: Fixed user agent. Defaults to None (rotate).

        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.logger = logging.getLogger(__name__)

    def fetch(self, url: str) -> FetchResult:
        """Fetch a page.

        Args:
            url: The URL to fetch

        Returns:
            FetchResult. Network errors, timeouts and non-200 responses are
            reported through ``block_reason`` with ``html=None``.

        Raises:
            BotDetectionError: If the response is a bot challenge.

        """
        start_time = time.time()

        try:
            response = requests.get(
                url, headers=build_headers(self.user_agent), timeout=self.timeout, allow_redirects=True
            )
        except requests.RequestException as e:
            self.logger.debug(f'Request for {url} failed: {e}')
            return FetchResult(url=url, block_reason=str(e), fetch_time=time.time() - start_time)

        status_code = response.status_code
        html = response.text

        is_blocked, indicators = self._check_for_bot_detection(html, status_code)
        if is_blocked:
            raise BotDetectionError(url, status_code, indicators)

        if status_code != 200:
            return FetchResult(
                url=url,
                status_code=status_code,
                block_reason=f'unexpected status code: {status_code}',
                fetch_time=time.time() - start_time,
            )

        if not html.strip():
            return FetchResult(
                url=url,
                status_code=status_code,
                is_blocked=True,
                block_reason='empty response',
                fetch_time=time.time() - start_time,
            )

        return FetchResult(
            url=url,
            html=html,
            status_code=status_code,
            fetch_time=time.time() - start_time,
            metadata=ContentAnalyzer.analyze(html),
        )

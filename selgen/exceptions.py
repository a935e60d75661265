"""Custom exceptions for selgen."""


class SelgenError(Exception):
    """Base class for all selgen exceptions."""

    pass


class InvalidSourceURLError(SelgenError, ValueError):
    """Raised when a source URL is not an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = 'not an absolute http(s) URL'):
        """Initialize invalid URL error.

        Args:
            url: The rejected URL
            reason: Why the URL was rejected

        """
        self.url = url
        self.reason = reason
        super().__init__(f'Invalid source URL {url!r}: {reason}')


class EmptyURLBatchError(SelgenError, ValueError):
    """Raised when validation is requested without any article URLs."""

    pass


class FetchError(SelgenError):
    """Raised when a page could not be fetched or parsed."""

    def __init__(self, url: str, reason: str):
        """Initialize fetch error.

        Args:
            url: URL that failed
            reason: Human readable failure reason

        """
        self.url = url
        self.reason = reason
        super().__init__(f'Failed to fetch {url}: {reason}')


class BotDetectionError(FetchError):
    """Raised when bot detection is triggered."""

    def __init__(self, url: str, status_code: int, indicators: list[str]):
        """Initialize bot detection error.

        Args:
            url: URL where bot detection was triggered
            status_code: HTTP status code received
            indicators: List of bot detection indicators found

        """
        self.status_code = status_code
        self.indicators = indicators
        super().__init__(url, f'bot detection triggered (status={status_code}): {", ".join(indicators)}')


class SourceNotFoundError(SelgenError):
    """Raised when a named source is missing from a sources file."""

    def __init__(self, name: str, path: str):
        """Initialize source lookup error.

        Args:
            name: Source name that was looked up
            path: Sources file that was searched

        """
        self.name = name
        self.path = path
        super().__init__(f'Source {name!r} not found in {path}')

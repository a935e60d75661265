"""Abstract base class for HTML fetchers and content analyzer."""

import re
from abc import ABC, abstractmethod

from selgen.models.results import ContentMetadata, FetchResult

_RSS_INDICATORS = (
    '<?xml',
    '<rss',
    '<feed',
    '<channel>',
    'xmlns="http://www.w3.org/2005/atom"',
    'xmlns="http://purl.org/rss/1.0/"',
)

_JS_FRAMEWORKS = {
    'react': ('id="root"', 'data-reactroot', 'react-root', '__react'),
    'vue': ('v-if=', 'v-for=', 'vue.js', '__vue'),
    'angular': ('ng-app', 'ng-controller', 'ng-version'),
    'next': ('__next', '_next/static'),
    'svelte': ('__svelte',),
}


class ContentAnalyzer:
    """Flags content that heuristic discovery cannot handle well.

    Neither feeds nor client-side rendered pages are supported; the flags
    only let callers warn the user.
    """

    @staticmethod
    def analyze(html: str) -> ContentMetadata:
        """Analyze HTML content and return metadata.

        Args:
            html: Raw page content

        Returns:
            ContentMetadata describing the page.

        """
        metadata = ContentMetadata(content_length=len(html))
        html_lower = html.lower()

        # Feed declarations appear at the very top
        if any(indicator in html_lower[:500] for indicator in _RSS_INDICATORS) and '<html' not in html_lower[:1000]:
            metadata.is_rss = True
            metadata.content_type = 'rss'
            return metadata

        metadata.js_framework, metadata.requires_js = ContentAnalyzer._detect_javascript_heavy(html_lower)
        return metadata

    @staticmethod
    def _detect_javascript_heavy(html_lower: str) -> tuple[str | None, bool]:
        """Detect client-side rendered pages.

        Returns:
            Tuple of (framework, requires_js). A framework signature alone is
            not enough; the body must also be nearly empty.

        """
        framework = None
        for name, indicators in _JS_FRAMEWORKS.items():
            if any(indicator in html_lower for indicator in indicators):
                framework = name
                break

        minimal_content = False
        body_match = re.search(r'<body[^>]*>(.*?)</body>', html_lower, re.DOTALL)
        if body_match:
            body_content = re.sub(r'<script[^>]*>.*?</script>', '', body_match.group(1), flags=re.DOTALL)
            body_content = re.sub(r'<style[^>]*>.*?</style>', '', body_content, flags=re.DOTALL)
            minimal_content = len(body_content.strip()) < 100

        has_noscript_warning = '<noscript>' in html_lower and (
            'enable javascript' in html_lower or 'requires javascript' in html_lower
        )

        return framework, (framework is not None and minimal_content) or has_noscript_warning


class HTMLFetcher(ABC):
    """Abstract base class for HTML fetchers.

    Implement this interface to plug in another transport.
    """

    @abstractmethod
    def fetch(self, url: str) -> FetchResult:
        """Fetch HTML from a URL.

        Args:
            url: URL to fetch

        Returns:
            FetchResult with HTML, metadata, and status

        Raises:
            BotDetectionError: If bot detection is triggered

        """
        pass

    def close(self) -> None:  # noqa: B027
        """Release any held resources."""

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def _check_for_bot_detection(self, html: str, status_code: int) -> tuple[bool, list[str]]:
        """Check if HTML indicates bot detection.

        Args:
            html: Response body
            status_code: HTTP status code

        Returns:
            Tuple of (is_blocked, indicators).

        """
        if status_code in (403, 429, 503):
            return True, [f'HTTP {status_code}']

        # Only the top of the page carries challenge markup
        html_check = html[:2000].lower()
        strict_indicators = {
            'challenge-form': 'Cloudflare challenge',
            'cf-captcha': 'Cloudflare CAPTCHA',
            'access denied</title>': 'Access denied page',
            'rate limit exceeded': 'Rate limit',
            'please verify you are human': 'Human verification',
        }
        found = [message for indicator, message in strict_indicators.items() if indicator in html_check]
        return bool(found), found

"""Runs every field detector over one document."""

import logging
from urllib.parse import urlparse

import logfire

from selgen.core.discovery.detectors import ExclusionDetector, LinkDetector, TieredDetector, default_detectors
from selgen.core.document import DocumentHandle
from selgen.exceptions import InvalidSourceURLError
from selgen.models import DiscoveryResult, SelectorCandidate


def parse_source_url(url: str) -> str:
    """Check that a source URL is an absolute http(s) URL.

    Args:
        url: URL to check

    Returns:
        The URL unchanged.

    Raises:
        InvalidSourceURLError: If the URL cannot be parsed or is not absolute.

    """
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidSourceURLError(url, str(e)) from e

    if parsed.scheme not in ('http', 'https'):
        raise InvalidSourceURLError(url, 'scheme must be http or https')
    if not parsed.netloc:
        raise InvalidSourceURLError(url, 'missing host')
    return url


class DiscoveryEngine:
    """Discovers selectors for all article fields in a single document.

    The document is only read, so one engine can run ``discover_all`` any
    number of times with identical results.

    Attributes:
        document: Parsed page to analyze
        source_url: Absolute URL the page was loaded from
        detectors: Field detectors keyed by field name
        exclusion_detector: Detector for boilerplate patterns

    """

    def __init__(
        self,
        document: DocumentHandle,
        source_url: str,
        detectors: dict[str, TieredDetector | LinkDetector] | None = None,
        exclusion_detector: ExclusionDetector | None = None,
    ):
        """Initialize the engine.

        Args:
            document: Parsed page to analyze
            source_url: Absolute http(s) URL of the page
            detectors: Custom detectors (defaults to the built-in rule tables)
            exclusion_detector: Custom exclusion detector

        Raises:
            InvalidSourceURLError: If source_url is not an absolute http(s) URL.

        """
        self.source_url = parse_source_url(source_url)
        self.document = document
        self.detectors = detectors or default_detectors()
        self.exclusion_detector = exclusion_detector or ExclusionDetector()
        self.logger = logging.getLogger(__name__)

    def discover_field(self, field: str) -> SelectorCandidate:
        """Run the detector for a single field.

        Raises:
            KeyError: If no detector is registered for the field.

        """
        return self.detectors[field].detect(self.document)

    def discover_exclusions(self) -> tuple[str, ...]:
        """Return boilerplate patterns present in the document."""
        return self.exclusion_detector.detect(self.document)

    def discover_all(self) -> DiscoveryResult:
        """Run every detector and collect the results.

        Returns:
            DiscoveryResult with one candidate per field. Fields with no
            match get an empty candidate with confidence 0.

        """
        with logfire.span('discover_all', url=self.source_url):
            candidates = {field: self.discover_field(field) for field in self.detectors}
            exclusions = self.discover_exclusions()

            found = [field for field, candidate in candidates.items() if candidate.has_selectors]
            self.logger.info(f'Discovered {len(found)}/{len(candidates)} fields on {self.source_url}')
            logfire.info('Discovery complete', url=self.source_url, found=found, exclusions=len(exclusions))

            return DiscoveryResult(**candidates, exclusions=exclusions)

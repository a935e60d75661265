"""Models for fetch and validation results."""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field, computed_field


@dataclass
class ContentMetadata:
    """Metadata about the fetched content.

    Attributes:
        is_rss: True if the content looks like an RSS/Atom feed
        requires_js: True if the page looks client-side rendered
        content_type: 'html' or 'rss'
        js_framework: Detected JS framework, if any
        content_length: Length of the HTML

    """

    is_rss: bool = False
    requires_js: bool = False
    content_type: str = 'html'
    js_framework: str | None = None
    content_length: int = 0


@dataclass
class FetchResult:
    """Result of an HTML fetch operation.

    Attributes:
        url: URL that was fetched
        html: HTML content, None on failure
        status_code: HTTP status code, None if the request never completed
        is_blocked: True if the response was rejected as blocked or empty
        block_reason: Why the fetch failed, if it did
        fetch_time: Total time spent fetching in seconds

    """

    url: str
    html: str | None = None
    status_code: int | None = None
    is_blocked: bool = False
    block_reason: str | None = None
    fetch_time: float = 0.0

    metadata: ContentMetadata = field(default_factory=ContentMetadata)

    @property
    def success(self) -> bool:
        """Whether the fetch produced usable HTML."""
        return self.html is not None and not self.is_blocked

    @property
    def is_rss(self) -> bool:
        """Shortcut to check if content is RSS."""
        return self.metadata.is_rss

    @property
    def requires_js(self) -> bool:
        """Shortcut to check if content requires JavaScript."""
        return self.metadata.requires_js


class FieldValidationResult(BaseModel):
    """Validation statistics for a single configured field.

    Attributes:
        field_name: Name of the field
        success_count: Articles where the field was extracted
        total_count: Articles the field was tested against
        failed_urls: One entry per article where extraction or fetching failed
        sample_values: Up to three extracted values, truncated to 100 chars

    """

    field_name: str = Field(description='Name of the field')
    success_count: int = Field(default=0, ge=0, description='Articles where the field was found')
    total_count: int = Field(default=0, ge=0, description='Articles tested')
    failed_urls: list[str] = Field(default_factory=list, description='URLs where the field was not found')
    sample_values: list[str] = Field(default_factory=list, description='Sample extracted values')

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success_rate(self) -> float:
        """Percentage of tested articles where the field was found (0-100)."""
        if self.total_count == 0:
            return 0.0
        return self.success_count / self.total_count * 100


class ValidationResult(BaseModel):
    """Report of one validation run.

    Attributes:
        field_results: Per-field statistics keyed by field name
        total_articles: Number of articles processed
        successful_articles: Articles where every critical field was extracted
        cancelled: True if the run stopped before every URL was processed

    """

    field_results: dict[str, FieldValidationResult] = Field(default_factory=dict, description='Per-field results')
    total_articles: int = Field(default=0, ge=0, description='Articles processed')
    successful_articles: int = Field(default=0, ge=0, description='Articles with all critical fields')
    cancelled: bool = Field(default=False, description='Run was cancelled before completion')

    @property
    def success(self) -> bool:
        """True if every processed article had all critical fields."""
        return self.total_articles > 0 and self.successful_articles == self.total_articles

    @property
    def failing_fields(self) -> list[str]:
        """Names of fields that failed on at least one article."""
        return [name for name, result in self.field_results.items() if result.failed_urls]

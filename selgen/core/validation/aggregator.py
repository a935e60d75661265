"""Accumulates per-field and per-article validation statistics."""

import threading
from collections.abc import Iterable, Mapping

from selgen.core.extraction import truncate_text
from selgen.models import FieldValidationResult, ValidationResult

CRITICAL_FIELDS: frozenset[str] = frozenset({'title', 'body'})
MAX_SAMPLE_VALUES = 3


class ValidationAggregator:
    """Thread-safe tally of validation outcomes.

    Every recorded article adds one to ``total_count`` of every tracked
    field, and either one success or one failed URL, so
    ``len(failed_urls) == total_count - success_count`` always holds.

    Attributes:
        field_names: Fields being tracked, in report order
        critical_fields: Fields that must all succeed for an article to count as successful

    """

    def __init__(self, field_names: Iterable[str], critical_fields: Iterable[str] = CRITICAL_FIELDS):
        """Initialize empty statistics.

        Args:
            field_names: Configured fields to track
            critical_fields: Fields required for a successful article

        """
        self.field_names = tuple(dict.fromkeys(field_names))
        self.critical_fields = frozenset(critical_fields)
        self._lock = threading.Lock()
        self._fields = {name: FieldValidationResult(field_name=name) for name in self.field_names}
        self._total_articles = 0
        self._successful_articles = 0

    def record_fetch_failure(self, url: str) -> None:
        """Record an article whose page could not be fetched.

        Every tracked field fails for this URL.
        """
        with self._lock:
            self._total_articles += 1
            for result in self._fields.values():
                result.total_count += 1
                result.failed_urls.append(url)

    def record_article(self, url: str, values: Mapping[str, str | None]) -> bool:
        """Record the extraction outcome of one fetched article.

        Args:
            url: Article URL
            values: Extracted value per tracked field; None or '' means not found

        Returns:
            True if every critical field was extracted.

        """
        with self._lock:
            self._total_articles += 1
            extracted = set()

            for name, result in self._fields.items():
                result.total_count += 1
                value = values.get(name)
                if value:
                    extracted.add(name)
                    result.success_count += 1
                    if len(result.sample_values) < MAX_SAMPLE_VALUES:
                        result.sample_values.append(truncate_text(value))
                else:
                    result.failed_urls.append(url)

            # An unconfigured critical field can never be extracted
            successful = self.critical_fields <= extracted
            if successful:
                self._successful_articles += 1
            return successful

    def result(self, cancelled: bool = False) -> ValidationResult:
        """Build the report from the statistics recorded so far.

        The returned report holds copies, so later records do not change it.
        """
        with self._lock:
            return ValidationResult(
                field_results={name: result.model_copy(deep=True) for name, result in self._fields.items()},
                total_articles=self._total_articles,
                successful_articles=self._successful_articles,
                cancelled=cancelled,
            )

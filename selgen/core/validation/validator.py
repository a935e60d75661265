"""Validates configured selectors against a sample of real article pages."""

import logging
import threading
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass

import logfire

from selgen.core.document import DocumentHandle
from selgen.core.extraction import extract_value
from selgen.core.fetcher import HTMLFetcher, SimpleFetcher, fetch_document
from selgen.core.validation.aggregator import ValidationAggregator
from selgen.exceptions import EmptyURLBatchError, FetchError
from selgen.models import ArticleSelectors, ValidationResult

DEFAULT_MAX_SAMPLES = 10
DEFAULT_MAX_WORKERS = 4


@dataclass
class ArticleOutcome:
    """What happened to one article URL.

    Attributes:
        url: Article URL
        values: Extracted value per configured field, None when not found
        error: Fetch failure reason, None when the page was fetched

    """

    url: str
    values: dict[str, str | None]
    error: str | None = None


def extract_fields(document: DocumentHandle, fields: dict[str, str]) -> dict[str, str | None]:
    """Run every configured fallback chain against one document."""
    return {name: extract_value(document, chain) for name, chain in fields.items()}


class SelectorValidator:
    """Checks how reliably a selector configuration extracts each field.

    Pages are fetched by a bounded thread pool. Workers only fetch and
    extract; all statistics are recorded by the calling thread.

    Attributes:
        fetcher: Fetcher shared by the worker threads
        max_workers: Worker pool size
        max_samples: Default cap on the number of URLs tested
        fetch_attempts: Fetch attempts per URL
        backoff: Base wait between fetch attempts in seconds

    """

    def __init__(
        self,
        fetcher: HTMLFetcher | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        max_samples: int = DEFAULT_MAX_SAMPLES,
        fetch_attempts: int = 1,
        backoff: float = 1.0,
    ):
        """Initialize the validator.

        Args:
            fetcher: Fetcher to use. Defaults to a SimpleFetcher with a 30s timeout.
            max_workers: Worker pool size. Defaults to 4.
            max_samples: URLs tested when the caller gives no positive limit. Defaults to 10.
            fetch_attempts: Fetch attempts per URL. Defaults to 1.
            backoff: Base wait between fetch attempts in seconds. Defaults to 1.

        """
        if max_workers < 1:
            raise ValueError('max_workers must be at least 1')
        if max_samples < 1:
            raise ValueError('max_samples must be at least 1')

        self.fetcher = fetcher or SimpleFetcher(timeout=30.0)
        self.max_workers = max_workers
        self.max_samples = max_samples
        self.fetch_attempts = fetch_attempts
        self.backoff = backoff
        self.logger = logging.getLogger(__name__)

    def validate(
        self,
        selectors: ArticleSelectors | None,
        urls: list[str],
        max_samples: int | None = None,
        cancel_event: threading.Event | None = None,
    ) -> ValidationResult:
        """Validate selectors against article pages.

        Args:
            selectors: Configured fallback chains per field
            urls: Article URLs; only the first ``max_samples`` are tested
            max_samples: URL cap. None or <= 0 uses the validator default.
            cancel_event: Set it to stop fetching new pages; the partial result is returned

        Returns:
            ValidationResult for the processed articles. ``cancelled`` is True
            when the run stopped early.

        Raises:
            ValueError: If selectors is None.
            EmptyURLBatchError: If there are no URLs to test.

        """
        if selectors is None:
            raise ValueError('selectors are required')

        limit = max_samples if max_samples and max_samples > 0 else self.max_samples
        batch = list(urls)[:limit]
        if not batch:
            raise EmptyURLBatchError('no article URLs provided')

        fields = selectors.configured_fields()
        aggregator = ValidationAggregator(fields)
        cancel_event = cancel_event or threading.Event()

        with logfire.span('validate_selectors', urls=len(batch), fields=list(fields)):
            self.logger.info(f'Validating {len(fields)} fields against {len(batch)} articles')
            cancelled = self._run(batch, fields, aggregator, cancel_event)
            result = aggregator.result(cancelled=cancelled)

            logfire.info(
                'Validation complete',
                total=result.total_articles,
                successful=result.successful_articles,
                cancelled=cancelled,
            )
            return result

    def _run(
        self,
        batch: list[str],
        fields: dict[str, str],
        aggregator: ValidationAggregator,
        cancel_event: threading.Event,
    ) -> bool:
        """Process the batch on the worker pool.

        Returns:
            True if the run was cancelled before every URL was processed.

        """
        executor = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix='selgen-validate')
        pending: set[Future[ArticleOutcome | None]] = {
            executor.submit(self._process_url, url, fields, cancel_event) for url in batch
        }
        processed = 0

        try:
            while pending and not cancel_event.is_set():
                done, pending = wait(pending, timeout=0.5, return_when=FIRST_COMPLETED)
                processed += self._record(done, aggregator)
        except KeyboardInterrupt:
            self.logger.warning('Validation interrupted, returning partial results')
            cancel_event.set()
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

        # Pages that finished while we were shutting down still count
        finished = {future for future in pending if future.done() and not future.cancelled()}
        processed += self._record(finished, aggregator)

        cancelled = processed < len(batch)
        if cancelled:
            logfire.warn('Validation cancelled', processed=processed, total=len(batch))
        return cancelled

    def _record(self, futures: set[Future[ArticleOutcome | None]], aggregator: ValidationAggregator) -> int:
        recorded = 0
        for future in futures:
            outcome = future.result()
            if outcome is None:
                continue

            if outcome.error is not None:
                aggregator.record_fetch_failure(outcome.url)
            else:
                aggregator.record_article(outcome.url, outcome.values)
            recorded += 1
        return recorded

    def _process_url(
        self, url: str, fields: dict[str, str], cancel_event: threading.Event
    ) -> ArticleOutcome | None:
        """Fetch one article and extract every configured field.

        Runs on a worker thread. Returns None if the run was cancelled
        before the fetch started.
        """
        if cancel_event.is_set():
            return None

        try:
            document = fetch_document(self.fetcher, url, max_attempts=self.fetch_attempts, backoff=self.backoff)
        except FetchError as e:
            self.logger.warning(f'Fetch failed for {url}: {e.reason}')
            return ArticleOutcome(url=url, values={}, error=e.reason)
        except Exception as e:
            # Any fetch-stage error counts as a failed page, never as a failed run
            self.logger.exception(f'Unexpected error fetching {url}')
            return ArticleOutcome(url=url, values={}, error=str(e))

        return ArticleOutcome(url=url, values=extract_fields(document, fields))

"""Core discovery, extraction, fetching and validation components."""

from selgen.core.discovery import DiscoveryEngine, merge_results
from selgen.core.document import DocumentHandle
from selgen.core.extraction import extract_value
from selgen.core.fetcher import HTMLFetcher, SimpleFetcher, create_fetcher, fetch_document
from selgen.core.pipeline import SourceGenerator
from selgen.core.validation import SelectorValidator, ValidationAggregator

__all__ = [
    'DiscoveryEngine',
    'DocumentHandle',
    'HTMLFetcher',
    'SelectorValidator',
    'SimpleFetcher',
    'SourceGenerator',
    'ValidationAggregator',
    'create_fetcher',
    'extract_value',
    'fetch_document',
    'merge_results',
]

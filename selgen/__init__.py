"""
selgen - Heuristic CSS Selector Discovery & Validation
======================================================

selgen inspects news pages with rule tables to propose CSS selectors for
article fields, and measures how reliably a selector configuration
extracts those fields across a sample of real articles.

Main Components:
    - DiscoveryEngine: Heuristic selector discovery for one document
    - SourceGenerator: Fetch, discover and merge listing and article pages
    - SelectorValidator: Concurrent validation against article URLs
    - generate_source_yaml: Render discovered selectors as a sources.yml entry

Example:
    >>> from selgen import DiscoveryEngine, DocumentHandle
    >>> document = DocumentHandle.from_html(html, url='https://example.com/news')
    >>> result = DiscoveryEngine(document, 'https://example.com/news').discover_all()
"""

__version__ = '0.1.0'

from selgen.config import SelgenConfig
from selgen.core import (
    DiscoveryEngine,
    DocumentHandle,
    HTMLFetcher,
    SelectorValidator,
    SimpleFetcher,
    SourceGenerator,
    ValidationAggregator,
    create_fetcher,
    extract_value,
    fetch_document,
    merge_results,
)
from selgen.exceptions import (
    BotDetectionError,
    EmptyURLBatchError,
    FetchError,
    InvalidSourceURLError,
    SelgenError,
    SourceNotFoundError,
)
from selgen.models import (
    ArticleSelectors,
    DiscoveryResult,
    FieldValidationResult,
    SelectorCandidate,
    ValidationResult,
)
from selgen.outputs import generate_source_yaml

__all__ = [
    'ArticleSelectors',
    'BotDetectionError',
    'DiscoveryEngine',
    'DiscoveryResult',
    'DocumentHandle',
    'EmptyURLBatchError',
    'FetchError',
    'FieldValidationResult',
    'HTMLFetcher',
    'InvalidSourceURLError',
    'SelectorCandidate',
    'SelectorValidator',
    'SelgenConfig',
    'SelgenError',
    'SimpleFetcher',
    'SourceGenerator',
    'SourceNotFoundError',
    'ValidationAggregator',
    'ValidationResult',
    'create_fetcher',
    'extract_value',
    'fetch_document',
    'generate_source_yaml',
    'merge_results',
]

"""Pydantic models for selectors and results."""

from selgen.models.discovery import DISCOVERY_FIELDS, DiscoveryResult, SelectorCandidate
from selgen.models.results import (
    ContentMetadata,
    FetchResult,
    FieldValidationResult,
    ValidationResult,
)
from selgen.models.selectors import ARTICLE_FIELDS, ArticleSelectors

__all__ = [
    'ARTICLE_FIELDS',
    'DISCOVERY_FIELDS',
    'ArticleSelectors',
    'ContentMetadata',
    'DiscoveryResult',
    'FetchResult',
    'FieldValidationResult',
    'SelectorCandidate',
    'ValidationResult',
]

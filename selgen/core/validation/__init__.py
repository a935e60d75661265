"""Selector validation against real article pages."""

from selgen.core.validation.aggregator import CRITICAL_FIELDS, ValidationAggregator
from selgen.core.validation.validator import SelectorValidator, extract_fields

__all__ = ['CRITICAL_FIELDS', 'SelectorValidator', 'ValidationAggregator', 'extract_fields']

"""Shared value extraction."""

from selgen.core.extraction.extractor import (
    SAMPLE_MAX_LENGTH,
    extract_value,
    split_selector_chain,
    truncate_text,
)

__all__ = ['SAMPLE_MAX_LENGTH', 'extract_value', 'split_selector_chain', 'truncate_text']

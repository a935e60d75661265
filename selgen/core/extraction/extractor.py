"""Extracts field values from documents using selectors or fallback chains.

Discovery sampling and validation both go through ``extract_value`` so a
selector that was discovered on one page is judged the same way when it is
validated on another.
"""

import re

from selgen.core.document import DocumentHandle, element_attr

SAMPLE_MAX_LENGTH = 100

# Attributes read instead of element text when a selector references them as
# [name] or [name=value]; operator forms such as [href*=...] only filter
VALUE_ATTRIBUTES: frozenset[str] = frozenset({'datetime', 'src', 'href'})

_ATTRIBUTE_REF = re.compile(r'\[\s*([A-Za-z_:][-\w:.]*)\s*(?:=[^\]]*)?\]')


def truncate_text(text: str, max_length: int = SAMPLE_MAX_LENGTH) -> str:
    """Truncate text to ``max_length`` characters, appending '...' when cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + '...'


def split_selector_chain(chain: str) -> list[str]:
    """Split a comma separated fallback chain into individual selectors.

    Commas inside brackets, parentheses or quotes belong to the selector
    (e.g. ``a[title='a, b']`` or ``:is(h1, h2)``) and do not split it.

    Args:
        chain: One selector or a comma separated chain

    Returns:
        Non-empty, stripped selectors in their original order.

    """
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    quote: str | None = None

    for char in chain:
        if quote:
            if char == quote:
                quote = None
        elif char in '\'"':
            quote = char
        elif char in '[(':
            depth += 1
        elif char in '])':
            depth = max(depth - 1, 0)
        elif char == ',' and depth == 0:
            parts.append(''.join(current))
            current = []
            continue
        current.append(char)

    parts.append(''.join(current))
    return [part.strip() for part in parts if part.strip()]


def _value_attribute(selector: str) -> tuple[str, str] | None:
    """Find a bracketed reference to a value attribute.

    Returns:
        Tuple of (attribute name, element part of the selector), or None
        when the selector does not reference datetime, src or href.

    """
    for match in _ATTRIBUTE_REF.finditer(selector):
        name = match.group(1).lower()
        if name in VALUE_ATTRIBUTES:
            element_part = (selector[: match.start()] + selector[match.end() :]).strip()
            return name, element_part or selector
    return None


def _extract_single(document: DocumentHandle, selector: str, attribute: str | None) -> str | None:
    if attribute:
        value = document.attr(selector, attribute)
        return value or None

    if selector.startswith('meta['):
        return document.attr(selector, 'content') or None

    reference = _value_attribute(selector)
    if reference:
        name, element_part = reference
        element = document.find_first(element_part)
        if element is not None:
            value = element_attr(element, name)
            if value:
                return value

    return document.text(selector) or None


def extract_value(document: DocumentHandle, selector: str, attribute: str | None = None) -> str | None:
    """Extract a value using a selector or fallback chain.

    Each selector in the chain is tried left to right:

    1. ``meta[...]`` selectors yield the ``content`` attribute.
    2. Selectors referencing ``datetime``, ``src`` or ``href`` in brackets
       yield that attribute from the first match of the element part.
    3. Anything else yields the trimmed text of the first match.

    Args:
        document: Document to query
        selector: Single selector or comma separated fallback chain
        attribute: Read this attribute of the first match instead of applying the rules above

    Returns:
        The first non-empty value, or None if no selector produced one.

    """
    if not selector:
        return None

    for single in split_selector_chain(selector):
        value = _extract_single(document, single, attribute)
        if value:
            return value
    return None

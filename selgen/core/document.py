"""Read-only handle over a parsed HTML document."""

import logging

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

logger = logging.getLogger(__name__)


class DocumentHandle:
    """Parsed DOM that can only be queried, never modified.

    Every query takes a CSS selector. Selectors that soupsieve cannot parse
    behave as if they matched nothing.

    Attributes:
        url: URL the document was loaded from

    """

    def __init__(self, soup: BeautifulSoup, url: str = ''):
        """Wrap an already parsed document.

        Args:
            soup: Parsed document
            url: URL the document was loaded from

        """
        self._soup = soup
        self.url = url

    @classmethod
    def from_html(cls, html: str, url: str = '') -> 'DocumentHandle':
        """Parse raw HTML with lxml and wrap it."""
        return cls(BeautifulSoup(html, 'lxml'), url=url)

    def find_all(self, selector: str) -> list[Tag]:
        """Return every element matching the selector, in document order."""
        try:
            return self._soup.select(selector)
        except SelectorSyntaxError as e:
            logger.debug(f'Invalid selector {selector!r}: {e}')
            return []

    def find_first(self, selector: str) -> Tag | None:
        """Return the first element matching the selector, or None."""
        try:
            return self._soup.select_one(selector)
        except SelectorSyntaxError as e:
            logger.debug(f'Invalid selector {selector!r}: {e}')
            return None

    def count(self, selector: str) -> int:
        """Return how many elements match the selector."""
        return len(self.find_all(selector))

    def exists(self, selector: str) -> bool:
        """Return True if at least one element matches."""
        return self.find_first(selector) is not None

    def attr(self, selector: str, name: str) -> str | None:
        """Return the stripped attribute of the first match, or None if absent."""
        element = self.find_first(selector)
        if element is None:
            return None
        return element_attr(element, name)

    def text(self, selector: str) -> str | None:
        """Return the stripped text of the first match, or None if nothing matched."""
        element = self.find_first(selector)
        if element is None:
            return None
        return element.get_text(' ', strip=True)


def element_attr(element: Tag, name: str) -> str | None:
    """Return an element attribute as a stripped string.

    BeautifulSoup returns multi-valued attributes such as ``class`` as lists;
    these are joined with spaces.
    """
    value = element.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        value = ' '.join(value)
    return value.strip()

"""Pydantic model for configured article selectors."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from selgen.models.discovery import DiscoveryResult

# Order in which configured fields are validated and reported
ARTICLE_FIELDS: tuple[str, ...] = (
    'title',
    'body',
    'author',
    'byline',
    'published_time',
    'image',
    'link',
    'category',
    'section',
)


class ArticleSelectors(BaseModel):
    """Selector configuration for article pages.

    Each value is a fallback chain: comma separated selectors tried left to
    right. An empty string means the field is not configured.

    Attributes:
        title: Article headline
        body: Article body
        author: Author name
        byline: Byline block
        published_time: Publication date/time
        image: Featured image
        link: Links to other articles
        category: Article category
        section: Site section

    """

    model_config = ConfigDict(extra='ignore')

    title: str = Field(default='', description='Title fallback chain')
    body: str = Field(default='', description='Body fallback chain')
    author: str = Field(default='', description='Author fallback chain')
    byline: str = Field(default='', description='Byline fallback chain')
    published_time: str = Field(default='', description='Published time fallback chain')
    image: str = Field(default='', description='Image fallback chain')
    link: str = Field(default='', description='Article link fallback chain')
    category: str = Field(default='', description='Category fallback chain')
    section: str = Field(default='', description='Section fallback chain')

    def configured_fields(self) -> dict[str, str]:
        """Return non-empty fallback chains keyed by field name, in fixed order."""
        return {name: chain for name in ARTICLE_FIELDS if (chain := getattr(self, name).strip())}

    @classmethod
    def from_discovery(cls, result: DiscoveryResult) -> 'ArticleSelectors':
        """Build a selector configuration from a discovery result.

        Args:
            result: Discovery output whose selectors become fallback chains

        Returns:
            ArticleSelectors with each discovered field joined by ', '.

        """
        return cls(**{name: ', '.join(candidate.selectors) for name, candidate in result.candidates().items()})

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> 'ArticleSelectors':
        """Build a selector configuration from a YAML ``selectors.article`` block.

        Unknown keys are ignored and ``None`` values become empty chains.
        """
        data = data or {}
        return cls(**{key: str(value) for key, value in data.items() if key in ARTICLE_FIELDS and value is not None})

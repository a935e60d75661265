"""Pydantic models for discovered selector candidates."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

DISCOVERY_FIELDS: tuple[str, ...] = (
    'title',
    'body',
    'author',
    'published_time',
    'image',
    'link',
    'category',
)

# Fields reported as missing when discovery found nothing for them
EXPECTED_FIELDS: tuple[str, ...] = ('title', 'body', 'author', 'published_time', 'image')


class SelectorCandidate(BaseModel):
    """Selectors discovered for a single field.

    Attributes:
        field: Field name (e.g. 'title', 'published_time')
        selectors: Selectors that produced a value, in discovery order (best tier first)
        confidence: Heuristic trust score in [0, 1], 0 when nothing was found
        sample_text: Value extracted by the first successful selector, truncated to 100 chars

    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(description='Field name')
    selectors: tuple[str, ...] = Field(default=(), description='Selectors in discovery order')
    confidence: float = Field(default=0.0, ge=0.0, le=1.0, description='Heuristic confidence')
    sample_text: str = Field(default='', description='Sample extracted value')

    @model_validator(mode='after')
    def _check_confidence(self) -> 'SelectorCandidate':
        if not self.selectors and self.confidence != 0.0:
            raise ValueError(f'{self.field}: confidence must be 0 when no selectors were found')
        if self.selectors and self.confidence == 0.0:
            raise ValueError(f'{self.field}: confidence must be above 0 when selectors were found')
        return self

    @classmethod
    def empty(cls, field: str) -> 'SelectorCandidate':
        """Return a candidate that found nothing."""
        return cls(field=field)

    @property
    def has_selectors(self) -> bool:
        """True if at least one selector was found."""
        return bool(self.selectors)


class DiscoveryResult(BaseModel):
    """Complete discovery output for one document (or a merge of two).

    Attributes:
        title: Article headline candidate
        body: Article body candidate
        author: Author/byline candidate
        published_time: Publication time candidate
        image: Featured image candidate
        link: Outbound article link candidate (advisory)
        category: Section/category candidate
        exclusions: Boilerplate patterns present in the document, catalogue order

    """

    model_config = ConfigDict(frozen=True)

    title: SelectorCandidate = Field(default_factory=lambda: SelectorCandidate.empty('title'))
    body: SelectorCandidate = Field(default_factory=lambda: SelectorCandidate.empty('body'))
    author: SelectorCandidate = Field(default_factory=lambda: SelectorCandidate.empty('author'))
    published_time: SelectorCandidate = Field(default_factory=lambda: SelectorCandidate.empty('published_time'))
    image: SelectorCandidate = Field(default_factory=lambda: SelectorCandidate.empty('image'))
    link: SelectorCandidate = Field(default_factory=lambda: SelectorCandidate.empty('link'))
    category: SelectorCandidate = Field(default_factory=lambda: SelectorCandidate.empty('category'))
    exclusions: tuple[str, ...] = ()

    @model_validator(mode='after')
    def _check_exclusions(self) -> 'DiscoveryResult':
        if len(set(self.exclusions)) != len(self.exclusions):
            raise ValueError('exclusions must not contain duplicates')
        return self

    def candidates(self) -> dict[str, SelectorCandidate]:
        """Return candidates keyed by field name, in output order."""
        return {name: getattr(self, name) for name in DISCOVERY_FIELDS}

    def missing_fields(self) -> list[str]:
        """Return expected fields for which nothing was discovered."""
        return [name for name in EXPECTED_FIELDS if not getattr(self, name).has_selectors]

"""Rule tables for heuristic selector discovery.

Each field has an ordered list of tiers. A tier is a group of selectors that
share one nominal confidence. The numbers are tuned by hand: what matters is
the ordering semantic > meta/schema > class pattern > bare tag fallback.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleTier:
    """A group of selectors sharing one confidence level.

    Attributes:
        name: Short label used in logs ('semantic', 'meta', 'class', ...)
        selectors: Selectors tried in order
        confidence: Confidence recorded when a selector in this tier matches
        attribute: Attribute to read instead of text (e.g. 'src'), None for the default rules
        ambiguous_confidence: Confidence used instead when the selector matches more than one element
        length_boosts: (min_length, confidence) pairs, longest first; the first threshold exceeded wins
        only_if_empty: Only try this tier when no earlier tier produced a selector

    """

    name: str
    selectors: tuple[str, ...]
    confidence: float
    attribute: str | None = None
    ambiguous_confidence: float | None = None
    length_boosts: tuple[tuple[int, float], ...] = ()
    only_if_empty: bool = False


TITLE_TIERS: tuple[RuleTier, ...] = (
    RuleTier(
        name='semantic',
        selectors=('article h1', 'main h1', 'article h1.article-title', 'main h1.page-title'),
        confidence=0.95,
    ),
    RuleTier(
        name='meta',
        selectors=("meta[property='og:title']", "[itemprop='headline']", "meta[name='twitter:title']"),
        confidence=0.90,
    ),
    RuleTier(
        name='class',
        selectors=("h1[class*='title']", '.article-title', '.headline', '.post-title', 'h1.title', 'h2.title'),
        confidence=0.75,
        ambiguous_confidence=0.65,
    ),
    RuleTier(
        name='fallback',
        selectors=('h1',),
        confidence=0.70,
        ambiguous_confidence=0.60,
        only_if_empty=True,
    ),
)

BODY_TIERS: tuple[RuleTier, ...] = (
    RuleTier(
        name='semantic',
        selectors=('article', "[itemprop='articleBody']", 'main article', 'article .article-content'),
        confidence=0.90,
        length_boosts=((500, 0.95), (200, 0.92)),
    ),
    RuleTier(
        name='class',
        selectors=('.article-body', '.article-content', '.post-content', '.entry-content', '.content', 'main .content'),
        confidence=0.85,
        length_boosts=((500, 0.90), (200, 0.87)),
    ),
)

AUTHOR_TIERS: tuple[RuleTier, ...] = (
    RuleTier(
        name='schema',
        selectors=("[itemprop='author']", "[rel='author']", "meta[property='article:author']", "meta[name='author']"),
        confidence=0.95,
    ),
    RuleTier(
        name='class',
        selectors=('.author', '.byline', '.article-author', '.post-author', '.writer'),
        confidence=0.80,
    ),
)

PUBLISHED_TIME_TIERS: tuple[RuleTier, ...] = (
    RuleTier(
        name='meta',
        selectors=(
            "meta[property='article:published_time']",
            "meta[name='publishdate']",
            "meta[name='pubdate']",
            "meta[name='date']",
        ),
        confidence=0.95,
    ),
    RuleTier(name='time', selectors=('time[datetime]',), confidence=0.90),
    RuleTier(name='schema', selectors=("[itemprop='datePublished']",), confidence=0.95),
    RuleTier(
        name='class',
        selectors=('.published-date', '.date', '.post-date', '.article-date', '.time', '.timestamp'),
        confidence=0.75,
    ),
)

IMAGE_TIERS: tuple[RuleTier, ...] = (
    RuleTier(name='opengraph', selectors=("meta[property='og:image']",), confidence=0.95, attribute='content'),
    RuleTier(name='schema', selectors=("[itemprop='image']",), confidence=0.90, attribute='src'),
    RuleTier(
        name='article',
        selectors=(
            'article img',
            'article picture img',
            '.article-image img',
            '.featured-image img',
            '.post-image img',
        ),
        confidence=0.85,
        attribute='src',
    ),
)

# Image URLs containing any of these are never accepted
IMAGE_REJECT_MARKERS: tuple[str, ...] = ('placeholder', 'fallback')

CATEGORY_TIERS: tuple[RuleTier, ...] = (
    RuleTier(name='meta', selectors=("meta[property='article:section']",), confidence=0.90),
    RuleTier(
        name='class',
        selectors=('.category', '.section', '.article-category', '.post-category', '[data-category]'),
        confidence=0.75,
    ),
)

# Link discovery is advisory and always stays below the manual review threshold
LINK_CONFIDENCE = 0.70
LINK_TOP_K = 5
ARTICLE_PATH_PATTERNS: tuple[str, ...] = ('/news/', '/article/', '/story/', '/post/', '/blog/', '/local-news/')
LINK_CLASS_HINTS: tuple[str, ...] = ('article', 'link', 'card')
LINK_DATA_ATTRIBUTES: tuple[str, ...] = ('data-tb-link',)

EXCLUSION_PATTERNS: tuple[str, ...] = (
    '.ad',
    "[class*='ad__']",
    "[id^='ad-']",
    "[id*='ad__']",
    "[data-aqa='advertisement']",
    '[data-ad]',
    'nav',
    '.header',
    '.footer',
    'script',
    'style',
    'noscript',
    "[aria-hidden='true']",
    '.visually-hidden',
    '.social-follow',
    '.share-buttons',
    'button',
    'form',
    '.sidebar',
    '.comments-section',
    '.pagination',
    '.related-posts',
    '.newsletter-widget',
    '.widget',
    '.consent__banner',
    '.cookie-banner',
)

"""Field detectors that turn rule tables into selector candidates."""

import logging
from collections import Counter
from collections.abc import Callable, Sequence

from bs4 import Tag

from selgen.core.discovery import rules
from selgen.core.discovery.rules import RuleTier
from selgen.core.document import DocumentHandle, element_attr
from selgen.core.extraction import extract_value, truncate_text
from selgen.models import SelectorCandidate

logger = logging.getLogger(__name__)


class _CandidateBuilder:
    """Accumulates matches for one field before freezing them into a candidate."""

    def __init__(self, field: str, confidence: float = 0.0):
        self.field = field
        self.selectors: list[str] = []
        self.confidence = confidence
        self.sample_text = ''

    def record(self, selector: str, value: str, confidence: float) -> None:
        self.selectors.append(selector)
        # Highest tier wins; a later, weaker match never lowers the score
        if confidence > self.confidence:
            self.confidence = confidence
        if not self.sample_text:
            self.sample_text = truncate_text(value)

    def build(self) -> SelectorCandidate:
        return SelectorCandidate(
            field=self.field,
            selectors=tuple(self.selectors),
            confidence=self.confidence if self.selectors else 0.0,
            sample_text=self.sample_text,
        )


class TieredDetector:
    """Runs a field's rule tiers against a document.

    Attributes:
        field: Field name the candidate is produced for
        tiers: Ordered rule tiers
        accept: Optional predicate; values it rejects are discarded as if nothing matched

    """

    def __init__(self, field: str, tiers: Sequence[RuleTier], accept: Callable[[str], bool] | None = None):
        """Initialize the detector.

        Args:
            field: Field name
            tiers: Ordered rule tiers, strongest first
            accept: Optional value filter applied in every tier

        """
        self.field = field
        self.tiers = tuple(tiers)
        self.accept = accept

    def detect(self, document: DocumentHandle) -> SelectorCandidate:
        """Try every selector of every tier and score the matches.

        Args:
            document: Document to analyze

        Returns:
            SelectorCandidate with matching selectors in tier order.

        """
        builder = _CandidateBuilder(self.field)

        for tier in self.tiers:
            if tier.only_if_empty and builder.selectors:
                continue

            for selector in tier.selectors:
                value = extract_value(document, selector, attribute=tier.attribute)
                if not value:
                    continue
                if self.accept and not self.accept(value):
                    logger.debug(f'{self.field}: rejected {selector!r} value {truncate_text(value, 60)!r}')
                    continue

                confidence = self._score(tier, document, selector, value)
                logger.debug(f'{self.field}: {tier.name} match {selector!r} (confidence={confidence:.2f})')
                builder.record(selector, value, confidence)

        return builder.build()

    @staticmethod
    def _score(tier: RuleTier, document: DocumentHandle, selector: str, value: str) -> float:
        """Compute the confidence for one matching selector of a tier."""
        if tier.ambiguous_confidence is not None and document.count(selector) > 1:
            return tier.ambiguous_confidence

        for min_length, boosted in tier.length_boosts:
            if len(value.strip()) > min_length:
                return boosted

        return tier.confidence


def is_real_image(src: str) -> bool:
    """Return False for placeholder or fallback image URLs."""
    lowered = src.lower()
    return not any(marker in lowered for marker in rules.IMAGE_REJECT_MARKERS)


def _matched_pattern(href: str) -> str | None:
    for pattern in rules.ARTICLE_PATH_PATTERNS:
        if pattern in href:
            return pattern
    return None


def build_link_selector(anchor: Tag) -> str | None:
    """Derive one representative selector for an article link.

    Priority: id, an article/link/card class, the first class, a known data
    attribute, then an href substring selector.

    Args:
        anchor: The <a> element

    Returns:
        Selector string, or None if nothing usable was found.

    """
    if anchor.name != 'a':
        return None

    anchor_id = element_attr(anchor, 'id')
    if anchor_id:
        return f'a#{anchor_id}'

    classes = (element_attr(anchor, 'class') or '').split()
    if classes:
        for token in classes:
            if any(hint in token for hint in rules.LINK_CLASS_HINTS):
                return f'a.{token}'
        return f'a.{classes[0]}'

    for data_attribute in rules.LINK_DATA_ATTRIBUTES:
        if element_attr(anchor, data_attribute):
            return f'a[{data_attribute}]'

    pattern = _matched_pattern(element_attr(anchor, 'href') or '')
    if pattern:
        return f"a[href*='{pattern}']"

    return None


class LinkDetector:
    """Finds selectors for links that point at articles."""

    field = 'link'

    def detect(self, document: DocumentHandle) -> SelectorCandidate:
        """Tally representative selectors of article-looking anchors.

        Args:
            document: Document to analyze

        Returns:
            Candidate with the most common selectors (at most five), or one
            generic href selector per known path pattern when nothing matched.

        """
        counts: Counter[str] = Counter()
        sample_href = ''

        for anchor in document.find_all('a[href]'):
            href = element_attr(anchor, 'href') or ''
            if not _matched_pattern(href):
                continue
            if not sample_href:
                sample_href = href

            selector = build_link_selector(anchor)
            if selector:
                counts[selector] += 1

        # most_common keeps first-seen order among equal counts
        selectors = [selector for selector, _ in counts.most_common(rules.LINK_TOP_K)]
        if not selectors:
            selectors = [f"a[href*='{pattern}']" for pattern in rules.ARTICLE_PATH_PATTERNS]

        logger.debug(f'link: {sum(counts.values())} article links, {len(counts)} distinct selectors')
        return SelectorCandidate(
            field=self.field,
            selectors=tuple(selectors),
            confidence=rules.LINK_CONFIDENCE,
            sample_text=truncate_text(sample_href) if sample_href else '',
        )


class ExclusionDetector:
    """Finds boilerplate patterns present in a document."""

    def __init__(self, patterns: Sequence[str] = rules.EXCLUSION_PATTERNS):
        """Initialize with the catalogue of candidate patterns."""
        self.patterns = tuple(dict.fromkeys(patterns))

    def detect(self, document: DocumentHandle) -> tuple[str, ...]:
        """Return the catalogue patterns that match at least one element."""
        return tuple(pattern for pattern in self.patterns if document.exists(pattern))


def default_detectors() -> dict[str, TieredDetector | LinkDetector]:
    """Return the detector for every discovered field, in output order."""
    return {
        'title': TieredDetector('title', rules.TITLE_TIERS),
        'body': TieredDetector('body', rules.BODY_TIERS),
        'author': TieredDetector('author', rules.AUTHOR_TIERS),
        'published_time': TieredDetector('published_time', rules.PUBLISHED_TIME_TIERS),
        'image': TieredDetector('image', rules.IMAGE_TIERS, accept=is_real_image),
        'link': LinkDetector(),
        'category': TieredDetector('category', rules.CATEGORY_TIERS),
    }

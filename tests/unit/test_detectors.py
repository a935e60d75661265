from bs4 import BeautifulSoup

from selgen.core.discovery import ExclusionDetector, LinkDetector, TieredDetector, build_link_selector, rules
from selgen.core.discovery.detectors import is_real_image
from selgen.core.document import DocumentHandle


def _document(body: str, head: str = '') -> DocumentHandle:
    return DocumentHandle.from_html(f'<html><head>{head}</head><body>{body}</body></html>')


def _anchor(markup: str):
    return BeautifulSoup(markup, 'lxml').find('a')


def test_semantic_title():
    document = _document('<article><h1>Breaking News</h1></article>')

    candidate = TieredDetector('title', rules.TITLE_TIERS).detect(document)

    assert candidate.selectors == ('article h1',)
    assert candidate.confidence == 0.95
    assert candidate.sample_text == 'Breaking News'


def test_ambiguous_class_title_is_penalized():
    document = _document('<h1 class="title">First</h1><h1 class="title">Second</h1>')

    candidate = TieredDetector('title', rules.TITLE_TIERS).detect(document)

    assert candidate.confidence == 0.65
    assert 'h1.title' in candidate.selectors
    # One entry per matching selector, not per matching element
    assert len(candidate.selectors) == len(set(candidate.selectors))
    assert candidate.sample_text == 'First'


def test_single_class_title_is_not_penalized():
    candidate = TieredDetector('title', rules.TITLE_TIERS).detect(_document('<h1 class="title">Only</h1>'))
    assert candidate.confidence == 0.75


def test_bare_h1_fallback():
    detector = TieredDetector('title', rules.TITLE_TIERS)

    single = detector.detect(_document('<h1>Plain</h1>'))
    assert single.selectors == ('h1',)
    assert single.confidence == 0.70

    ambiguous = detector.detect(_document('<h1>One</h1><h1>Two</h1>'))
    assert ambiguous.confidence == 0.60


def test_weaker_tier_never_lowers_confidence():
    document = _document('<article><h1 class="title">A</h1></article><h1 class="title">B</h1>')

    candidate = TieredDetector('title', rules.TITLE_TIERS).detect(document)

    assert candidate.selectors[0] == 'article h1'
    assert 'h1.title' in candidate.selectors
    assert candidate.confidence == 0.95
    assert candidate.sample_text == 'A'


def test_title_tiers_are_ordered_strongest_first():
    confidences = [tier.confidence for tier in rules.TITLE_TIERS]
    assert confidences == sorted(confidences, reverse=True)


def test_fallback_tier_skipped_when_earlier_tier_matched():
    document = _document('<article><h1>Headline</h1></article>')
    candidate = TieredDetector('title', rules.TITLE_TIERS).detect(document)
    assert 'h1' not in candidate.selectors


def test_body_length_boosts():
    detector = TieredDetector('body', rules.BODY_TIERS)

    assert detector.detect(_document('<article><p>Short body.</p></article>')).confidence == 0.90
    assert detector.detect(_document(f'<article><p>{"word " * 50}</p></article>')).confidence == 0.92
    assert detector.detect(_document(f'<article><p>{"word " * 120}</p></article>')).confidence == 0.95


def test_missing_field_has_zero_confidence():
    candidate = TieredDetector('author', rules.AUTHOR_TIERS).detect(_document('<p>Nothing here</p>'))

    assert candidate.selectors == ()
    assert candidate.confidence == 0.0
    assert candidate.sample_text == ''


def test_published_time_prefers_datetime_attribute():
    document = _document('<time datetime="2025-01-15T10:00:00Z">Jan 15</time>')

    candidate = TieredDetector('published_time', rules.PUBLISHED_TIME_TIERS).detect(document)

    assert candidate.selectors == ('time[datetime]',)
    assert candidate.confidence == 0.90
    assert candidate.sample_text == '2025-01-15T10:00:00Z'


def test_placeholder_images_are_rejected():
    document = _document(
        '<article><img src="https://cdn.example.com/real.jpg"></article>',
        head='<meta property="og:image" content="https://cdn.example.com/PlaceHolder.png">',
    )

    candidate = TieredDetector('image', rules.IMAGE_TIERS, accept=is_real_image).detect(document)

    assert "meta[property='og:image']" not in candidate.selectors
    assert candidate.selectors[0] == 'article img'
    assert candidate.confidence == 0.85
    assert candidate.sample_text == 'https://cdn.example.com/real.jpg'


def test_is_real_image():
    assert is_real_image('https://cdn.example.com/photo.jpg')
    assert not is_real_image('/img/placeholder.png')
    assert not is_real_image('/img/FALLBACK-image.png')


def test_build_link_selector_priority():
    assert build_link_selector(_anchor('<a id="lead" class="article-link" href="/news/a">x</a>')) == 'a#lead'
    assert build_link_selector(_anchor('<a class="promo story-card" href="/news/a">x</a>')) == 'a.story-card'
    assert build_link_selector(_anchor('<a class="promo big" href="/news/a">x</a>')) == 'a.promo'
    assert build_link_selector(_anchor('<a data-tb-link="1" href="/news/a">x</a>')) == 'a[data-tb-link]'
    assert build_link_selector(_anchor('<a href="/story/a">x</a>')) == "a[href*='/story/']"
    assert build_link_selector(_anchor('<a href="/about">x</a>')) is None


def test_link_detection_counts_selectors(listing_html):
    candidate = LinkDetector().detect(DocumentHandle.from_html(listing_html))

    assert candidate.selectors == ('a.card-link', "a[href*='/news/']")
    assert candidate.confidence == 0.70
    assert candidate.sample_text == '/news/budget-approved'


def test_link_top_five_ties_keep_first_seen_order():
    anchors = ''.join(f'<a id="l{i}" href="/news/{i}">{i}</a>' for i in range(1, 8))

    candidate = LinkDetector().detect(_document(anchors))

    assert candidate.selectors == ('a#l1', 'a#l2', 'a#l3', 'a#l4', 'a#l5')


def test_link_most_common_first():
    anchors = '<a id="solo" href="/news/1">1</a>' + '<a class="teaser" href="/post/2">2</a>' * 3

    candidate = LinkDetector().detect(_document(anchors))

    assert candidate.selectors == ('a.teaser', 'a#solo')


def test_link_fallback_without_article_links():
    candidate = LinkDetector().detect(_document('<a href="/about">About</a>'))

    assert candidate.selectors == tuple(f"a[href*='{pattern}']" for pattern in rules.ARTICLE_PATH_PATTERNS)
    assert candidate.confidence == 0.70
    assert candidate.sample_text == ''


def test_exclusions_in_catalogue_order(article_html):
    exclusions = ExclusionDetector().detect(DocumentHandle.from_html(article_html))
    assert exclusions == ('.ad', 'nav', '.header', '.footer')


def test_exclusion_catalogue_is_deduplicated():
    detector = ExclusionDetector(['nav', 'footer', 'nav'])

    assert detector.patterns == ('nav', 'footer')
    assert detector.detect(_document('<nav></nav><footer></footer>')) == ('nav', 'footer')

"""Combines discovery results from a listing page and an article page."""

from selgen.models import DiscoveryResult, SelectorCandidate


def _prefer_article_title(main: SelectorCandidate, article: SelectorCandidate) -> SelectorCandidate:
    if article.confidence > main.confidence or (not main.has_selectors and article.has_selectors):
        return article
    return main


def _prefer_article_content(main: SelectorCandidate, article: SelectorCandidate) -> SelectorCandidate:
    # Listing pages rarely carry full article content
    return article if article.has_selectors else main


def _prefer_stronger_article(main: SelectorCandidate, article: SelectorCandidate) -> SelectorCandidate:
    if article.has_selectors and article.confidence > main.confidence:
        return article
    return main


def _prefer_main_image(main: SelectorCandidate, article: SelectorCandidate) -> SelectorCandidate:
    if main.confidence > article.confidence or (not article.has_selectors and main.has_selectors):
        return main
    return article


def _prefer_main(main: SelectorCandidate, article: SelectorCandidate) -> SelectorCandidate:
    return main if main.has_selectors else article


def merge_results(main: DiscoveryResult, article: DiscoveryResult) -> DiscoveryResult:
    """Merge listing page and article page discovery results.

    Article pages win for content fields, the listing page wins for article
    links and site-wide exclusions.

    Args:
        main: Result from the listing/index page
        article: Result from an article page

    Returns:
        A new DiscoveryResult; neither input is modified.

    """
    return DiscoveryResult(
        title=_prefer_article_title(main.title, article.title),
        body=_prefer_article_content(main.body, article.body),
        author=_prefer_article_content(main.author, article.author),
        published_time=_prefer_article_content(main.published_time, article.published_time),
        image=_prefer_main_image(main.image, article.image),
        link=_prefer_main(main.link, article.link),
        category=_prefer_stronger_article(main.category, article.category),
        exclusions=main.exclusions,
    )

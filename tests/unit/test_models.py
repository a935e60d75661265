import pytest
from pydantic import ValidationError

from selgen.models import (
    ArticleSelectors,
    DiscoveryResult,
    FetchResult,
    FieldValidationResult,
    SelectorCandidate,
    ValidationResult,
)


def test_candidate_confidence_must_match_selectors():
    with pytest.raises(ValidationError):
        SelectorCandidate(field='title', confidence=0.5)
    with pytest.raises(ValidationError):
        SelectorCandidate(field='title', selectors=('h1',), confidence=0.0)
    with pytest.raises(ValidationError):
        SelectorCandidate(field='title', selectors=('h1',), confidence=1.5)


def test_empty_candidate():
    candidate = SelectorCandidate.empty('author')
    assert candidate.field == 'author'
    assert not candidate.has_selectors
    assert candidate.confidence == 0.0


def test_candidate_is_frozen():
    candidate = SelectorCandidate(field='title', selectors=('h1',), confidence=0.7)
    with pytest.raises(ValidationError):
        candidate.confidence = 0.9


def test_discovery_result_defaults_and_order():
    result = DiscoveryResult()

    assert list(result.candidates()) == ['title', 'body', 'author', 'published_time', 'image', 'link', 'category']
    assert result.candidates()['published_time'].field == 'published_time'
    assert result.missing_fields() == ['title', 'body', 'author', 'published_time', 'image']


def test_discovery_result_rejects_duplicate_exclusions():
    with pytest.raises(ValidationError):
        DiscoveryResult(exclusions=('nav', 'nav'))


def test_configured_fields_skips_empty_chains():
    selectors = ArticleSelectors(body='article', title='h1, .headline', author='   ', section='.section')

    assert selectors.configured_fields() == {'title': 'h1, .headline', 'body': 'article', 'section': '.section'}


def test_from_discovery_joins_selectors():
    result = DiscoveryResult(
        title=SelectorCandidate(field='title', selectors=('article h1', 'h1.title'), confidence=0.95),
    )

    selectors = ArticleSelectors.from_discovery(result)

    assert selectors.title == 'article h1, h1.title'
    assert selectors.body == ''
    assert list(selectors.configured_fields()) == ['title']


def test_from_mapping_ignores_unknown_keys_and_nulls():
    selectors = ArticleSelectors.from_mapping(
        {'title': 'h1', 'body': None, 'exclude': ['nav'], 'published_time': 'time[datetime]'}
    )

    assert selectors.configured_fields() == {'title': 'h1', 'published_time': 'time[datetime]'}
    assert ArticleSelectors.from_mapping(None).configured_fields() == {}


def test_success_rate():
    assert FieldValidationResult(field_name='title').success_rate == 0.0

    result = FieldValidationResult(field_name='title', success_count=2, total_count=3)
    assert round(result.success_rate, 2) == 66.67
    assert result.model_dump()['success_rate'] == result.success_rate


def test_validation_result_properties():
    result = ValidationResult(
        field_results={
            'title': FieldValidationResult(field_name='title', success_count=2, total_count=2),
            'body': FieldValidationResult(
                field_name='body', success_count=1, total_count=2, failed_urls=['https://example.com/b']
            ),
        },
        total_articles=2,
        successful_articles=1,
    )

    assert not result.success
    assert result.failing_fields == ['body']
    assert not ValidationResult().success


def test_fetch_result_success():
    assert FetchResult(url='https://example.com', html='<html></html>', status_code=200).success
    assert not FetchResult(url='https://example.com', block_reason='timeout').success
    assert not FetchResult(url='https://example.com', html='', is_blocked=True).success

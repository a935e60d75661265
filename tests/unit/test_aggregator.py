from selgen.core.validation import CRITICAL_FIELDS, ValidationAggregator


def _assert_failed_url_invariant(aggregator):
    for result in aggregator.result().field_results.values():
        assert len(result.failed_urls) == result.total_count - result.success_count


def test_empty_aggregator():
    result = ValidationAggregator(['title', 'body']).result()

    assert result.total_articles == 0
    assert result.field_results['title'].success_rate == 0.0
    assert result.field_results['title'].total_count == 0


def test_critical_fields():
    assert CRITICAL_FIELDS == {'title', 'body'}


def test_record_article():
    aggregator = ValidationAggregator(['title', 'body', 'author'])

    assert aggregator.record_article('https://example.com/1', {'title': 'One', 'body': 'Text', 'author': None})
    assert not aggregator.record_article('https://example.com/2', {'title': 'Two', 'body': '', 'author': 'Jo'})

    result = aggregator.result()
    assert result.total_articles == 2
    assert result.successful_articles == 1
    assert result.field_results['title'].success_count == 2
    assert result.field_results['body'].failed_urls == ['https://example.com/2']
    assert result.field_results['author'].failed_urls == ['https://example.com/1']
    _assert_failed_url_invariant(aggregator)


def test_fetch_failure_fails_every_field():
    aggregator = ValidationAggregator(['title', 'body'])

    aggregator.record_fetch_failure('https://example.com/broken')

    result = aggregator.result()
    assert result.total_articles == 1
    assert result.successful_articles == 0
    for field_result in result.field_results.values():
        assert field_result.total_count == 1
        assert field_result.failed_urls == ['https://example.com/broken']
    _assert_failed_url_invariant(aggregator)


def test_samples_are_capped_and_truncated():
    aggregator = ValidationAggregator(['body'])

    for i in range(5):
        aggregator.record_article(f'https://example.com/{i}', {'body': f'{i}' + 'x' * 150})

    samples = aggregator.result().field_results['body'].sample_values
    assert len(samples) == 3
    assert all(len(sample) == 103 and sample.endswith('...') for sample in samples)


def test_unconfigured_critical_field_means_unsuccessful():
    aggregator = ValidationAggregator(['title'])

    assert not aggregator.record_article('https://example.com/1', {'title': 'Headline'})
    assert aggregator.result().successful_articles == 0


def test_result_is_a_snapshot():
    aggregator = ValidationAggregator(['title'])
    aggregator.record_article('https://example.com/1', {'title': 'One'})

    snapshot = aggregator.result()
    aggregator.record_fetch_failure('https://example.com/2')

    assert snapshot.total_articles == 1
    assert snapshot.field_results['title'].failed_urls == []
    assert aggregator.result().total_articles == 2


def test_result_cancelled_flag():
    assert ValidationAggregator(['title']).result(cancelled=True).cancelled

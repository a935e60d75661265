import logging

import pytest

from selgen.config import SelgenConfig

ENV_VARS = (
    'SELGEN_TIMEOUT',
    'SELGEN_MAX_WORKERS',
    'SELGEN_MAX_SAMPLES',
    'SELGEN_FETCH_RETRIES',
    'SELGEN_USER_AGENT',
    'SELGEN_LOG_LEVEL',
    'LOGFIRE_TOKEN',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, mocker):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Never read a developer's .env during tests
    mocker.patch('selgen.config.load_dotenv')


def test_defaults():
    config = SelgenConfig()

    assert config.timeout == 30.0
    assert config.max_workers == 4
    assert config.max_samples == 10
    assert config.fetch_retries == 1
    assert config.user_agent is None
    assert config.log_level == 'INFO'
    assert config.numeric_log_level == logging.INFO


@pytest.mark.parametrize(
    'kwargs',
    [{'timeout': 0}, {'max_workers': 0}, {'max_samples': 0}, {'fetch_retries': 0}, {'log_level': 'LOUD'}],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        SelgenConfig(**kwargs)


def test_log_level_is_normalized():
    assert SelgenConfig(log_level='debug').log_level == 'DEBUG'
    assert SelgenConfig(log_level='all').numeric_log_level == logging.NOTSET


def test_from_env(monkeypatch):
    monkeypatch.setenv('SELGEN_TIMEOUT', '12.5')
    monkeypatch.setenv('SELGEN_MAX_WORKERS', '8')
    monkeypatch.setenv('SELGEN_USER_AGENT', 'selgen-test')
    monkeypatch.setenv('LOGFIRE_TOKEN', 'token')

    config = SelgenConfig.from_env()

    assert config.timeout == 12.5
    assert config.max_workers == 8
    assert config.max_samples == 10
    assert config.user_agent == 'selgen-test'
    assert config.logfire_token == 'token'


def test_overrides_win_over_env(monkeypatch):
    monkeypatch.setenv('SELGEN_MAX_SAMPLES', '20')

    assert SelgenConfig.from_env(max_samples=5).max_samples == 5
    assert SelgenConfig.from_env(max_samples=None).max_samples == 20


def test_unparseable_env_value(monkeypatch):
    monkeypatch.setenv('SELGEN_MAX_WORKERS', 'many')

    with pytest.raises(ValueError, match='SELGEN_MAX_WORKERS'):
        SelgenConfig.from_env()

"""
config.py
=========
Runtime configuration for selgen.

Values come from keyword arguments or, through ``SelgenConfig.from_env``,
from the environment and an optional ``.env`` file.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

LOG_LEVELS = {'ALL', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


@dataclass
class SelgenConfig:
    """Settings shared by the generate and validate commands.

    Attributes:
        timeout: Per-request fetch timeout in seconds. Defaults to 30.
        max_workers: Validation worker pool size. Defaults to 4.
        max_samples: Article URLs tested per validation run. Defaults to 10.
        fetch_retries: Fetch attempts per page. Defaults to 1.
        user_agent: Fixed User-Agent header. Defaults to None (rotated).
        log_level: Level for the local run log. Defaults to 'INFO'.
        logfire_token: Logfire write token. Defaults to None (no remote export).
    """

    timeout: float = 30.0
    max_workers: int = 4
    max_samples: int = 10
    fetch_retries: int = 1
    user_agent: str | None = None
    log_level: str = 'INFO'
    logfire_token: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization.

        Raises:
            ValueError: If a numeric setting is out of range or the log level is unknown.
        """
        if self.timeout <= 0:
            raise ValueError(f'timeout must be positive, got {self.timeout}')
        if self.max_workers < 1:
            raise ValueError(f'max_workers must be at least 1, got {self.max_workers}')
        if self.max_samples < 1:
            raise ValueError(f'max_samples must be at least 1, got {self.max_samples}')
        if self.fetch_retries < 1:
            raise ValueError(f'fetch_retries must be at least 1, got {self.fetch_retries}')

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f'Unknown log level: {self.log_level}')

    @property
    def numeric_log_level(self) -> int:
        if self.log_level == 'ALL':
            return logging.NOTSET
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, **overrides) -> 'SelgenConfig':
        """Build a config from SELGEN_* environment variables.

        A ``.env`` file in the working directory is loaded first. Keyword
        overrides that are not None win over the environment.

        Raises:
            ValueError: If a variable cannot be parsed or is out of range.
        """
        load_dotenv()

        values = {
            'timeout': _env_number('SELGEN_TIMEOUT', float),
            'max_workers': _env_number('SELGEN_MAX_WORKERS', int),
            'max_samples': _env_number('SELGEN_MAX_SAMPLES', int),
            'fetch_retries': _env_number('SELGEN_FETCH_RETRIES', int),
            'user_agent': os.getenv('SELGEN_USER_AGENT') or None,
            'log_level': os.getenv('SELGEN_LOG_LEVEL') or None,
            'logfire_token': os.getenv('LOGFIRE_TOKEN') or None,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})

        return cls(**{key: value for key, value in values.items() if value is not None})


def _env_number(name: str, kind: type[int] | type[float]) -> int | float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return kind(raw.strip())
    except ValueError as e:
        raise ValueError(f'{name} must be a number, got {raw!r}') from e

"""Per-run log files under .selgen/logs/."""

import logging
from datetime import datetime
from pathlib import Path

from selgen.utils.files import get_logs_path

LOG_FORMAT = '%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s'


def setup_local_logging(level: int = logging.DEBUG) -> Path:
    """Send every log record of this run to a fresh ``run_<timestamp>.log``.

    The console belongs to rich, so only a file handler is attached to the
    root logger. Validation logs from worker threads, hence the thread name
    in each line.

    Args:
        level: Numeric logging level, e.g. ``SelgenConfig.numeric_log_level``

    Returns:
        Path of the log file.

    """
    logs_dir = get_logs_path()
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f'run_{datetime.now():%Y%m%d_%H%M%S}.log'

    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    return log_file

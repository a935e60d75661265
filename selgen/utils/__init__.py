"""Utility components for selgen."""

from selgen.utils.console import SELGEN_THEME, create_console
from selgen.utils.files import backup_file, get_project_root, init_selgen
from selgen.utils.headers import UserAgentRotator, build_headers
from selgen.utils.logging import setup_local_logging

__all__ = [
    'SELGEN_THEME',
    'UserAgentRotator',
    'backup_file',
    'build_headers',
    'create_console',
    'get_project_root',
    'init_selgen',
    'setup_local_logging',
]

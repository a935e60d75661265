"""Utility functions for file and directory management in selgen."""

from datetime import datetime
from pathlib import Path


def get_project_root() -> Path:
    """Find the project root by searching upwards from the Current Working Directory.

    Stops at the first directory containing a marker file.
    """
    current_path = Path.cwd()

    markers = {'.git', 'pyproject.toml', '.selgen', 'sources.yml', 'sources.yaml'}

    for parent in [current_path] + list(current_path.parents):
        if any((parent / marker).exists() for marker in markers):
            return parent

    # No markers (e.g. running in /tmp): use the current directory
    return current_path


def get_logs_path() -> Path:
    """Return the path to the logs directory in .selgen."""
    root = get_project_root()
    return root / '.selgen' / 'logs'


def is_initialized() -> bool:
    """Check if the .selgen directory exists in the project root."""
    selgen_dir = get_project_root() / '.selgen'
    return selgen_dir.is_dir() and (selgen_dir / '.gitignore').exists()


def init_selgen() -> Path:
    """Initialize the .selgen directory and return its path."""
    selgen_dir = get_project_root() / '.selgen'
    (selgen_dir / 'logs').mkdir(parents=True, exist_ok=True)

    # Keep run artifacts out of source control
    gitignore = selgen_dir / '.gitignore'
    if not gitignore.exists():
        gitignore.write_text('# Automatically created by selgen\n*\n')

    return selgen_dir


def backup_file(path: Path, backup_dir: Path | None = None) -> Path:
    """Copy a sources file to ``backups/<stem>_<timestamp>.yaml`` next to it.

    Args:
        path: File to back up
        backup_dir: Target directory. Defaults to a ``backups`` directory beside the file.

    Returns:
        Path of the backup copy.

    Raises:
        FileNotFoundError: If the file does not exist.

    """
    backup_dir = backup_dir or path.parent / 'backups'
    backup_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
    backup_path = backup_dir / f'{path.stem}_{timestamp}.yaml'
    backup_path.write_bytes(path.read_bytes())
    return backup_path

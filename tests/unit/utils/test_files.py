import logging
from pathlib import Path

import selgen.utils.files
import selgen.utils.logging
from selgen.utils.files import backup_file, get_project_root, init_selgen, is_initialized
from selgen.utils.logging import setup_local_logging


def test_get_project_root(monkeypatch, tmp_path):
    project_root = tmp_path / 'project'
    project_root.mkdir()
    (project_root / 'pyproject.toml').touch()

    sub_dir = project_root / 'src' / 'deep' / 'dir'
    sub_dir.mkdir(parents=True)

    monkeypatch.setattr(Path, 'cwd', lambda: sub_dir)

    assert get_project_root() == project_root


def test_get_project_root_finds_sources_file(monkeypatch, tmp_path):
    (tmp_path / 'sources.yml').touch()
    monkeypatch.setattr(Path, 'cwd', lambda: tmp_path)

    assert get_project_root() == tmp_path


def test_get_project_root_default(monkeypatch, tmp_path):
    # Falls back to CWD if no markers are found
    monkeypatch.setattr(Path, 'cwd', lambda: tmp_path)

    assert get_project_root() == tmp_path


def test_init_selgen(monkeypatch, tmp_path):
    monkeypatch.setattr(selgen.utils.files, 'get_project_root', lambda: tmp_path)

    assert not is_initialized()

    selgen_dir = init_selgen()

    assert selgen_dir == tmp_path / '.selgen'
    assert (selgen_dir / 'logs').is_dir()
    assert (selgen_dir / '.gitignore').read_text() == '# Automatically created by selgen\n*\n'
    assert is_initialized()


def test_backup_file(tmp_path):
    sources = tmp_path / 'sources.yml'
    sources.write_text('sources: []\n')

    backup = backup_file(sources)

    assert backup.parent == tmp_path / 'backups'
    assert backup.name.startswith('sources_')
    assert backup.suffix == '.yaml'
    assert backup.read_text() == 'sources: []\n'


def test_setup_local_logging(monkeypatch, tmp_path):
    monkeypatch.setattr(selgen.utils.logging, 'get_logs_path', lambda: tmp_path / 'logs')
    root_logger = logging.getLogger()
    previous_level = root_logger.level
    handlers_before = list(root_logger.handlers)

    try:
        log_file = setup_local_logging(logging.INFO)
        logging.getLogger('selgen.test').info('hello from the test')

        assert log_file.parent == tmp_path / 'logs'
        assert log_file.name.startswith('run_')
        assert 'hello from the test' in log_file.read_text()
    finally:
        for handler in list(root_logger.handlers):
            if handler not in handlers_before:
                root_logger.removeHandler(handler)
                handler.close()
        root_logger.setLevel(previous_level)

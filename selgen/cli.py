"""
cli.py
======
Command line entry point: generate selectors for a new source, or validate
configured selectors against real article pages.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import logfire
import yaml
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from selgen.config import SelgenConfig
from selgen.core.fetcher import SimpleFetcher
from selgen.core.pipeline import SourceGenerator
from selgen.core.validation import SelectorValidator
from selgen.exceptions import BotDetectionError, SelgenError, SourceNotFoundError
from selgen.models import ArticleSelectors, DiscoveryResult
from selgen.outputs import (
    generate_source_name,
    generate_source_yaml,
    print_discovery_summary,
    print_missing_fields,
    print_validation_report,
)
from selgen.utils import backup_file, create_console, init_selgen, setup_local_logging

logger = logging.getLogger(__name__)

DEFAULT_SOURCES_FILE = 'sources.yml'

# Exit codes
EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_VALIDATION_FAILED = 2


def load_sources(path: Path) -> list[dict[str, Any]]:
    """Load source entries from a sources file.

    Accepts a mapping with a ``sources`` list or a bare list of entries
    (the shape of a generated fragment).

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the file holds neither shape.
    """
    with open(path, encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get('sources') or []
    if not isinstance(data, list):
        raise ValueError(f'{path}: expected a list of sources')
    return [entry for entry in data if isinstance(entry, dict)]


def find_source(sources: list[dict[str, Any]], name: str, path: Path) -> dict[str, Any]:
    """Return the source entry called ``name`` (case-insensitive).

    Raises:
        SourceNotFoundError: If no entry has that name.
    """
    for entry in sources:
        if str(entry.get('name', '')).lower() == name.lower():
            return entry
    raise SourceNotFoundError(name, str(path))


def article_selectors_from_entry(entry: dict[str, Any]) -> ArticleSelectors:
    """Read the ``selectors.article`` block of a source entry.

    A mapping without a ``selectors`` key is treated as the article block itself.
    """
    if 'selectors' in entry:
        return ArticleSelectors.from_mapping((entry.get('selectors') or {}).get('article'))
    return ArticleSelectors.from_mapping(entry.get('article', entry))


def load_selectors_file(path: Path) -> ArticleSelectors:
    """Load article selectors from a generated fragment or a selectors YAML file.

    Raises:
        ValueError: If the file holds no selectors.
    """
    with open(path, encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if isinstance(data, list):
        data = next((entry for entry in data if isinstance(entry, dict)), None)
    if isinstance(data, dict) and 'sources' in data:
        sources = data.get('sources') or []
        data = sources[0] if sources else None
    if not isinstance(data, dict):
        raise ValueError(f'{path}: no selectors found')

    selectors = article_selectors_from_entry(data)
    if not selectors.configured_fields():
        raise ValueError(f'{path}: no selectors found')
    return selectors


def _backup_sources(path: Path, console: Console) -> Path | None:
    """Back up the sources file to ./backups/, returning None when there is nothing to back up."""
    backup_path = None
    if path.exists():
        backup_path = backup_file(path, Path('backups'))
        console.print(f'[info]Backup created: {backup_path}[/info]')
    return backup_path


def _existing_names(path: Path) -> set[str]:
    if not path.exists():
        return set()
    return {str(entry.get('name', '')) for entry in load_sources(path)}


def _write_append(path: Path, content: str) -> None:
    if not path.exists():
        path.write_text('sources:\n' + content, encoding='utf-8')
        return

    existing = path.read_text(encoding='utf-8')
    with open(path, 'a', encoding='utf-8') as f:
        if existing and not existing.endswith('\n'):
            f.write('\n')
        f.write(content)


def cmd_generate(args: argparse.Namespace, config: SelgenConfig, console: Console) -> int:
    """Discover selectors for a source and emit a sources.yml entry."""
    sources_path = Path(args.sources)
    backup_path = None

    if args.append:
        backup_path = _backup_sources(sources_path, console)
        if not Confirm.ask(f'This will append to {sources_path}. Continue?', default=False, console=console):
            console.print('[warning]Cancelled[/warning]')
            return EXIT_OK

    fetcher = SimpleFetcher(timeout=config.timeout, user_agent=config.user_agent)
    generator = SourceGenerator(fetcher=fetcher, console=console, fetch_attempts=config.fetch_retries)

    try:
        result: DiscoveryResult = generator.generate(args.url, article_url=args.article_url)
    except BotDetectionError as e:
        console.print('[danger]BOT DETECTION TRIGGERED[/danger]')
        console.print(f'[danger]Status Code: {e.status_code}[/danger]')
        console.print(f'[danger]Indicators: {", ".join(e.indicators)}[/danger]')
        return EXIT_INPUT_ERROR
    except SelgenError as e:
        console.print(f'[danger]{escape(str(e))}[/danger]')
        return EXIT_INPUT_ERROR

    print_discovery_summary(console, result)
    print_missing_fields(console, result)

    content = generate_source_yaml(args.url, result)

    if args.append:
        name = generate_source_name(urlparse(args.url).hostname or '')
        try:
            existing = _existing_names(sources_path)
        except (yaml.YAMLError, ValueError) as e:
            console.print(f'[danger]Could not read {sources_path}: {escape(str(e))}[/danger]')
            return EXIT_INPUT_ERROR

        if name in existing:
            console.print(f'[warning]⚠ WARNING: Source "{name}" already exists in {sources_path}![/warning]')
            console.print('[warning]  Cancel and merge manually (recommended), or append a duplicate.[/warning]')
            if not Confirm.ask('Continue with append?', default=False, console=console):
                console.print('[warning]Cancelled. Review the generated YAML and merge it manually.[/warning]')
                return EXIT_OK

        _write_append(sources_path, content)
        console.print(f'[success]✓ Appended to {sources_path}[/success]')
        if backup_path:
            console.print(f'[info]  To undo: cp {backup_path} {sources_path}[/info]')
    elif args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding='utf-8')
        console.print(f'[success]✓ Selectors written to {output_path}[/success]')
        console.print(f'[info]  After review, add to sources.yml: cat {output_path} >> sources.yml[/info]')
    else:
        sys.stdout.write(content)

    console.print('[warning]⚠ IMPORTANT: Review and refine these selectors manually![/warning]')
    logfire.info('Source generated', url=args.url, missing=result.missing_fields())
    return EXIT_OK


def cmd_validate(args: argparse.Namespace, config: SelgenConfig, console: Console) -> int:
    """Validate configured selectors against article URLs."""
    try:
        if args.selectors_from:
            selectors = load_selectors_file(Path(args.selectors_from))
        else:
            sources_path = Path(args.sources)
            entry = find_source(load_sources(sources_path), args.source, sources_path)
            selectors = article_selectors_from_entry(entry)
    except (OSError, yaml.YAMLError, ValueError, SelgenError) as e:
        console.print(f'[danger]{escape(str(e))}[/danger]')
        return EXIT_INPUT_ERROR

    if not selectors.configured_fields():
        console.print('[danger]No article selectors configured for this source[/danger]')
        return EXIT_INPUT_ERROR

    fetcher = SimpleFetcher(timeout=config.timeout, user_agent=config.user_agent)
    validator = SelectorValidator(
        fetcher=fetcher,
        max_workers=config.max_workers,
        max_samples=config.max_samples,
        fetch_attempts=config.fetch_retries,
    )

    console.print(f'[step]Validating selectors against {min(len(args.urls), config.max_samples)} articles...[/step]')
    try:
        result = validator.validate(selectors, args.urls)
    except ValueError as e:
        console.print(f'[danger]{escape(str(e))}[/danger]')
        return EXIT_INPUT_ERROR

    print_validation_report(console, result)
    return EXIT_OK if result.success else EXIT_VALIDATION_FAILED


def _positive_or_none(value: int | None) -> int | None:
    # A non-positive sample cap means "use the default"
    return value if value is not None and value > 0 else None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the selgen command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--log-level', type=str, help='Level for the local run log (default: SELGEN_LOG_LEVEL or INFO)')
    common.add_argument('--no-log-file', action='store_true', help='Do not write a run log to .selgen/logs/')
    common.add_argument('--timeout', type=float, help='Fetch timeout in seconds (default: 30)')
    common.add_argument('--retries', type=int, help='Fetch attempts per page (default: 1)')

    parser = argparse.ArgumentParser(prog='selgen', description='Discover and validate CSS selectors for news sources')
    subparsers = parser.add_subparsers(dest='command', required=True)

    generate = subparsers.add_parser('generate', parents=[common], help='Generate selectors for a new source')
    generate.add_argument('url', help='Listing page of the source')
    generate.add_argument('-a', '--article-url', help='Article page analyzed for better content selectors')
    generate.add_argument('-o', '--output', help='Write the YAML entry to this file (default: stdout)')
    generate.add_argument('--append', action='store_true', help='Append to the sources file (creates a backup)')
    generate.add_argument('--sources', default=DEFAULT_SOURCES_FILE, help='Sources file used by --append')

    validate = subparsers.add_parser('validate', parents=[common], help='Validate selectors against article pages')
    selector_source = validate.add_mutually_exclusive_group(required=True)
    selector_source.add_argument('--source', help='Name of a source in the sources file')
    selector_source.add_argument('--selectors-from', help='YAML file holding a generated source entry')
    validate.add_argument('--sources', default=DEFAULT_SOURCES_FILE, help='Sources file used by --source')
    validate.add_argument('--urls', nargs='+', required=True, help='Article URLs to test')
    validate.add_argument('--samples', type=int, help='Maximum number of URLs to test (default: 10)')
    validate.add_argument('--workers', type=int, help='Concurrent fetches (default: 4)')

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    console = create_console(stderr=True)

    try:
        config = SelgenConfig.from_env(
            timeout=args.timeout,
            fetch_retries=args.retries,
            log_level=args.log_level,
            max_samples=_positive_or_none(getattr(args, 'samples', None)),
            max_workers=getattr(args, 'workers', None),
        )
    except ValueError as e:
        console.print(f'[danger]Invalid configuration: {escape(str(e))}[/danger]')
        return EXIT_INPUT_ERROR

    if config.logfire_token:
        logfire.configure(token=config.logfire_token, service_name='selgen')

    if not args.no_log_file:
        init_selgen()
        log_file = setup_local_logging(config.numeric_log_level)
        logger.info(f'Logging to {log_file}')

    if args.command == 'generate':
        return cmd_generate(args, config, console)
    return cmd_validate(args, config, console)


if __name__ == '__main__':
    sys.exit(main())

"""Rich console reports for discovery and validation runs."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from selgen.models import DiscoveryResult, SelectorCandidate, ValidationResult

SUMMARY_SAMPLE_LENGTH = 80


def _trim(text: str, max_length: int = SUMMARY_SAMPLE_LENGTH) -> str:
    if len(text) > max_length:
        return text[:max_length] + '...'
    return text


def _print_candidate(console: Console, name: str, candidate: SelectorCandidate) -> None:
    console.print(f'[bold]{name}[/bold] [info](confidence: {candidate.confidence * 100:.0f}%)[/info]')
    for selector in candidate.selectors:
        console.print(f'  - {selector}', markup=False)
    if candidate.sample_text:
        console.print(f'  Sample: "{_trim(candidate.sample_text)}"', markup=False, highlight=False)
    console.print()


def print_discovery_summary(console: Console, result: DiscoveryResult) -> None:
    """Print the discovered selectors per field and the exclusions found.

    Fields without selectors are skipped.
    """
    console.print(Panel('Discovered Selectors', style='bold blue'))

    for name, candidate in result.candidates().items():
        if candidate.has_selectors:
            _print_candidate(console, name, candidate)

    if result.exclusions:
        console.print(f'[bold]exclude[/bold] ({len(result.exclusions)} patterns found):')
        for pattern in result.exclusions:
            console.print(f'  - {pattern}', markup=False)
        console.print()


def print_missing_fields(console: Console, result: DiscoveryResult) -> list[str]:
    """Warn about expected fields that discovery could not find.

    Returns:
        The missing field names, in output order.

    """
    missing = result.missing_fields()
    if not missing:
        return missing

    console.print(f'[warning]⚠ Missing fields: {", ".join(missing)}[/warning]')
    console.print('[warning]  These will need to be added manually.[/warning]\n')

    if 'body' in missing:
        console.print('[info]TIP: No article body found![/info]')
        console.print('[info]  This might be a listing page, not an article page.[/info]')
        console.print('[info]  Pass --article-url with an actual article for better results.[/info]\n')

    return missing


def print_validation_report(console: Console, result: ValidationResult) -> None:
    """Print per-field validation statistics, failed URLs and the article success ratio."""
    table = Table(title='Selector Validation')
    table.add_column('Field', style='cyan')
    table.add_column('Found', justify='right')
    table.add_column('Rate', justify='right')
    table.add_column('Sample', style='dim', overflow='fold')

    for name, field_result in result.field_results.items():
        rate = field_result.success_rate
        rate_style = 'success' if rate >= 100.0 else 'warning' if rate > 0 else 'danger'
        sample = _trim(field_result.sample_values[0]) if field_result.sample_values else ''
        table.add_row(
            name,
            f'{field_result.success_count}/{field_result.total_count}',
            f'[{rate_style}]{rate:.1f}%[/{rate_style}]',
            Text(sample),
        )

    console.print(table)

    for name in result.failing_fields:
        field_result = result.field_results[name]
        console.print(f'\n[warning]{name} failed on:[/warning]')
        for url in field_result.failed_urls:
            console.print(f'  - {url}', markup=False)

    ratio = f'{result.successful_articles}/{result.total_articles}'
    if result.total_articles and result.successful_articles == result.total_articles:
        console.print(f'\n[success]✓ Articles with title and body: {ratio}[/success]')
    else:
        console.print(f'\n[warning]⚠ Articles with title and body: {ratio}[/warning]')

    if result.cancelled:
        console.print('[warning]⚠ Validation was cancelled; results are partial[/warning]')

"""Rich console shared by the CLI and the reports."""

from rich.console import Console
from rich.theme import Theme

SELGEN_THEME = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
        'step': 'bold blue',
    }
)


def create_console(**kwargs) -> Console:
    """Return a Console with the selgen theme; kwargs are passed to Console."""
    return Console(theme=SELGEN_THEME, **kwargs)

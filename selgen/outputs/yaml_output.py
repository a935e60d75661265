"""YAML source entry renderer for discovered selectors.

The entry is written by hand rather than through ``yaml.safe_dump`` so it
can carry confidence and sample comments and be appended verbatim to the
``sources:`` list of an existing sources file.
"""

from urllib.parse import urlparse

from selgen.core.discovery import parse_source_url
from selgen.models import DiscoveryResult

DEFAULT_RATE_LIMIT = '1s'
DEFAULT_MAX_DEPTH = 2
DEFAULT_SCHEDULE = ('11:45', '23:45')

# TLDs dropped from generated source names
GENERIC_TLDS = {'com', 'org', 'net'}


def escape_yaml_string(value: str) -> str:
    """Escape a value for use inside a double-quoted YAML scalar."""
    # Backslashes first so later escapes are not doubled
    value = value.replace('\\', '\\\\')
    value = value.replace('\n', '\\n')
    value = value.replace('\r', '\\r')
    return value.replace('"', '\\"')


def _strip_www(hostname: str) -> str:
    hostname = hostname.removeprefix('www.')
    return hostname.removeprefix('www')


def generate_source_name(hostname: str) -> str:
    """Turn a hostname into a display name.

    Examples:
        >>> generate_source_name('www.example.com')
        'Example'
        >>> generate_source_name('news.bbc.co.uk')
        'Co UK'

    """
    hostname = _strip_www(hostname)
    parts = hostname.split('.')

    main_part = parts[-2] if len(parts) >= 2 else parts[0]
    if not main_part:
        return hostname
    main_part = main_part[:1].upper() + main_part[1:].lower()

    tld = parts[-1] if len(parts) > 1 else ''
    if not tld or tld in GENERIC_TLDS:
        return main_part
    return f'{main_part} {tld.upper()}'


def generate_index_name(hostname: str, suffix: str) -> str:
    """Turn a hostname into a snake_case index name, e.g. ``example_com_articles``."""
    hostname = _strip_www(hostname)
    hostname = hostname.replace('.', '_').replace('-', '_').lower().strip('_')
    return f'{hostname}_{suffix}'


def generate_source_yaml(source_url: str, result: DiscoveryResult) -> str:
    """Render a discovery result as one entry of a ``sources:`` list.

    Args:
        source_url: Listing page the selectors were discovered on
        result: Discovery output

    Returns:
        YAML text indented as a list item, ending with a newline. Fields
        without selectors are omitted.

    Raises:
        InvalidSourceURLError: If source_url is not an absolute http(s) URL.

    """
    parse_source_url(source_url)
    hostname = urlparse(source_url).hostname or ''

    lines = [
        f'  - name: "{escape_yaml_string(generate_source_name(hostname))}"',
        f'    url: "{escape_yaml_string(source_url)}"',
        f'    article_index: "{generate_index_name(hostname, "articles")}"',
        f'    page_index: "{generate_index_name(hostname, "pages")}"',
        f'    rate_limit: {DEFAULT_RATE_LIMIT}',
        f'    max_depth: {DEFAULT_MAX_DEPTH}',
        '    time:',
        *(f'      - "{slot}"' for slot in DEFAULT_SCHEDULE),
        '    selectors:',
        '      article:',
    ]

    for name, candidate in result.candidates().items():
        if not candidate.has_selectors:
            continue
        chain = escape_yaml_string(', '.join(candidate.selectors))
        lines.append(f'        {name}: "{chain}"  # Confidence: {candidate.confidence:.2f}')
        if candidate.sample_text:
            lines.append(f'        # Sample: "{escape_yaml_string(candidate.sample_text)}"')

    if result.exclusions:
        lines.append('        exclude: [')
        lines.extend(f'          "{escape_yaml_string(pattern)}",' for pattern in result.exclusions)
        lines.append('        ]')

    return '\n'.join(lines) + '\n'

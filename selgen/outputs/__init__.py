"""Output formatting for discovery and validation results."""

from selgen.outputs.report import print_discovery_summary, print_missing_fields, print_validation_report
from selgen.outputs.yaml_output import (
    escape_yaml_string,
    generate_index_name,
    generate_source_name,
    generate_source_yaml,
)

__all__ = [
    'escape_yaml_string',
    'generate_index_name',
    'generate_source_name',
    'generate_source_yaml',
    'print_discovery_summary',
    'print_missing_fields',
    'print_validation_report',
]

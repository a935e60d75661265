"""Heuristic selector discovery."""

from selgen.core.discovery.detectors import (
    ExclusionDetector,
    LinkDetector,
    TieredDetector,
    build_link_selector,
    default_detectors,
)
from selgen.core.discovery.engine import DiscoveryEngine, parse_source_url
from selgen.core.discovery.merger import merge_results
from selgen.core.discovery.rules import RuleTier

__all__ = [
    'DiscoveryEngine',
    'ExclusionDetector',
    'LinkDetector',
    'RuleTier',
    'TieredDetector',
    'build_link_selector',
    'default_detectors',
    'merge_results',
    'parse_source_url',
]

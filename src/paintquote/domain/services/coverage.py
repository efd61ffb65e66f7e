"""Coverage-range resolution."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Mapping

from ..numeric import safe_number

if TYPE_CHECKING:
    from ..cache import CalculationCache
    from ..value_objects import CoverageSpec

__all__ = ["DEFAULT_COVERAGE_RATE", "CoverageResolver", "parse_coverage_range"]

logger = logging.getLogger(__name__)

DEFAULT_COVERAGE_RATE = 100.0

# "140-160", "140 – 160", "12.5-15"
_RANGE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*[-–]\s*(\d+(?:\.\d+)?)")
_LEADING_NUMBER = re.compile(r"^\s*([-+]?\d+(?:\.\d+)?)")


def parse_coverage_range(coverage_range: str | None) -> float:
    """Resolve a coverage text to sq.ft per unit.

    A range resolves to the mean of its bounds; a lone number to itself;
    anything else to ``DEFAULT_COVERAGE_RATE``.

    Examples:
        >>> parse_coverage_range("140-160")
        150.0
        >>> parse_coverage_range("120")
        120.0
        >>> parse_coverage_range("")
        100.0
    """
    if not coverage_range:
        return DEFAULT_COVERAGE_RATE

    match = _RANGE_PATTERN.search(coverage_range)
    if match:
        low = float(match.group(1))
        high = float(match.group(2))
        return (low + high) / 2

    single = _LEADING_NUMBER.match(coverage_range)
    if single:
        return safe_number(single.group(1), DEFAULT_COVERAGE_RATE)
    return DEFAULT_COVERAGE_RATE


class CoverageResolver:
    """Resolves product coverage rates, memoized per coverage text."""

    def __init__(self, cache: CalculationCache | None = None) -> None:
        self.cache = cache

    def resolve(self, coverage_range: str | None) -> float:
        """Resolve a coverage text, using the cache when available."""
        if self.cache is None or not coverage_range:
            return parse_coverage_range(coverage_range)
        return self.cache.get_or_compute(
            ("coverage", coverage_range),
            lambda: parse_coverage_range(coverage_range),
        )

    def resolve_product(
        self, product_name: str, coverage_specs: Mapping[str, CoverageSpec]
    ) -> float | None:
        """Coverage rate for a product, or None if the catalog has no entry."""
        spec = coverage_specs.get(product_name)
        if spec is None:
            logger.debug(f"No coverage spec for '{product_name}'")
            return None
        return self.resolve(spec.coverage_range_text)

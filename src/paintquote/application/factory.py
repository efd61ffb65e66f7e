"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from paintquote.domain.cache import DEFAULT_TTL_SECONDS, CalculationCache

if TYPE_CHECKING:
    from paintquote.application.commands import GenerateSummaryCommand
    from paintquote.domain.services import (
        AreaCalculator,
        CoverageResolver,
        PackOptimizer,
    )
    from paintquote.infrastructure.formatters import (
        JsonExporter,
        QuotationFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Owns the calculation cache shared by the memoizing services, so one
    factory per process (or per test) gives one cache lifetime.

    Example:
        ```python
        factory = ServiceFactory(include_door_window_grill=True)
        command = factory.create_summary_command()
        summary = command.execute(rooms, configs, catalog)
        ```
    """

    cache_ttl_seconds: float = DEFAULT_TTL_SECONDS
    include_door_window_grill: bool = False

    _cache: CalculationCache | None = field(default=None, init=False, repr=False)
    _area_calculators: "dict[bool, AreaCalculator]" = field(
        default_factory=dict, init=False, repr=False
    )
    _coverage_resolver: "CoverageResolver | None" = field(
        default=None, init=False, repr=False
    )
    _pack_optimizer: "PackOptimizer | None" = field(
        default=None, init=False, repr=False
    )

    def get_cache(self) -> CalculationCache:
        """Get or create the shared calculation cache."""
        if self._cache is None:
            self._cache = CalculationCache(ttl_seconds=self.cache_ttl_seconds)
        return self._cache

    def get_area_calculator(
        self, include_door_window_grill: bool | None = None
    ) -> "AreaCalculator":
        """Get or create the area calculator for a door/window/grill policy."""
        if include_door_window_grill is None:
            include_door_window_grill = self.include_door_window_grill
        if include_door_window_grill not in self._area_calculators:
            from paintquote.domain.services import AreaCalculator

            self._area_calculators[include_door_window_grill] = AreaCalculator(
                cache=self.get_cache(),
                include_door_window_grill=include_door_window_grill,
            )
        return self._area_calculators[include_door_window_grill]

    def get_coverage_resolver(self) -> "CoverageResolver":
        """Get or create coverage resolver instance."""
        if self._coverage_resolver is None:
            from paintquote.domain.services import CoverageResolver

            self._coverage_resolver = CoverageResolver(cache=self.get_cache())
        return self._coverage_resolver

    def get_pack_optimizer(self) -> "PackOptimizer":
        """Get or create pack optimizer instance."""
        if self._pack_optimizer is None:
            from paintquote.domain.services import PackOptimizer

            self._pack_optimizer = PackOptimizer(cache=self.get_cache())
        return self._pack_optimizer

    def get_quotation_formatter(self) -> "QuotationFormatter":
        from paintquote.infrastructure.formatters import QuotationFormatter

        return QuotationFormatter()

    def get_json_exporter(self) -> "JsonExporter":
        from paintquote.infrastructure.formatters import JsonExporter

        return JsonExporter()

    def create_summary_command(
        self, include_door_window_grill: bool | None = None
    ) -> "GenerateSummaryCommand":
        """Create a GenerateSummaryCommand wired to the shared services."""
        from paintquote.application.commands import GenerateSummaryCommand

        return GenerateSummaryCommand(
            area_calculator=self.get_area_calculator(include_door_window_grill),
            coverage_resolver=self.get_coverage_resolver(),
            pack_optimizer=self.get_pack_optimizer(),
        )


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None

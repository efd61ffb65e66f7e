"""Labour-day estimation.

Two formulas are provided:

- ``calculate_labour_days``: total area over crew capacity, for quick
  per-task breakdowns.
- ``LabourEstimator``: per-material tasks whose coverage rates come from a
  fixed sq.ft/day table and are scaled by working hours over a standard day.

Both round up to whole days. Tasks for one configuration are performed one
after another by the same crew, so their days add.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from ..numeric import ceil_whole, safe_number, validate_sqft_input
from ..value_objects import (
    ConfigLabourResult,
    LabourTask,
    MaterialRole,
    PaintTypeCategory,
)

if TYPE_CHECKING:
    from ..entities import AreaConfig

__all__ = [
    "DEFAULT_DAILY_RATE",
    "DEFAULT_SQFT_PER_DAY",
    "LABOUR_COVERAGE_RATES",
    "LabourCoverageRates",
    "LabourEstimator",
    "calculate_labour_cost",
    "calculate_labour_days",
]

logger = logging.getLogger(__name__)

DEFAULT_SQFT_PER_DAY = 150.0
DEFAULT_DAILY_RATE = 1100.0
DEFAULT_WORKING_HOURS = 7.0
STANDARD_HOURS = 8.0


@dataclass(frozen=True)
class LabourCoverageRates:
    """Sq.ft one worker covers in a standard day, per material pass."""

    putty: float = 400
    interior_primer: float = 700
    exterior_primer: float = 550
    interior_emulsion: float = 700
    exterior_emulsion: float = 550
    red_oxide: float = 300
    enamel_base: float = 250
    enamel_top: float = 280
    full_3_coat: float = 275


LABOUR_COVERAGE_RATES = LabourCoverageRates()


def calculate_labour_days(
    total_paintable_area: float,
    sqft_per_day_per_worker: float = DEFAULT_SQFT_PER_DAY,
    number_of_workers: int = 1,
) -> int:
    """Whole days for a crew to cover an area (area already x coats).

    Examples:
        >>> calculate_labour_days(300, 150, 1)
        2
        >>> calculate_labour_days(301, 150, 2)
        2
        >>> calculate_labour_days(0)
        0
    """
    area = safe_number(total_paintable_area)
    capacity = safe_number(sqft_per_day_per_worker) * safe_number(number_of_workers)
    if area <= 0 or capacity <= 0:
        return 0
    return ceil_whole(area / capacity)


def calculate_labour_cost(days: float, daily_rate: float = DEFAULT_DAILY_RATE) -> float:
    """Cost of ``days`` labour-days at ``daily_rate``."""
    return safe_number(days) * safe_number(daily_rate)


class LabourEstimator:
    """Hour-adjusted labour estimation per area configuration.

    Attributes:
        working_hours: Hours the crew actually works per day.
        standard_hours: Hours in the reference day the rate table assumes.
        number_of_workers: Crew size.
        rates: Coverage table in sq.ft per worker per standard day.
    """

    def __init__(
        self,
        working_hours: float = DEFAULT_WORKING_HOURS,
        standard_hours: float = STANDARD_HOURS,
        number_of_workers: int = 1,
        rates: LabourCoverageRates = LABOUR_COVERAGE_RATES,
    ) -> None:
        self.working_hours = working_hours
        self.standard_hours = standard_hours
        self.number_of_workers = number_of_workers
        self.rates = rates

    @property
    def hours_factor(self) -> float:
        standard = safe_number(self.standard_hours)
        if standard <= 0:
            return 0.0
        return safe_number(self.working_hours) / standard

    def days_for(self, total_work: float, coverage: float) -> int:
        """Days to complete ``total_work`` sq.ft at a standard-day coverage."""
        capacity = (
            safe_number(coverage)
            * self.hours_factor
            * safe_number(self.number_of_workers)
        )
        if total_work <= 0 or capacity <= 0:
            return 0
        return ceil_whole(total_work / capacity)

    def coverage_for(self, config: AreaConfig, role: MaterialRole) -> float:
        """Pick the table rate for a material pass of a configuration."""
        rates = self.rates
        materials = config.selected_materials
        exterior = config.paint_type_category in (
            PaintTypeCategory.EXTERIOR,
            PaintTypeCategory.EXTERIOR.value,
        )
        oil_based = (
            "enamel" in (materials.emulsion or "").lower()
            or "oxide" in (materials.primer or "").lower()
            or "oil" in (materials.emulsion or "").lower()
        )

        if role == MaterialRole.PUTTY:
            return rates.putty
        if role == MaterialRole.PRIMER:
            if config.is_fresh and materials.mentions("enamel"):
                return rates.enamel_base
            if oil_based:
                return rates.red_oxide
            return rates.exterior_primer if exterior else rates.interior_primer
        if oil_based:
            return rates.enamel_top
        return rates.exterior_emulsion if exterior else rates.interior_emulsion

    def calculate_tasks(self, config: AreaConfig) -> list[LabourTask]:
        """Labour tasks for one configuration.

        Fresh painting gets putty, primer and emulsion passes; repainting
        skips putty. Passes with no coats are left out.
        """
        area = validate_sqft_input(config.area).sanitized_value
        if area <= 0:
            return []

        tasks: list[LabourTask] = []
        for role in (MaterialRole.PUTTY, MaterialRole.PRIMER, MaterialRole.EMULSION):
            coats = int(safe_number(config.coats_for(role)))
            if coats <= 0:
                continue
            coverage = self.coverage_for(config, role)
            total_work = area * coats
            tasks.append(
                LabourTask(
                    name=config.selected_materials.for_role(role) or role.value.title(),
                    area=area,
                    coats=coats,
                    total_work=total_work,
                    coverage=coverage,
                    days_required=self.days_for(total_work, coverage),
                )
            )
        return tasks

    def calculate_config(self, config: AreaConfig) -> ConfigLabourResult:
        category = getattr(
            config.paint_type_category, "value", config.paint_type_category
        )
        result = ConfigLabourResult(
            config_label=config.display_label,
            paint_type_category=str(category or PaintTypeCategory.INTERIOR.value),
            tasks=tuple(self.calculate_tasks(config)),
            is_enamel=config.is_enamel,
        )
        logger.debug(
            f"Labour for '{result.config_label}': {len(result.tasks)} tasks, "
            f"{result.total_days} days"
        )
        return result

    def calculate_all(self, configs: Iterable[AreaConfig]) -> list[ConfigLabourResult]:
        """Labour results for every configuration, in input order."""
        return [self.calculate_config(config) for config in configs]

    @staticmethod
    def total_days(results: Iterable[ConfigLabourResult]) -> int:
        return sum(result.total_days for result in results)

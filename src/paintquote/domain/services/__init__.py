"""Domain services for paint estimation.

This package provides the estimation engine:
- Room area derivation
- Coverage-range resolution
- Material quantity and pack-combination optimization
- Labour-day estimation
- Project totals aggregation
- Canonical display ordering of area configurations
"""

from .area_calculator import (
    DEFAULT_SELECTED_AREAS,
    AreaCalculator,
    aggregate_room_areas,
    calculate_room_areas,
    total_paintable_area,
)
from .coverage import DEFAULT_COVERAGE_RATE, CoverageResolver, parse_coverage_range
from .labour_estimator import (
    LABOUR_COVERAGE_RATES,
    LabourCoverageRates,
    LabourEstimator,
    calculate_labour_cost,
    calculate_labour_days,
)
from .material_estimator import (
    PACK_COMBINATION_NOT_FOUND,
    MaterialEstimator,
    PackOptimizer,
    ProductLookup,
    calculate_material_quantity,
    optimal_pack_combination,
)
from .ordering import (
    DisplayOrder,
    get_global_display_order,
    resolve_area_type,
    sort_by_global_display_order,
)
from .totals import (
    DEFAULT_MARGIN_PERCENTAGE,
    calculate_project_totals,
    summarize_by_category,
)

__all__ = [
    # Areas
    "DEFAULT_SELECTED_AREAS",
    "AreaCalculator",
    "aggregate_room_areas",
    "calculate_room_areas",
    "total_paintable_area",
    # Coverage
    "DEFAULT_COVERAGE_RATE",
    "CoverageResolver",
    "parse_coverage_range",
    # Materials
    "PACK_COMBINATION_NOT_FOUND",
    "MaterialEstimator",
    "PackOptimizer",
    "ProductLookup",
    "calculate_material_quantity",
    "optimal_pack_combination",
    # Labour
    "LABOUR_COVERAGE_RATES",
    "LabourCoverageRates",
    "LabourEstimator",
    "calculate_labour_cost",
    "calculate_labour_days",
    # Totals
    "DEFAULT_MARGIN_PERCENTAGE",
    "calculate_project_totals",
    "summarize_by_category",
    # Ordering
    "DisplayOrder",
    "get_global_display_order",
    "resolve_area_type",
    "sort_by_global_display_order",
]

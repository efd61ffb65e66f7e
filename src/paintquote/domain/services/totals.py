"""Project totals aggregation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..numeric import round2, safe_number, validate_sqft_input
from ..value_objects import CategoryBreakdown, ProjectTotals

if TYPE_CHECKING:
    from ..entities import AreaConfig

__all__ = ["DEFAULT_MARGIN_PERCENTAGE", "calculate_project_totals", "summarize_by_category"]

DEFAULT_MARGIN_PERCENTAGE = 10.0


def _config_cost(config: AreaConfig) -> tuple[float, float]:
    area = validate_sqft_input(config.area).sanitized_value
    rate = safe_number(config.per_sqft_rate)
    return area, area * rate


def calculate_project_totals(
    area_configs: Iterable[AreaConfig],
    material_cost: float,
    labour_cost: float,
    margin_percentage: float = DEFAULT_MARGIN_PERCENTAGE,
) -> ProjectTotals:
    """Combine company cost, margin, material and labour into a quotation.

    The company project cost is the sum of area x per-sq.ft rate; the margin
    is a percentage of that cost. Unusable areas or rates count as 0.
    """
    company_project_cost = 0.0
    for config in area_configs:
        company_project_cost += _config_cost(config)[1]

    material_cost = safe_number(material_cost)
    labour_cost = safe_number(labour_cost)
    margin_cost = company_project_cost * (safe_number(margin_percentage) / 100)

    return ProjectTotals(
        company_project_cost=company_project_cost,
        material_cost=material_cost,
        labour_cost=labour_cost,
        margin_cost=margin_cost,
        actual_total_cost=material_cost + labour_cost + margin_cost,
    )


def summarize_by_category(area_configs: Iterable[AreaConfig]) -> CategoryBreakdown:
    """Area and company cost per paint category (Interior/Exterior/...)."""
    total_area = 0.0
    total_cost = 0.0
    area_by_category: dict[str, float] = {}
    cost_by_category: dict[str, float] = {}

    for config in area_configs:
        area, cost = _config_cost(config)
        total_area += area
        total_cost += cost
        category = getattr(
            config.paint_type_category, "value", config.paint_type_category
        )
        key = str(category) if category else "Other"
        area_by_category[key] = area_by_category.get(key, 0.0) + area
        cost_by_category[key] = cost_by_category.get(key, 0.0) + cost

    return CategoryBreakdown(
        total_area=round2(total_area),
        total_cost=round2(total_cost),
        area_by_category=area_by_category,
        cost_by_category=cost_by_category,
    )

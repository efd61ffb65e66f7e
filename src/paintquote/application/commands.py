"""Application commands (use cases) for paint estimation."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Sequence

from paintquote.domain import (
    AreaConfig,
    AreaTotals,
    PaintTypeCategory,
    Room,
    RoomAreaResult,
    validate_sqft_input,
)
from paintquote.domain.services import (
    DEFAULT_MARGIN_PERCENTAGE,
    AreaCalculator,
    CoverageResolver,
    LabourEstimator,
    MaterialEstimator,
    PackOptimizer,
    ProductLookup,
    aggregate_room_areas,
    calculate_labour_cost,
    calculate_project_totals,
    resolve_area_type,
    sort_by_global_display_order,
    summarize_by_category,
    total_paintable_area,
)

from .dtos import LabourSettings, ProjectSummaryOutput, RoomAreaOutput

if TYPE_CHECKING:
    from paintquote.application.config import EstimateConfiguration

logger = logging.getLogger(__name__)


class GenerateSummaryCommand:
    """Command to produce a complete project quotation summary.

    Runs rooms through the area calculator, fills configuration areas from
    room totals where they were left empty, orders the configurations, then
    estimates materials, labour and the final totals.
    """

    def __init__(
        self,
        area_calculator: AreaCalculator | None = None,
        coverage_resolver: CoverageResolver | None = None,
        pack_optimizer: PackOptimizer | None = None,
    ) -> None:
        self.area_calculator = area_calculator or AreaCalculator()
        self.coverage_resolver = coverage_resolver or CoverageResolver()
        self.pack_optimizer = pack_optimizer or PackOptimizer()

    def execute(
        self,
        rooms: Sequence[Room],
        area_configs: Sequence[AreaConfig],
        catalog: ProductLookup,
        labour_settings: LabourSettings | None = None,
        margin_percentage: float = DEFAULT_MARGIN_PERCENTAGE,
        paint_type: PaintTypeCategory | None = None,
    ) -> ProjectSummaryOutput:
        """Execute the summary command.

        Args:
            rooms: Measured rooms of the project.
            area_configs: Paint area configurations. Configurations with
                ``area=None`` take the room total for their type and category.
            catalog: Coverage and pricing lookup.
            labour_settings: Crew and labour mode; defaults apply when None.
            margin_percentage: Margin applied to the company project cost.
            paint_type: Restrict the reported area totals to one category.

        Returns:
            ProjectSummaryOutput; ``errors`` is set and nothing is estimated
            when the labour settings are invalid.
        """
        settings = labour_settings or LabourSettings()
        errors = settings.validate()
        if errors:
            return ProjectSummaryOutput(errors=errors)

        room_outputs: list[RoomAreaOutput] = []
        room_areas: list[tuple[Room, RoomAreaResult]] = []
        for room in rooms:
            areas = self.area_calculator.calculate(room)
            room_areas.append((room, areas))
            room_outputs.append(
                RoomAreaOutput(
                    name=room.name,
                    project_type=str(getattr(room.project_type, "value", room.project_type)),
                    areas=areas,
                    paintable_area=total_paintable_area(areas, room.selected_areas),
                )
            )

        warnings: list[str] = []
        filled = self._fill_areas(area_configs, room_areas, warnings)
        ordered = sort_by_global_display_order(filled)

        material_estimator = MaterialEstimator(
            catalog, self.coverage_resolver, self.pack_optimizer
        )
        materials = material_estimator.estimate_all(ordered)
        for result in materials:
            warnings.extend(result.warnings)
        material_cost = MaterialEstimator.total_cost(materials)

        labour_estimator = LabourEstimator(
            working_hours=settings.working_hours,
            standard_hours=settings.standard_hours,
            number_of_workers=settings.number_of_workers,
        )
        labour = labour_estimator.calculate_all(ordered)
        if settings.mode == "manual":
            labour_days = settings.manual_days
        else:
            labour_days = LabourEstimator.total_days(labour)
        labour_cost = (
            calculate_labour_cost(labour_days, settings.per_day_cost)
            * settings.number_of_workers
        )

        totals = calculate_project_totals(
            ordered, material_cost, labour_cost, margin_percentage
        )
        logger.debug(
            f"Summary: {len(ordered)} configs, material={material_cost:.2f}, "
            f"labour={labour_cost:.2f} ({labour_days} days), "
            f"total={totals.actual_total_cost:.2f}"
        )

        return ProjectSummaryOutput(
            rooms=room_outputs,
            area_totals=aggregate_room_areas(room_areas, paint_type),
            area_configs=ordered,
            materials=materials,
            labour=labour,
            labour_mode=settings.mode,
            labour_days=labour_days,
            number_of_workers=settings.number_of_workers,
            per_day_cost=settings.per_day_cost,
            totals=totals,
            breakdown=summarize_by_category(ordered),
            warnings=warnings,
        )

    def execute_config(self, config: EstimateConfiguration) -> ProjectSummaryOutput:
        """Execute the summary for a loaded estimate file."""
        from paintquote.application.config import (
            config_to_area_configs,
            config_to_catalog,
            config_to_labour_settings,
            config_to_rooms,
        )

        return self.execute(
            rooms=config_to_rooms(config),
            area_configs=config_to_area_configs(config),
            catalog=config_to_catalog(config),
            labour_settings=config_to_labour_settings(config),
            margin_percentage=config.margin_percentage,
            paint_type=config.project.paint_type,
        )

    def _fill_areas(
        self,
        area_configs: Sequence[AreaConfig],
        room_areas: list[tuple[Room, RoomAreaResult]],
        warnings: list[str],
    ) -> list[AreaConfig]:
        """Copies of the configurations with every area resolved."""
        totals_by_category: dict[str, AreaTotals] = {}
        filled: list[AreaConfig] = []
        for config in area_configs:
            if config.area is None:
                category = str(
                    getattr(config.paint_type_category, "value", config.paint_type_category)
                )
                if category not in totals_by_category:
                    totals_by_category[category] = aggregate_room_areas(room_areas, category)
                area = totals_by_category[category].for_area_type(resolve_area_type(config))
                config = dataclasses.replace(config, area=area)
            else:
                check = validate_sqft_input(config.area)
                if not check.is_valid:
                    warnings.append(f"{config.display_label}: {check.error}")
            filled.append(config)
        return filled

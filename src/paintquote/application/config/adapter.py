"""Conversion from estimate configuration models to domain objects."""

from __future__ import annotations

from paintquote.application.catalog import (
    CatalogIntegrityError,
    CustomProduct,
    ProductCatalog,
)
from paintquote.application.config.schema import (
    AreaConfigSchema,
    EstimateConfiguration,
    RoomConfig,
)
from paintquote.application.dtos import LabourSettings
from paintquote.domain import (
    AdjustmentKind,
    AreaAdjustment,
    AreaConfig,
    CoatConfiguration,
    CoverageSpec,
    RepaintingConfiguration,
    Room,
    RoomDimensions,
    SelectedMaterials,
)

__all__ = [
    "config_to_area_configs",
    "config_to_catalog",
    "config_to_labour_settings",
    "config_to_rooms",
    "room_config_to_room",
]


def room_config_to_room(room: RoomConfig) -> Room:
    return Room(
        name=room.name,
        dimensions=RoomDimensions(room.length, room.width, room.height),
        project_type=room.project_type,
        openings=[
            AreaAdjustment(a.area, AdjustmentKind.OPENING, a.label) for a in room.openings
        ],
        extra_surfaces=[
            AreaAdjustment(a.area, AdjustmentKind.EXTRA_SURFACE, a.label)
            for a in room.extra_surfaces
        ],
        door_window_grills=[
            AreaAdjustment(a.area, AdjustmentKind.DOOR_WINDOW_GRILL, a.label)
            for a in room.door_window_grills
        ],
        selected_areas=room.selected_areas.model_dump() if room.selected_areas else None,
    )


def config_to_rooms(config: EstimateConfiguration) -> list[Room]:
    return [room_config_to_room(room) for room in config.rooms]


def _area_config(schema: AreaConfigSchema, index: int) -> AreaConfig:
    repaint = schema.repainting_configuration
    return AreaConfig(
        id=schema.id,
        area_type=schema.area_type,
        painting_system=schema.painting_system,
        area=schema.area,
        per_sqft_rate=schema.per_sqft_rate,
        selected_materials=SelectedMaterials(**schema.selected_materials.model_dump()),
        coat_configuration=CoatConfiguration(**schema.coat_configuration.model_dump()),
        paint_type_category=schema.paint_type_category,
        label=schema.label,
        section_name=schema.section_name,
        is_custom_section=schema.is_custom_section,
        repainting_configuration=(
            RepaintingConfiguration(**repaint.model_dump()) if repaint else None
        ),
        creation_index=index,
    )


def config_to_area_configs(config: EstimateConfiguration) -> list[AreaConfig]:
    """Area configurations in file order; missing areas stay ``None``."""
    return [_area_config(schema, i) for i, schema in enumerate(config.area_configs)]


def config_to_catalog(config: EstimateConfiguration) -> ProductCatalog:
    """Build the product catalog of an estimate.

    Raises:
        CatalogIntegrityError: If a custom product name is listed twice.
    """
    source = config.catalog
    catalog = ProductCatalog(
        coverage={name: CoverageSpec(name, text) for name, text in source.coverage.items()},
        pricing={name: dict(sizes) for name, sizes in source.pricing.items()},
        units=dict(source.units),
    )
    seen: set[str] = set()
    for product in source.custom_products:
        if product.name in seen:
            raise CatalogIntegrityError(
                f"Custom product listed twice: {product.name}", product=product.name
            )
        seen.add(product.name)
        catalog.custom_products[product.name] = CustomProduct(
            name=product.name, category=product.category, unit=product.unit
        )
    return catalog


def config_to_labour_settings(config: EstimateConfiguration) -> LabourSettings:
    labour = config.labour
    return LabourSettings(
        mode=labour.mode,
        manual_days=labour.manual_days,
        number_of_workers=labour.number_of_workers,
        working_hours=labour.working_hours,
        standard_hours=labour.standard_hours,
        per_day_cost=labour.per_day_cost,
    )

"""Pydantic models for estimate configuration files.

An estimate file describes one project: measured rooms, the paint area
configurations, the dealer's coverage and pricing catalog, labour settings
and margin. Field names are snake_case; camelCase aliases are accepted for
area configurations exported by the UI.
"""

from typing import Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from paintquote.domain import AreaType, PaintingSystem, PaintTypeCategory

# Supported schema versions for estimate files
# Version 1.0: Rooms, area configurations, catalog and labour settings
# Version 1.1: Custom products and repainting coat configuration
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class AdjustmentConfig(BaseModel):
    """An opening, extra surface or door/window/grill area in sq.ft."""

    model_config = ConfigDict(extra="forbid")

    area: float = Field(..., ge=0, le=10_000, description="Area in sq.ft")
    label: str = ""


class SelectedAreasConfig(BaseModel):
    """Which surfaces of a room are painted."""

    model_config = ConfigDict(extra="forbid")

    floor: bool = True
    wall: bool = True
    ceiling: bool = False


class RoomConfig(BaseModel):
    """A measured room.

    Attributes:
        name: Room name.
        length: Length in feet.
        width: Width in feet.
        height: Height in feet; 0 means unknown.
        project_type: Paint category the room belongs to.
        openings: Areas deducted from wall area.
        extra_surfaces: Areas added to wall area.
        door_window_grills: Enamel surfaces.
        selected_areas: Surfaces to paint.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=50)
    length: float = Field(..., ge=0.1, le=1000)
    width: float = Field(..., ge=0.1, le=1000)
    height: float = Field(default=0.0, ge=0, le=100)
    project_type: PaintTypeCategory = PaintTypeCategory.INTERIOR
    openings: list[AdjustmentConfig] = Field(default_factory=list, max_length=50)
    extra_surfaces: list[AdjustmentConfig] = Field(default_factory=list, max_length=50)
    door_window_grills: list[AdjustmentConfig] = Field(default_factory=list, max_length=50)
    selected_areas: SelectedAreasConfig | None = None


class MaterialsConfig(BaseModel):
    """Product names per coat."""

    model_config = ConfigDict(extra="forbid")

    putty: str = ""
    primer: str = ""
    emulsion: str = ""


class CoatsConfig(BaseModel):
    """Coat counts per material."""

    model_config = ConfigDict(extra="forbid")

    putty: int = Field(default=0, ge=0, le=10)
    primer: int = Field(default=0, ge=0, le=10)
    emulsion: int = Field(default=0, ge=0, le=10)


class RepaintCoatsConfig(BaseModel):
    """Coat counts for repainting."""

    model_config = ConfigDict(extra="forbid")

    primer: int = Field(default=0, ge=0, le=10)
    emulsion: int = Field(default=0, ge=0, le=10)


class AreaConfigSchema(BaseModel):
    """A paint area configuration.

    ``area`` may be omitted for wall, ceiling, floor and enamel
    configurations; it is then filled from the room totals for the
    configuration's paint category.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str = Field(..., min_length=1)
    area_type: AreaType | None = Field(
        default=None, validation_alias=AliasChoices("area_type", "areaType")
    )
    painting_system: PaintingSystem = Field(
        default=PaintingSystem.FRESH,
        validation_alias=AliasChoices("painting_system", "paintingSystem"),
    )
    area: float | None = Field(default=None, ge=0, le=100_000)
    per_sqft_rate: float = Field(
        default=0.0, ge=0, validation_alias=AliasChoices("per_sqft_rate", "perSqFtRate")
    )
    selected_materials: MaterialsConfig = Field(
        default_factory=MaterialsConfig,
        validation_alias=AliasChoices("selected_materials", "selectedMaterials"),
    )
    coat_configuration: CoatsConfig = Field(
        default_factory=CoatsConfig,
        validation_alias=AliasChoices("coat_configuration", "coatConfiguration"),
    )
    repainting_configuration: RepaintCoatsConfig | None = Field(
        default=None,
        validation_alias=AliasChoices("repainting_configuration", "repaintingConfiguration"),
    )
    paint_type_category: PaintTypeCategory = Field(
        default=PaintTypeCategory.INTERIOR,
        validation_alias=AliasChoices("paint_type_category", "paintTypeCategory"),
    )
    label: str = ""
    section_name: str | None = Field(
        default=None, validation_alias=AliasChoices("section_name", "sectionName")
    )
    is_custom_section: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_custom_section", "isCustomSection"),
    )

    @field_validator("painting_system", mode="before")
    @classmethod
    def normalize_painting_system(cls, value: object) -> object:
        """Accept the UI's long names ("Fresh Painting", "Repainting")."""
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered.startswith("fresh"):
                return PaintingSystem.FRESH
            if lowered.startswith("repaint"):
                return PaintingSystem.REPAINT
        return value

    @model_validator(mode="after")
    def custom_sections_need_area(self) -> "AreaConfigSchema":
        if self.area is None and (self.area_type == AreaType.CUSTOM or self.section_name):
            raise ValueError("custom sections require an explicit area")
        return self


class CustomProductConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    unit: Literal["L", "kg"] = "L"


class CatalogConfig(BaseModel):
    """Dealer coverage and pricing data.

    Attributes:
        coverage: Coverage text per product, e.g. ``{"Primer X": "140-160"}``.
        pricing: Price per pack-size label per product,
            e.g. ``{"Primer X": {"20 Ltr": 2400, "4 Ltr": 520}}``.
        units: Optional unit override per product.
        custom_products: Dealer-defined products.
    """

    model_config = ConfigDict(extra="forbid")

    coverage: dict[str, str] = Field(default_factory=dict)
    pricing: dict[str, dict[str, float]] = Field(default_factory=dict)
    units: dict[str, Literal["L", "kg"]] = Field(default_factory=dict)
    custom_products: list[CustomProductConfig] = Field(default_factory=list)

    @field_validator("pricing")
    @classmethod
    def prices_non_negative(cls, value: dict[str, dict[str, float]]) -> dict[str, dict[str, float]]:
        for product, sizes in value.items():
            for label, price in sizes.items():
                if price < 0:
                    raise ValueError(f"negative price for {product} {label}")
        return value


class LabourConfig(BaseModel):
    """Labour settings.

    Attributes:
        mode: ``auto`` estimates days from the rate table; ``manual`` uses
            ``manual_days``.
        manual_days: Days used in manual mode.
        number_of_workers: Crew size.
        working_hours: Hours worked per day.
        standard_hours: Reference day length for the rate table.
        per_day_cost: Cost per worker per day.
    """

    model_config = ConfigDict(extra="forbid")

    mode: Literal["auto", "manual"] = "auto"
    manual_days: int = Field(default=5, ge=0, le=365)
    number_of_workers: int = Field(default=1, ge=1, le=100)
    working_hours: float = Field(default=7.0, gt=0, le=24)
    standard_hours: float = Field(default=8.0, gt=0, le=24)
    per_day_cost: float = Field(default=1100.0, ge=0)


class ProjectConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    customer_name: str = ""
    location: str = ""
    paint_type: PaintTypeCategory | None = None


class EstimateConfiguration(BaseModel):
    """Root model of an estimate file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    rooms: list[RoomConfig] = Field(default_factory=list, max_length=500)
    area_configs: list[AreaConfigSchema] = Field(default_factory=list)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    labour: LabourConfig = Field(default_factory=LabourConfig)
    margin_percentage: float = Field(default=10.0, ge=0, le=100)
    include_door_window_grill: bool = False

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version {value!r}; "
                f"supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return value

    @model_validator(mode="after")
    def unique_config_ids(self) -> "EstimateConfiguration":
        ids = [config.id for config in self.area_configs]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate area config ids: {', '.join(duplicates)}")
        return self

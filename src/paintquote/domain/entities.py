"""Domain entities for paint estimation."""

from dataclasses import dataclass, field

from .value_objects import (
    AdjustmentKind,
    AreaAdjustment,
    AreaType,
    MaterialRole,
    PaintingSystem,
    PaintTypeCategory,
    RoomDimensions,
)


@dataclass
class SelectedMaterials:
    """Product names chosen for each coat."""

    putty: str = ""
    primer: str = ""
    emulsion: str = ""

    def for_role(self, role: MaterialRole) -> str:
        return getattr(self, role.value) or ""

    def mentions(self, *keywords: str) -> bool:
        """True if any selected product name contains one of the keywords."""
        names = (self.putty or "", self.primer or "", self.emulsion or "")
        return any(k in name.lower() for name in names for k in keywords)


@dataclass
class CoatConfiguration:
    """Coat counts per material role."""

    putty: int = 0
    primer: int = 0
    emulsion: int = 0

    def for_role(self, role: MaterialRole) -> int:
        return getattr(self, role.value) or 0


@dataclass
class RepaintingConfiguration:
    """Coat counts used when repainting (no putty pass)."""

    primer: int = 0
    emulsion: int = 0


@dataclass
class AreaConfig:
    """One named paint-job line item.

    Created per room/section by the UI, edited as the user changes coats or
    materials, and read by the estimation services.

    Attributes:
        id: Identifier assigned by the caller.
        area_type: Surface the configuration paints; ``None`` reads it from the label.
        painting_system: Fresh painting or repaint.
        area: Area in sq.ft. ``None`` means "derive from room totals".
        per_sqft_rate: Company rate per sq.ft; may arrive as text from forms.
        selected_materials: Putty/primer/emulsion product names.
        coat_configuration: Coat counts per role.
        paint_type_category: Interior, Exterior or Waterproofing.
        label: Free-text display label.
        section_name: Set for custom ("separate") sections.
        is_custom_section: Explicit custom-section marker.
        repainting_configuration: Coat counts for the repaint regime.
        display_order: Canonical order class, assigned by the ordering service.
        creation_index: Original insertion position.
    """

    id: str
    area_type: AreaType | str | None = None
    painting_system: PaintingSystem = PaintingSystem.FRESH
    area: float | None = 0.0
    per_sqft_rate: float | str = 0.0
    selected_materials: SelectedMaterials = field(default_factory=SelectedMaterials)
    coat_configuration: CoatConfiguration = field(default_factory=CoatConfiguration)
    paint_type_category: PaintTypeCategory = PaintTypeCategory.INTERIOR
    label: str = ""
    section_name: str | None = None
    is_custom_section: bool = False
    repainting_configuration: RepaintingConfiguration | None = None
    display_order: int | None = None
    creation_index: int | None = None

    @property
    def display_label(self) -> str:
        if self.label:
            return self.label
        if self.section_name:
            return self.section_name
        area_type = self.area_type
        if area_type is None:
            return self.id
        return area_type.value if isinstance(area_type, AreaType) else str(area_type)

    @property
    def is_fresh(self) -> bool:
        return self.painting_system == PaintingSystem.FRESH

    @property
    def is_enamel(self) -> bool:
        """Door/window/grill work painted with an oil-based enamel system."""
        area_type = str(getattr(self.area_type, "value", self.area_type) or "").lower()
        return (
            area_type in ("enamel", "door & window")
            or "enamel" in (self.label or "").lower()
            or "enamel" in (self.selected_materials.emulsion or "").lower()
        )

    def coats_for(self, role: MaterialRole) -> int:
        """Coats applied for a role under this configuration's regime."""
        if self.is_fresh:
            return self.coat_configuration.for_role(role)
        if role == MaterialRole.PUTTY:
            return 0
        if self.repainting_configuration is not None:
            return getattr(self.repainting_configuration, role.value) or 0
        return self.coat_configuration.for_role(role)


@dataclass
class Room:
    """A measured room with its wall adjustments."""

    name: str
    dimensions: RoomDimensions
    project_type: PaintTypeCategory = PaintTypeCategory.INTERIOR
    openings: list[AreaAdjustment] = field(default_factory=list)
    extra_surfaces: list[AreaAdjustment] = field(default_factory=list)
    door_window_grills: list[AreaAdjustment] = field(default_factory=list)
    selected_areas: dict[str, bool] | None = None

    def add_adjustment(self, adjustment: AreaAdjustment) -> None:
        """File an adjustment under the list matching its kind."""
        if adjustment.kind == AdjustmentKind.EXTRA_SURFACE:
            self.extra_surfaces.append(adjustment)
        elif adjustment.kind == AdjustmentKind.DOOR_WINDOW_GRILL:
            self.door_window_grills.append(adjustment)
        else:
            self.openings.append(adjustment)

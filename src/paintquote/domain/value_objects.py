"""Value objects for the paint estimation domain.

All result types are frozen dataclasses so they can be shared between the
UI/export layer and cached safely. Enums derive from ``str`` for JSON
compatibility.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AreaType(str, Enum):
    """Kinds of surface a paint configuration applies to."""

    WALL = "wall"
    CEILING = "ceiling"
    FLOOR = "floor"
    ENAMEL = "enamel"
    CUSTOM = "custom"


class PaintingSystem(str, Enum):
    """Coat regime for a configuration."""

    FRESH = "Fresh"
    REPAINT = "Repaint"


class PaintTypeCategory(str, Enum):
    """Paint category a room or configuration belongs to."""

    INTERIOR = "Interior"
    EXTERIOR = "Exterior"
    WATERPROOFING = "Waterproofing"


class AdjustmentKind(str, Enum):
    """How an adjustment affects wall area."""

    OPENING = "opening"
    EXTRA_SURFACE = "extra_surface"
    DOOR_WINDOW_GRILL = "door_window_grill"


class MaterialRole(str, Enum):
    """Position of a material in the coat stack."""

    PUTTY = "putty"
    PRIMER = "primer"
    EMULSION = "emulsion"


class MaterialStatus(str, Enum):
    """Outcome of estimating a single material line."""

    OK = "ok"
    COVERAGE_NOT_CONFIGURED = "coverage_not_configured"
    PRICING_NOT_CONFIGURED = "pricing_not_configured"
    PACK_COMBINATION_NOT_FOUND = "pack_combination_not_found"


@dataclass(frozen=True)
class RoomDimensions:
    """Room dimensions in feet."""

    length: float
    width: float
    height: float = 0.0


@dataclass(frozen=True)
class AreaAdjustment:
    """An area in sq.ft that is deducted from or added to a wall."""

    area: float
    kind: AdjustmentKind = AdjustmentKind.OPENING
    label: str = ""


@dataclass(frozen=True)
class RoomAreaResult:
    """Derived areas for a single room, rounded to 2 decimals."""

    floor_area: float
    wall_area: float
    ceiling_area: float
    adjusted_wall_area: float
    total_opening_area: float
    total_extra_surface: float
    total_door_window_grill_area: float


@dataclass(frozen=True)
class AreaTotals:
    """Project-wide area totals by surface, summed across rooms."""

    wall: float = 0.0
    ceiling: float = 0.0
    floor: float = 0.0
    enamel: float = 0.0

    def for_area_type(self, area_type: AreaType | str) -> float:
        """Total matching an area type (custom sections have none)."""
        return {
            AreaType.WALL: self.wall,
            AreaType.CEILING: self.ceiling,
            AreaType.FLOOR: self.floor,
            AreaType.ENAMEL: self.enamel,
        }.get(area_type, 0.0)


@dataclass(frozen=True)
class CoverageSpec:
    """Catalog coverage text for a product, e.g. ``"140-160"``."""

    product_name: str
    coverage_range_text: str


@dataclass(frozen=True)
class PackOption:
    """One purchasable pack size for a product."""

    size: float
    price: float
    label: str = ""


@dataclass(frozen=True)
class PackLine:
    """A pack size chosen in a combination and how many of it to buy."""

    size: float
    quantity: int
    price: float
    label: str = ""

    @property
    def cost(self) -> float:
        return self.quantity * self.price

    @property
    def units(self) -> float:
        return self.quantity * self.size


@dataclass(frozen=True)
class PackCombination:
    """Packs chosen to cover a required quantity.

    Attributes:
        packs: Chosen pack lines, largest size first. Each size appears once.
        total_cost: Sum of quantity x price across lines.
        error: Set when a positive quantity could not be covered.
    """

    packs: tuple[PackLine, ...] = ()
    total_cost: float = 0.0
    error: str | None = None

    @property
    def total_units(self) -> float:
        return sum(line.units for line in self.packs)

    @property
    def pack_count(self) -> int:
        return sum(line.quantity for line in self.packs)

    @property
    def is_empty(self) -> bool:
        return not self.packs

    def describe(self) -> str:
        """Short text such as ``"2 x 20 + 2 x 4"``."""
        if not self.packs:
            return "-"
        return " + ".join(
            f"{line.quantity} x {line.label or _format_size(line.size)}"
            for line in self.packs
        )


def _format_size(size: float) -> str:
    return f"{size:g}"


@dataclass(frozen=True)
class MaterialLine:
    """Quantity and cost of one material for one configuration."""

    product: str
    role: MaterialRole
    area: float
    coats: int
    coverage_rate: float
    required_quantity: int
    unit: str
    combination: PackCombination = field(default_factory=PackCombination)
    status: MaterialStatus = MaterialStatus.OK
    warning: str | None = None

    @property
    def total_cost(self) -> float:
        return self.combination.total_cost


@dataclass(frozen=True)
class ConfigMaterialResult:
    """All material lines for a configuration."""

    config_label: str
    paint_type_category: str
    materials: tuple[MaterialLine, ...]
    is_enamel: bool = False

    @property
    def total_cost(self) -> float:
        return sum(line.total_cost for line in self.materials)

    @property
    def warnings(self) -> list[str]:
        return [line.warning for line in self.materials if line.warning]


@dataclass(frozen=True)
class LabourTask:
    """Labour needed for one material pass over an area."""

    name: str
    area: float
    coats: int
    total_work: float
    coverage: float
    days_required: int


@dataclass(frozen=True)
class ConfigLabourResult:
    """Labour tasks for a configuration; tasks run one after another."""

    config_label: str
    paint_type_category: str
    tasks: tuple[LabourTask, ...]
    is_enamel: bool = False

    @property
    def total_days(self) -> int:
        return sum(task.days_required for task in self.tasks)


@dataclass(frozen=True)
class ProjectTotals:
    """Final quotation figures."""

    company_project_cost: float
    material_cost: float
    labour_cost: float
    margin_cost: float
    actual_total_cost: float


@dataclass(frozen=True)
class CategoryBreakdown:
    """Area and company cost grouped by paint category."""

    total_area: float
    total_cost: float
    area_by_category: dict[str, float]
    cost_by_category: dict[str, float]

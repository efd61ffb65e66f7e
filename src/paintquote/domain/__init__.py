"""Domain layer - estimation entities, value objects and services."""

from .cache import CalculationCache
from .entities import (
    AreaConfig,
    CoatConfiguration,
    RepaintingConfiguration,
    Room,
    SelectedMaterials,
)
from .numeric import safe_number, validate_sqft_input
from .value_objects import (
    AdjustmentKind,
    AreaAdjustment,
    AreaTotals,
    AreaType,
    CategoryBreakdown,
    ConfigLabourResult,
    ConfigMaterialResult,
    CoverageSpec,
    LabourTask,
    MaterialLine,
    MaterialRole,
    MaterialStatus,
    PackCombination,
    PackLine,
    PackOption,
    PaintingSystem,
    PaintTypeCategory,
    ProjectTotals,
    RoomAreaResult,
    RoomDimensions,
)

__all__ = [
    "AdjustmentKind",
    "AreaAdjustment",
    "AreaConfig",
    "AreaTotals",
    "AreaType",
    "CalculationCache",
    "CategoryBreakdown",
    "CoatConfiguration",
    "ConfigLabourResult",
    "ConfigMaterialResult",
    "CoverageSpec",
    "LabourTask",
    "MaterialLine",
    "MaterialRole",
    "MaterialStatus",
    "PackCombination",
    "PackLine",
    "PackOption",
    "PaintingSystem",
    "PaintTypeCategory",
    "ProjectTotals",
    "RepaintingConfiguration",
    "Room",
    "RoomAreaResult",
    "RoomDimensions",
    "SelectedMaterials",
    "safe_number",
    "validate_sqft_input",
]

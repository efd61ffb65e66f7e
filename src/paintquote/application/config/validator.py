"""Validation structures and estimating advisory checks.

Schema errors are caught by pydantic when the file is loaded; the checks
here look for estimates that load fine but would quote poorly, such as
materials with no coverage or pricing in the catalog.
"""

from dataclasses import dataclass, field
from typing import Any

from paintquote.application.config.schema import AreaConfigSchema, EstimateConfiguration
from paintquote.domain import AreaType, PaintingSystem

# Dealer margins above this are unusual enough to flag.
MAX_TYPICAL_MARGIN = 10.0


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "area_configs[0].area")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [
                {"path": e.path, "message": e.message, "value": e.value}
                for e in self.errors
            ],
            "warnings": [
                {"path": w.path, "message": w.message, "suggestion": w.suggestion}
                for w in self.warnings
            ],
        }


def check_catalog_advisories(config: EstimateConfiguration) -> ValidationResult:
    """Warn about selected products the catalog cannot price or cover."""
    result = ValidationResult()
    catalog = config.catalog
    for i, area_config in enumerate(config.area_configs):
        materials = area_config.selected_materials
        for role in ("putty", "primer", "emulsion"):
            product = getattr(materials, role)
            if not product:
                continue
            path = f"area_configs[{i}].selected_materials.{role}"
            if product not in catalog.coverage:
                result.add_warning(
                    path,
                    f"No coverage configured for '{product}'",
                    suggestion="Quantities will assume 100 sq.ft per unit",
                )
            if not catalog.pricing.get(product):
                result.add_warning(
                    path,
                    f"No pack pricing configured for '{product}'",
                    suggestion="Material cost for this product will be 0",
                )
    return result


def _applied_coats(area_config: AreaConfigSchema) -> tuple[int, ...]:
    """Coat counts the configuration's painting system will actually use."""
    coats = area_config.coat_configuration
    if area_config.painting_system == PaintingSystem.FRESH:
        return (coats.putty, coats.primer, coats.emulsion)
    repaint = area_config.repainting_configuration or coats
    return (repaint.primer, repaint.emulsion)


def check_area_advisories(config: EstimateConfiguration) -> ValidationResult:
    """Check area configurations against the measured rooms."""
    result = ValidationResult()
    room_categories = {room.project_type for room in config.rooms}

    for i, area_config in enumerate(config.area_configs):
        path = f"area_configs[{i}]"
        if area_config.area is None and area_config.paint_type_category not in room_categories:
            result.add_warning(
                f"{path}.area",
                f"No {area_config.paint_type_category.value} rooms to derive the area from",
                suggestion="Add rooms of this category or give an explicit area",
            )
        if (area_config.area or area_config.area is None) and area_config.per_sqft_rate == 0:
            result.add_warning(
                f"{path}.per_sqft_rate",
                "Rate per sq.ft is 0; this work adds nothing to the project cost",
            )
        if not any(_applied_coats(area_config)) and area_config.area_type != AreaType.CUSTOM:
            result.add_warning(f"{path}.coat_configuration", "No coats configured")

    for i, room in enumerate(config.rooms):
        wall = 2 * (room.length + room.width) * room.height if room.height else 0.0
        openings = sum(a.area for a in room.openings)
        if wall and openings > wall:
            result.add_error(
                f"rooms[{i}].openings",
                f"Openings ({openings:.2f} sq.ft) exceed the wall area ({wall:.2f} sq.ft)",
                value=openings,
            )
    return result


def validate_config(config: EstimateConfiguration) -> ValidationResult:
    """Run all advisory checks on an already-parsed estimate."""
    result = ValidationResult()
    for partial in (check_catalog_advisories(config), check_area_advisories(config)):
        result.errors.extend(partial.errors)
        result.warnings.extend(partial.warnings)

    if config.margin_percentage > MAX_TYPICAL_MARGIN:
        result.add_warning(
            "margin_percentage",
            f"Margin of {config.margin_percentage:g}% is above the usual "
            f"{MAX_TYPICAL_MARGIN:g}%",
        )
    if config.labour.mode == "manual" and config.labour.manual_days == 0:
        result.add_warning("labour.manual_days", "Manual labour mode with 0 days")
    return result

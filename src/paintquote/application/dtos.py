"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from paintquote.domain import (
    AreaConfig,
    AreaTotals,
    CategoryBreakdown,
    ConfigLabourResult,
    ConfigMaterialResult,
    ProjectTotals,
    RoomAreaResult,
)


@dataclass
class LabourSettings:
    """Input DTO for labour estimation."""

    mode: str = "auto"
    manual_days: int = 5
    number_of_workers: int = 1
    working_hours: float = 7.0
    standard_hours: float = 8.0
    per_day_cost: float = 1100.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.mode not in ("auto", "manual"):
            errors.append("Labour mode must be 'auto' or 'manual'")
        if self.manual_days < 0:
            errors.append("Manual days cannot be negative")
        if self.number_of_workers < 1:
            errors.append("Must have at least 1 worker")
        if self.working_hours <= 0 or self.working_hours > 24:
            errors.append("Working hours must be between 0 and 24")
        if self.standard_hours <= 0 or self.standard_hours > 24:
            errors.append("Standard hours must be between 0 and 24")
        if self.per_day_cost < 0:
            errors.append("Per-day cost cannot be negative")
        return errors


@dataclass
class RoomAreaOutput:
    """Areas computed for one room."""

    name: str
    project_type: str
    areas: RoomAreaResult
    paintable_area: float


@dataclass
class ProjectSummaryOutput:
    """Output DTO for a full project summary.

    Every figure shown by the UI or written to a quotation comes from here.
    """

    rooms: list[RoomAreaOutput] = field(default_factory=list)
    area_totals: AreaTotals = field(default_factory=AreaTotals)
    area_configs: list[AreaConfig] = field(default_factory=list)
    materials: list[ConfigMaterialResult] = field(default_factory=list)
    labour: list[ConfigLabourResult] = field(default_factory=list)
    labour_mode: str = "auto"
    labour_days: int = 0
    number_of_workers: int = 1
    per_day_cost: float = 0.0
    totals: ProjectTotals | None = None
    breakdown: CategoryBreakdown | None = None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

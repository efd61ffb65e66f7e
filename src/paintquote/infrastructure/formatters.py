"""Output formatters for estimation results."""

from __future__ import annotations

import json
from typing import Any

from paintquote.application.dtos import ProjectSummaryOutput, RoomAreaOutput
from paintquote.domain import (
    AreaConfig,
    ConfigLabourResult,
    ConfigMaterialResult,
    MaterialLine,
    PackCombination,
    ProjectTotals,
    RoomAreaResult,
)

WIDTH = 72


def _money(value: float) -> str:
    return f"Rs. {value:,.2f}"


class RoomAreaFormatter:
    """Formats per-room area tables."""

    def format(self, rooms: list[RoomAreaOutput]) -> str:
        if not rooms:
            return "No rooms."

        header = (
            f"{'Room':<20} {'Type':<10} {'Floor':>9} {'Wall':>9} "
            f"{'Ceiling':>9} {'Adj.Wall':>9}"
        )
        lines = ["ROOM AREAS (sq.ft)", "=" * WIDTH, header, "-" * WIDTH]
        for room in rooms:
            a = room.areas
            lines.append(
                f"{room.name[:20]:<20} {room.project_type[:10]:<10} "
                f"{a.floor_area:>9.2f} {a.wall_area:>9.2f} "
                f"{a.ceiling_area:>9.2f} {a.adjusted_wall_area:>9.2f}"
            )
            if a.total_opening_area or a.total_extra_surface:
                lines.append(
                    f"  openings -{a.total_opening_area:.2f}, "
                    f"extra +{a.total_extra_surface:.2f}"
                )
            if a.total_door_window_grill_area:
                lines.append(f"  door/window/grill {a.total_door_window_grill_area:.2f}")
        return "\n".join(lines)

    def format_single(self, areas: RoomAreaResult) -> str:
        """Format the areas of one ad-hoc room."""
        return "\n".join(
            [
                f"Floor area:          {areas.floor_area:.2f} sq.ft",
                f"Wall area:           {areas.wall_area:.2f} sq.ft",
                f"Ceiling area:        {areas.ceiling_area:.2f} sq.ft",
                f"Openings:            {areas.total_opening_area:.2f} sq.ft",
                f"Extra surfaces:      {areas.total_extra_surface:.2f} sq.ft",
                f"Door/window/grill:   {areas.total_door_window_grill_area:.2f} sq.ft",
                f"Adjusted wall area:  {areas.adjusted_wall_area:.2f} sq.ft",
            ]
        )


class MaterialReportFormatter:
    """Formats material quantities and pack purchases."""

    def format(self, results: list[ConfigMaterialResult]) -> str:
        lines = ["MATERIALS", "=" * WIDTH]
        for result in results:
            if not result.materials:
                continue
            lines.append(f"{result.config_label} ({result.paint_type_category})")
            for line in result.materials:
                lines.append(self._format_line(line))
            lines.append(f"  Subtotal: {_money(result.total_cost)}")
            lines.append("")
        total = sum(r.total_cost for r in results)
        lines.append("-" * WIDTH)
        lines.append(f"Total material cost: {_money(total)}")
        return "\n".join(lines)

    def _format_line(self, line: MaterialLine) -> str:
        text = (
            f"  {line.role.value.title():<8} {line.product[:28]:<28} "
            f"{line.required_quantity:>4} {line.unit:<3} "
            f"[{line.combination.describe()}] {_money(line.total_cost)}"
        )
        if line.warning:
            text += f"\n    ! {line.warning}"
        return text

    def format_packs(self, required: float, combination: PackCombination) -> str:
        """Format a single pack combination."""
        if combination.error:
            return f"Required {required:g}: {combination.error}"
        if combination.is_empty:
            return f"Required {required:g}: nothing to buy"
        lines = [f"Required {required:g} -> {combination.total_units:g} in {combination.pack_count} pack(s)"]
        for pack in combination.packs:
            label = pack.label or f"{pack.size:g}"
            lines.append(
                f"  {pack.quantity} x {label:<10} @ {_money(pack.price)} = {_money(pack.cost)}"
            )
        lines.append(f"Total: {_money(combination.total_cost)}")
        return "\n".join(lines)


class LabourReportFormatter:
    """Formats labour task breakdowns."""

    def format(self, results: list[ConfigLabourResult], labour_days: int) -> str:
        lines = ["LABOUR", "=" * WIDTH]
        for result in results:
            if not result.tasks:
                continue
            lines.append(f"{result.config_label} ({result.paint_type_category})")
            for task in result.tasks:
                lines.append(
                    f"  {task.name[:30]:<30} {task.total_work:>9.2f} sq.ft "
                    f"@ {task.coverage:g}/day -> {task.days_required} day(s)"
                )
        lines.append("-" * WIDTH)
        lines.append(f"Labour days: {labour_days}")
        return "\n".join(lines)


class QuotationFormatter:
    """Formats a full project summary as a plain-text quotation."""

    def __init__(self) -> None:
        self.rooms = RoomAreaFormatter()
        self.materials = MaterialReportFormatter()
        self.labour = LabourReportFormatter()

    def format(self, output: ProjectSummaryOutput, project_name: str = "") -> str:
        if not output.is_valid:
            return "\n".join(f"Error: {e}" for e in output.errors)

        title = "QUOTATION"
        if project_name:
            title += f" - {project_name}"
        sections = [title, ""]
        if output.rooms:
            sections += [self.rooms.format(output.rooms), ""]
        sections += [self._format_configs(output.area_configs), ""]
        sections += [self.materials.format(output.materials), ""]
        sections += [self.labour.format(output.labour, output.labour_days), ""]
        if output.totals is not None:
            sections.append(self._format_totals(output))
        if output.warnings:
            sections += ["", "WARNINGS"]
            sections += [f"  - {w}" for w in output.warnings]
        return "\n".join(sections)

    def _format_configs(self, configs: list[AreaConfig]) -> str:
        lines = ["WORK ITEMS", "=" * WIDTH]
        for config in configs:
            area = config.area or 0.0
            system = getattr(config.painting_system, "value", config.painting_system)
            lines.append(
                f"{config.display_label[:30]:<30} {system:<15} "
                f"{area:>10.2f} sq.ft @ {config.per_sqft_rate}"
            )
        return "\n".join(lines)

    def _format_totals(self, output: ProjectSummaryOutput) -> str:
        totals: ProjectTotals = output.totals  # type: ignore[assignment]
        return "\n".join(
            [
                "TOTALS",
                "=" * WIDTH,
                f"Company project cost: {_money(totals.company_project_cost)}",
                f"Material cost:        {_money(totals.material_cost)}",
                f"Labour cost:          {_money(totals.labour_cost)}"
                f" ({output.labour_days} days x {output.number_of_workers} worker(s)"
                f" @ {_money(output.per_day_cost)})",
                f"Margin:               {_money(totals.margin_cost)}",
                "-" * WIDTH,
                f"Total:                {_money(totals.actual_total_cost)}",
            ]
        )


class JsonExporter:
    """Exports project summaries as JSON."""

    def export(self, output: ProjectSummaryOutput) -> str:
        """Export summary output as JSON string."""
        return json.dumps(self.to_dict(output), indent=2)

    def to_dict(self, output: ProjectSummaryOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {"errors": output.errors}

        data: dict[str, Any] = {
            "rooms": [self._format_room(r) for r in output.rooms],
            "area_totals": {
                "wall": output.area_totals.wall,
                "ceiling": output.area_totals.ceiling,
                "floor": output.area_totals.floor,
                "enamel": output.area_totals.enamel,
            },
            "area_configs": [self._format_config(c) for c in output.area_configs],
            "materials": [self._format_materials(m) for m in output.materials],
            "labour": {
                "mode": output.labour_mode,
                "days": output.labour_days,
                "number_of_workers": output.number_of_workers,
                "per_day_cost": output.per_day_cost,
                "configs": [self._format_labour(r) for r in output.labour],
            },
            "warnings": list(output.warnings),
        }
        if output.totals is not None:
            t = output.totals
            data["totals"] = {
                "company_project_cost": round(t.company_project_cost, 2),
                "material_cost": round(t.material_cost, 2),
                "labour_cost": round(t.labour_cost, 2),
                "margin_cost": round(t.margin_cost, 2),
                "actual_total_cost": round(t.actual_total_cost, 2),
            }
        if output.breakdown is not None:
            b = output.breakdown
            data["breakdown"] = {
                "total_area": b.total_area,
                "total_cost": b.total_cost,
                "area_by_category": dict(b.area_by_category),
                "cost_by_category": dict(b.cost_by_category),
            }
        return data

    def export_room_areas(self, areas: RoomAreaResult) -> str:
        return json.dumps(self._format_areas(areas), indent=2)

    def export_packs(self, required: float, combination: PackCombination) -> str:
        return json.dumps(
            {"required_quantity": required, **self._format_combination(combination)},
            indent=2,
        )

    def _format_areas(self, areas: RoomAreaResult) -> dict[str, float]:
        return {
            "floor_area": areas.floor_area,
            "wall_area": areas.wall_area,
            "ceiling_area": areas.ceiling_area,
            "adjusted_wall_area": areas.adjusted_wall_area,
            "total_opening_area": areas.total_opening_area,
            "total_extra_surface": areas.total_extra_surface,
            "total_door_window_grill_area": areas.total_door_window_grill_area,
        }

    def _format_room(self, room: RoomAreaOutput) -> dict[str, Any]:
        return {
            "name": room.name,
            "project_type": room.project_type,
            "paintable_area": room.paintable_area,
            **self._format_areas(room.areas),
        }

    def _format_config(self, config: AreaConfig) -> dict[str, Any]:
        return {
            "id": config.id,
            "label": config.display_label,
            "area_type": getattr(config.area_type, "value", config.area_type),
            "painting_system": str(
                getattr(config.painting_system, "value", config.painting_system)
            ),
            "paint_type_category": str(
                getattr(config.paint_type_category, "value", config.paint_type_category)
            ),
            "area": config.area,
            "per_sqft_rate": config.per_sqft_rate,
            "display_order": config.display_order,
            "creation_index": config.creation_index,
        }

    def _format_combination(self, combination: PackCombination) -> dict[str, Any]:
        return {
            "packs": [
                {
                    "size": p.size,
                    "label": p.label,
                    "quantity": p.quantity,
                    "price": p.price,
                    "cost": p.cost,
                }
                for p in combination.packs
            ],
            "total_cost": combination.total_cost,
            "error": combination.error,
        }

    def _format_materials(self, result: ConfigMaterialResult) -> dict[str, Any]:
        return {
            "config_label": result.config_label,
            "paint_type_category": result.paint_type_category,
            "is_enamel": result.is_enamel,
            "total_cost": result.total_cost,
            "materials": [
                {
                    "product": line.product,
                    "role": line.role.value,
                    "area": line.area,
                    "coats": line.coats,
                    "coverage_rate": line.coverage_rate,
                    "required_quantity": line.required_quantity,
                    "unit": line.unit,
                    "status": line.status.value,
                    "warning": line.warning,
                    **self._format_combination(line.combination),
                }
                for line in result.materials
            ],
        }

    def _format_labour(self, result: ConfigLabourResult) -> dict[str, Any]:
        return {
            "config_label": result.config_label,
            "paint_type_category": result.paint_type_category,
            "is_enamel": result.is_enamel,
            "total_days": result.total_days,
            "tasks": [
                {
                    "name": t.name,
                    "area": t.area,
                    "coats": t.coats,
                    "total_work": t.total_work,
                    "coverage": t.coverage,
                    "days_required": t.days_required,
                }
                for t in result.tasks
            ],
        }

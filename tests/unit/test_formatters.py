"""Unit tests for quotation text and JSON output."""

import json

import pytest

from paintquote.application import GenerateSummaryCommand, LabourSettings, ProjectSummaryOutput
from paintquote.domain import PackOption
from paintquote.domain.services import calculate_room_areas, optimal_pack_combination
from paintquote.infrastructure import (
    JsonExporter,
    MaterialReportFormatter,
    QuotationFormatter,
    RoomAreaFormatter,
)


@pytest.fixture
def summary(rooms, area_configs, catalog) -> ProjectSummaryOutput:
    settings = LabourSettings(working_hours=8, standard_hours=8)
    return GenerateSummaryCommand().execute(rooms, area_configs, catalog, settings)


class TestQuotationFormatter:
    def test_sections(self, summary: ProjectSummaryOutput) -> None:
        text = QuotationFormatter().format(summary, project_name="Sharma Residence")

        assert text.startswith("QUOTATION - Sharma Residence")
        for heading in ("ROOM AREAS", "WORK ITEMS", "MATERIALS", "LABOUR", "TOTALS", "WARNINGS"):
            assert heading in text
        assert "Rs. 26,067.20" in text
        assert "Labour days: 13" in text

    def test_sections_follow_display_order(self, summary: ProjectSummaryOutput) -> None:
        text = QuotationFormatter().format(summary)
        work_items = text[text.index("WORK ITEMS") : text.index("MATERIALS")]

        assert work_items.index("wall") < work_items.index("ceiling") < work_items.index("enamel")

    def test_errors(self) -> None:
        output = ProjectSummaryOutput(errors=["Must have at least 1 worker"])

        assert QuotationFormatter().format(output) == "Error: Must have at least 1 worker"


class TestRoomAreaFormatter:
    def test_single_room(self) -> None:
        text = RoomAreaFormatter().format_single(calculate_room_areas(12, 10, 10, openings=[21, 15]))

        assert "Adjusted wall area:  404.00 sq.ft" in text
        assert "Openings:            36.00 sq.ft" in text

    def test_no_rooms(self) -> None:
        assert RoomAreaFormatter().format([]) == "No rooms."


class TestMaterialReportFormatter:
    def test_format_packs(self) -> None:
        combination = optimal_pack_combination(45, [PackOption(20, 100), PackOption(4, 30)])

        text = MaterialReportFormatter().format_packs(45, combination)

        assert text.splitlines()[0] == "Required 45 -> 48 in 4 pack(s)"
        assert text.endswith("Total: Rs. 260.00")

    def test_format_packs_error(self) -> None:
        combination = optimal_pack_combination(10, [PackOption(0, 100)])

        text = MaterialReportFormatter().format_packs(10, combination)

        assert text.startswith("Required 10: ")

    def test_format_materials(self, summary: ProjectSummaryOutput) -> None:
        text = MaterialReportFormatter().format(summary.materials)

        assert "4 x 20 kg + 3 x 5 kg" in text
        assert "Total material cost: Rs. 10,140.00" in text
        assert "Pricing not configured" in text


class TestJsonExporter:
    def test_export(self, summary: ProjectSummaryOutput) -> None:
        data = json.loads(JsonExporter().export(summary))

        assert data["totals"] == {
            "company_project_cost": 16272.0,
            "material_cost": 10140.0,
            "labour_cost": 14300.0,
            "margin_cost": 1627.2,
            "actual_total_cost": 26067.2,
        }
        assert data["labour"]["days"] == 13
        assert [c["id"] for c in data["area_configs"]] == ["wall-1", "ceiling-1", "enamel-1"]
        assert [c["display_order"] for c in data["area_configs"]] == [1, 2, 5]
        assert data["area_totals"]["wall"] == 1104.0
        assert data["breakdown"]["area_by_category"] == {"Interior": 924.0}
        assert len(data["warnings"]) == 2

    def test_material_lines(self, summary: ProjectSummaryOutput) -> None:
        data = JsonExporter().to_dict(summary)
        putty = data["materials"][0]["materials"][0]

        assert putty["role"] == "putty"
        assert putty["required_quantity"] == 92
        assert putty["unit"] == "kg"
        assert putty["total_cost"] == 3950
        assert [p["label"] for p in putty["packs"]] == ["20 kg", "5 kg"]

    def test_errors(self) -> None:
        output = ProjectSummaryOutput(errors=["bad"])

        assert JsonExporter().to_dict(output) == {"errors": ["bad"]}

    def test_export_packs(self) -> None:
        combination = optimal_pack_combination(45, [PackOption(20, 100), PackOption(4, 30)])

        data = json.loads(JsonExporter().export_packs(45, combination))

        assert data["required_quantity"] == 45
        assert data["total_cost"] == 260
        assert data["error"] is None

"""Unit tests for estimate advisory checks."""

from paintquote.application.config import ValidationResult, load_config_from_dict, validate_config
from paintquote.application.config.validator import (
    check_area_advisories,
    check_catalog_advisories,
)


class TestValidationResult:
    def test_exit_codes(self) -> None:
        result = ValidationResult()
        assert result.exit_code == 0

        result.add_warning("margin_percentage", "High margin")
        assert result.is_valid
        assert result.exit_code == 2

        result.add_error("rooms[0].openings", "Too large", value=900)
        assert not result.is_valid
        assert result.exit_code == 1

    def test_to_dict(self) -> None:
        result = ValidationResult().add_error("a", "bad", value=1)

        assert result.to_dict() == {
            "is_valid": False,
            "errors": [{"path": "a", "message": "bad", "value": 1}],
            "warnings": [],
        }


class TestValidateConfig:
    def test_clean_estimate(self, minimal_estimate_data) -> None:
        result = validate_config(load_config_from_dict(minimal_estimate_data))

        assert result.errors == []
        assert result.warnings == []

    def test_missing_catalog_entries(self, full_estimate_data) -> None:
        result = check_catalog_advisories(load_config_from_dict(full_estimate_data))

        assert [w.path for w in result.warnings] == [
            "area_configs[0].selected_materials.primer",
            "area_configs[0].selected_materials.emulsion",
        ]
        assert "No pack pricing configured for 'Enamel Base'" in result.warnings[0].message
        assert "No coverage configured for 'Gloss Enamel'" in result.warnings[1].message

    def test_full_estimate_has_warnings_only(self, full_estimate_data) -> None:
        result = validate_config(load_config_from_dict(full_estimate_data))

        assert result.is_valid
        assert result.exit_code == 2

    def test_no_rooms_for_category(self, minimal_estimate_data) -> None:
        minimal_estimate_data["area_configs"][0]["paint_type_category"] = "Exterior"

        result = check_area_advisories(load_config_from_dict(minimal_estimate_data))

        assert result.warnings[0].path == "area_configs[0].area"
        assert "No Exterior rooms" in result.warnings[0].message

    def test_zero_rate_and_no_coats(self, minimal_estimate_data) -> None:
        minimal_estimate_data["area_configs"][0].update(
            per_sqft_rate=0, coat_configuration={}
        )

        result = check_area_advisories(load_config_from_dict(minimal_estimate_data))

        assert [w.path for w in result.warnings] == [
            "area_configs[0].per_sqft_rate",
            "area_configs[0].coat_configuration",
        ]

    def test_repaint_coats_count(self, minimal_estimate_data) -> None:
        minimal_estimate_data["area_configs"][0].update(
            painting_system="Repainting",
            coat_configuration={},
            repainting_configuration={"emulsion": 2},
        )

        result = check_area_advisories(load_config_from_dict(minimal_estimate_data))

        assert result.warnings == []

    def test_repaint_ignores_putty_coats(self, minimal_estimate_data) -> None:
        minimal_estimate_data["area_configs"][0].update(
            painting_system="Repainting", coat_configuration={"putty": 2}
        )

        result = check_area_advisories(load_config_from_dict(minimal_estimate_data))

        assert [w.path for w in result.warnings] == ["area_configs[0].coat_configuration"]

    def test_openings_larger_than_walls(self, minimal_estimate_data) -> None:
        minimal_estimate_data["rooms"][0]["openings"] = [{"area": 300}, {"area": 150}]

        result = validate_config(load_config_from_dict(minimal_estimate_data))

        assert not result.is_valid
        assert result.errors[0].path == "rooms[0].openings"
        assert result.errors[0].value == 450

    def test_high_margin(self, minimal_estimate_data) -> None:
        minimal_estimate_data["margin_percentage"] = 25

        result = validate_config(load_config_from_dict(minimal_estimate_data))

        assert [w.path for w in result.warnings] == ["margin_percentage"]

    def test_manual_mode_without_days(self, minimal_estimate_data) -> None:
        minimal_estimate_data["labour"] = {"mode": "manual", "manual_days": 0}

        result = validate_config(load_config_from_dict(minimal_estimate_data))

        assert [w.path for w in result.warnings] == ["labour.manual_days"]

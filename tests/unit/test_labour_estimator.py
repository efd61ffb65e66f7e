"""Unit tests for labour-day estimation."""

import pytest

from paintquote.domain import (
    AreaConfig,
    AreaType,
    CoatConfiguration,
    MaterialRole,
    PaintingSystem,
    PaintTypeCategory,
    RepaintingConfiguration,
    SelectedMaterials,
)
from paintquote.domain.services import (
    LABOUR_COVERAGE_RATES,
    LabourEstimator,
    calculate_labour_cost,
    calculate_labour_days,
)


def make_config(**overrides) -> AreaConfig:
    values = dict(
        id="wall",
        area=700,
        selected_materials=SelectedMaterials(
            putty="Wall Putty", primer="Interior Primer", emulsion="Silk Emulsion"
        ),
        coat_configuration=CoatConfiguration(putty=2, primer=1, emulsion=2),
    )
    values.update(overrides)
    return AreaConfig(**values)


class TestCalculateLabourDays:
    def test_examples(self) -> None:
        assert calculate_labour_days(300, 150, 1) == 2
        assert calculate_labour_days(301, 150, 2) == 2
        assert calculate_labour_days(301, 150, 1) == 3

    def test_degenerate_inputs(self) -> None:
        assert calculate_labour_days(0) == 0
        assert calculate_labour_days(300, 0) == 0
        assert calculate_labour_days(300, 150, 0) == 0

    def test_labour_cost(self) -> None:
        assert calculate_labour_cost(3) == 3300
        assert calculate_labour_cost(2, 1500) == 3000


class TestCoverageRates:
    def test_rate_table(self) -> None:
        rates = LABOUR_COVERAGE_RATES

        assert rates.putty == 400
        assert rates.interior_primer == 700
        assert rates.exterior_primer == 550
        assert rates.interior_emulsion == 700
        assert rates.exterior_emulsion == 550
        assert rates.red_oxide == 300
        assert rates.enamel_base == 250
        assert rates.enamel_top == 280
        assert rates.full_3_coat == 275

    def test_interior_and_exterior(self) -> None:
        estimator = LabourEstimator()
        interior = make_config()
        exterior = make_config(paint_type_category=PaintTypeCategory.EXTERIOR)

        assert estimator.coverage_for(interior, MaterialRole.PRIMER) == 700
        assert estimator.coverage_for(exterior, MaterialRole.PRIMER) == 550
        assert estimator.coverage_for(exterior, MaterialRole.EMULSION) == 550
        assert estimator.coverage_for(exterior, MaterialRole.PUTTY) == 400

    def test_enamel_system(self) -> None:
        config = make_config(
            area_type=AreaType.ENAMEL,
            selected_materials=SelectedMaterials(
                primer="Enamel Base", emulsion="Gloss Enamel"
            ),
        )
        estimator = LabourEstimator()

        assert estimator.coverage_for(config, MaterialRole.PRIMER) == 250
        assert estimator.coverage_for(config, MaterialRole.EMULSION) == 280

    def test_red_oxide_primer(self) -> None:
        config = make_config(
            painting_system=PaintingSystem.REPAINT,
            selected_materials=SelectedMaterials(primer="Red Oxide Primer"),
        )

        assert LabourEstimator().coverage_for(config, MaterialRole.PRIMER) == 300


class TestLabourEstimator:
    def test_hours_adjusted_days(self) -> None:
        estimator = LabourEstimator(working_hours=7, standard_hours=8)

        tasks = estimator.calculate_tasks(make_config())

        assert [t.name for t in tasks] == ["Wall Putty", "Interior Primer", "Silk Emulsion"]
        assert [t.total_work for t in tasks] == [1400, 700, 1400]
        assert [t.days_required for t in tasks] == [4, 2, 3]

    def test_full_standard_day(self) -> None:
        estimator = LabourEstimator(working_hours=8, standard_hours=8)

        result = estimator.calculate_config(make_config())

        assert [t.days_required for t in result.tasks] == [4, 1, 2]
        assert result.total_days == 7

    def test_workers_share_the_work(self) -> None:
        estimator = LabourEstimator(working_hours=8, standard_hours=8, number_of_workers=2)

        result = estimator.calculate_config(make_config())

        assert [t.days_required for t in result.tasks] == [2, 1, 1]

    def test_repaint_skips_putty(self) -> None:
        config = make_config(
            painting_system=PaintingSystem.REPAINT,
            repainting_configuration=RepaintingConfiguration(primer=1, emulsion=2),
        )

        tasks = LabourEstimator().calculate_tasks(config)

        assert [t.name for t in tasks] == ["Interior Primer", "Silk Emulsion"]

    def test_unnamed_material_uses_role(self) -> None:
        config = make_config(
            selected_materials=SelectedMaterials(),
            coat_configuration=CoatConfiguration(emulsion=1),
        )

        tasks = LabourEstimator().calculate_tasks(config)

        assert [t.name for t in tasks] == ["Emulsion"]

    def test_zero_area(self) -> None:
        assert LabourEstimator().calculate_tasks(make_config(area=0)) == []

    def test_total_days_sums_configs(self) -> None:
        estimator = LabourEstimator(working_hours=8, standard_hours=8)
        results = estimator.calculate_all([make_config(), make_config(id="second")])

        assert LabourEstimator.total_days(results) == 14

    def test_invalid_hours_give_zero_days(self) -> None:
        estimator = LabourEstimator(working_hours=7, standard_hours=0)

        assert estimator.hours_factor == 0.0
        assert estimator.days_for(700, 700) == 0

    @pytest.mark.parametrize(
        ("working_hours", "expected"),
        [(8, 1.0), (7, 0.875), (4, 0.5)],
    )
    def test_hours_factor(self, working_hours: float, expected: float) -> None:
        assert LabourEstimator(working_hours=working_hours).hours_factor == expected

"""Pytest configuration and shared fixtures for estimation tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from paintquote.application import ProductCatalog
from paintquote.application.factory import reset_factory
from paintquote.domain import (
    AreaAdjustment,
    AreaConfig,
    AreaType,
    CoatConfiguration,
    CoverageSpec,
    PaintTypeCategory,
    Room,
    RoomDimensions,
    SelectedMaterials,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "estimates"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture(autouse=True)
def _fresh_factory():
    """Give every test its own service factory and calculation cache."""
    reset_factory()
    yield
    reset_factory()


# =============================================================================
# Shared domain fixtures
# =============================================================================


@pytest.fixture
def catalog() -> ProductCatalog:
    """Catalog matching fixtures/estimates/full_estimate.json."""
    coverage = {
        "Wall Putty": "15-20",
        "Interior Primer": "140-160",
        "Silk Emulsion": "120",
        "Enamel Base": "100-120",
    }
    return ProductCatalog(
        coverage={name: CoverageSpec(name, text) for name, text in coverage.items()},
        pricing={
            "Wall Putty": {"20 kg": 800, "5 kg": 250},
            "Interior Primer": {"20 Ltr": 2400, "4 Ltr": 520},
            "Silk Emulsion": {"20 Ltr": 5000, "10 Ltr": 2600, "4 Ltr": 1100},
            "Gloss Enamel": {"1 Ltr": 350, "500 ml": 190},
        },
    )


@pytest.fixture
def rooms() -> list[Room]:
    return [
        Room(
            name="Living",
            dimensions=RoomDimensions(12, 10, 10),
            openings=[AreaAdjustment(21, label="Door"), AreaAdjustment(15, label="Window")],
            door_window_grills=[AreaAdjustment(20, label="Window grill")],
        ),
        Room(
            name="Bedroom",
            dimensions=RoomDimensions(10, 10, 10),
            selected_areas={"floor": False, "wall": True, "ceiling": True},
        ),
        Room(
            name="Front elevation",
            dimensions=RoomDimensions(30, 10, 0),
            project_type=PaintTypeCategory.EXTERIOR,
        ),
    ]


@pytest.fixture
def wall_config() -> AreaConfig:
    return AreaConfig(
        id="wall-1",
        area_type=AreaType.WALL,
        area=None,
        per_sqft_rate=18,
        selected_materials=SelectedMaterials(
            putty="Wall Putty", primer="Interior Primer", emulsion="Silk Emulsion"
        ),
        coat_configuration=CoatConfiguration(putty=2, primer=1, emulsion=2),
    )


@pytest.fixture
def area_configs(wall_config: AreaConfig) -> list[AreaConfig]:
    """Configurations in entry order: enamel first, then wall and ceiling."""
    return [
        AreaConfig(
            id="enamel-1",
            area_type=AreaType.ENAMEL,
            area=None,
            per_sqft_rate=40,
            selected_materials=SelectedMaterials(
                primer="Enamel Base", emulsion="Gloss Enamel"
            ),
            coat_configuration=CoatConfiguration(primer=1, emulsion=2),
            creation_index=0,
        ),
        AreaConfig(
            id=wall_config.id,
            area_type=wall_config.area_type,
            area=None,
            per_sqft_rate=wall_config.per_sqft_rate,
            selected_materials=wall_config.selected_materials,
            coat_configuration=wall_config.coat_configuration,
            creation_index=1,
        ),
        AreaConfig(
            id="ceiling-1",
            area_type=AreaType.CEILING,
            area=None,
            per_sqft_rate=10,
            selected_materials=SelectedMaterials(emulsion="Silk Emulsion"),
            coat_configuration=CoatConfiguration(emulsion=2),
            creation_index=2,
        ),
    ]


# =============================================================================
# Estimate file fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def full_estimate_data() -> dict[str, Any]:
    return json.loads((FIXTURES_PATH / "full_estimate.json").read_text())


@pytest.fixture
def minimal_estimate_data() -> dict[str, Any]:
    return json.loads((FIXTURES_PATH / "minimal_estimate.json").read_text())

"""Unit tests for the product catalog."""

import pytest

from paintquote.application import CatalogIntegrityError, ProductCatalog
from paintquote.application.catalog import parse_pack_size, unit_from_label
from paintquote.domain import AreaConfig, SelectedMaterials


class TestPackLabels:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [("20 kg", 20.0), ("10 Ltr", 10.0), ("900 ml", 0.9), ("500g", 0.5), ("1.5 L", 1.5), ("Large", 0.0)],
    )
    def test_parse_pack_size(self, label: str, expected: float) -> None:
        assert parse_pack_size(label) == expected

    def test_unit_from_label(self) -> None:
        assert unit_from_label("20 kg") == "kg"
        assert unit_from_label("500 gm") == "kg"
        assert unit_from_label("4 Ltr") == "L"
        assert unit_from_label("20") is None


class TestLookup:
    def test_pack_options(self, catalog: ProductCatalog) -> None:
        options = catalog.pack_options("Gloss Enamel")

        assert [(o.size, o.price, o.label) for o in options] == [
            (1.0, 350.0, "1 Ltr"),
            (0.5, 190.0, "500 ml"),
        ]

    def test_unusable_labels_skipped(self) -> None:
        catalog = ProductCatalog(pricing={"Primer": {"Large": 100, "4 Ltr": 500}})

        assert [o.label for o in catalog.pack_options("Primer")] == ["4 Ltr"]

    def test_missing_product_has_no_packs(self, catalog: ProductCatalog) -> None:
        assert catalog.pack_options("Unknown") == []

    def test_unit_for(self, catalog: ProductCatalog) -> None:
        catalog.units["Tile Grout"] = "kg"

        assert catalog.unit_for("Wall Putty") == "kg"
        assert catalog.unit_for("Silk Emulsion") == "L"
        assert catalog.unit_for("Tile Grout") == "kg"
        assert catalog.unit_for("Acrylic Putty") == "kg"
        assert catalog.unit_for("Unpriced Paint") == "L"


class TestEditing:
    def test_set_coverage_and_price(self) -> None:
        catalog = ProductCatalog()

        catalog.set_coverage("Primer", "100-120")
        catalog.set_price("Primer", "4 Ltr", 500)

        assert catalog.coverage["Primer"].coverage_range_text == "100-120"
        assert catalog.pricing == {"Primer": {"4 Ltr": 500.0}}

    def test_add_custom_product(self, catalog: ProductCatalog) -> None:
        product = catalog.add_custom_product(" Texture Coat ", "Emulsion", unit="kg")

        assert product.name == "Texture Coat"
        assert catalog.has_product("Texture Coat")
        assert catalog.unit_for("Texture Coat") == "kg"

    @pytest.mark.parametrize("name", ["", "   ", "Silk Emulsion"])
    def test_add_custom_product_rejected(self, catalog: ProductCatalog, name: str) -> None:
        with pytest.raises(CatalogIntegrityError):
            catalog.add_custom_product(name, "Emulsion")

    def test_rename_cascades(self, catalog: ProductCatalog) -> None:
        config = AreaConfig(
            id="wall-1", selected_materials=SelectedMaterials(emulsion="Silk Emulsion")
        )

        catalog.rename_product("Silk Emulsion", "Royal Silk", [config])

        assert "Silk Emulsion" not in catalog.coverage
        assert catalog.coverage["Royal Silk"].product_name == "Royal Silk"
        assert "4 Ltr" in catalog.pricing["Royal Silk"]
        assert config.selected_materials.emulsion == "Royal Silk"

    def test_rename_to_existing_name(self, catalog: ProductCatalog) -> None:
        with pytest.raises(CatalogIntegrityError):
            catalog.rename_product("Silk Emulsion", "Wall Putty")

    def test_rename_unknown(self, catalog: ProductCatalog) -> None:
        with pytest.raises(CatalogIntegrityError) as exc_info:
            catalog.rename_product("Missing", "Other")

        assert exc_info.value.product == "Missing"

    def test_remove_blocked_while_referenced(self, catalog: ProductCatalog) -> None:
        config = AreaConfig(
            id="ceiling-1", selected_materials=SelectedMaterials(emulsion="Silk Emulsion")
        )

        with pytest.raises(CatalogIntegrityError) as exc_info:
            catalog.remove_product("Silk Emulsion", [config])

        assert exc_info.value.references == ["ceiling-1"]
        assert "Silk Emulsion" in catalog.pricing

    def test_remove_unreferenced(self, catalog: ProductCatalog) -> None:
        catalog.remove_product("Gloss Enamel")

        assert not catalog.has_product("Gloss Enamel")

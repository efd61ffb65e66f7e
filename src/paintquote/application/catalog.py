"""Product catalog: coverage specs, pack pricing and dealer custom products.

The catalog is the in-memory view of the dealer's coverage and pricing data
that the estimation services read. Pack prices are keyed by product name and
pack-size label ("20 kg", "10 Ltr", "900 ml").
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from paintquote.domain import AreaConfig, CoverageSpec, MaterialRole, PackOption

__all__ = [
    "CatalogIntegrityError",
    "CustomProduct",
    "ProductCatalog",
    "parse_pack_size",
    "unit_from_label",
]

logger = logging.getLogger(__name__)

_SIZE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*([a-zA-Z]*)")
_SUB_UNITS = {"ml": 1000.0, "g": 1000.0, "gm": 1000.0, "gms": 1000.0}
_KG_UNITS = {"kg", "kgs", "g", "gm", "gms"}
DEFAULT_UNIT = "L"


class CatalogIntegrityError(Exception):
    """Raised when a catalog change would break existing references.

    Attributes:
        message: Human-readable description.
        product: Product the operation targeted.
        references: Identifiers of the records still using the product.
    """

    def __init__(self, message: str, product: str, references: list[str] | None = None) -> None:
        self.message = message
        self.product = product
        self.references = references or []
        super().__init__(message)


def parse_pack_size(label: str) -> float:
    """Pack size in litres or kilograms from a label such as ``"20 kg"``.

    Millilitre and gram labels are converted to litres and kilograms.
    Returns 0 for labels without a number.

    Examples:
        >>> parse_pack_size("20 kg")
        20.0
        >>> parse_pack_size("900 ml")
        0.9
    """
    match = _SIZE_PATTERN.search(label or "")
    if not match:
        return 0.0
    size = float(match.group(1))
    unit = match.group(2).lower()
    return size / _SUB_UNITS.get(unit, 1.0)


def unit_from_label(label: str) -> str | None:
    """Base unit ("kg" or "L") named in a pack label, if any."""
    match = _SIZE_PATTERN.search(label or "")
    if not match or not match.group(2):
        return None
    unit = match.group(2).lower()
    return "kg" if unit in _KG_UNITS else DEFAULT_UNIT


@dataclass
class CustomProduct:
    """A product the dealer added outside the standard catalog."""

    name: str
    category: str
    unit: str = DEFAULT_UNIT


@dataclass
class ProductCatalog:
    """Coverage and pricing lookup for the material estimator.

    Attributes:
        coverage: Coverage specs keyed by exact product name.
        pricing: Pack prices keyed by product name, then pack-size label.
        units: Explicit unit per product; otherwise inferred from labels.
        custom_products: Dealer-defined products keyed by name.
    """

    coverage: dict[str, CoverageSpec] = field(default_factory=dict)
    pricing: dict[str, dict[str, float]] = field(default_factory=dict)
    units: dict[str, str] = field(default_factory=dict)
    custom_products: dict[str, CustomProduct] = field(default_factory=dict)

    # Lookup used by MaterialEstimator

    def coverage_specs(self) -> dict[str, CoverageSpec]:
        return self.coverage

    def pack_options(self, product_name: str) -> list[PackOption]:
        """Priced pack sizes for a product; empty when pricing is missing."""
        sizes = self.pricing.get(product_name) or {}
        options = []
        for label, price in sizes.items():
            size = parse_pack_size(label)
            if size <= 0:
                logger.debug(f"Ignoring pack label '{label}' for '{product_name}'")
                continue
            options.append(PackOption(size=size, price=float(price), label=label))
        return options

    def unit_for(self, product_name: str) -> str:
        if product_name in self.units:
            return self.units[product_name]
        custom = self.custom_products.get(product_name)
        if custom is not None:
            return custom.unit
        for label in (self.pricing.get(product_name) or {}):
            unit = unit_from_label(label)
            if unit:
                return unit
        return "kg" if "putty" in product_name.lower() else DEFAULT_UNIT

    # Editing

    def set_coverage(self, product_name: str, coverage_range_text: str) -> None:
        self.coverage[product_name] = CoverageSpec(product_name, coverage_range_text)

    def set_price(self, product_name: str, size_label: str, price: float) -> None:
        self.pricing.setdefault(product_name, {})[size_label] = float(price)

    def add_custom_product(self, name: str, category: str, unit: str = DEFAULT_UNIT) -> CustomProduct:
        """Register a dealer-defined product.

        Raises:
            CatalogIntegrityError: If the name is empty or already in use.
        """
        name = name.strip()
        if not name:
            raise CatalogIntegrityError("Product name is required", product=name)
        if self.has_product(name):
            raise CatalogIntegrityError(f"Product already exists: {name}", product=name)
        product = CustomProduct(name=name, category=category, unit=unit)
        self.custom_products[name] = product
        return product

    def has_product(self, name: str) -> bool:
        return name in self.custom_products or name in self.coverage or name in self.pricing

    def rename_product(
        self,
        old_name: str,
        new_name: str,
        area_configs: Iterable[AreaConfig] = (),
    ) -> None:
        """Rename a product everywhere it is referenced.

        Coverage, pricing, unit and custom-product entries move to the new
        name, and area configurations selecting the product are updated.

        Raises:
            CatalogIntegrityError: If the old name is unknown or the new one
                is taken.
        """
        new_name = new_name.strip()
        if not self.has_product(old_name):
            raise CatalogIntegrityError(f"Unknown product: {old_name}", product=old_name)
        if not new_name or (new_name != old_name and self.has_product(new_name)):
            raise CatalogIntegrityError(
                f"Cannot rename {old_name} to {new_name!r}", product=old_name
            )

        if old_name in self.coverage:
            spec = self.coverage.pop(old_name)
            self.coverage[new_name] = CoverageSpec(new_name, spec.coverage_range_text)
        if old_name in self.pricing:
            self.pricing[new_name] = self.pricing.pop(old_name)
        if old_name in self.units:
            self.units[new_name] = self.units.pop(old_name)
        if old_name in self.custom_products:
            product = self.custom_products.pop(old_name)
            product.name = new_name
            self.custom_products[new_name] = product

        for config in area_configs:
            for role in MaterialRole:
                if config.selected_materials.for_role(role) == old_name:
                    setattr(config.selected_materials, role.value, new_name)

    def remove_product(self, name: str, area_configs: Iterable[AreaConfig] = ()) -> None:
        """Delete a product and its coverage/pricing entries.

        Raises:
            CatalogIntegrityError: If any area configuration still selects
                the product.
        """
        references = [
            config.id
            for config in area_configs
            if any(config.selected_materials.for_role(role) == name for role in MaterialRole)
        ]
        if references:
            raise CatalogIntegrityError(
                f"Product {name} is used by {len(references)} configuration(s)",
                product=name,
                references=references,
            )
        self.coverage.pop(name, None)
        self.pricing.pop(name, None)
        self.units.pop(name, None)
        self.custom_products.pop(name, None)


"""Material quantity and pack-combination estimation."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Iterable, Mapping, Protocol, Sequence

from ..numeric import ceil_whole, safe_number, validate_sqft_input
from ..value_objects import (
    ConfigMaterialResult,
    CoverageSpec,
    MaterialLine,
    MaterialRole,
    MaterialStatus,
    PackCombination,
    PackLine,
    PackOption,
)
from .coverage import DEFAULT_COVERAGE_RATE, CoverageResolver

if TYPE_CHECKING:
    from ..cache import CalculationCache
    from ..entities import AreaConfig

__all__ = [
    "PACK_COMBINATION_NOT_FOUND",
    "MaterialEstimator",
    "PackOptimizer",
    "ProductLookup",
    "calculate_material_quantity",
    "optimal_pack_combination",
]

logger = logging.getLogger(__name__)

PACK_COMBINATION_NOT_FOUND = "Pack combination not found for full quantity."

# Float noise below this many decimal places is not a real remainder.
_REMAINDER_PRECISION = 9

_ROLES = (MaterialRole.PUTTY, MaterialRole.PRIMER, MaterialRole.EMULSION)


def calculate_material_quantity(
    area: float, coverage_rate: float, coats: int = 1
) -> int:
    """Whole units of material needed to cover ``area``.

    ``coats`` is not applied here; callers pass the work area (area x coats).

    Examples:
        >>> calculate_material_quantity(300, 150)
        2
        >>> calculate_material_quantity(301, 150)
        3
        >>> calculate_material_quantity(0, 150)
        0
    """
    area = safe_number(area)
    coverage_rate = safe_number(coverage_rate)
    if area <= 0 or coverage_rate <= 0:
        return 0
    return ceil_whole(area / coverage_rate)


def _usable_options(pack_options: Iterable[PackOption]) -> list[PackOption]:
    """Drop packs with no size and keep the first option for each size."""
    seen: set[float] = set()
    usable: list[PackOption] = []
    for option in pack_options:
        size = safe_number(option.size)
        if size <= 0 or size in seen:
            continue
        seen.add(size)
        usable.append(option)
    return usable


def optimal_pack_combination(
    required_quantity: float, pack_options: Sequence[PackOption]
) -> PackCombination:
    """Greedily choose packs covering ``required_quantity``.

    Packs are taken largest size first, as many of each as fit without
    exceeding the remaining quantity. Any leftover is covered by one more of
    the smallest pack, so the order may slightly exceed the requirement.
    Each pack size appears at most once in the result; when the input lists
    a size more than once the first listing wins.

    This is a greedy approximation, not an exact minimum-cost search.

    Args:
        required_quantity: Units (litres/kg) to buy.
        pack_options: Purchasable pack sizes with prices.

    Returns:
        PackCombination. Empty with zero cost when there is nothing to buy
        or no packs are listed; carries ``error`` when listed packs cannot
        cover a positive quantity.
    """
    required = safe_number(required_quantity)
    if required <= 0 or not pack_options:
        return PackCombination()

    ordered = sorted(
        _usable_options(pack_options), key=lambda o: safe_number(o.size), reverse=True
    )
    if not ordered:
        logger.warning(f"No usable pack sizes to cover {required:g} units")
        return PackCombination(error=PACK_COMBINATION_NOT_FOUND)

    remaining = required
    counts: dict[float, int] = {}
    for option in ordered:
        if round(remaining, _REMAINDER_PRECISION) <= 0:
            break
        size = safe_number(option.size)
        count = math.floor(round(remaining / size, _REMAINDER_PRECISION))
        if count > 0:
            counts[size] = count
            remaining -= count * size

    if round(remaining, _REMAINDER_PRECISION) > 0:
        smallest = safe_number(ordered[-1].size)
        counts[smallest] = counts.get(smallest, 0) + 1

    lines = tuple(
        PackLine(
            size=safe_number(option.size),
            quantity=counts[safe_number(option.size)],
            price=safe_number(option.price),
            label=option.label,
        )
        for option in ordered
        if safe_number(option.size) in counts
    )
    if not lines:
        return PackCombination(error=PACK_COMBINATION_NOT_FOUND)

    return PackCombination(packs=lines, total_cost=sum(line.cost for line in lines))


class PackOptimizer:
    """Pack combination search memoized by quantity and pack set."""

    def __init__(self, cache: CalculationCache | None = None) -> None:
        self.cache = cache

    def optimal_combination(
        self, required_quantity: float, pack_options: Sequence[PackOption]
    ) -> PackCombination:
        if self.cache is None:
            return optimal_pack_combination(required_quantity, pack_options)
        key = (
            "packs",
            required_quantity,
            tuple((o.size, o.price, o.label) for o in pack_options),
        )
        return self.cache.get_or_compute(
            key, lambda: optimal_pack_combination(required_quantity, pack_options)
        )


class ProductLookup(Protocol):
    """Catalog data the material estimator reads."""

    def coverage_specs(self) -> Mapping[str, CoverageSpec]: ...

    def pack_options(self, product_name: str) -> list[PackOption]: ...

    def unit_for(self, product_name: str) -> str: ...


class MaterialEstimator:
    """Builds per-material quantity and cost lines for area configurations.

    A product missing from the catalog only degrades its own line; other
    materials and configurations are estimated normally.
    """

    def __init__(
        self,
        catalog: ProductLookup,
        coverage_resolver: CoverageResolver | None = None,
        pack_optimizer: PackOptimizer | None = None,
    ) -> None:
        self.catalog = catalog
        self.coverage_resolver = coverage_resolver or CoverageResolver()
        self.pack_optimizer = pack_optimizer or PackOptimizer()

    def estimate_config(self, config: AreaConfig) -> ConfigMaterialResult:
        """Estimate every selected material of one configuration."""
        area = validate_sqft_input(config.area).sanitized_value
        lines: list[MaterialLine] = []
        if area > 0:
            for role in _ROLES:
                product = config.selected_materials.for_role(role)
                coats = int(safe_number(config.coats_for(role)))
                if not product or coats <= 0:
                    continue
                lines.append(self.estimate_line(product, role, area, coats))

        category = getattr(
            config.paint_type_category, "value", config.paint_type_category
        )
        return ConfigMaterialResult(
            config_label=config.display_label,
            paint_type_category=str(category),
            materials=tuple(lines),
            is_enamel=config.is_enamel,
        )

    def estimate_line(
        self, product: str, role: MaterialRole, area: float, coats: int
    ) -> MaterialLine:
        """Quantity, packs and cost for one product over ``area``."""
        warnings: list[str] = []
        status = MaterialStatus.OK

        coverage_rate = self.coverage_resolver.resolve_product(
            product, self.catalog.coverage_specs()
        )
        if coverage_rate is None:
            status = MaterialStatus.COVERAGE_NOT_CONFIGURED
            coverage_rate = DEFAULT_COVERAGE_RATE
            warnings.append(
                f"Coverage not configured for {product}; "
                f"using {DEFAULT_COVERAGE_RATE:g} sq.ft per unit"
            )

        required = calculate_material_quantity(area * coats, coverage_rate, coats)

        pack_options = self.catalog.pack_options(product)
        if not pack_options:
            combination = PackCombination()
            if status == MaterialStatus.OK:
                status = MaterialStatus.PRICING_NOT_CONFIGURED
            warnings.append(f"Pricing not configured for {product}")
        else:
            combination = self.pack_optimizer.optimal_combination(required, pack_options)
            if combination.error:
                if status == MaterialStatus.OK:
                    status = MaterialStatus.PACK_COMBINATION_NOT_FOUND
                warnings.append(f"{product}: {combination.error}")

        warning = "; ".join(warnings) or None
        if warning:
            logger.warning(warning)

        return MaterialLine(
            product=product,
            role=role,
            area=area,
            coats=coats,
            coverage_rate=coverage_rate,
            required_quantity=required,
            unit=self.catalog.unit_for(product),
            combination=combination,
            status=status,
            warning=warning,
        )

    def estimate_all(self, configs: Iterable[AreaConfig]) -> list[ConfigMaterialResult]:
        return [self.estimate_config(config) for config in configs]

    @staticmethod
    def total_cost(results: Iterable[ConfigMaterialResult]) -> float:
        return sum(result.total_cost for result in results)

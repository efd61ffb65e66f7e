"""Canonical display order for area configurations.

Every list of configurations shown in the UI, the labour and material
breakdowns, and exported quotations goes through
``sort_by_global_display_order`` so all views agree on ordering.

Order classes, lowest first:

1. Wall
2. Ceiling
3. Floor
4. Custom ("separate") section
5. Main enamel / door & window
6. Custom enamel section
7. Anything unrecognised
"""

from __future__ import annotations

import dataclasses
from enum import IntEnum
from typing import Any, Mapping, Sequence, TypeVar

from ..numeric import safe_number

__all__ = [
    "DisplayOrder",
    "get_global_display_order",
    "resolve_area_type",
    "sort_by_global_display_order",
]

T = TypeVar("T")


class DisplayOrder(IntEnum):
    WALL = 1
    CEILING = 2
    FLOOR = 3
    CUSTOM = 4
    ENAMEL = 5
    CUSTOM_ENAMEL = 6
    UNKNOWN = 7


_ENAMEL_KEYWORDS = ("enamel", "door & window")
_SURFACE_KEYWORDS = (
    ("wall", DisplayOrder.WALL),
    ("ceiling", DisplayOrder.CEILING),
    ("floor", DisplayOrder.FLOOR),
)

_ALIASES = {
    "area_type": ("area_type", "areaType"),
    "label": ("label",),
    "section_name": ("section_name", "sectionName"),
    "is_custom_section": ("is_custom_section", "isCustomSection"),
    "display_order": ("display_order", "displayOrder"),
    "creation_index": ("creation_index", "creationIndex", "_creationIndex"),
}


def _field(config: Any, name: str) -> Any:
    for key in _ALIASES[name]:
        if isinstance(config, Mapping):
            if key in config:
                return config[key]
        elif hasattr(config, key):
            return getattr(config, key)
    return None


def _text(config: Any, name: str) -> str:
    value = _field(config, name)
    value = getattr(value, "value", value)
    return str(value).strip().lower() if value else ""


def _is_enamel_text(text: str) -> bool:
    return any(keyword in text for keyword in _ENAMEL_KEYWORDS)


def _surface_order(text: str) -> DisplayOrder | None:
    if not text:
        return None
    if _is_enamel_text(text):
        return DisplayOrder.ENAMEL
    for keyword, order in _SURFACE_KEYWORDS:
        if text == keyword:
            return order
    for keyword, order in _SURFACE_KEYWORDS:
        if keyword in text:
            return order
    return None


def get_global_display_order(config: Any) -> int:
    """Classify a configuration into its display order class.

    ``area_type`` decides first; the free-text label is consulted when the
    area type is missing or unrecognised. Any input shape is accepted and
    unrecognised shapes land in ``DisplayOrder.UNKNOWN``.
    """
    area_type = _text(config, "area_type")
    label = _text(config, "label")
    section_name = _text(config, "section_name")

    is_custom = (
        bool(_field(config, "is_custom_section"))
        or bool(section_name)
        or area_type == "custom"
        or "separate" in label
    )
    if is_custom:
        if _is_enamel_text(area_type) or _is_enamel_text(label) or _is_enamel_text(section_name):
            return DisplayOrder.CUSTOM_ENAMEL
        return DisplayOrder.CUSTOM

    order = _surface_order(area_type) or _surface_order(label)
    return order if order is not None else DisplayOrder.UNKNOWN


_SURFACE_AREA_TYPES = {
    DisplayOrder.WALL: "wall",
    DisplayOrder.CEILING: "ceiling",
    DisplayOrder.FLOOR: "floor",
    DisplayOrder.ENAMEL: "enamel",
}


def resolve_area_type(config: Any) -> str:
    """Area type text of a configuration, read from its label when unset.

    Returns ``""`` when neither the area type nor the label names a surface.
    """
    area_type = _text(config, "area_type")
    if area_type:
        return _SURFACE_AREA_TYPES.get(_surface_order(area_type), area_type)
    order = _surface_order(_text(config, "label"))
    return _SURFACE_AREA_TYPES.get(order, "")


def _display_order(config: Any) -> int:
    assigned = safe_number(_field(config, "display_order"), 0)
    if assigned > 0:
        return int(assigned)
    return int(get_global_display_order(config))


def _with_ordering(config: T, display_order: int, creation_index: int) -> T:
    """Copy of ``config`` carrying its display order and creation index."""
    if dataclasses.is_dataclass(config) and not isinstance(config, type):
        names = {f.name for f in dataclasses.fields(config)}
        if {"display_order", "creation_index"} <= names:
            return dataclasses.replace(
                config, display_order=display_order, creation_index=creation_index
            )
        return config
    if isinstance(config, Mapping):
        copied = dict(config)
        if "areaType" in copied or "displayOrder" in copied:
            copied["displayOrder"] = display_order
            copied["creationIndex"] = creation_index
        else:
            copied["display_order"] = display_order
            copied["creation_index"] = creation_index
        return copied  # type: ignore[return-value]
    return config


def sort_by_global_display_order(configs: Sequence[T]) -> list[T]:
    """Sort configurations by display order, then original creation index.

    Returns copies with ``display_order`` and ``creation_index`` filled in;
    an existing creation index is kept, so sorting an already sorted list
    changes nothing.
    """
    keyed: list[tuple[int, int, T]] = []
    for index, config in enumerate(configs):
        order = _display_order(config)
        creation = _field(config, "creation_index")
        creation_index = int(safe_number(creation, index)) if creation is not None else index
        keyed.append((order, creation_index, _with_ordering(config, order, creation_index)))

    keyed.sort(key=lambda item: (item[0], item[1]))
    return [item[2] for item in keyed]

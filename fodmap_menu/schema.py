"""Dish assessment model and normalization of raw model output."""

from enum import Enum
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_DISH_NAME = "Unknown Item"


class FodmapLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    UNKNOWN = "unknown"


class DishAssessment(BaseModel):
    """
    FODMAP assessment of one menu item.

    Serialized with camelCase keys (``fodmapLevel``) via ``by_alias``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = UNKNOWN_DISH_NAME
    description: str = ""
    fodmap_level: FodmapLevel = Field(default=FodmapLevel.UNKNOWN, alias="fodmapLevel")
    concerns: Tuple[str, ...] = ()
    alternatives: Tuple[str, ...] = ()


def _coerce_level(raw: Any) -> FodmapLevel:
    if isinstance(raw, str):
        value = raw.strip().lower()
        if value in (FodmapLevel.LOW.value, FodmapLevel.MODERATE.value, FodmapLevel.HIGH.value):
            return FodmapLevel(value)
    return FodmapLevel.UNKNOWN


def _clean_text(value: str) -> str:
    # json.loads keeps lone surrogates (\ud83c), which cannot be encoded as UTF-8
    return value.encode("utf-8", "replace").decode("utf-8")


def _coerce_strings(raw: Any) -> Tuple[str, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(_clean_text(item) for item in raw if isinstance(item, str))


def normalize_dish(item: dict) -> DishAssessment:
    name = item.get("name")
    if not isinstance(name, str) or not name.strip():
        name = UNKNOWN_DISH_NAME

    description = item.get("description")
    if not isinstance(description, str):
        description = ""

    return DishAssessment(
        name=_clean_text(name),
        description=_clean_text(description),
        fodmap_level=_coerce_level(item.get("fodmapLevel")),
        concerns=_coerce_strings(item.get("concerns")),
        alternatives=_coerce_strings(item.get("alternatives")),
    )


def normalize_dishes(parsed: Any) -> List[DishAssessment]:
    """
    Turn any parsed JSON value into a list of dish assessments.

    - list   -> one dish per object element, non-objects dropped
    - object -> one-dish menu
    - other  -> no dishes
    Never raises: bad fields fall back to defaults.
    """
    if isinstance(parsed, dict):
        items = [parsed]
    elif isinstance(parsed, list):
        items = parsed
    else:
        return []

    return [normalize_dish(item) for item in items if isinstance(item, dict)]

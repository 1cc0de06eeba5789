"""Game data models - enums and the item catalog."""

from .catalog import Catalog, ConsumableSpec, WeaponSpec, default_catalog
from .enums import ActionChoice, ItemKind, Outcome, Skill, TurnPhase

__all__ = [
    "ActionChoice",
    "Catalog",
    "ConsumableSpec",
    "ItemKind",
    "Outcome",
    "Skill",
    "TurnPhase",
    "WeaponSpec",
    "default_catalog",
]

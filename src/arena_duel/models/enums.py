"""Enums for game models."""

from enum import Enum, IntEnum


class ItemKind(str, Enum):
    """Classes of purchasable items."""

    CONSUMABLE = "consumable"
    WEAPON = "weapon"


class Skill(str, Enum):
    """Trainable attributes."""

    STRENGTH = "strength"
    AGILITY = "agility"
    INTELLECT = "intellect"


class ActionChoice(IntEnum):
    """Top-level menu selectors a player can submit on their turn."""

    ATTACK = 1
    PURCHASE = 2
    USE = 3
    WORK = 4
    TRAIN = 5
    FORFEIT = 6


class Outcome(str, Enum):
    """Outcome of resolving an action."""

    OK = "ok"  # Turn consumed
    ITEM_NOT_FOUND = "item_not_found"  # Unknown catalog key or item not owned
    INSUFFICIENT_FUNDS = "insufficient_funds"  # Not enough coins
    INSUFFICIENT_SKILL = "insufficient_skill"  # No weapon requirement met
    INVALID_SKILL = "invalid_skill"  # Not a trainable attribute
    INVALID_SELECTION = "invalid_selection"  # Menu selector out of range


class TurnPhase(str, Enum):
    """States of the turn engine."""

    AWAITING_EFFECT_EXPIRY = "awaiting_effect_expiry"  # Active player's effects age
    AWAITING_ACTION = "awaiting_action"  # Soliciting until an action resolves
    TURN_COMPLETE = "turn_complete"  # Action consumed the turn
    MATCH_OVER = "match_over"  # Death or forfeit, terminal

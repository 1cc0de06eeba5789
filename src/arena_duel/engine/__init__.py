"""Duel engine module - handles turn flow, action resolution and effect expiry."""

from .actions import ActionResolver
from .effects import EffectTracker
from .logging import CombatLog, CombatLogger, LogEntry, LogEventType, StateSnapshot
from .turn import ActionSource, MatchReporter, MatchState, TurnEngine, create_combatant
from .types import (
    ActionRequest,
    ActionResult,
    ActiveEffect,
    Combatant,
    ExpiredEffect,
    StatChange,
    TurnResult,
)

__all__ = [
    "ActionRequest",
    "ActionResolver",
    "ActionResult",
    "ActionSource",
    "ActiveEffect",
    "CombatLog",
    "CombatLogger",
    "Combatant",
    "EffectTracker",
    "ExpiredEffect",
    "LogEntry",
    "LogEventType",
    "MatchReporter",
    "MatchState",
    "StatChange",
    "StateSnapshot",
    "TurnEngine",
    "TurnResult",
    "create_combatant",
]

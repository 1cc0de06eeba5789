"""Combat logging system for tracking and verifying engine output.

Provides a structured record of every match event:
- Turn starts with a snapshot of both combatants
- Effect expirations
- Rejected and resolved actions with before/after state
- The match result
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .types import ActionResult, Combatant, ExpiredEffect


class LogEventType(str, Enum):
    """Types of log events."""

    TURN_START = "turn_start"
    EFFECT_EXPIRED = "effect_expired"
    ACTION_REJECTED = "action_rejected"  # Failed attempt, turn stays open
    ACTION_RESOLVED = "action_resolved"  # Turn consumed
    MATCH_OVER = "match_over"


@dataclass
class StateSnapshot:
    """Snapshot of a combatant at a point in time."""

    name: str
    hitpoints: int
    strength: int
    agility: int
    intellect: int
    coins: int
    weapon: str
    inventory: dict[str, int]
    active_effects: list[str]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "hitpoints": self.hitpoints,
            "strength": self.strength,
            "agility": self.agility,
            "intellect": self.intellect,
            "coins": self.coins,
            "weapon": self.weapon,
            "inventory": dict(self.inventory),
            "active_effects": list(self.active_effects),
        }


@dataclass
class LogEntry:
    """A single log entry representing a match event."""

    event_type: LogEventType
    turn_number: int
    timestamp_order: int = 0  # Order within the match for deterministic sorting

    player_name: str | None = None
    action: str | None = None
    outcome: str | None = None
    item_key: str | None = None
    value: int | None = None
    description: str | None = None

    state_before: StateSnapshot | None = None
    state_after: StateSnapshot | None = None
    all_states: dict[str, StateSnapshot] | None = None

    winner: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {
            "event_type": self.event_type.value,
            "turn_number": self.turn_number,
            "timestamp_order": self.timestamp_order,
        }

        if self.player_name is not None:
            result["player_name"] = self.player_name
        if self.action is not None:
            result["action"] = self.action
        if self.outcome is not None:
            result["outcome"] = self.outcome
        if self.item_key is not None:
            result["item_key"] = self.item_key
        if self.value is not None:
            result["value"] = self.value
        if self.description is not None:
            result["description"] = self.description
        if self.state_before is not None:
            result["state_before"] = self.state_before.to_dict()
        if self.state_after is not None:
            result["state_after"] = self.state_after.to_dict()
        if self.all_states is not None:
            result["all_states"] = {name: state.to_dict() for name, state in self.all_states.items()}
        if self.winner is not None:
            result["winner"] = self.winner

        return result


@dataclass
class CombatLog:
    """Complete log of a match."""

    entries: list[LogEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"entries": [entry.to_dict() for entry in self.entries]}

    def get_entries_by_type(self, event_type: LogEventType) -> list[LogEntry]:
        """Get all entries of a specific type."""
        return [e for e in self.entries if e.event_type == event_type]

    def get_entries_for_turn(self, turn_number: int) -> list[LogEntry]:
        """Get all entries for a specific turn."""
        return [e for e in self.entries if e.turn_number == turn_number]

    def format_readable(self) -> str:
        """Format the log in a human-readable format."""
        lines: list[str] = ["=== Combat Log ==="]

        current_turn = -1
        for entry in self.entries:
            if entry.turn_number != current_turn:
                current_turn = entry.turn_number
                lines.append(f"\n--- Turn {current_turn} ---")
            lines.append(self._format_entry(entry))

        return "\n".join(lines)

    def _format_entry(self, entry: LogEntry) -> str:
        """Format a single log entry."""
        match entry.event_type:
            case LogEventType.TURN_START:
                header = f"  {entry.player_name} to act"
                if entry.all_states:
                    state_lines = [
                        f"    {s.name}: HP={s.hitpoints} STR={s.strength} AGI={s.agility} "
                        f"INT={s.intellect} coins={s.coins} weapon={s.weapon}"
                        for s in entry.all_states.values()
                    ]
                    return header + "\n" + "\n".join(state_lines)
                return header

            case LogEventType.EFFECT_EXPIRED:
                return f"  ~ {entry.description}"

            case LogEventType.ACTION_REJECTED:
                return f"  x {entry.action or 'action'} rejected ({entry.outcome}): {entry.description}"

            case LogEventType.ACTION_RESOLVED:
                hp_change = ""
                if entry.state_before and entry.state_after:
                    if entry.state_after.hitpoints != entry.state_before.hitpoints:
                        hp_change = f" [HP: {entry.state_before.hitpoints} -> {entry.state_after.hitpoints}]"
                return f"  > {entry.action}: {entry.description}{hp_change}"

            case LogEventType.MATCH_OVER:
                return f"  *** WINNER: {entry.winner} ***"

            case _:
                return f"  {entry.event_type.value}: {entry.description or ''}"


class CombatLogger:
    """Logger for tracking match events.

    Usage:
        logger = CombatLogger()
        engine = TurnEngine(..., combat_logger=logger)
        engine.run()
        print(logger.get_log().format_readable())
    """

    def __init__(self) -> None:
        self._log = CombatLog()
        self._order_counter = 0

    def _next_order(self) -> int:
        self._order_counter += 1
        return self._order_counter

    def get_log(self) -> CombatLog:
        """Get the complete combat log."""
        return self._log

    def clear(self) -> None:
        """Clear all log entries."""
        self._log.entries.clear()
        self._order_counter = 0

    @staticmethod
    def snapshot_state(combatant: Combatant) -> StateSnapshot:
        """Create a snapshot from a Combatant."""
        return StateSnapshot(
            name=combatant.name,
            hitpoints=combatant.hitpoints,
            strength=combatant.strength,
            agility=combatant.agility,
            intellect=combatant.intellect,
            coins=combatant.coins,
            weapon=combatant.weapon.key,
            inventory=dict(combatant.inventory),
            active_effects=[effect.spec.key for effect in combatant.active_effects],
        )

    def log_turn_start(self, turn_number: int, player_name: str, combatants: list[Combatant]) -> None:
        """Log the start of a turn with a snapshot of everyone."""
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.TURN_START,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                player_name=player_name,
                all_states={c.name: self.snapshot_state(c) for c in combatants},
            )
        )

    def log_effect_expired(self, turn_number: int, player_name: str, expired: ExpiredEffect) -> None:
        """Log an effect that ran out and was reversed."""
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.EFFECT_EXPIRED,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                player_name=player_name,
                description=f"{expired.name} expired on {player_name}",
            )
        )

    def log_action_rejected(self, turn_number: int, player_name: str, result: ActionResult) -> None:
        """Log a failed attempt (the turn stays open)."""
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.ACTION_REJECTED,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                player_name=player_name,
                action=result.action.name.lower() if result.action else None,
                outcome=result.outcome.value,
                description=result.message,
            )
        )

    def log_action_resolved(
        self,
        turn_number: int,
        player_name: str,
        result: ActionResult,
        state_before: StateSnapshot,
        state_after: Combatant,
    ) -> None:
        """Log an action that consumed the turn.

        ``state_before`` is a snapshot of the most affected combatant (the
        defender for attacks, the actor otherwise) taken before resolution.
        """
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.ACTION_RESOLVED,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                player_name=player_name,
                action=result.action.name.lower() if result.action else None,
                outcome=result.outcome.value,
                item_key=result.item_key,
                value=result.value,
                description=result.message,
                state_before=state_before,
                state_after=self.snapshot_state(state_after),
            )
        )

    def log_match_over(self, turn_number: int, winner: str) -> None:
        """Log the winner determination."""
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.MATCH_OVER,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                winner=winner,
            )
        )

"""Type definitions for the duel engine."""

from dataclasses import dataclass, field

from ..models.catalog import ConsumableSpec, WeaponSpec
from ..models.enums import ActionChoice, Outcome, Skill


@dataclass(frozen=True)
class StatChange:
    """A set of stat deltas (consumable effect or its reversal)."""

    hitpoints: int = 0
    strength: int = 0
    agility: int = 0
    intellect: int = 0

    @classmethod
    def from_consumable(cls, spec: ConsumableSpec) -> "StatChange":
        return cls(
            hitpoints=spec.hitpoints_effect,
            strength=spec.strength_effect,
            agility=spec.agility_effect,
            intellect=spec.intellect_effect,
        )


@dataclass
class ActiveEffect:
    """A consumed item whose stat deltas are currently applied to its owner."""

    spec: ConsumableSpec
    remaining: int
    is_permanent: bool = False

    @classmethod
    def start(cls, spec: ConsumableSpec) -> "ActiveEffect":
        """Create the effect for a freshly used consumable."""
        if spec.is_permanent:
            return cls(spec=spec, remaining=0, is_permanent=True)
        return cls(spec=spec, remaining=spec.duration)

    @property
    def name(self) -> str:
        return self.spec.name


@dataclass
class ExpiredEffect:
    """An effect removed at turn start, with the deltas that were reversed."""

    name: str
    reversed: StatChange


@dataclass
class Combatant:
    """In-memory state of one duel participant.

    Mutated in place by the resolver for the whole match. Hitpoints may go
    non-positive, which signals death.
    """

    name: str
    hitpoints: int
    weapon: WeaponSpec
    coins: int = 0
    strength: int = 0
    agility: int = 0
    intellect: int = 0
    inventory: dict[str, int] = field(default_factory=dict)
    active_effects: list[ActiveEffect] = field(default_factory=list)

    def is_alive(self) -> bool:
        """Check if the combatant is still alive."""
        return self.hitpoints > 0

    def get_skill(self, skill: Skill) -> int:
        """Get the current value of an attribute."""
        return getattr(self, skill.value)

    def add_skill(self, skill: Skill, amount: int) -> None:
        """Raise (or lower, with a negative amount) an attribute."""
        setattr(self, skill.value, self.get_skill(skill) + amount)

    def item_count(self, key: str) -> int:
        """Get the owned quantity of a consumable."""
        return self.inventory.get(key, 0)

    def add_item(self, key: str, count: int = 1) -> None:
        """Add consumables to the inventory."""
        self.inventory[key] = self.item_count(key) + count

    def remove_item(self, key: str) -> bool:
        """Remove one consumable. Returns False if none is owned.

        Entries are deleted when their quantity reaches zero.
        """
        current = self.item_count(key)
        if current <= 0:
            self.inventory.pop(key, None)
            return False
        if current == 1:
            del self.inventory[key]
        else:
            self.inventory[key] = current - 1
        return True

    def inventory_entries(self) -> list[str]:
        """Owned consumable keys in the order they were first acquired."""
        return [key for key, count in self.inventory.items() if count > 0]

    def apply_change(self, change: StatChange, sign: int = 1) -> None:
        """Add (sign=1) or subtract (sign=-1) a set of stat deltas."""
        self.hitpoints += sign * change.hitpoints
        self.strength += sign * change.strength
        self.agility += sign * change.agility
        self.intellect += sign * change.intellect


@dataclass
class ActionRequest:
    """A player's menu selection for one action attempt.

    ``action`` is the top-level selector (1-6). ``item_class`` (1=consumable,
    2=weapon) and ``index`` (1-based) are the nested purchase/use/train
    selections; they are ignored by actions that don't need them.
    """

    action: int
    item_class: int | None = None
    index: int | None = None


@dataclass
class ActionResult:
    """Result of resolving one action attempt.

    ``success`` means the turn was consumed. A failed result leaves all state
    untouched and the same player is asked again.
    """

    success: bool
    outcome: Outcome
    message: str
    action: ActionChoice | None = None
    value: int = 0
    item_key: str | None = None
    stat_change: StatChange | None = None
    ends_match: bool = False
    winner: str | None = None
    loser: str | None = None

    @classmethod
    def failure(cls, outcome: Outcome, message: str, action: ActionChoice | None = None) -> "ActionResult":
        return cls(success=False, outcome=outcome, message=message, action=action)


@dataclass
class TurnResult:
    """Result of playing one complete turn."""

    turn_number: int
    player_name: str
    accepted: bool = True
    expired: list[ExpiredEffect] = field(default_factory=list)
    attempts: list[ActionResult] = field(default_factory=list)
    winner: str | None = None
    is_match_over: bool = False

    @property
    def final_result(self) -> ActionResult | None:
        """The action that consumed the turn, if any."""
        if self.attempts and self.attempts[-1].success:
            return self.attempts[-1]
        return None

    @property
    def rejected(self) -> list[ActionResult]:
        return [a for a in self.attempts if not a.success]

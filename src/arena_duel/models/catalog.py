"""Item catalog - immutable weapon and consumable definitions."""

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from .enums import Skill

UNARMED = "unarmed"


@dataclass(frozen=True)
class WeaponSpec:
    """A purchasable weapon.

    A requirement of zero means "no requirement" for that attribute.
    """

    key: str
    name: str
    damage_min: int
    damage_max: int
    strength_req: int = 0
    agility_req: int = 0
    intellect_req: int = 0
    cost: int = 0

    def __post_init__(self) -> None:
        if self.damage_min < 0 or self.damage_max < 0:
            raise ValueError(f"Weapon {self.key!r} has negative damage")
        if self.damage_min > self.damage_max:
            raise ValueError(f"Weapon {self.key!r} has damage_min > damage_max")
        if self.cost < 0:
            raise ValueError(f"Weapon {self.key!r} has negative cost")
        if min(self.strength_req, self.agility_req, self.intellect_req) < 0:
            raise ValueError(f"Weapon {self.key!r} has a negative requirement")

    def requirement(self, skill: Skill) -> int:
        """Get the requirement for one attribute."""
        match skill:
            case Skill.STRENGTH:
                return self.strength_req
            case Skill.AGILITY:
                return self.agility_req
            case Skill.INTELLECT:
                return self.intellect_req


@dataclass(frozen=True)
class ConsumableSpec:
    """A purchasable consumable.

    ``duration`` is the number of the owner's turn-starts the effect lasts,
    or ``None`` for an effect that never expires.
    """

    key: str
    name: str
    duration: int | None
    hitpoints_effect: int = 0
    strength_effect: int = 0
    agility_effect: int = 0
    intellect_effect: int = 0
    cost: int = 0

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"Consumable {self.key!r} has negative cost")
        if self.duration is not None and self.duration < 1:
            raise ValueError(f"Consumable {self.key!r} duration must be positive or None")

    @property
    def is_permanent(self) -> bool:
        return self.duration is None


class Catalog:
    """Read-only lookup of weapons and consumables by key.

    Built once at startup and shared by reference. Menu order is the order in
    which specs were given.
    """

    def __init__(
        self,
        weapons: Iterable[WeaponSpec],
        consumables: Iterable[ConsumableSpec],
        unarmed_key: str = UNARMED,
    ) -> None:
        weapon_map = {w.key: w for w in weapons}
        consumable_map = {c.key: c for c in consumables}
        if unarmed_key not in weapon_map:
            raise ValueError(f"Catalog has no default weapon {unarmed_key!r}")

        self._weapons = MappingProxyType(weapon_map)
        self._consumables = MappingProxyType(consumable_map)
        self._unarmed_key = unarmed_key

    @property
    def unarmed(self) -> WeaponSpec:
        """The weapon every combatant starts with."""
        return self._weapons[self._unarmed_key]

    @property
    def weapons(self) -> MappingProxyType:
        """Read-only weapon table, keyed by weapon key."""
        return self._weapons

    @property
    def consumables(self) -> MappingProxyType:
        """Read-only consumable table, keyed by consumable key."""
        return self._consumables

    def get_weapon(self, key: str | None) -> WeaponSpec | None:
        """Look up a weapon. Returns None if the key is unknown."""
        if key is None:
            return None
        return self._weapons.get(key)

    def get_consumable(self, key: str | None) -> ConsumableSpec | None:
        """Look up a consumable. Returns None if the key is unknown."""
        if key is None:
            return None
        return self._consumables.get(key)

    def weapon_menu(self) -> list[str]:
        """Purchasable weapon keys in menu order (the unarmed default is not sold)."""
        return [key for key in self.weapons if key != self._unarmed_key]

    def consumable_menu(self) -> list[str]:
        """Consumable keys in menu order."""
        return list(self.consumables)


def default_catalog() -> Catalog:
    """Build the standard shop."""
    return Catalog(
        weapons=[
            WeaponSpec(UNARMED, "Bare Hands", 1, 1),
            WeaponSpec("knife", "Knife", 2, 3, cost=10),
            WeaponSpec("sword", "Sword", 3, 5, strength_req=2, cost=35),
            WeaponSpec("twin_blade", "Twin Blade", 1, 7, agility_req=2, cost=25),
            WeaponSpec("wand", "Wand", 3, 3, intellect_req=2, cost=30),
            WeaponSpec("greatsword", "Greatsword", 6, 7, strength_req=3, intellect_req=2, cost=65),
        ],
        consumables=[
            ConsumableSpec("health_potion", "Health Potion", None, hitpoints_effect=5, cost=5),
            ConsumableSpec("strength_potion", "Strength Potion", 3, strength_effect=3, cost=10),
            ConsumableSpec("agility_potion", "Agility Potion", 3, agility_effect=3, cost=10),
            ConsumableSpec("intellect_potion", "Intellect Potion", 3, intellect_effect=3, cost=10),
        ],
    )

"""Tests for the item catalog."""

import pytest

from arena_duel.models.catalog import UNARMED, Catalog, ConsumableSpec, WeaponSpec
from arena_duel.models.enums import Skill


class TestWeaponSpec:
    """Tests for WeaponSpec validation."""

    def test_valid_weapon(self):
        """A well-formed weapon keeps its values."""
        weapon = WeaponSpec("axe", "Axe", 2, 4, strength_req=1, cost=12)
        assert weapon.damage_min == 2
        assert weapon.damage_max == 4
        assert weapon.requirement(Skill.STRENGTH) == 1
        assert weapon.requirement(Skill.AGILITY) == 0

    def test_min_above_max_rejected(self):
        with pytest.raises(ValueError):
            WeaponSpec("bad", "Bad", 5, 3)

    def test_negative_damage_rejected(self):
        with pytest.raises(ValueError):
            WeaponSpec("bad", "Bad", -1, 3)

    def test_negative_cost_rejected(self):
        with pytest.raises(ValueError):
            WeaponSpec("bad", "Bad", 1, 3, cost=-5)

    def test_is_immutable(self):
        """Specs cannot be changed after construction."""
        weapon = WeaponSpec("axe", "Axe", 2, 4)
        with pytest.raises(AttributeError):
            weapon.cost = 0


class TestConsumableSpec:
    """Tests for ConsumableSpec validation."""

    def test_permanent_flag(self):
        assert ConsumableSpec("elixir", "Elixir", None).is_permanent
        assert not ConsumableSpec("tonic", "Tonic", 2).is_permanent

    def test_zero_duration_rejected(self):
        """Duration must be positive or None."""
        with pytest.raises(ValueError):
            ConsumableSpec("bad", "Bad", 0)

    def test_negative_effects_allowed(self):
        spec = ConsumableSpec("curse", "Curse", 2, strength_effect=-2)
        assert spec.strength_effect == -2

    def test_negative_cost_rejected(self):
        with pytest.raises(ValueError):
            ConsumableSpec("bad", "Bad", 1, cost=-1)


class TestDefaultCatalog:
    """Tests for the standard shop content."""

    def test_unarmed_default(self, catalog):
        assert catalog.unarmed.key == UNARMED
        assert (catalog.unarmed.damage_min, catalog.unarmed.damage_max) == (1, 1)
        assert catalog.unarmed.cost == 0

    def test_weapon_menu_order(self, catalog):
        """The unarmed default is not for sale."""
        assert catalog.weapon_menu() == ["knife", "sword", "twin_blade", "wand", "greatsword"]

    def test_consumable_menu_order(self, catalog):
        assert catalog.consumable_menu() == [
            "health_potion",
            "strength_potion",
            "agility_potion",
            "intellect_potion",
        ]

    @pytest.mark.parametrize(
        "key,damage,reqs,cost",
        [
            ("knife", (2, 3), (0, 0, 0), 10),
            ("sword", (3, 5), (2, 0, 0), 35),
            ("twin_blade", (1, 7), (0, 2, 0), 25),
            ("wand", (3, 3), (0, 0, 2), 30),
            ("greatsword", (6, 7), (3, 0, 2), 65),
        ],
    )
    def test_weapon_values(self, catalog, key, damage, reqs, cost):
        weapon = catalog.get_weapon(key)
        assert (weapon.damage_min, weapon.damage_max) == damage
        assert (weapon.strength_req, weapon.agility_req, weapon.intellect_req) == reqs
        assert weapon.cost == cost

    def test_health_potion_is_permanent(self, catalog):
        potion = catalog.get_consumable("health_potion")
        assert potion.is_permanent
        assert potion.hitpoints_effect == 5
        assert potion.cost == 5

    @pytest.mark.parametrize("key,stat", [
        ("strength_potion", "strength_effect"),
        ("agility_potion", "agility_effect"),
        ("intellect_potion", "intellect_effect"),
    ])
    def test_stat_potions(self, catalog, key, stat):
        potion = catalog.get_consumable(key)
        assert potion.duration == 3
        assert getattr(potion, stat) == 3
        assert potion.cost == 10

    def test_lookup_missing_returns_none(self, catalog):
        """Unknown keys are a normal 'not found' outcome."""
        assert catalog.get_weapon("bazooka") is None
        assert catalog.get_consumable("bazooka") is None
        assert catalog.get_weapon(None) is None
        assert catalog.get_consumable("sword") is None

    def test_tables_are_read_only(self, catalog):
        with pytest.raises(TypeError):
            catalog.weapons["bazooka"] = catalog.unarmed
        with pytest.raises(TypeError):
            del catalog.consumables["health_potion"]

    def test_menus_follow_tables(self, catalog):
        """Menus list the table keys in order, without the unarmed default."""
        assert catalog.weapon_menu() == [key for key in catalog.weapons if key != "unarmed"]
        assert catalog.consumable_menu() == list(catalog.consumables)


class TestCatalogConstruction:
    """Tests for building custom catalogs."""

    def test_requires_unarmed_weapon(self):
        with pytest.raises(ValueError):
            Catalog(weapons=[WeaponSpec("knife", "Knife", 2, 3)], consumables=[])

    def test_custom_unarmed_key(self):
        catalog = Catalog(
            weapons=[WeaponSpec("fists", "Fists", 1, 2), WeaponSpec("club", "Club", 2, 2, cost=3)],
            consumables=[],
            unarmed_key="fists",
        )
        assert catalog.unarmed.key == "fists"
        assert catalog.weapon_menu() == ["club"]

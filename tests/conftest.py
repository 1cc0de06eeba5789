"""Shared fixtures for engine and console tests."""

import random

import pytest

from arena_duel.config import Settings
from arena_duel.engine.actions import ActionResolver
from arena_duel.engine.effects import EffectTracker
from arena_duel.engine.types import ActionRequest, ActionResult, Combatant, ExpiredEffect
from arena_duel.models.catalog import Catalog, default_catalog


class FixedRandom:
    """Random source whose randint always picks the low or the high end."""

    def __init__(self, pick_max: bool = False) -> None:
        self.pick_max = pick_max

    def randint(self, a: int, b: int) -> int:
        return b if self.pick_max else a


class ScriptedSource:
    """ActionSource that replays a fixed list of requests."""

    def __init__(self, requests: list[ActionRequest]) -> None:
        self.requests = list(requests)
        self.asked: list[str] = []

    def choose_action(self, actor: Combatant, opponent: Combatant, catalog: Catalog) -> ActionRequest:
        self.asked.append(actor.name)
        if not self.requests:
            raise AssertionError(f"No scripted action left for {actor.name}")
        return self.requests.pop(0)


class RecordingReporter:
    """MatchReporter that remembers every call."""

    def __init__(self) -> None:
        self.statuses: list[list[str]] = []
        self.expired: list[tuple[str, list[ExpiredEffect]]] = []
        self.results: list[tuple[str, ActionResult]] = []
        self.winners: list[str] = []

    def show_status(self, combatants: list[Combatant]) -> None:
        self.statuses.append([c.name for c in combatants])

    def report_expired(self, combatant: Combatant, expired: list[ExpiredEffect]) -> None:
        self.expired.append((combatant.name, expired))

    def report_result(self, actor: Combatant, result: ActionResult) -> None:
        self.results.append((actor.name, result))

    def report_winner(self, winner: Combatant) -> None:
        self.winners.append(winner.name)


@pytest.fixture
def catalog() -> Catalog:
    """The standard shop."""
    return default_catalog()


@pytest.fixture
def settings() -> Settings:
    """Default game constants, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def tracker() -> EffectTracker:
    return EffectTracker()


@pytest.fixture
def resolver(catalog: Catalog, settings: Settings, rng: random.Random, tracker: EffectTracker) -> ActionResolver:
    """Resolver over the standard shop with a seeded random source."""
    return ActionResolver(catalog, settings, rng=rng, effect_tracker=tracker)


@pytest.fixture
def make_combatant(catalog: Catalog):
    """Factory for combatants with starting stats unless overridden."""

    def _make(name: str = "Gopher 1", **overrides) -> Combatant:
        values = {"hitpoints": 30, "coins": 20, "weapon": catalog.unarmed}
        values.update(overrides)
        return Combatant(name=name, **values)

    return _make


@pytest.fixture
def player1(make_combatant) -> Combatant:
    return make_combatant("Gopher 1")


@pytest.fixture
def player2(make_combatant) -> Combatant:
    return make_combatant("Gopher 2")


@pytest.fixture
def fixed_rng():
    """Factory for random sources pinned to the low or high end of every range."""
    return FixedRandom

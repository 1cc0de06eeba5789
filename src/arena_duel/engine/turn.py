"""Turn engine - alternates turns between two combatants until the match ends."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from ..config import Settings
from ..models.catalog import Catalog
from ..models.enums import ActionChoice, TurnPhase
from .actions import ActionResolver
from .effects import EffectTracker
from .types import ActionRequest, ActionResult, Combatant, ExpiredEffect, TurnResult

if TYPE_CHECKING:
    from .logging import CombatLogger

logger = logging.getLogger(__name__)


class ActionSource(Protocol):
    """Supplies a player's menu selection. May block indefinitely."""

    def choose_action(self, actor: Combatant, opponent: Combatant, catalog: Catalog) -> ActionRequest: ...


class MatchReporter(Protocol):
    """Receives everything the engine wants shown to the players."""

    def show_status(self, combatants: list[Combatant]) -> None: ...

    def report_expired(self, combatant: Combatant, expired: list[ExpiredEffect]) -> None: ...

    def report_result(self, actor: Combatant, result: ActionResult) -> None: ...

    def report_winner(self, winner: Combatant) -> None: ...


@dataclass
class MatchState:
    """The two combatants plus whose turn it is."""

    combatants: list[Combatant]
    active_index: int = 0
    phase: TurnPhase = TurnPhase.AWAITING_EFFECT_EXPIRY
    turn_number: int = 1
    winner: Combatant | None = None
    history: list[TurnResult] = field(default_factory=list)

    @property
    def active(self) -> Combatant:
        return self.combatants[self.active_index]

    @property
    def opponent(self) -> Combatant:
        return self.combatants[1 - self.active_index]

    @property
    def is_over(self) -> bool:
        return self.phase == TurnPhase.MATCH_OVER

    def find(self, name: str) -> Combatant:
        """Get a combatant by name."""
        for combatant in self.combatants:
            if combatant.name == name:
                return combatant
        raise ValueError(f"No combatant named {name!r}")


def create_combatant(name: str, catalog: Catalog, settings: Settings) -> Combatant:
    """Create a combatant with starting hitpoints, coins and bare hands."""
    return Combatant(
        name=name,
        hitpoints=settings.starting_hitpoints,
        coins=settings.starting_coins,
        weapon=catalog.unarmed,
    )


class TurnEngine:
    """Runs a match: expire effects, solicit until an action resolves, advance.

    State machine per turn:
        AWAITING_EFFECT_EXPIRY -> AWAITING_ACTION -> (retry on failure)
        -> TURN_COMPLETE -> AWAITING_EFFECT_EXPIRY for the other player.
    MATCH_OVER is terminal and only reached through death or forfeit.
    """

    def __init__(
        self,
        state: MatchState,
        resolver: ActionResolver,
        source: ActionSource,
        reporter: MatchReporter | None = None,
        effect_tracker: EffectTracker | None = None,
        combat_logger: "CombatLogger | None" = None,
    ) -> None:
        if len(state.combatants) != 2:
            raise ValueError("A match needs exactly two combatants")
        if state.combatants[0].name == state.combatants[1].name:
            raise ValueError("Combatants must have distinct names")
        self.state = state
        self.resolver = resolver
        self.source = source
        self.reporter = reporter
        self.effect_tracker = effect_tracker or resolver.effect_tracker
        self.combat_logger = combat_logger

    @classmethod
    def create(
        cls,
        catalog: Catalog,
        settings: Settings,
        source: ActionSource,
        reporter: MatchReporter | None = None,
        resolver: ActionResolver | None = None,
        combat_logger: "CombatLogger | None" = None,
    ) -> "TurnEngine":
        """Build a fresh match with two starting combatants."""
        state = MatchState(
            combatants=[
                create_combatant(settings.player1_name, catalog, settings),
                create_combatant(settings.player2_name, catalog, settings),
            ]
        )
        resolver = resolver or ActionResolver(catalog, settings)
        return cls(state, resolver, source, reporter=reporter, combat_logger=combat_logger)

    def play_turn(self) -> TurnResult:
        """Play one complete turn for the active combatant.

        Returns:
            TurnResult with expirations, every attempt, and the winner if the
            match ended. After the match is over nothing is accepted and the
            result has ``accepted=False``.
        """
        state = self.state
        actor = state.active
        opponent = state.opponent

        if state.is_over:
            logger.warning("Turn requested after the match ended")
            return TurnResult(
                turn_number=state.turn_number,
                player_name=actor.name,
                accepted=False,
                winner=state.winner.name if state.winner else None,
                is_match_over=True,
            )

        result = TurnResult(turn_number=state.turn_number, player_name=actor.name)

        if self.reporter:
            self.reporter.show_status(state.combatants)
        if self.combat_logger:
            self.combat_logger.log_turn_start(state.turn_number, actor.name, state.combatants)

        # Effects age only at the start of their owner's turn
        state.phase = TurnPhase.AWAITING_EFFECT_EXPIRY
        result.expired = self.effect_tracker.expire_effects(actor)
        if result.expired:
            if self.reporter:
                self.reporter.report_expired(actor, result.expired)
            if self.combat_logger:
                for expired in result.expired:
                    self.combat_logger.log_effect_expired(state.turn_number, actor.name, expired)

        state.phase = TurnPhase.AWAITING_ACTION
        while state.phase == TurnPhase.AWAITING_ACTION:
            request = self.source.choose_action(actor, opponent, self.resolver.catalog)
            affected = opponent if request.action == ActionChoice.ATTACK else actor
            before = self.combat_logger.snapshot_state(affected) if self.combat_logger else None

            attempt = self.resolver.resolve(request, actor, opponent)
            result.attempts.append(attempt)
            if self.reporter:
                self.reporter.report_result(actor, attempt)

            if not attempt.success:
                logger.debug(f"{actor.name}: action {request.action} rejected ({attempt.outcome.value})")
                if self.combat_logger:
                    self.combat_logger.log_action_rejected(state.turn_number, actor.name, attempt)
                continue

            if self.combat_logger:
                self.combat_logger.log_action_resolved(state.turn_number, actor.name, attempt, before, affected)
            state.phase = TurnPhase.TURN_COMPLETE

            if attempt.ends_match:
                self._finish(state.find(attempt.winner), result)

        state.history.append(result)
        if not state.is_over:
            state.active_index = 1 - state.active_index
            state.turn_number += 1
            state.phase = TurnPhase.AWAITING_EFFECT_EXPIRY
        return result

    def _finish(self, winner: Combatant, result: TurnResult) -> None:
        """Enter the terminal state."""
        self.state.phase = TurnPhase.MATCH_OVER
        self.state.winner = winner
        result.winner = winner.name
        result.is_match_over = True
        logger.info(f"Match over on turn {self.state.turn_number}: {winner.name} wins")
        if self.combat_logger:
            self.combat_logger.log_match_over(self.state.turn_number, winner.name)
        if self.reporter:
            self.reporter.report_winner(winner)

    def run(self) -> Combatant:
        """Play turns until someone dies or forfeits. Returns the winner."""
        while not self.state.is_over:
            self.play_turn()
        return self.state.winner

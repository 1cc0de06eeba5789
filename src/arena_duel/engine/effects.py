"""Effect tracker - applies consumable effects and expires them over time."""

import logging

from ..models.catalog import ConsumableSpec
from .types import ActiveEffect, Combatant, ExpiredEffect, StatChange

logger = logging.getLogger(__name__)


class EffectTracker:
    """Owns the lifecycle of active consumable effects on a combatant."""

    def register(self, combatant: Combatant, spec: ConsumableSpec) -> ActiveEffect:
        """Apply a consumable's deltas immediately and start tracking it.

        Args:
            combatant: The combatant who consumed the item
            spec: The consumable being used

        Returns:
            The new ActiveEffect (appended after any existing ones)
        """
        combatant.apply_change(StatChange.from_consumable(spec))
        effect = ActiveEffect.start(spec)
        combatant.active_effects.append(effect)
        lasts = "permanent" if effect.is_permanent else f"{effect.remaining} turns"
        logger.debug(f"{combatant.name} gained {spec.name} ({lasts})")
        return effect

    def expire_effects(self, combatant: Combatant) -> list[ExpiredEffect]:
        """Age the combatant's effects by one turn and drop the finished ones.

        Must be called exactly once at the start of the owner's own turn.
        Effects whose counter reaches exactly zero are removed and their deltas
        subtracted. Permanent effects are never decremented.

        Args:
            combatant: The combatant whose turn is starting

        Returns:
            One ExpiredEffect per removed effect, in consumption order
        """
        still_active: list[ActiveEffect] = []
        expired: list[ExpiredEffect] = []

        for effect in combatant.active_effects:
            if effect.is_permanent:
                still_active.append(effect)
                continue

            effect.remaining -= 1
            if effect.remaining != 0:
                still_active.append(effect)
                continue

            change = StatChange.from_consumable(effect.spec)
            combatant.apply_change(change, sign=-1)
            expired.append(ExpiredEffect(name=effect.name, reversed=change))
            logger.debug(f"{effect.name} expired on {combatant.name}")

        combatant.active_effects = still_active
        return expired

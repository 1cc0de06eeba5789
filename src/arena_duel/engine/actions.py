"""Action resolver - validates and applies player actions to combatants."""

import logging
import random

from ..config import Settings
from ..models.catalog import Catalog, WeaponSpec
from ..models.enums import ActionChoice, ItemKind, Outcome, Skill
from .effects import EffectTracker
from .types import ActionRequest, ActionResult, Combatant, StatChange

logger = logging.getLogger(__name__)

# Menu order of the nested selectors
ITEM_CLASS_MENU = [ItemKind.CONSUMABLE, ItemKind.WEAPON]
SKILL_MENU = [Skill.STRENGTH, Skill.AGILITY, Skill.INTELLECT]


def pick(options: list, index: int | None):
    """Return the option at a 1-based menu index, or None if out of range."""
    if index is None or index < 1 or index > len(options):
        return None
    return options[index - 1]


class ActionResolver:
    """Executes actions and modifies combatant state.

    Every operation returns an ActionResult. A failed result never mutates
    anything, and means the same player must choose again.
    """

    def __init__(
        self,
        catalog: Catalog,
        settings: Settings,
        rng: random.Random | None = None,
        effect_tracker: EffectTracker | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            catalog: Shop content used for purchases and consumable lookups
            settings: Game constants (training cost/increment, work payout)
            rng: Random source for damage and work payout
            effect_tracker: Tracker that registers used consumables
        """
        self.catalog = catalog
        self.settings = settings
        self.rng = rng or random.Random()
        self.effect_tracker = effect_tracker or EffectTracker()

    def resolve(self, request: ActionRequest, actor: Combatant, opponent: Combatant) -> ActionResult:
        """Dispatch a menu selection to the matching action.

        Out-of-range selectors are turned into failures here so callers can
        pass raw menu input straight through.
        """
        try:
            choice = ActionChoice(request.action)
        except ValueError:
            logger.debug(f"{actor.name} picked invalid action {request.action!r}")
            return ActionResult.failure(Outcome.INVALID_SELECTION, "Invalid choice. Try again.")

        match choice:
            case ActionChoice.ATTACK:
                return self.attack(actor, opponent)
            case ActionChoice.PURCHASE:
                return self._resolve_purchase(request, actor)
            case ActionChoice.USE:
                key = pick(actor.inventory_entries(), request.index)
                return self.use(actor, key)
            case ActionChoice.WORK:
                return self.work(actor)
            case ActionChoice.TRAIN:
                skill = pick(SKILL_MENU, request.index)
                return self.train(actor, skill)
            case ActionChoice.FORFEIT:
                return self.forfeit(actor, opponent)

    def _resolve_purchase(self, request: ActionRequest, buyer: Combatant) -> ActionResult:
        kind = pick(ITEM_CLASS_MENU, request.item_class)
        if kind is None:
            return ActionResult.failure(Outcome.INVALID_SELECTION, "Invalid choice. Try again.", ActionChoice.PURCHASE)

        if kind == ItemKind.CONSUMABLE:
            key = pick(self.catalog.consumable_menu(), request.index)
            return self.purchase(buyer, key, is_consumable=True)
        key = pick(self.catalog.weapon_menu(), request.index)
        return self.purchase(buyer, key, is_consumable=False)

    def attack(self, attacker: Combatant, defender: Combatant) -> ActionResult:
        """Hit the defender with the attacker's weapon.

        Damage is drawn uniformly from the weapon's inclusive range. Always
        consumes the turn; ends the match if the defender drops to 0 or below.
        """
        weapon = attacker.weapon
        damage = self.rng.randint(weapon.damage_min, weapon.damage_max)
        defender.hitpoints -= damage

        message = f"{attacker.name} attacks {defender.name} for {damage} damage!"
        result = ActionResult(
            success=True,
            outcome=Outcome.OK,
            action=ActionChoice.ATTACK,
            message=message,
            value=damage,
            item_key=weapon.key,
        )
        if not defender.is_alive():
            result.ends_match = True
            result.winner = attacker.name
            result.loser = defender.name
            result.message = f"{message}\n{defender.name} is dead. {attacker.name} wins!"
        return result

    def purchase(self, buyer: Combatant, key: str | None, is_consumable: bool) -> ActionResult:
        """Buy a consumable into the inventory, or buy and equip a weapon.

        Weapons are gated on the buyer meeting at least one of the three
        attribute requirements (a zero requirement is always met).
        """
        if is_consumable:
            consumable = self.catalog.get_consumable(key)
            if consumable is None:
                return ActionResult.failure(
                    Outcome.ITEM_NOT_FOUND, "Item not found in the shop. Try again", ActionChoice.PURCHASE
                )
            if buyer.coins < consumable.cost:
                return ActionResult.failure(
                    Outcome.INSUFFICIENT_FUNDS, "Not enough coins to buy the item. Try again", ActionChoice.PURCHASE
                )

            buyer.coins -= consumable.cost
            buyer.add_item(consumable.key)
            return ActionResult(
                success=True,
                outcome=Outcome.OK,
                action=ActionChoice.PURCHASE,
                message=f"{buyer.name} bought {consumable.name} for {consumable.cost} gold",
                value=consumable.cost,
                item_key=consumable.key,
            )

        weapon = self.catalog.get_weapon(key)
        if weapon is None:
            return ActionResult.failure(
                Outcome.ITEM_NOT_FOUND, "Item not found in the shop. Try again", ActionChoice.PURCHASE
            )
        if buyer.coins < weapon.cost:
            return ActionResult.failure(
                Outcome.INSUFFICIENT_FUNDS, "Not enough coins to buy the weapon. Try again", ActionChoice.PURCHASE
            )
        if not self.meets_any_requirement(buyer, weapon):
            return ActionResult.failure(
                Outcome.INSUFFICIENT_SKILL,
                "Insufficient skills to buy and equip the weapon. Try again",
                ActionChoice.PURCHASE,
            )

        buyer.coins -= weapon.cost
        buyer.weapon = weapon
        return ActionResult(
            success=True,
            outcome=Outcome.OK,
            action=ActionChoice.PURCHASE,
            message=f"{buyer.name} bought {weapon.name} for {weapon.cost} gold and equipped it",
            value=weapon.cost,
            item_key=weapon.key,
        )

    @staticmethod
    def meets_any_requirement(buyer: Combatant, weapon: WeaponSpec) -> bool:
        """True if at least one of the weapon's requirements is met."""
        return any(buyer.get_skill(skill) >= weapon.requirement(skill) for skill in SKILL_MENU)

    def use(self, user: Combatant, key: str | None) -> ActionResult:
        """Consume an owned item, applying its effects immediately."""
        spec = self.catalog.get_consumable(key)
        if spec is None or user.item_count(spec.key) <= 0:
            return ActionResult.failure(
                Outcome.ITEM_NOT_FOUND, "Item not found in inventory. Try again", ActionChoice.USE
            )

        user.remove_item(spec.key)
        self.effect_tracker.register(user, spec)
        return ActionResult(
            success=True,
            outcome=Outcome.OK,
            action=ActionChoice.USE,
            message=f"{user.name} used {spec.name} and gained the following effects:",
            item_key=spec.key,
            stat_change=StatChange.from_consumable(spec),
        )

    def train(self, trainer: Combatant, skill: Skill | str | None) -> ActionResult:
        """Pay the training cost to raise one attribute."""
        cost = self.settings.training_cost
        if trainer.coins < cost:
            return ActionResult.failure(
                Outcome.INSUFFICIENT_FUNDS, "Not enough coins to train. Try again", ActionChoice.TRAIN
            )

        try:
            skill = Skill(skill)
        except ValueError:
            return ActionResult.failure(Outcome.INVALID_SKILL, "Invalid skill to train. Try again", ActionChoice.TRAIN)

        increment = self.settings.training_increment
        trainer.coins -= cost
        trainer.add_skill(skill, increment)
        return ActionResult(
            success=True,
            outcome=Outcome.OK,
            action=ActionChoice.TRAIN,
            message=f"{trainer.name} trained {skill.value} and gained {increment} points.",
            value=increment,
        )

    def work(self, worker: Combatant) -> ActionResult:
        """Earn a random amount of coins."""
        earned = self.rng.randint(self.settings.work_min_coins, self.settings.work_max_coins)
        worker.coins += earned
        return ActionResult(
            success=True,
            outcome=Outcome.OK,
            action=ActionChoice.WORK,
            message=f"{worker.name} worked and earned {earned} coins.",
            value=earned,
        )

    def forfeit(self, player: Combatant, opponent: Combatant) -> ActionResult:
        """Give up. The opponent wins immediately."""
        return ActionResult(
            success=True,
            outcome=Outcome.OK,
            action=ActionChoice.FORFEIT,
            message=f"{player.name} forfeits the game. {opponent.name} wins!",
            ends_match=True,
            winner=opponent.name,
            loser=player.name,
        )

"""Console input and output for a local two-player match."""

import logging
from collections.abc import Callable

from ..engine.types import ActionRequest, ActionResult, Combatant, ExpiredEffect
from ..models.catalog import Catalog
from ..models.enums import ActionChoice
from .formatting import (
    ACTION_MENU,
    BUY_MENU,
    TRAIN_MENU,
    consumable_options,
    format_expired,
    format_menu,
    format_prompt,
    format_result,
    format_status,
    inventory_options,
    weapon_options,
)

logger = logging.getLogger(__name__)


def parse_choice(raw: str) -> int:
    """Parse a menu selection. Anything that isn't an integer counts as 0 (invalid)."""
    try:
        return int(raw.strip())
    except ValueError:
        return 0


class ConsoleActionSource:
    """Asks the active player for an action through numbered menus.

    ``read`` and ``write`` default to ``input`` and ``print`` so tests can
    drive the menus with scripted lines.
    """

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.read = read
        self.write = write

    def ask(self, title: str, options: list[str], what: str = "your choice") -> int:
        """Show a numbered menu and read one selection."""
        self.write("\n" + format_menu(title, options))
        return parse_choice(self.read(format_prompt(options, what)))

    def choose_action(self, actor: Combatant, opponent: Combatant, catalog: Catalog) -> ActionRequest:
        """Walk the player through the action menu and any sub-menu."""
        self.write(f"\n{actor.name}")
        action = self.ask("Actions", ACTION_MENU)
        logger.debug(f"{actor.name} selected action {action}")

        match action:
            case ActionChoice.PURCHASE:
                item_class = self.ask("Buy Items", BUY_MENU)
                if item_class == 1:
                    index = self.ask(
                        "Buy Consumables", consumable_options(catalog), "the number of the consumable you want to buy"
                    )
                elif item_class == 2:
                    index = self.ask("Buy Weapons", weapon_options(catalog), "the number of the weapon you want to buy")
                else:
                    index = None
                return ActionRequest(action=action, item_class=item_class, index=index)

            case ActionChoice.USE:
                options = inventory_options(actor, catalog)
                if not options:
                    self.write("Your inventory is empty.")
                    return ActionRequest(action=action, index=None)
                index = self.ask("Select an item to use", options, "the number of the item you want to use")
                return ActionRequest(action=action, index=index)

            case ActionChoice.TRAIN:
                index = self.ask("Train Skill", TRAIN_MENU, "the number of the skill you want to train")
                return ActionRequest(action=action, index=index)

            case _:
                return ActionRequest(action=action)


class ConsoleReporter:
    """Prints match progress to the console."""

    def __init__(self, catalog: Catalog, write: Callable[[str], None] = print) -> None:
        self.catalog = catalog
        self.write = write

    def show_status(self, combatants: list[Combatant]) -> None:
        self.write("\n")
        for combatant in combatants:
            self.write(format_status(combatant, self.catalog) + "\n")

    def report_expired(self, combatant: Combatant, expired: list[ExpiredEffect]) -> None:
        for effect in expired:
            self.write(format_expired(combatant, effect))

    def report_result(self, actor: Combatant, result: ActionResult) -> None:
        self.write(format_result(result))

    def report_winner(self, winner: Combatant) -> None:
        self.write(f"\nGame over. {winner.name} wins!")

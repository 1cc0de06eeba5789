"""Text formatting for menus, status blocks and action results."""

from ..engine.types import ActionResult, Combatant, ExpiredEffect, StatChange
from ..models.catalog import Catalog

ACTION_MENU = ["Attack", "Buy", "Use", "Work", "Train", "Exit"]
BUY_MENU = ["Consumables", "Weapons"]
TRAIN_MENU = ["Strength", "Agility", "Intellect"]


def format_status(combatant: Combatant, catalog: Catalog) -> str:
    """Format one combatant's status block."""
    lines = [
        f"{combatant.name}:",
        f"Hitpoints: {combatant.hitpoints}",
        f"Strength: {combatant.strength}",
        f"Agility: {combatant.agility}",
        f"Intellect: {combatant.intellect}",
        f"Coins: {combatant.coins}",
        f"Equipped Weapon: {combatant.weapon.name}",
        "Inventory:",
    ]
    for key, quantity in combatant.inventory.items():
        lines.append(f"{item_name(key, catalog)}: {quantity}")
    return "\n".join(lines)


def item_name(key: str, catalog: Catalog) -> str:
    """Display name for a consumable key (falls back to the key itself)."""
    spec = catalog.get_consumable(key)
    return spec.name if spec else key


def format_menu(title: str, options: list[str]) -> str:
    """Format a numbered menu."""
    lines = [f"{title}:"]
    lines.extend(f"{i}. {option}" for i, option in enumerate(options, start=1))
    return "\n".join(lines)


def format_prompt(options: list[str], what: str = "your choice") -> str:
    """Format the input prompt that follows a numbered menu."""
    if len(options) == 1:
        return f"Enter {what} (1): "
    return f"Enter {what} (1-{len(options)}): "


def consumable_options(catalog: Catalog) -> list[str]:
    """Buy menu lines for consumables, with prices."""
    return [f"{spec.name} ({spec.cost} gold)" for spec in map(catalog.get_consumable, catalog.consumable_menu())]


def weapon_options(catalog: Catalog) -> list[str]:
    """Buy menu lines for weapons, with prices."""
    return [f"{spec.name} ({spec.cost} gold)" for spec in map(catalog.get_weapon, catalog.weapon_menu())]


def inventory_options(combatant: Combatant, catalog: Catalog) -> list[str]:
    """Use menu lines for the combatant's owned consumables."""
    return [f"{item_name(key, catalog)} (x{combatant.item_count(key)})" for key in combatant.inventory_entries()]


def format_stat_change(change: StatChange, sign: str) -> str:
    """Format per-stat lines like ``Hitpoints: +5``."""
    return "\n".join(
        [
            f"Hitpoints: {sign}{change.hitpoints}",
            f"Strength: {sign}{change.strength}",
            f"Agility: {sign}{change.agility}",
            f"Intellect: {sign}{change.intellect}",
        ]
    )


def format_expired(combatant: Combatant, expired: ExpiredEffect) -> str:
    """Format an expiry notice with the reversed deltas."""
    header = f"{expired.name} duration expired and {combatant.name} lost the following effects:"
    return header + "\n" + format_stat_change(expired.reversed, "-")


def format_result(result: ActionResult) -> str:
    """Format an action result for display."""
    if result.stat_change is not None:
        return result.message + "\n" + format_stat_change(result.stat_change, "+")
    return result.message

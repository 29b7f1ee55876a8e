import logging

from src.pokemon_adventure.constants import POTION_HEAL_AMOUNT
from src.pokemon_adventure.data.items import get_shop_item
from src.pokemon_adventure.enums import ActionResult, ItemKind
from src.pokemon_adventure.schema.creature import Creature
from src.pokemon_adventure.schema.player import Inventory

LOGGER = logging.getLogger(__name__)


def purchase(inventory: Inventory, item: ItemKind) -> ActionResult:
    """Buy one item: deduct its price and add it to the bag."""
    shop_item = get_shop_item(item)
    if shop_item is None:
        return ActionResult.UNKNOWN_ITEM
    if inventory.money < shop_item.price:
        LOGGER.debug("Cannot afford %s (%d < %d)", shop_item.name, inventory.money, shop_item.price)
        return ActionResult.INSUFFICIENT_FUNDS

    inventory.money -= shop_item.price
    if item == ItemKind.POKEBALL:
        inventory.pokeballs += 1
    elif item == ItemKind.POTION:
        inventory.potions += 1
    LOGGER.info("Bought %s for $%d, $%d left", shop_item.name, shop_item.price, inventory.money)
    return ActionResult.OK


def use_potion(inventory: Inventory, creature: Creature, heal_amount: int = POTION_HEAL_AMOUNT) -> ActionResult:
    """Heal a creature by heal_amount (capped at maxHP), consuming a potion.

    Fainted creatures are below maxHP, so a potion brings them back.
    """
    if inventory.potions <= 0:
        return ActionResult.NO_POTIONS
    if creature.is_full_hp():
        return ActionResult.ALREADY_FULL_HP

    restored = creature.heal(heal_amount)
    inventory.potions -= 1
    LOGGER.info("Potion restored %d HP to %s (%d/%d)", restored, creature.name, creature.hp, creature.maxHP)
    return ActionResult.OK


def add_money(inventory: Inventory, amount: int) -> int:
    if amount < 0:
        raise ValueError(f"Reward must be non-negative, got {amount}")
    inventory.money += amount
    return inventory.money

from pydantic import BaseModel, ConfigDict, Field

from src.pokemon_adventure.constants import POTION_HEAL_AMOUNT
from src.pokemon_adventure.enums import ItemKind


class ShopItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: int = Field(ge=0)
    description: str
    sprite: str


SHOP_ITEMS: dict[ItemKind, ShopItem] = {
    ItemKind.POKEBALL: ShopItem(name="Pokeball", price=200, description="Catch wild Pokemon", sprite="⚪"),
    ItemKind.POTION: ShopItem(name="Potion", price=300, description=f"Restore {POTION_HEAL_AMOUNT} HP to a Pokemon", sprite="🧪"),
}


def get_shop_item(item: ItemKind) -> ShopItem | None:
    return SHOP_ITEMS.get(item)

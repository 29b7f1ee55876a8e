from pydantic import BaseModel, Field

from src.pokemon_adventure.schema.creature import Creature


class Inventory(BaseModel):
    """Currency and consumable counts"""

    money: int = Field(ge=0, default=0)
    pokeballs: int = Field(ge=0, default=0)
    potions: int = Field(ge=0, default=0)


class Player(BaseModel):
    """Player position, party and bag.

    party keeps capture order; active_index points at the creature currently
    representing the player in battle.
    """

    x: int = Field(ge=0)
    y: int = Field(ge=0)
    party: list[Creature] = Field(min_length=1)
    active_index: int = Field(ge=0, default=0)
    inventory: Inventory = Field(default_factory=Inventory)

    def active_creature(self) -> Creature | None:
        if 0 <= self.active_index < len(self.party):
            return self.party[self.active_index]
        return None

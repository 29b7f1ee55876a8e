from pydantic import BaseModel, Field, model_validator

from src.pokemon_adventure.enums import Species, Type


class Creature(BaseModel):
    """A species instance with level-derived stats and mutable HP"""

    id: str
    species: Species
    name: str
    type: Type
    level: int = Field(ge=1)
    hp: int = Field(ge=0)
    maxHP: int = Field(ge=1)
    attack: int = Field(ge=0)
    sprite: str

    @model_validator(mode="after")
    def _hp_within_max(self) -> "Creature":
        if self.hp > self.maxHP:
            raise ValueError(f"hp {self.hp} exceeds maxHP {self.maxHP}")
        return self

    def is_fainted(self) -> bool:
        return self.hp <= 0

    def is_full_hp(self) -> bool:
        return self.hp >= self.maxHP

    def take_damage(self, amount: int) -> int:
        """Apply damage floored at 0 HP and return the amount actually lost."""
        if amount < 0:
            raise ValueError(f"Damage must be non-negative, got {amount}")
        before = self.hp
        self.hp = max(0, self.hp - amount)
        return before - self.hp

    def heal(self, amount: int) -> int:
        """Apply healing capped at maxHP and return the amount restored."""
        if amount < 0:
            raise ValueError(f"Healing must be non-negative, got {amount}")
        before = self.hp
        self.hp = min(self.maxHP, self.hp + amount)
        return self.hp - before

    def restore_full(self) -> None:
        self.hp = self.maxHP

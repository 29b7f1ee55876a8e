from pydantic import BaseModel, ConfigDict, Field

from src.pokemon_adventure.enums import Type


class SpeciesInfo(BaseModel):
    """Static species archetype - base stats and display data"""

    model_config = ConfigDict(frozen=True)

    name: str
    type: Type
    baseHP: int = Field(ge=1, le=255)
    baseAttack: int = Field(ge=1, le=255)
    sprite: str  # display glyph

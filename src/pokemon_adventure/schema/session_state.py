from typing import Optional

from pydantic import BaseModel

from src.pokemon_adventure.enums import GameMode
from src.pokemon_adventure.schema.encounter import Encounter
from src.pokemon_adventure.schema.player import Player


class SessionSnapshot(BaseModel):
    """Read-only copy of the session handed to the presentation layer"""

    mode: GameMode
    player: Player
    encounter: Optional[Encounter] = None
    clock: float = 0.0

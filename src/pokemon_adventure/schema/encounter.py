from pydantic import BaseModel, Field

from src.pokemon_adventure.enums import BattlePhase
from src.pokemon_adventure.schema.creature import Creature


class Encounter(BaseModel):
    """Transient battle against a single wild creature.

    Exists only while the session is in battle mode; the log is append-only
    and discarded together with the encounter.
    """

    id: int = Field(ge=0)
    wild: Creature
    phase: BattlePhase = BattlePhase.PLAYER_TURN
    log: list[str] = Field(default_factory=list)

    @property
    def player_turn(self) -> bool:
        return self.phase == BattlePhase.PLAYER_TURN

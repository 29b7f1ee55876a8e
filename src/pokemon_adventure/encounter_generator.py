import logging
from typing import Optional

from src.pokemon_adventure.config import GameConfig
from src.pokemon_adventure.data.species import catalog_species
from src.pokemon_adventure.schema.creature import Creature
from src.pokemon_adventure.utils import rng
from src.pokemon_adventure.utils.mon_factory import create_creature

LOGGER = logging.getLogger(__name__)


def roll_encounter(has_moved: bool, source: rng.RandomSource, config: Optional[GameConfig] = None) -> Optional[Creature]:
    """
    Decide whether a wild creature appears after a step

    Only a step that actually changed the player's position is eligible; a
    blocked step consumes no draws. Otherwise one draw against the encounter
    rate, then a uniform species from the catalog and a uniform level from
    the configured wild levels.

    Does not touch game state: the caller switches to battle mode.
    """
    if not has_moved:
        return None
    config = config or GameConfig()

    if source.random() >= config.encounter_rate:
        return None

    species = rng.choice(source, catalog_species())
    level = rng.choice(source, config.wild_levels)
    wild = create_creature(species, level)
    LOGGER.info("Wild %s (lv%d) appeared", wild.name, wild.level)
    return wild

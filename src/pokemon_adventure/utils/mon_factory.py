import logging
import math
import uuid

from src.pokemon_adventure.constants import ATTACK_PER_LEVEL, CREATURE_ID_LENGTH, HP_PER_LEVEL, MIN_LEVEL
from src.pokemon_adventure.data.species import get_species_info
from src.pokemon_adventure.enums import Species
from src.pokemon_adventure.exceptions import InvalidLevelError
from src.pokemon_adventure.schema.creature import Creature

LOGGER = logging.getLogger(__name__)


def compute_max_hp(base_hp: int, level: int) -> int:
    return math.floor(base_hp + level * HP_PER_LEVEL)


def compute_attack(base_attack: int, level: int) -> int:
    return math.floor(base_attack + level * ATTACK_PER_LEVEL)


def new_creature_id() -> str:
    return uuid.uuid4().hex[:CREATURE_ID_LENGTH]


def create_creature(species: Species, level: int = 5) -> Creature:
    """Instantiate a creature at full HP.

    Deterministic for a given species and level apart from the generated id.
    Raises InvalidLevelError for levels below 1.
    """
    if level < MIN_LEVEL:
        raise InvalidLevelError(level)
    info = get_species_info(species)

    max_hp = compute_max_hp(info.baseHP, level)
    creature = Creature(
        id=new_creature_id(),
        species=species,
        name=info.name,
        type=info.type,
        level=level,
        hp=max_hp,
        maxHP=max_hp,
        attack=compute_attack(info.baseAttack, level),
        sprite=info.sprite,
    )
    LOGGER.debug("Created %s lv%d (hp=%d atk=%d)", creature.name, level, creature.maxHP, creature.attack)
    return creature

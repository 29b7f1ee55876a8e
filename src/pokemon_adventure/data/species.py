from src.pokemon_adventure.enums import Species, Type
from src.pokemon_adventure.exceptions import UnknownSpeciesError
from src.pokemon_adventure.schema.species_info import SpeciesInfo

SPECIES_INFOS: dict[Species, SpeciesInfo] = {
    Species.PIKACHU: SpeciesInfo(name="Pikachu", type=Type.ELECTRIC, baseHP=35, baseAttack=55, sprite="⚡"),
    Species.CHARMANDER: SpeciesInfo(name="Charmander", type=Type.FIRE, baseHP=39, baseAttack=52, sprite="🔥"),
    Species.SQUIRTLE: SpeciesInfo(name="Squirtle", type=Type.WATER, baseHP=44, baseAttack=48, sprite="💧"),
    Species.BULBASAUR: SpeciesInfo(name="Bulbasaur", type=Type.GRASS, baseHP=45, baseAttack=49, sprite="🌱"),
    Species.RATTATA: SpeciesInfo(name="Rattata", type=Type.NORMAL, baseHP=30, baseAttack=56, sprite="🐭"),
    Species.PIDGEY: SpeciesInfo(name="Pidgey", type=Type.FLYING, baseHP=40, baseAttack=45, sprite="🐦"),
}


def get_species_info(species: Species) -> SpeciesInfo:
    """Look up static species data.

    Raises UnknownSpeciesError if the species has no catalog entry.
    """
    try:
        return SPECIES_INFOS[species]
    except KeyError:
        raise UnknownSpeciesError(species) from None


def catalog_species() -> list[Species]:
    """All species in catalog order (the order wild encounters draw from)"""
    return list(SPECIES_INFOS)

from enum import IntEnum


class Species(IntEnum):
    """Species available in the wild and as starters"""

    PIKACHU = 0
    CHARMANDER = 1
    SQUIRTLE = 2
    BULBASAUR = 3
    RATTATA = 4
    PIDGEY = 5

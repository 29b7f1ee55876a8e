class GameError(Exception):
    """Base class for programming errors raised by the engine.

    Gameplay rejections (wrong turn, no money, ...) are reported through
    ActionResult instead and never raise.
    """


class InvalidLevelError(GameError, ValueError):
    def __init__(self, level: int):
        super().__init__(f"Creature level must be >= 1, got {level}")
        self.level = level


class UnknownSpeciesError(GameError, KeyError):
    def __init__(self, species: object):
        super().__init__(f"Species {species!r} is not in the catalog")
        self.species = species

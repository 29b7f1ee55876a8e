from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.pokemon_adventure import constants
from src.pokemon_adventure.enums import Species


class GameConfig(BaseModel):
    """Session tunables. Defaults give the standard 10x10 game."""

    model_config = ConfigDict(frozen=True)

    # World
    grid_width: int = Field(ge=1, default=constants.GRID_WIDTH)
    grid_height: int = Field(ge=1, default=constants.GRID_HEIGHT)
    start_x: int = Field(ge=0, default=constants.START_X)
    start_y: int = Field(ge=0, default=constants.START_Y)
    shop_x: int = Field(ge=0, default=constants.SHOP_X)
    shop_y: int = Field(ge=0, default=constants.SHOP_Y)
    grass_density: float = Field(ge=0.0, le=1.0, default=constants.GRASS_DENSITY)

    # Encounters
    encounter_rate: float = Field(ge=0.0, le=1.0, default=constants.ENCOUNTER_RATE)
    wild_levels: tuple[int, ...] = Field(min_length=1, default=constants.WILD_LEVELS)

    # Player start
    starter_species: Species = Species.PIKACHU
    starter_level: int = Field(ge=constants.MIN_LEVEL, default=constants.STARTER_LEVEL)
    starting_money: int = Field(ge=0, default=constants.STARTING_MONEY)
    starting_pokeballs: int = Field(ge=0, default=constants.STARTING_POKEBALLS)
    starting_potions: int = Field(ge=0, default=constants.STARTING_POTIONS)
    potion_heal_amount: int = Field(ge=1, default=constants.POTION_HEAL_AMOUNT)

    # Pacing delays (seconds)
    wild_turn_delay: float = Field(ge=0.0, default=constants.WILD_TURN_DELAY)
    capture_resolve_delay: float = Field(ge=0.0, default=constants.CAPTURE_RESOLVE_DELAY)
    win_return_delay: float = Field(ge=0.0, default=constants.WIN_RETURN_DELAY)
    capture_return_delay: float = Field(ge=0.0, default=constants.CAPTURE_RETURN_DELAY)
    flee_return_delay: float = Field(ge=0.0, default=constants.FLEE_RETURN_DELAY)
    loss_return_delay: float = Field(ge=0.0, default=constants.LOSS_RETURN_DELAY)

    @model_validator(mode="after")
    def _check_grid_positions(self) -> "GameConfig":
        for label, x, y in (("start", self.start_x, self.start_y), ("shop", self.shop_x, self.shop_y)):
            if x >= self.grid_width or y >= self.grid_height:
                raise ValueError(f"{label} position ({x}, {y}) is outside the {self.grid_width}x{self.grid_height} grid")
        if any(level < constants.MIN_LEVEL for level in self.wild_levels):
            raise ValueError(f"wild_levels must all be >= {constants.MIN_LEVEL}")
        return self

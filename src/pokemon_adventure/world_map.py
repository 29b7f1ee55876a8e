from pydantic import BaseModel, Field

from src.pokemon_adventure.config import GameConfig
from src.pokemon_adventure.enums import TileKind
from src.pokemon_adventure.utils.rng import RandomSource


class WorldMap(BaseModel):
    """Overworld grid, generated once per session so it stays stable between renders"""

    width: int = Field(ge=1)
    height: int = Field(ge=1)
    tiles: list[list[TileKind]]  # tiles[y][x]

    @classmethod
    def generate(cls, config: GameConfig, source: RandomSource) -> "WorldMap":
        threshold = 1.0 - config.grass_density
        tiles = []
        for y in range(config.grid_height):
            row = []
            for x in range(config.grid_width):
                if (x, y) == (config.shop_x, config.shop_y):
                    row.append(TileKind.SHOP)
                elif source.random() > threshold:
                    row.append(TileKind.GRASS)
                else:
                    row.append(TileKind.PATH)
            tiles.append(row)
        return cls(width=config.grid_width, height=config.grid_height, tiles=tiles)

    def tile_at(self, x: int, y: int) -> TileKind:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside the map")
        return self.tiles[y][x]

    def clamp_position(self, x: int, y: int) -> tuple[int, int]:
        return max(0, min(self.width - 1, x)), max(0, min(self.height - 1, y))

from src.pokemon_adventure.enums.species import Species
from src.pokemon_adventure.enums.other import Type, ItemKind, TileKind, GameMode, BattlePhase, ActionResult

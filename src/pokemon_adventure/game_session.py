import logging
from typing import NamedTuple, Optional

from src.pokemon_adventure import inventory as economy
from src.pokemon_adventure import party
from src.pokemon_adventure.battle_engine import BattleAction, BattleEngine
from src.pokemon_adventure.config import GameConfig
from src.pokemon_adventure.encounter_generator import roll_encounter
from src.pokemon_adventure.enums import ActionResult, GameMode, ItemKind
from src.pokemon_adventure.scheduler import Scheduler
from src.pokemon_adventure.schema.creature import Creature
from src.pokemon_adventure.schema.player import Inventory, Player
from src.pokemon_adventure.schema.session_state import SessionSnapshot
from src.pokemon_adventure.utils.mon_factory import create_creature
from src.pokemon_adventure.utils.rng import LcgRandom, RandomSource
from src.pokemon_adventure.world_map import WorldMap

LOGGER = logging.getLogger(__name__)


class MoveOutcome(NamedTuple):
    result: ActionResult
    x: int
    y: int
    encounter_started: bool = False


class GameSession:
    """
    One running game: the single owner of all mutable state

    The presentation layer drives the session with discrete calls (a key
    press, a button, elapsed time via tick()) and renders snapshot(). Every
    operation either applies completely and returns ActionResult.OK, or
    returns the reason it was refused and leaves state unchanged.
    """

    def __init__(self, config: Optional[GameConfig] = None, source: Optional[RandomSource] = None, seed: Optional[int] = None, map_source: Optional[RandomSource] = None):
        """
        Args:
            config: Tunables; defaults give the standard game
            source: Random source for encounters and battles
            seed: Seed for the default LcgRandom when no source is given
            map_source: Random source for map decoration; defaults to source
        """
        self.config = config or GameConfig()
        self.rng: RandomSource = source if source is not None else LcgRandom(seed)
        self.scheduler = Scheduler()
        self.world_map = WorldMap.generate(self.config, map_source if map_source is not None else self.rng)

        self.mode = GameMode.OVERWORLD
        self.player = Player(
            x=self.config.start_x,
            y=self.config.start_y,
            party=[create_creature(self.config.starter_species, self.config.starter_level)],
            inventory=Inventory(
                money=self.config.starting_money,
                pokeballs=self.config.starting_pokeballs,
                potions=self.config.starting_potions,
            ),
        )
        self.battle: Optional[BattleEngine] = None
        self._encounter_count = 0

    # =================================================================
    # OVERWORLD
    # =================================================================

    def move_player(self, dx: int, dy: int) -> MoveOutcome:
        """Step on the grid; a step that changes position may start a battle."""
        if not self.mode.allows_movement():
            return MoveOutcome(ActionResult.WRONG_MODE, self.player.x, self.player.y)

        new_x, new_y = self.world_map.clamp_position(self.player.x + dx, self.player.y + dy)
        has_moved = (new_x, new_y) != (self.player.x, self.player.y)
        self.player.x, self.player.y = new_x, new_y

        wild = roll_encounter(has_moved, self.rng, self.config)
        if wild is not None:
            self.start_encounter(wild)
        return MoveOutcome(ActionResult.OK, new_x, new_y, wild is not None)

    def start_encounter(self, wild: Creature) -> Optional[BattleEngine]:
        """Switch to battle mode against wild. Returns None outside the overworld."""
        if not self.mode.allows_movement():
            LOGGER.debug("Refusing encounter with %s in %s mode", wild.name, self.mode.name)
            return None
        if self.battle is not None:
            self.battle.close()
        self._encounter_count += 1
        self.battle = BattleEngine(
            player=self.player,
            wild=wild,
            encounter_id=self._encounter_count,
            source=self.rng,
            scheduler=self.scheduler,
            config=self.config,
            on_finished=self._end_encounter,
        )
        self.mode = GameMode.BATTLE
        return self.battle

    # =================================================================
    # BATTLE
    # =================================================================

    def submit_battle_action(self, action: BattleAction) -> ActionResult:
        if not self.mode.allows_battle_actions() or self.battle is None:
            return ActionResult.WRONG_MODE
        return self.battle.submit(action)

    def _end_encounter(self, encounter_id: int) -> None:
        if self.battle is None or self._encounter_count != encounter_id:
            LOGGER.debug("Ignoring end of stale encounter %d", encounter_id)
            return
        self.battle = None
        self.mode = GameMode.OVERWORLD
        LOGGER.info("Back to the overworld after encounter %d", encounter_id)

    # =================================================================
    # SHOP AND MENU
    # =================================================================

    def buy(self, item: ItemKind) -> ActionResult:
        if not self.mode.allows_purchase():
            return ActionResult.WRONG_MODE
        return economy.purchase(self.player.inventory, item)

    def use_potion(self, index: int) -> ActionResult:
        if not self.mode.allows_party_management():
            return ActionResult.WRONG_MODE
        if not 0 <= index < len(self.player.party):
            return ActionResult.INVALID_TARGET
        return economy.use_potion(self.player.inventory, self.player.party[index], self.config.potion_heal_amount)

    def set_active(self, index: int) -> ActionResult:
        """Choose the active creature from the menu. In battle use BattleAction.switch."""
        if not self.mode.allows_party_management():
            return ActionResult.WRONG_MODE
        return party.set_active(self.player, index)

    def open_menu(self) -> ActionResult:
        return self._open(GameMode.MENU)

    def open_shop(self) -> ActionResult:
        return self._open(GameMode.SHOP)

    def close(self) -> ActionResult:
        """Leave the menu or shop."""
        if self.mode not in (GameMode.MENU, GameMode.SHOP):
            return ActionResult.WRONG_MODE
        self.mode = GameMode.OVERWORLD
        return ActionResult.OK

    def toggle_menu(self) -> ActionResult:
        """Escape key: shop -> overworld, menu <-> overworld. No effect in battle."""
        if self.mode == GameMode.OVERWORLD:
            return self.open_menu()
        return self.close()

    def _open(self, mode: GameMode) -> ActionResult:
        if not self.mode.can_open_screens():
            return ActionResult.WRONG_MODE
        self.mode = mode
        LOGGER.debug("Opened %s", mode.name)
        return ActionResult.OK

    # =================================================================
    # TIME AND QUERIES
    # =================================================================

    def tick(self, seconds: float) -> int:
        """Advance the pacing clock; returns the number of delayed steps that ran."""
        return self.scheduler.advance(seconds)

    def flush(self) -> int:
        """Run every pending delayed step right away."""
        return self.scheduler.flush()

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            mode=self.mode,
            player=self.player.model_copy(deep=True),
            encounter=self.battle.encounter.model_copy(deep=True) if self.battle and self.battle.encounter else None,
            clock=self.scheduler.now,
        )

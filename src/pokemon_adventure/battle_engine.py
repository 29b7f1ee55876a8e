import logging
from enum import IntEnum
from typing import Callable, Optional

from pydantic import BaseModel, Field

from src.pokemon_adventure import party
from src.pokemon_adventure.config import GameConfig
from src.pokemon_adventure.constants import (
    CAPTURE_REWARD_BASE,
    CAPTURE_REWARD_SPREAD,
    CATCH_FLOOR,
    CATCH_HP_WEIGHT,
    PLAYER_DAMAGE_BONUS,
    WILD_DAMAGE_BONUS,
    WIN_REWARD_BASE,
    WIN_REWARD_SPREAD,
)
from src.pokemon_adventure.enums import ActionResult, BattlePhase
from src.pokemon_adventure.inventory import add_money
from src.pokemon_adventure.scheduler import Scheduler
from src.pokemon_adventure.schema.creature import Creature
from src.pokemon_adventure.schema.encounter import Encounter
from src.pokemon_adventure.schema.player import Player
from src.pokemon_adventure.utils import rng

LOGGER = logging.getLogger(__name__)


class BattleAction(BaseModel):
    """Player input during a battle"""

    class ActionType(IntEnum):
        ATTACK = 0
        CAPTURE = 1
        FLEE = 2
        SWITCH = 3

    action_type: ActionType

    # For SWITCH
    party_slot: Optional[int] = Field(None, description="Which party slot to switch to; range-checked by the party")

    @classmethod
    def attack(cls) -> "BattleAction":
        return cls(action_type=cls.ActionType.ATTACK)

    @classmethod
    def capture(cls) -> "BattleAction":
        return cls(action_type=cls.ActionType.CAPTURE)

    @classmethod
    def flee(cls) -> "BattleAction":
        return cls(action_type=cls.ActionType.FLEE)

    @classmethod
    def switch(cls, party_slot: int) -> "BattleAction":
        return cls(action_type=cls.ActionType.SWITCH, party_slot=party_slot)


# =================================================================
# DAMAGE, CAPTURE AND REWARD ROLLS
# =================================================================


def roll_player_damage(source: rng.RandomSource, attack: int) -> int:
    """Uniform integer in [10, attack + 9]"""
    return rng.rand_int(source, attack) + PLAYER_DAMAGE_BONUS


def roll_wild_damage(source: rng.RandomSource, attack: int) -> int:
    """Uniform integer in [5, attack + 4]"""
    return rng.rand_int(source, attack) + WILD_DAMAGE_BONUS


def catch_probability(wild: Creature) -> float:
    """0.3 at full HP rising linearly to 1.0 at 0 HP."""
    missing_fraction = 1 - wild.hp / wild.maxHP
    return min(1.0, max(CATCH_FLOOR, missing_fraction * CATCH_HP_WEIGHT + CATCH_FLOOR))


def roll_win_reward(source: rng.RandomSource) -> int:
    """Uniform integer in [50, 149]"""
    return rng.rand_int(source, WIN_REWARD_SPREAD) + WIN_REWARD_BASE


def roll_capture_reward(source: rng.RandomSource) -> int:
    """Uniform integer in [25, 74]"""
    return rng.rand_int(source, CAPTURE_REWARD_SPREAD) + CAPTURE_REWARD_BASE


class BattleEngine:
    """
    Battle against one wild creature

    The engine is a state machine over BattlePhase:

        PLAYER_TURN --attack--> WILD_TURN | BATTLE_WON
        PLAYER_TURN --pokeball--> RESOLVING_PLAYER_ACTION --> CAPTURED | WILD_TURN
        PLAYER_TURN --flee--> PLAYER_FLED
        WILD_TURN --(delay)--> PLAYER_TURN | BATTLE_LOST

    Player actions are only honoured in PLAYER_TURN. Delayed steps (wild
    turn, pokeball reveal, return to the overworld) go through the shared
    Scheduler keyed to the encounter id. Every delayed callback re-checks that
    its encounter is still the live one before touching state.

    on_finished is called with the encounter id once a terminal phase has
    been displayed; the session uses it to go back to the overworld.
    """

    def __init__(
        self,
        player: Player,
        wild: Creature,
        encounter_id: int,
        source: rng.RandomSource,
        scheduler: Scheduler,
        config: Optional[GameConfig] = None,
        on_finished: Optional[Callable[[int], None]] = None,
    ):
        self.player = player
        self.rng = source
        self.scheduler = scheduler
        self.config = config or GameConfig()
        self.on_finished = on_finished
        self.encounter: Optional[Encounter] = Encounter(id=encounter_id, wild=wild, log=[f"A wild {wild.name} appeared!"])
        LOGGER.info("Encounter %d started against %s (lv%d)", encounter_id, wild.name, wild.level)

    # =================================================================
    # QUERIES
    # =================================================================

    @property
    def phase(self) -> Optional[BattlePhase]:
        return self.encounter.phase if self.encounter else None

    @property
    def log(self) -> list[str]:
        return self.encounter.log if self.encounter else []

    def is_over(self) -> bool:
        return self.encounter is None or self.encounter.phase.is_terminal()

    # =================================================================
    # PLAYER ACTIONS
    # =================================================================

    def submit(self, action: BattleAction) -> ActionResult:
        """Dispatch a player action. Anything outside PLAYER_TURN is refused."""
        if self.encounter is None or self.encounter.phase != BattlePhase.PLAYER_TURN:
            LOGGER.debug("Refusing %s outside the player's turn (phase=%s)", action.action_type.name, self.phase)
            return ActionResult.WRONG_TURN

        if action.action_type == BattleAction.ActionType.ATTACK:
            return self.attack()
        elif action.action_type == BattleAction.ActionType.CAPTURE:
            return self.throw_pokeball()
        elif action.action_type == BattleAction.ActionType.FLEE:
            return self.flee()
        elif action.action_type == BattleAction.ActionType.SWITCH:
            if action.party_slot is None:
                return ActionResult.INVALID_TARGET
            return self.switch(action.party_slot)
        return ActionResult.WRONG_TURN

    def attack(self) -> ActionResult:
        if not self._is_player_turn():
            return ActionResult.WRONG_TURN
        active = self.player.active_creature()
        wild = self.encounter.wild
        if active is None or active.is_fainted():
            return ActionResult.NO_ACTIVE_CREATURE
        if wild.is_fainted():
            return ActionResult.INVALID_TARGET

        damage = roll_player_damage(self.rng, active.attack)
        wild.take_damage(damage)
        self._log(f"{active.name} dealt {damage} damage!")

        if wild.is_fainted():
            reward = roll_win_reward(self.rng)
            add_money(self.player.inventory, reward)
            self._log(f"Wild {wild.name} fainted!", f"You earned ${reward}!")
            self._finish(BattlePhase.BATTLE_WON, self.config.win_return_delay)
        else:
            self._begin_wild_turn()
        return ActionResult.OK

    def throw_pokeball(self) -> ActionResult:
        if not self._is_player_turn():
            return ActionResult.WRONG_TURN
        inventory = self.player.inventory
        if inventory.pokeballs <= 0:
            return ActionResult.NO_POKEBALLS

        inventory.pokeballs -= 1
        wild = self.encounter.wild
        chance = catch_probability(wild)
        caught = self.rng.random() < chance
        self._log("You threw a Pokeball!")
        LOGGER.debug("Catch chance %.2f -> %s", chance, "caught" if caught else "broke free")

        self.encounter.phase = BattlePhase.RESOLVING_PLAYER_ACTION
        self._schedule(self.config.capture_resolve_delay, lambda: self._resolve_capture(caught), "capture reveal")
        return ActionResult.OK

    def flee(self) -> ActionResult:
        if not self._is_player_turn():
            return ActionResult.WRONG_TURN
        self._log("You ran away safely!")
        self._finish(BattlePhase.PLAYER_FLED, self.config.flee_return_delay)
        return ActionResult.OK

    def switch(self, party_slot: int) -> ActionResult:
        """Change the active creature. Does not use up the turn."""
        if not self._is_player_turn():
            return ActionResult.WRONG_TURN
        return party.set_active(self.player, party_slot)

    # =================================================================
    # DELAYED STEPS
    # =================================================================

    def _resolve_capture(self, caught: bool) -> None:
        wild = self.encounter.wild
        if caught:
            reward = roll_capture_reward(self.rng)
            party.add_captured(self.player, wild)
            add_money(self.player.inventory, reward)
            self._log(f"{wild.name} was caught!", f"You earned ${reward}!")
            self._finish(BattlePhase.CAPTURED, self.config.capture_return_delay)
        else:
            self._log(f"{wild.name} broke free!")
            self._begin_wild_turn()

    def _begin_wild_turn(self) -> None:
        self.encounter.phase = BattlePhase.WILD_TURN
        self._schedule(self.config.wild_turn_delay, self._resolve_wild_turn, "wild turn")

    def _resolve_wild_turn(self) -> None:
        wild = self.encounter.wild
        active = self.player.active_creature()
        if active is None or active.is_fainted():
            # Nothing to hit; hand the turn back
            self.encounter.phase = BattlePhase.PLAYER_TURN
            return

        damage = roll_wild_damage(self.rng, wild.attack)
        active.take_damage(damage)
        self._log(f"Wild {wild.name} dealt {damage} damage!")

        if not active.is_fainted():
            self.encounter.phase = BattlePhase.PLAYER_TURN
            return

        self._log(f"{active.name} fainted!")
        replacement = party.next_healthy_index(self.player, exclude=self.player.active_index)
        if replacement is None:
            self._log("All your Pokemon have fainted! You ran away!")
            self._finish(BattlePhase.BATTLE_LOST, self.config.loss_return_delay)
            return

        self.player.active_index = replacement
        self._log(f"Go {self.player.party[replacement].name}!")
        self.encounter.phase = BattlePhase.PLAYER_TURN

    def _finish(self, phase: BattlePhase, delay: float) -> None:
        self.encounter.phase = phase
        LOGGER.info("Encounter %d resolved: %s", self.encounter.id, phase.name)
        self._schedule(delay, self._return_to_overworld, "return to overworld")

    def _return_to_overworld(self) -> None:
        encounter_id = self.encounter.id
        self.close()
        if self.on_finished is not None:
            self.on_finished(encounter_id)

    def close(self) -> None:
        """Tear down the encounter and drop its pending events."""
        if self.encounter is None:
            return
        encounter_id = self.encounter.id
        self.encounter = None
        self.scheduler.cancel_owner(encounter_id)
        LOGGER.debug("Encounter %d torn down", encounter_id)

    # =================================================================
    # HELPER METHODS
    # =================================================================

    def _is_player_turn(self) -> bool:
        return self.encounter is not None and self.encounter.phase == BattlePhase.PLAYER_TURN

    def _log(self, *lines: str) -> None:
        self.encounter.log.extend(lines)
        for line in lines:
            LOGGER.debug("[battle %d] %s", self.encounter.id, line)

    def _schedule(self, delay: float, step: Callable[[], None], label: str) -> None:
        encounter_id = self.encounter.id

        def guarded() -> None:
            if self.encounter is None or self.encounter.id != encounter_id:
                LOGGER.debug("Ignoring stale %s for encounter %d", label, encounter_id)
                return
            step()

        self.scheduler.schedule(delay, guarded, owner=encounter_id, label=label)

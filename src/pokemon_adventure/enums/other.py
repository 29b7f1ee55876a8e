from enum import Enum, IntEnum


class Type(str, Enum):
    NORMAL = "Normal"
    FIRE = "Fire"
    WATER = "Water"
    GRASS = "Grass"
    ELECTRIC = "Electric"
    FLYING = "Flying"


class ItemKind(IntEnum):
    """Consumables sold at the shop"""

    POKEBALL = 0
    POTION = 1


class TileKind(IntEnum):
    PATH = 0
    GRASS = 1
    SHOP = 2


class GameMode(IntEnum):
    """Top-level screen the session is in.

    Each mode owns the set of operations the session accepts while it is active.
    """

    OVERWORLD = 0
    BATTLE = 1
    MENU = 2
    SHOP = 3

    # =========================================================================
    # ALLOWED OPERATIONS PER MODE
    # =========================================================================

    def allows_movement(self) -> bool:
        return self == GameMode.OVERWORLD

    def allows_battle_actions(self) -> bool:
        return self == GameMode.BATTLE

    def allows_purchase(self) -> bool:
        return self == GameMode.SHOP

    def allows_party_management(self) -> bool:
        """Healing and choosing the active creature happen from the menu"""
        return self == GameMode.MENU

    def can_open_screens(self) -> bool:
        return self == GameMode.OVERWORLD


class BattlePhase(IntEnum):
    """Battle state machine phases"""

    PLAYER_TURN = 0
    RESOLVING_PLAYER_ACTION = 1  # pokeball in the air
    WILD_TURN = 2
    BATTLE_WON = 3
    BATTLE_LOST = 4
    PLAYER_FLED = 5
    CAPTURED = 6

    def is_terminal(self) -> bool:
        return self in (BattlePhase.BATTLE_WON, BattlePhase.BATTLE_LOST, BattlePhase.PLAYER_FLED, BattlePhase.CAPTURED)


class ActionResult(IntEnum):
    """Outcome of a player-facing operation. Anything but OK leaves state untouched."""

    OK = 0
    WRONG_MODE = 1
    WRONG_TURN = 2
    NO_POKEBALLS = 3
    NO_POTIONS = 4
    INSUFFICIENT_FUNDS = 5
    INVALID_TARGET = 6
    ALREADY_FULL_HP = 7
    NO_ACTIVE_CREATURE = 8
    UNKNOWN_ITEM = 9

    @property
    def ok(self) -> bool:
        return self == ActionResult.OK

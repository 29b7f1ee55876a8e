import logging
from typing import Optional

from src.pokemon_adventure.enums import ActionResult
from src.pokemon_adventure.schema.creature import Creature
from src.pokemon_adventure.schema.player import Player

LOGGER = logging.getLogger(__name__)


def set_active(player: Player, index: int) -> ActionResult:
    """Make party[index] the active creature. Fainted or missing targets are refused."""
    if not 0 <= index < len(player.party):
        return ActionResult.INVALID_TARGET
    target = player.party[index]
    if target.is_fainted():
        return ActionResult.INVALID_TARGET
    player.active_index = index
    LOGGER.debug("Active creature is now %s (slot %d)", target.name, index)
    return ActionResult.OK


def add_captured(player: Player, creature: Creature) -> Creature:
    """Append a captured creature. It always joins at full HP."""
    member = creature.model_copy(deep=True)
    member.restore_full()
    player.party.append(member)
    LOGGER.info("%s joined the party (slot %d)", member.name, len(player.party) - 1)
    return member


def next_healthy_index(player: Player, exclude: Optional[int] = None) -> Optional[int]:
    """Return the first party slot other than exclude whose creature can still fight."""
    for slot, candidate in enumerate(player.party):
        if slot == exclude:
            continue
        if not candidate.is_fainted():
            return slot
    return None


def has_healthy(player: Player) -> bool:
    return next_healthy_index(player) is not None

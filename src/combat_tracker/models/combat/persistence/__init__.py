"""Combat state persistence models."""

from .combat_session import CombatSession
from .combatant import Combatant, new_combatant_id

__all__ = [
    "CombatSession",
    "Combatant",
    "new_combatant_id",
]

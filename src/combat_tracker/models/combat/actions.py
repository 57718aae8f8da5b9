"""Actions accepted by the combat session reducer.

The set is closed: ``reduce_combat`` raises ``InvalidActionError`` for any
object that is not one of the types in ``CombatAction``.
"""
from dataclasses import dataclass
from typing import Tuple, Union

from combat_tracker.models.combat.persistence.combat_session import CombatSession
from combat_tracker.models.combat.persistence.combatant import Combatant


@dataclass(frozen=True)
class AddCombatant:
    combatant: Combatant


@dataclass(frozen=True)
class AddCombatants:
    combatants: Tuple[Combatant, ...]


@dataclass(frozen=True)
class RemoveCombatant:
    combatant_id: str


@dataclass(frozen=True)
class UpdateCombatant:
    combatant: Combatant


@dataclass(frozen=True)
class ReorderCombatants:
    """Replace the roster wholesale, e.g. after a manual drag reorder."""
    combatants: Tuple[Combatant, ...]


@dataclass(frozen=True)
class StartSession:
    pass


@dataclass(frozen=True)
class EndSession:
    pass


@dataclass(frozen=True)
class AdvanceTurn:
    pass


@dataclass(frozen=True)
class RetreatTurn:
    pass


@dataclass(frozen=True)
class ImportState:
    """Replace the whole session with a previously validated snapshot."""
    session: CombatSession


CombatAction = Union[
    AddCombatant,
    AddCombatants,
    RemoveCombatant,
    UpdateCombatant,
    ReorderCombatants,
    StartSession,
    EndSession,
    AdvanceTurn,
    RetreatTurn,
    ImportState,
]

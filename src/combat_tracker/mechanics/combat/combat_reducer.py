"""Combat session state machine.

``reduce_combat`` is a pure function from ``(CombatSession, CombatAction)`` to
the next ``CombatSession``. The only side effect is the d20 draw made while
starting a session, or when a rolled combatant joins a running one, which
goes through the injected ``roll_d20`` roller.
"""
import logging
from dataclasses import replace
from typing import Tuple

from combat_tracker.mechanics.combat.initiative import (
    resolve_combatant,
    resolve_initiative,
    sort_by_initiative,
)
from combat_tracker.mechanics.combat.renumbering import renumber_combatants
from combat_tracker.models.combat.actions import (
    AddCombatant,
    AddCombatants,
    AdvanceTurn,
    EndSession,
    ImportState,
    RemoveCombatant,
    ReorderCombatants,
    RetreatTurn,
    StartSession,
    UpdateCombatant,
)
from combat_tracker.models.combat.persistence.combat_session import CombatSession
from combat_tracker.models.combat.persistence.combatant import Combatant
from combat_tracker.utils.dice import Roller, d20

logger = logging.getLogger(__name__)


class InvalidActionError(TypeError):
    """Raised when an object outside the closed action set is dispatched."""


INITIAL_SESSION = CombatSession()


def start_session(state: CombatSession, roll_d20: Roller = d20) -> CombatSession:
    """Resolve rolled initiative, sort into turn order and begin round 1."""
    combatants = sort_by_initiative(resolve_initiative(state.combatants, roll_d20))
    if not combatants:
        logger.warning("[SESSION] Starting combat with an empty roster")
    logger.info(f"[SESSION] Combat started with {len(combatants)} combatants")
    return CombatSession(active=True, round=1, turn_index=1, combatants=combatants)


def end_session(state: CombatSession) -> CombatSession:
    """End combat; the roster is discarded along with the turn pointers."""
    logger.info(f"[SESSION] Combat ended after round {state.round}")
    return INITIAL_SESSION


def advance_turn(state: CombatSession) -> CombatSession:
    """Move to the next turn, wrapping into a new round after the last one."""
    if not state.active:
        logger.debug("[TURN] Ignoring advance while no combat is running")
        return state

    if not state.combatants:
        logger.debug("[TURN] Ignoring advance with an empty roster")
        return state

    if state.turn_index < len(state.combatants):
        return replace(state, turn_index=state.turn_index + 1)

    logger.debug(f"[TURN] New round: {state.round + 1}")
    return replace(state, turn_index=1, round=state.round + 1)


def retreat_turn(state: CombatSession) -> CombatSession:
    """Step back one turn, wrapping into the previous round if needed."""
    if not state.active:
        logger.debug("[TURN] Ignoring retreat while no combat is running")
        return state

    if not state.combatants:
        logger.debug("[TURN] Ignoring retreat with an empty roster")
        return state

    # Nothing precedes the first turn of the first round
    if state.turn_index == 1 and state.round == 1:
        return state

    if state.turn_index == 1:
        return replace(state, turn_index=len(state.combatants), round=state.round - 1)

    return replace(state, turn_index=state.turn_index - 1)


def _enter_combat(
    state: CombatSession,
    combatants: Tuple[Combatant, ...],
    roll_d20: Roller,
) -> Tuple[Combatant, ...]:
    """Resolve rolled initiative for combatants joining a running session."""
    if not state.active:
        return combatants
    return tuple(resolve_combatant(combatant, roll_d20) for combatant in combatants)


def reduce_combat(state: CombatSession, action, roll_d20: Roller = d20) -> CombatSession:
    """Apply ``action`` to ``state`` and return the next session.

    Args:
        state: Current session (never mutated)
        action: One of the ``CombatAction`` types
        roll_d20: d20 source for ``StartSession`` and for rolled combatants
            added or updated while combat is active

    Returns:
        The next session

    Raises:
        InvalidActionError: If ``action`` is not part of the action set
    """
    logger.debug(f"[REDUCER] {type(action).__name__} (round={state.round}, turn={state.turn_index})")

    if isinstance(action, StartSession):
        return start_session(state, roll_d20)

    elif isinstance(action, EndSession):
        return end_session(state)

    elif isinstance(action, AdvanceTurn):
        return advance_turn(state)

    elif isinstance(action, RetreatTurn):
        return retreat_turn(state)

    elif isinstance(action, AddCombatant):
        added = _enter_combat(state, (action.combatant,), roll_d20)
        return replace(
            state,
            combatants=renumber_combatants(state.combatants + added),
        )

    elif isinstance(action, AddCombatants):
        added = _enter_combat(state, tuple(action.combatants), roll_d20)
        return replace(
            state,
            combatants=renumber_combatants(state.combatants + added),
        )

    elif isinstance(action, RemoveCombatant):
        # No renumbering on removal: a lone survivor keeps its suffix
        return replace(
            state,
            combatants=tuple(c for c in state.combatants if c.id != action.combatant_id),
        )

    elif isinstance(action, UpdateCombatant):
        if state.get_combatant(action.combatant.id) is None:
            logger.debug(f"[REDUCER] Update for unknown combatant {action.combatant.id} ignored")
            return state
        updated, = _enter_combat(state, (action.combatant,), roll_d20)
        return replace(
            state,
            combatants=tuple(updated if c.id == updated.id else c for c in state.combatants),
        )

    elif isinstance(action, ReorderCombatants):
        return replace(
            state,
            combatants=_enter_combat(state, tuple(action.combatants), roll_d20),
        )

    elif isinstance(action, ImportState):
        logger.info(f"[SESSION] Imported state with {len(action.session.combatants)} combatants")
        return action.session

    raise InvalidActionError(f"Unhandled action type: {type(action).__name__}")

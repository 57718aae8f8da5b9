"""Holds the current combat session and applies dispatched actions."""
import logging
from typing import Callable, List, Optional

from combat_tracker.mechanics.combat.combat_reducer import INITIAL_SESSION, reduce_combat
from combat_tracker.models.combat.persistence.combat_session import CombatSession
from combat_tracker.utils.dice import Roller, d20

logger = logging.getLogger(__name__)

StateListener = Callable[[CombatSession], None]


class ReentrantDispatchError(RuntimeError):
    """Raised when an action is dispatched while another is being applied."""


class CombatTracker:
    """Single dispatch entry point for combat session state.

    Actions are applied one at a time. Listeners (e.g. a read-only player
    view) are notified with the new state after it has been committed, so a
    listener may dispatch follow-up actions of its own.
    """

    def __init__(
        self,
        initial_state: Optional[CombatSession] = None,
        roll_d20: Roller = d20
    ):
        """Initialize the tracker.

        Args:
            initial_state: Session to start from (an empty session if omitted)
            roll_d20: d20 source passed to the reducer on session start
        """
        self._state = initial_state if initial_state is not None else INITIAL_SESSION
        self._roll_d20 = roll_d20
        self._dispatching = False
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> CombatSession:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action) -> CombatSession:
        """Apply an action and return the resulting session.

        Raises:
            ReentrantDispatchError: If called while another action is applied
            InvalidActionError: If the action is not part of the action set
        """
        if self._dispatching:
            raise ReentrantDispatchError(
                f"Cannot dispatch {type(action).__name__} while another action is being applied"
            )

        self._dispatching = True
        try:
            next_state = reduce_combat(self._state, action, self._roll_d20)
        finally:
            self._dispatching = False

        if next_state is self._state:
            return next_state

        self._state = next_state
        for listener in list(self._listeners):
            listener(next_state)
        return next_state

"""Initiative resolution for session start."""
import logging
from dataclasses import replace
from typing import Iterable, Tuple

from combat_tracker.models.combat.enums import InitiativeKind
from combat_tracker.models.combat.persistence.combatant import Combatant
from combat_tracker.utils.dice import DiceType, Roller, d20

logger = logging.getLogger(__name__)


def resolve_combatant(combatant: Combatant, roll_d20: Roller = d20) -> Combatant:
    """Resolve a single combatant's initiative.

    A ``ROLL`` combatant with modifier ``m`` becomes ``FIXED`` with
    ``max(0, d + m)`` where ``d`` is drawn from ``roll_d20``. Resolved scores
    are clamped at zero so the fixed-initiative invariant always holds.
    ``FIXED`` combatants are returned unchanged without drawing.

    Args:
        combatant: The combatant to resolve
        roll_d20: Zero-argument roller returning an int in [1, 20]

    Returns:
        A combatant with ``initiative_kind == FIXED``

    Raises:
        ValueError: If the roller returns a value outside [1, 20]
    """
    if not combatant.is_rolled:
        return combatant

    die = roll_d20()
    if not isinstance(die, int) or not 1 <= die <= DiceType.D20.value:
        raise ValueError(f"d20 roller returned out-of-range value: {die!r}")

    score = max(0, die + combatant.initiative_value)
    logger.debug(
        f"[INITIATIVE] {combatant.name}: rolled {die} + {combatant.initiative_value} -> {score}"
    )
    return replace(
        combatant,
        initiative_kind=InitiativeKind.FIXED,
        initiative_value=score,
    )


def resolve_initiative(
    combatants: Iterable[Combatant],
    roll_d20: Roller = d20
) -> Tuple[Combatant, ...]:
    """Resolve every ``ROLL`` combatant, drawing once each in roster order."""
    return tuple(resolve_combatant(combatant, roll_d20) for combatant in combatants)


def sort_by_initiative(combatants: Iterable[Combatant]) -> Tuple[Combatant, ...]:
    """Sort highest initiative first; ties keep their prior relative order."""
    return tuple(sorted(combatants, key=lambda c: c.initiative_value, reverse=True))

"""Turn template library selections into encounter combatants."""
import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from combat_tracker.models.combat.persistence import Combatant, new_combatant_id
from combat_tracker.models.library import CreatureTemplate

logger = logging.getLogger(__name__)


def creatures_to_combatants(
    creatures: Iterable[CreatureTemplate],
    id_factory: Callable[[], str] = new_combatant_id,
) -> List[Combatant]:
    """Create one fresh combatant per template.

    Each combatant gets a new id and starts at full health; initiative kind
    and value are copied unchanged.
    """
    combatants = [
        Combatant(
            id=id_factory(),
            name=creature.name,
            initiative_kind=creature.initiative_kind,
            initiative_value=creature.initiative_value,
            hp=creature.hp,
            max_hp=creature.hp,
        )
        for creature in creatures
    ]
    logger.debug(f"[ROSTER] Built {len(combatants)} combatants from templates")
    return combatants


def expand_selection(items: Iterable[Tuple[CreatureTemplate, int]]) -> List[CreatureTemplate]:
    """Flatten ``(template, quantity)`` pairs, repeating each template."""
    expanded: List[CreatureTemplate] = []
    for creature, quantity in items:
        if quantity < 0:
            raise ValueError(f"Quantity for {creature.name} cannot be negative: {quantity}")
        expanded.extend([creature] * quantity)
    return expanded


def filter_creatures(
    creatures: Iterable[CreatureTemplate],
    name_filter: str = "",
    category_ids: Optional[Sequence[str]] = None,
) -> List[CreatureTemplate]:
    """Filter templates by name substring and category membership.

    A blank ``name_filter`` and an empty ``category_ids`` each match
    everything. A creature in any selected category passes.
    """
    needle = name_filter.strip().lower()
    selected = set(category_ids or ())

    def matches(creature: CreatureTemplate) -> bool:
        if needle and needle not in creature.name.lower():
            return False
        if selected and not selected.intersection(creature.category_ids):
            return False
        return True

    return [creature for creature in creatures if matches(creature)]

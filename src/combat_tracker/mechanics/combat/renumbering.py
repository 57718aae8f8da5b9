"""Automatic numbering of combatants that share a base name.

Adding a second "Goblin" turns the pair into "Goblin 1" and "Goblin 2";
adding a third yields "Goblin 3". Singletons keep the name the user gave
them. The pass is a whole-roster recomputation and is idempotent.
"""
import re
from collections import OrderedDict
from dataclasses import replace
from typing import Dict, Iterable, List, Tuple

from combat_tracker.models.combat.persistence.combatant import Combatant

_NUMBER_SUFFIX = re.compile(r"^(.*) (\d+)\Z")


def get_base_name(name: str) -> str:
    """Strip a trailing ``" <integer>"`` suffix from a combatant name.

    >>> get_base_name("Goblin 3")
    'Goblin'
    >>> get_base_name("Dragon")
    'Dragon'
    """
    match = _NUMBER_SUFFIX.match(name)
    base = match.group(1) if match else name
    return base.strip()


def renumber_combatants(combatants: Iterable[Combatant]) -> Tuple[Combatant, ...]:
    """Reassign gap-free ``1..k`` suffixes within every group of ``k >= 2``."""
    roster = list(combatants)

    groups: Dict[str, List[int]] = OrderedDict()
    for position, combatant in enumerate(roster):
        groups.setdefault(get_base_name(combatant.name), []).append(position)

    for base_name, positions in groups.items():
        if len(positions) <= 1:
            continue
        for number, position in enumerate(positions, start=1):
            numbered_name = f"{base_name} {number}"
            if roster[position].name != numbered_name:
                roster[position] = replace(roster[position], name=numbered_name)

    return tuple(roster)

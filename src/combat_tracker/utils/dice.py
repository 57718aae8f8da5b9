"""Dice utilities for initiative rolls.

The reducer never calls ``random`` directly; it receives a zero-argument
roller (``Callable[[], int]``). ``d20`` is the production roller, the other
helpers build reproducible ones.
"""

import random
from enum import Enum
from typing import Callable, Iterable, Iterator, Optional

Roller = Callable[[], int]


class DiceType(Enum):
    """Standard dice types in D&D."""
    D4 = 4
    D6 = 6
    D8 = 8
    D10 = 10
    D12 = 12
    D20 = 20
    D100 = 100


def roll_die(dice_type: DiceType, rng: Optional[random.Random] = None) -> int:
    """Roll a single die of the given type.

    Args:
        dice_type: The type of die to roll
        rng: Random generator to draw from (module-level ``random`` if omitted)

    Returns:
        A uniformly random integer in ``[1, dice_type.value]``
    """
    source = rng or random
    return source.randint(1, dice_type.value)


def d20() -> int:
    """Roll a d20."""
    return roll_die(DiceType.D20)


def seeded_d20(seed: int) -> Roller:
    """Build a d20 roller that replays the same sequence for a given seed."""
    rng = random.Random(seed)
    return lambda: roll_die(DiceType.D20, rng)


def sequence_roller(values: Iterable[int]) -> Roller:
    """Build a roller that returns ``values`` in order.

    Raises:
        RuntimeError: If more rolls are requested than values were supplied
    """
    iterator: Iterator[int] = iter(values)

    def roll() -> int:
        try:
            return next(iterator)
        except StopIteration:
            raise RuntimeError("Roll sequence exhausted") from None

    return roll

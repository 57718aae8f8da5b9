"""Pytest configuration and shared fixtures."""
import itertools

import pytest

from combat_tracker.models.combat import Combatant, CombatSession, InitiativeKind
from combat_tracker.utils.dice import sequence_roller

TEST_SECRET_KEY = "test-secret-key"


@pytest.fixture
def make_combatant():
    """Factory for combatants with unique ids."""
    counter = itertools.count(1)

    def _make(
        name: str = "Goblin",
        initiative_value: int = 10,
        initiative_kind: InitiativeKind = InitiativeKind.FIXED,
        hp: int = 7,
        max_hp: int = 7,
        combatant_id: str = None,
    ) -> Combatant:
        return Combatant(
            id=combatant_id or f"c{next(counter)}",
            name=name,
            initiative_kind=initiative_kind,
            initiative_value=initiative_value,
            hp=hp,
            max_hp=max_hp,
        )

    return _make


@pytest.fixture
def rolls():
    """Build a deterministic d20 roller from a list of values."""
    return sequence_roller


@pytest.fixture
def active_session(make_combatant):
    """Three combatants in round 1, first turn."""
    return CombatSession(
        active=True,
        round=1,
        turn_index=1,
        combatants=(
            make_combatant("Fighter", 18, hp=30, max_hp=30),
            make_combatant("Goblin", 12),
            make_combatant("Wizard", 9, hp=14, max_hp=14),
        ),
    )


@pytest.fixture
def secret_key():
    return TEST_SECRET_KEY

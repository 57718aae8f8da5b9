"""Tests for initiative resolution and ordering."""
import pytest

from combat_tracker.mechanics.combat.initiative import (
    resolve_combatant,
    resolve_initiative,
    sort_by_initiative,
)
from combat_tracker.models.combat import InitiativeKind


class TestResolveCombatant:
    """Test single combatant resolution."""

    def test_roll_adds_modifier(self, make_combatant, rolls):
        """A rolled combatant becomes fixed with die + modifier."""
        orc = make_combatant("Orc", 3, InitiativeKind.ROLL)
        resolved = resolve_combatant(orc, rolls([12]))

        assert resolved.initiative_kind == InitiativeKind.FIXED
        assert resolved.initiative_value == 15
        assert resolved.id == orc.id

    def test_fixed_combatant_does_not_roll(self, make_combatant, rolls):
        """Fixed combatants are returned unchanged without drawing."""
        fighter = make_combatant("Fighter", 14)
        roller = rolls([])  # would raise if called

        assert resolve_combatant(fighter, roller) is fighter

    def test_negative_result_clamped_to_zero(self, make_combatant, rolls):
        """A low roll with a large penalty never yields negative initiative."""
        zombie = make_combatant("Zombie", -5, InitiativeKind.ROLL)
        resolved = resolve_combatant(zombie, rolls([2]))

        assert resolved.initiative_value == 0
        assert resolved.initiative_kind == InitiativeKind.FIXED

    @pytest.mark.parametrize("bad_roll", [0, 21, -1])
    def test_out_of_range_roll_rejected(self, make_combatant, rolls, bad_roll):
        """Rollers must return values in [1, 20]."""
        orc = make_combatant("Orc", 0, InitiativeKind.ROLL)
        with pytest.raises(ValueError):
            resolve_combatant(orc, rolls([bad_roll]))


class TestResolveInitiative:
    """Test whole-roster resolution and sorting."""

    def test_draws_once_per_rolled_combatant_in_order(self, make_combatant, rolls):
        """Rolls are consumed in roster order, skipping fixed combatants."""
        roster = [
            make_combatant("A", 1, InitiativeKind.ROLL),
            make_combatant("B", 11),
            make_combatant("C", 2, InitiativeKind.ROLL),
        ]
        resolved = resolve_initiative(roster, rolls([5, 10]))

        assert [c.initiative_value for c in resolved] == [6, 11, 12]
        assert all(c.initiative_kind == InitiativeKind.FIXED for c in resolved)

    def test_sort_descending(self, make_combatant):
        roster = [make_combatant("A", 5), make_combatant("B", 20), make_combatant("C", 12)]
        assert [c.name for c in sort_by_initiative(roster)] == ["B", "C", "A"]

    def test_sort_is_stable_for_ties(self, make_combatant):
        """Tied combatants keep their prior relative order."""
        roster = [
            make_combatant("First", 10),
            make_combatant("High", 15),
            make_combatant("Second", 10),
            make_combatant("Third", 10),
        ]
        ordered = sort_by_initiative(roster)
        assert [c.name for c in ordered] == ["High", "First", "Second", "Third"]

"""Tests for duplicate-name renumbering."""
import pytest

from combat_tracker.mechanics.combat.combat_reducer import INITIAL_SESSION, reduce_combat
from combat_tracker.mechanics.combat.renumbering import get_base_name, renumber_combatants
from combat_tracker.models.combat import AddCombatant, AddCombatants, RemoveCombatant


class TestGetBaseName:
    """Test suffix stripping."""

    @pytest.mark.parametrize("name,expected", [
        ("Goblin", "Goblin"),
        ("Goblin 3", "Goblin"),
        ("Goblin 12", "Goblin"),
        ("Goblin3", "Goblin3"),
        ("Hill Giant 2", "Hill Giant"),
        ("  Orc  ", "Orc"),
        ("7", "7"),
        ("Goblin\t3", "Goblin\t3"),
        ("Goblin 3\n", "Goblin 3"),
    ])
    def test_base_name(self, name, expected):
        assert get_base_name(name) == expected


class TestRenumberCombatants:
    """Test whole-roster renumbering."""

    def test_singletons_untouched(self, make_combatant):
        roster = (make_combatant("Goblin"), make_combatant("Orc"))
        assert renumber_combatants(roster) == roster

    def test_duplicates_numbered_in_roster_order(self, make_combatant):
        roster = (
            make_combatant("Goblin"),
            make_combatant("Orc"),
            make_combatant("Goblin"),
        )
        names = [c.name for c in renumber_combatants(roster)]
        assert names == ["Goblin 1", "Orc", "Goblin 2"]

    def test_numbering_is_gap_free(self, make_combatant):
        """Existing gaps are closed; numbering always runs 1..k."""
        roster = (
            make_combatant("Goblin 1"),
            make_combatant("Goblin 4"),
            make_combatant("Goblin 9"),
        )
        names = [c.name for c in renumber_combatants(roster)]
        assert names == ["Goblin 1", "Goblin 2", "Goblin 3"]

    def test_idempotent(self, make_combatant):
        roster = (
            make_combatant("Goblin"),
            make_combatant("Goblin"),
            make_combatant("Skeleton 2"),
            make_combatant("Skeleton"),
        )
        once = renumber_combatants(roster)
        assert renumber_combatants(once) == once

    def test_ids_and_order_preserved(self, make_combatant):
        roster = (make_combatant("Goblin"), make_combatant("Goblin"))
        renumbered = renumber_combatants(roster)
        assert [c.id for c in renumbered] == [c.id for c in roster]


class TestRenumberingThroughReducer:
    """Renumbering as applied by add and remove actions."""

    def test_third_goblin_gets_next_number(self, make_combatant):
        state = reduce_combat(INITIAL_SESSION, AddCombatant(make_combatant("Goblin")))
        state = reduce_combat(state, AddCombatant(make_combatant("Goblin")))
        assert [c.name for c in state.combatants] == ["Goblin 1", "Goblin 2"]

        state = reduce_combat(state, AddCombatant(make_combatant("Goblin")))
        assert [c.name for c in state.combatants] == ["Goblin 1", "Goblin 2", "Goblin 3"]

    def test_batch_add_renumbers_once(self, make_combatant):
        batch = tuple(make_combatant("Kobold") for _ in range(3))
        state = reduce_combat(INITIAL_SESSION, AddCombatants(batch))
        assert [c.name for c in state.combatants] == ["Kobold 1", "Kobold 2", "Kobold 3"]

    def test_removal_does_not_renumber(self, make_combatant):
        """A lone survivor keeps its numeric suffix."""
        first, second = make_combatant("Goblin"), make_combatant("Goblin")
        state = reduce_combat(INITIAL_SESSION, AddCombatants((first, second)))
        state = reduce_combat(state, RemoveCombatant(first.id))

        assert [c.name for c in state.combatants] == ["Goblin 2"]

    def test_next_add_after_removal_closes_gap(self, make_combatant):
        goblins = tuple(make_combatant("Goblin") for _ in range(3))
        state = reduce_combat(INITIAL_SESSION, AddCombatants(goblins))
        state = reduce_combat(state, RemoveCombatant(goblins[0].id))
        state = reduce_combat(state, AddCombatant(make_combatant("Goblin")))

        assert [c.name for c in state.combatants] == ["Goblin 1", "Goblin 2", "Goblin 3"]

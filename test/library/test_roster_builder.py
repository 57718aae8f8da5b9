"""Tests for building encounter rosters from library templates."""
import itertools

import pytest

from combat_tracker.mechanics.combat.combat_reducer import INITIAL_SESSION, reduce_combat
from combat_tracker.mechanics.library.roster_builder import (
    creatures_to_combatants,
    expand_selection,
    filter_creatures,
)
from combat_tracker.models.combat import AddCombatants, InitiativeKind
from combat_tracker.models.library import (
    DEFAULT_CATEGORIES,
    Category,
    CreatureTemplate,
    LibrarySnapshot,
    default_library,
)

UNDEAD = "undead"
HUMANOID = "humanoid"


@pytest.fixture
def templates():
    return [
        CreatureTemplate(id="t1", name="Goblin", initiative_kind=InitiativeKind.ROLL,
                         initiative_value=2, hp=7, category_ids=(HUMANOID,)),
        CreatureTemplate(id="t2", name="Skeleton", initiative_value=12, hp=13,
                         category_ids=(UNDEAD,)),
        CreatureTemplate(id="t3", name="Hobgoblin Captain", initiative_kind=InitiativeKind.ROLL,
                         initiative_value=-1, hp=39, category_ids=(HUMANOID,)),
        CreatureTemplate(id="t4", name="Wisp", initiative_value=20),
    ]


@pytest.fixture
def ids():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


class TestCreaturesToCombatants:
    """Test template to combatant conversion."""

    def test_copies_template_fields(self, templates, ids):
        goblin, = creatures_to_combatants(templates[:1], ids)

        assert goblin.id == "id-1"
        assert goblin.name == "Goblin"
        assert goblin.initiative_kind == InitiativeKind.ROLL
        assert goblin.initiative_value == 2
        assert (goblin.hp, goblin.max_hp) == (7, 7)

    def test_fresh_id_per_copy(self, templates):
        combatants = creatures_to_combatants([templates[0]] * 3)
        assert len({c.id for c in combatants}) == 3

    def test_added_copies_are_numbered(self, templates, ids):
        selection = expand_selection([(templates[0], 3), (templates[1], 1)])
        state = reduce_combat(INITIAL_SESSION, AddCombatants(tuple(creatures_to_combatants(selection, ids))))

        assert [c.name for c in state.combatants] == ["Goblin 1", "Goblin 2", "Goblin 3", "Skeleton"]


class TestExpandSelection:
    """Test quantity expansion."""

    def test_repeats_by_quantity(self, templates):
        expanded = expand_selection([(templates[0], 2), (templates[1], 0), (templates[3], 1)])
        assert [t.name for t in expanded] == ["Goblin", "Goblin", "Wisp"]

    def test_negative_quantity_rejected(self, templates):
        with pytest.raises(ValueError):
            expand_selection([(templates[0], -1)])


class TestFilterCreatures:
    """Test library search."""

    def test_blank_filter_matches_all(self, templates):
        assert filter_creatures(templates, "  ", []) == templates

    def test_name_substring_case_insensitive(self, templates):
        names = [t.name for t in filter_creatures(templates, "GOBLIN")]
        assert names == ["Goblin", "Hobgoblin Captain"]

    def test_category_membership(self, templates):
        names = [t.name for t in filter_creatures(templates, "", [UNDEAD])]
        assert names == ["Skeleton"]

    def test_any_selected_category_matches(self, templates):
        names = [t.name for t in filter_creatures(templates, category_ids=[UNDEAD, HUMANOID])]
        assert names == ["Goblin", "Skeleton", "Hobgoblin Captain"]

    def test_name_and_category_combined(self, templates):
        names = [t.name for t in filter_creatures(templates, "cap", [HUMANOID])]
        assert names == ["Hobgoblin Captain"]


class TestLibrarySnapshot:
    """Test library models."""

    def test_default_library_seeds_srd_types(self):
        library = default_library()
        assert library.creatures == ()
        assert len(library.categories) == 14
        assert {c.name for c in library.categories} >= {"Beast", "Dragon", "Undead", "Humanoid"}
        assert len({c.id for c in DEFAULT_CATEGORIES}) == 14

    def test_dict_round_trip(self, templates):
        snapshot = LibrarySnapshot(categories=(Category(id=UNDEAD, name="Undead"),),
                                   creatures=tuple(templates))
        assert LibrarySnapshot.from_dict(snapshot.to_dict()) == snapshot

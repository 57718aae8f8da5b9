"""Tests for HP management helpers."""
import pytest

from combat_tracker.mechanics.combat.hp_manager import (
    HealthStatus,
    apply_damage,
    apply_healing,
    get_health_status,
    hp_percentage,
)


class TestDamageAndHealing:
    """Test HP changes."""

    def test_damage_reduces_hp(self, make_combatant):
        ogre = make_combatant("Ogre", hp=59, max_hp=59)
        assert apply_damage(ogre, 12).hp == 47

    def test_damage_floors_at_zero(self, make_combatant):
        goblin = make_combatant("Goblin", hp=7, max_hp=7)
        assert apply_damage(goblin, 30).hp == 0

    def test_healing_caps_at_max(self, make_combatant):
        cleric = make_combatant("Cleric", hp=5, max_hp=20)
        assert apply_healing(cleric, 100).hp == 20
        assert apply_healing(cleric, 3).hp == 8

    def test_original_is_unchanged(self, make_combatant):
        goblin = make_combatant("Goblin", hp=7, max_hp=7)
        apply_damage(goblin, 3)
        assert goblin.hp == 7

    @pytest.mark.parametrize("operation", [apply_damage, apply_healing])
    def test_negative_amount_rejected(self, make_combatant, operation):
        with pytest.raises(ValueError):
            operation(make_combatant(), -1)


class TestHealthStatus:
    """Test health thresholds."""

    @pytest.mark.parametrize("hp,expected", [
        (20, HealthStatus.HEALTHY),
        (11, HealthStatus.HEALTHY),
        (10, HealthStatus.BLOODIED),
        (6, HealthStatus.BLOODIED),
        (5, HealthStatus.CRITICAL),
        (1, HealthStatus.CRITICAL),
        (0, HealthStatus.DOWN),
    ])
    def test_thresholds(self, make_combatant, hp, expected):
        assert get_health_status(make_combatant(hp=hp, max_hp=20)) == expected

    def test_untracked_without_max_hp(self, make_combatant):
        commoner = make_combatant(hp=0, max_hp=0)
        assert get_health_status(commoner) == HealthStatus.UNTRACKED
        assert hp_percentage(commoner) == 0.0

    def test_percentage(self, make_combatant):
        assert hp_percentage(make_combatant(hp=15, max_hp=20)) == 75.0
        assert hp_percentage(make_combatant(hp=30, max_hp=20)) == 100.0

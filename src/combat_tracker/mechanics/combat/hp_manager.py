"""Health point helpers for combatants.

Damage and healing return new combatants; feed the result back through
``UpdateCombatant``.
"""

from dataclasses import replace
from enum import Enum

from combat_tracker.models.combat.persistence.combatant import Combatant


class HealthStatus(Enum):
    """Health status categories for combatants."""
    HEALTHY = "healthy"  # Above 50% HP
    BLOODIED = "bloodied"  # 50% or less HP
    CRITICAL = "critical"  # 25% or less HP
    DOWN = "down"  # 0 HP
    UNTRACKED = "untracked"  # No maximum HP recorded


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"HP amount must be non-negative, got {amount}")


def apply_damage(combatant: Combatant, amount: int) -> Combatant:
    """Reduce current HP by ``amount``, never below zero.

    Raises:
        ValueError: If amount is negative
    """
    _check_amount(amount)
    return replace(combatant, hp=max(0, combatant.hp - amount))


def apply_healing(combatant: Combatant, amount: int) -> Combatant:
    """Increase current HP by ``amount``, never above ``max_hp``.

    Raises:
        ValueError: If amount is negative
    """
    _check_amount(amount)
    return replace(combatant, hp=min(combatant.max_hp, combatant.hp + amount))


def hp_percentage(combatant: Combatant) -> float:
    """Current HP as a 0-100 percentage of maximum (0 when untracked)."""
    if combatant.max_hp <= 0:
        return 0.0
    return min(100.0, (combatant.hp / combatant.max_hp) * 100)


def get_health_status(combatant: Combatant) -> HealthStatus:
    """Get the health status of a combatant.

    Args:
        combatant: The combatant to check

    Returns:
        The combatant's health status
    """
    if combatant.max_hp <= 0:
        return HealthStatus.UNTRACKED
    if combatant.hp <= 0:
        return HealthStatus.DOWN

    percentage = hp_percentage(combatant)
    if percentage <= 25:
        return HealthStatus.CRITICAL
    elif percentage <= 50:
        return HealthStatus.BLOODIED
    else:
        return HealthStatus.HEALTHY

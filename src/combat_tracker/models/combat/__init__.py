"""Combat models package - re-exports for public API"""

# Persistence models
from combat_tracker.models.combat.persistence import (
    CombatSession,
    Combatant,
    new_combatant_id,
)

# Actions
from combat_tracker.models.combat.actions import (
    AddCombatant,
    AddCombatants,
    AdvanceTurn,
    CombatAction,
    EndSession,
    ImportState,
    RemoveCombatant,
    ReorderCombatants,
    RetreatTurn,
    StartSession,
    UpdateCombatant,
)

# Enums
from combat_tracker.models.combat.enums import ExportOrigin, InitiativeKind

__all__ = [
    # Types/Enums
    "ExportOrigin",
    "InitiativeKind",
    # Persistence
    "CombatSession",
    "Combatant",
    "new_combatant_id",
    # Actions
    "CombatAction",
    "AddCombatant",
    "AddCombatants",
    "RemoveCombatant",
    "UpdateCombatant",
    "ReorderCombatants",
    "StartSession",
    "EndSession",
    "AdvanceTurn",
    "RetreatTurn",
    "ImportState",
]

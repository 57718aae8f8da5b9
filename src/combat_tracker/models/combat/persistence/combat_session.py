"""Combat session model for managing combat encounters."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from combat_tracker.models.combat.persistence.combatant import Combatant


@dataclass(frozen=True)
class CombatSession:
    """Complete state of a combat encounter.

    ``turn_index`` is 1-based into ``combatants`` while the session is
    active and ``0`` otherwise. Instances are immutable; transitions produce
    new sessions (see ``mechanics.combat.combat_reducer``).
    """
    active: bool = False
    round: int = 0
    turn_index: int = 0
    combatants: Tuple[Combatant, ...] = field(default_factory=tuple)

    @property
    def can_start(self) -> bool:
        """Return True if a new encounter can be started from this state."""
        return not self.active and len(self.combatants) > 0

    @property
    def current_combatant(self) -> Optional[Combatant]:
        """Return the combatant whose turn it is, if any."""
        if not self.active or not 1 <= self.turn_index <= len(self.combatants):
            return None
        return self.combatants[self.turn_index - 1]

    def get_combatant(self, combatant_id: str) -> Optional[Combatant]:
        """Get a combatant by ID."""
        for combatant in self.combatants:
            if combatant.id == combatant_id:
                return combatant
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "active": self.active,
            "round": self.round,
            "turn_index": self.turn_index,
            "combatants": [combatant.to_dict() for combatant in self.combatants],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CombatSession':
        """Create CombatSession from dictionary representation.

        Args:
            data: Dictionary containing session data

        Returns:
            Deserialized CombatSession
        """
        return cls(
            active=data.get("active", False),
            round=data.get("round", 0),
            turn_index=data.get("turn_index", 0),
            combatants=tuple(
                Combatant.from_dict(combatant_data)
                for combatant_data in data.get("combatants", [])
            ),
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get a brief summary of combat state for read-only displays."""
        current = self.current_combatant
        return {
            "active": self.active,
            "round": self.round,
            "current_turn": current.id if current else None,
            "turn_order": [
                {
                    "id": combatant.id,
                    "name": combatant.name,
                    "hp": f"{combatant.hp}/{combatant.max_hp}",
                    "is_current": current is not None and combatant.id == current.id,
                }
                for combatant in self.combatants
            ],
        }

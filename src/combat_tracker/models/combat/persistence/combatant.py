"""Combatant model for a single encounter participant."""
import uuid
from dataclasses import dataclass
from typing import Any, Dict

from combat_tracker.models.combat.enums import InitiativeKind


def new_combatant_id() -> str:
    """Generate a fresh opaque combatant id."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Combatant:
    """One participant in an encounter.

    When ``initiative_kind`` is ``ROLL`` the ``initiative_value`` is a signed
    modifier waiting for a d20; once a session starts every combatant is
    ``FIXED`` and ``initiative_value`` is the turn-order score.
    """
    id: str
    name: str
    initiative_kind: InitiativeKind = InitiativeKind.FIXED
    initiative_value: int = 0
    hp: int = 0
    max_hp: int = 0

    @property
    def is_rolled(self) -> bool:
        """Return True while initiative still awaits a roll."""
        return self.initiative_kind == InitiativeKind.ROLL

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "initiative_kind": self.initiative_kind.value,
            "initiative_value": self.initiative_value,
            "hp": self.hp,
            "max_hp": self.max_hp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Combatant':
        """Create Combatant from dictionary representation.

        Args:
            data: Dictionary containing combatant data

        Returns:
            Deserialized Combatant
        """
        kind = data.get("initiative_kind", InitiativeKind.FIXED)
        if not isinstance(kind, InitiativeKind):
            kind = InitiativeKind(kind)

        return cls(
            id=data["id"],
            name=data["name"],
            initiative_kind=kind,
            initiative_value=data.get("initiative_value", 0),
            hp=data.get("hp", 0),
            max_hp=data.get("max_hp", 0),
        )

"""Enumerations for the combat tracker."""
from enum import Enum


class InitiativeKind(Enum):
    """How a combatant's initiative value is interpreted."""
    FIXED = "fixed"  # initiative_value is the final turn-order score
    ROLL = "roll"  # initiative_value is a modifier added to a d20 at start


class ExportOrigin(Enum):
    """Kind of data carried inside an export envelope."""
    SESSION = "session"
    LIBRARY = "library"

"""Pydantic schemas validating data at the import boundary."""

from .combat import (
    CombatantSchema,
    CombatSessionSchema,
    FixedCombatantSchema,
    RollCombatantSchema,
)
from .envelope import PAYLOAD_SCHEMAS, ExportEnvelopeSchema
from .library import CategorySchema, CreatureTemplateSchema, LibrarySnapshotSchema

__all__ = [
    "CombatantSchema",
    "CombatSessionSchema",
    "FixedCombatantSchema",
    "RollCombatantSchema",
    "CategorySchema",
    "CreatureTemplateSchema",
    "LibrarySnapshotSchema",
    "ExportEnvelopeSchema",
    "PAYLOAD_SCHEMAS",
]

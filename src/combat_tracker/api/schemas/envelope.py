"""Outer envelope wrapped around every export payload."""

from typing import Any, Dict, Type

from pydantic import BaseModel, ConfigDict

from combat_tracker.api.schemas.combat import CombatSessionSchema
from combat_tracker.api.schemas.library import LibrarySnapshotSchema
from combat_tracker.models.combat.enums import ExportOrigin


class ExportEnvelopeSchema(BaseModel):
    """``{"origin": ..., "payload": {...}}``.

    ``origin`` is kept as a plain string here so an unexpected origin is
    reported as an origin mismatch rather than a shape error.
    """
    model_config = ConfigDict(extra="forbid", strict=True)

    origin: str
    payload: Dict[str, Any]


PAYLOAD_SCHEMAS: Dict[ExportOrigin, Type[BaseModel]] = {
    ExportOrigin.SESSION: CombatSessionSchema,
    ExportOrigin.LIBRARY: LibrarySnapshotSchema,
}

"""Build signed export strings for sessions and library snapshots."""
import base64
import json
import logging
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Optional

from combat_tracker.infra.transfer.signing import generate_hmac
from combat_tracker.models.combat.enums import ExportOrigin
from combat_tracker.models.combat.persistence import CombatSession
from combat_tracker.models.library import LibrarySnapshot

logger = logging.getLogger(__name__)

SIGNATURE_SEPARATOR = "."


class TransferJSONEncoder(json.JSONEncoder):
    """JSON encoder that handles tracker dataclasses and enums."""

    def default(self, obj: Any) -> Any:
        if is_dataclass(obj) and not isinstance(obj, type):
            if hasattr(obj, "to_dict"):
                return obj.to_dict()
            return asdict(obj)
        if isinstance(obj, Enum):
            return obj.value
        return super().default(obj)


def _encode_envelope(origin: ExportOrigin, payload: Any) -> bytes:
    envelope = {"origin": origin.value, "payload": payload}
    text = json.dumps(
        envelope,
        cls=TransferJSONEncoder,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return text.encode("utf-8")


def create_export_string(
    origin: ExportOrigin,
    payload: Any,
    secret_key: Optional[str] = None,
) -> str:
    """Serialize, encode and sign ``payload`` as ``<hmac>.<base64>``.

    ``payload`` may be a dataclass with ``to_dict`` or any JSON-compatible
    structure.
    """
    encoded = base64.b64encode(_encode_envelope(origin, payload)).decode("ascii")
    signature = generate_hmac(encoded, secret_key)
    logger.debug(f"[EXPORT] Created {origin.value} export ({len(encoded)} base64 chars)")
    return f"{signature}{SIGNATURE_SEPARATOR}{encoded}"


def create_export_bytes(
    origin: ExportOrigin,
    payload: Any,
    secret_key: Optional[str] = None,
) -> bytes:
    """Same as :func:`create_export_string`, as UTF-8 bytes for file output."""
    return create_export_string(origin, payload, secret_key).encode("utf-8")


def export_session(session: CombatSession, secret_key: Optional[str] = None) -> str:
    logger.info(
        f"[EXPORT] Exporting session with {len(session.combatants)} combatants "
        f"(round {session.round})"
    )
    return create_export_string(ExportOrigin.SESSION, session, secret_key)


def export_library(snapshot: LibrarySnapshot, secret_key: Optional[str] = None) -> str:
    logger.info(
        f"[EXPORT] Exporting library with {len(snapshot.creatures)} creatures "
        f"in {len(snapshot.categories)} categories"
    )
    return create_export_string(ExportOrigin.LIBRARY, snapshot, secret_key)

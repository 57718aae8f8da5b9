"""Verify and decode signed export strings.

Checks run in a fixed order and stop at the first failure:

1. envelope format (``<signature>.<data>``)
2. signature
3. base64 / UTF-8 / JSON decoding
4. outer ``{origin, payload}`` shape
5. origin
6. payload schema

Nothing here touches tracker state; callers dispatch ``ImportState`` only
after a successful import.
"""
import base64
import binascii
import json
import logging
from typing import Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from combat_tracker.api.schemas import CombatSessionSchema, ExportEnvelopeSchema, LibrarySnapshotSchema
from combat_tracker.infra.transfer.errors import (
    DecodeFailureError,
    IntegrityFailureError,
    MalformedEnvelopeError,
    OriginMismatchError,
    SchemaMismatchError,
)
from combat_tracker.infra.transfer.export_codec import SIGNATURE_SEPARATOR
from combat_tracker.infra.transfer.signing import verify_hmac
from combat_tracker.models.combat.enums import ExportOrigin
from combat_tracker.models.combat.persistence import CombatSession
from combat_tracker.models.library import LibrarySnapshot

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _field_errors(error: ValidationError, prefix: str = "") -> Dict[str, List[str]]:
    """Group pydantic error messages by dotted field path."""
    grouped: Dict[str, List[str]] = {}
    for item in error.errors():
        path = ".".join(str(part) for part in item["loc"])
        if prefix:
            path = f"{prefix}.{path}" if path else prefix
        grouped.setdefault(path, []).append(item["msg"])
    return grouped


def _split_envelope(raw: str) -> List[str]:
    parts = raw.strip().split(SIGNATURE_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        logger.warning("[IMPORT] Rejected export: missing signature or data")
        raise MalformedEnvelopeError()
    return parts


def _decode_data(encoded: str) -> object:
    try:
        raw_bytes = base64.b64decode(encoded, validate=True)
        return json.loads(raw_bytes.decode("utf-8"))
    except (binascii.Error, ValueError) as e:
        # UnicodeDecodeError and JSONDecodeError are ValueErrors too
        logger.warning(f"[IMPORT] Rejected export: could not decode data ({e})")
        raise DecodeFailureError() from e


def parse_import_string(
    raw: str,
    expected_origin: ExportOrigin,
    payload_schema: Type[SchemaT],
    secret_key: Optional[str] = None,
) -> SchemaT:
    """Verify ``raw`` and return its payload validated by ``payload_schema``.

    Raises:
        MalformedEnvelopeError, IntegrityFailureError, DecodeFailureError,
        SchemaMismatchError, OriginMismatchError
    """
    signature, encoded = _split_envelope(raw)

    if not verify_hmac(encoded, signature, secret_key):
        logger.warning("[IMPORT] Rejected export: signature mismatch")
        raise IntegrityFailureError()

    decoded = _decode_data(encoded)

    try:
        envelope = ExportEnvelopeSchema.model_validate(decoded)
    except ValidationError as e:
        logger.warning(f"[IMPORT] Rejected export: bad envelope shape ({e.error_count()} errors)")
        raise SchemaMismatchError(_field_errors(e)) from e

    if envelope.origin != expected_origin.value:
        logger.warning(
            f"[IMPORT] Rejected export: origin '{envelope.origin}', "
            f"expected '{expected_origin.value}'"
        )
        raise OriginMismatchError(expected_origin.value, envelope.origin)

    try:
        payload = payload_schema.model_validate(envelope.payload)
    except ValidationError as e:
        logger.warning(f"[IMPORT] Rejected export: payload failed validation ({e.error_count()} errors)")
        raise SchemaMismatchError(_field_errors(e, prefix="payload")) from e

    logger.info(f"[IMPORT] Accepted {expected_origin.value} export")
    return payload


def parse_import_bytes(
    data: bytes,
    expected_origin: ExportOrigin,
    payload_schema: Type[SchemaT],
    secret_key: Optional[str] = None,
) -> SchemaT:
    """Byte-oriented variant of :func:`parse_import_string` (file contents)."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning("[IMPORT] Rejected export: file is not UTF-8 text")
        raise DecodeFailureError() from e
    return parse_import_string(text, expected_origin, payload_schema, secret_key)


def _parse(
    raw: Union[str, bytes],
    expected_origin: ExportOrigin,
    payload_schema: Type[SchemaT],
    secret_key: Optional[str],
) -> SchemaT:
    if isinstance(raw, bytes):
        return parse_import_bytes(raw, expected_origin, payload_schema, secret_key)
    return parse_import_string(raw, expected_origin, payload_schema, secret_key)


def import_session(raw: Union[str, bytes], secret_key: Optional[str] = None) -> CombatSession:
    """Import a combat session export."""
    schema = _parse(raw, ExportOrigin.SESSION, CombatSessionSchema, secret_key)
    return schema.to_model()


def import_library(raw: Union[str, bytes], secret_key: Optional[str] = None) -> LibrarySnapshot:
    """Import a template library export."""
    schema = _parse(raw, ExportOrigin.LIBRARY, LibrarySnapshotSchema, secret_key)
    return schema.to_model()

"""Failures raised by the import pipeline.

Each kind names the pipeline step that rejected the input and carries a
short message that can be shown to the user as-is.
"""
from typing import Dict, List, Optional


class TransferError(ValueError):
    """Base class for export/import failures."""

    default_message = "The data could not be imported."

    def __init__(self, message: Optional[str] = None):
        self.user_message = message or self.default_message
        super().__init__(self.user_message)


class MalformedEnvelopeError(TransferError):
    """Input is not ``<signature>.<data>``."""

    default_message = (
        "Invalid format: missing signature or data. "
        "Please make sure you pasted the complete export string."
    )


class IntegrityFailureError(TransferError):
    """Signature does not match the data."""

    default_message = "Data integrity check failed. The data may have been modified."


class DecodeFailureError(TransferError):
    """Data segment is not valid base64 / UTF-8 / JSON."""

    default_message = "The export data could not be decoded. It may be truncated or corrupted."


class SchemaMismatchError(TransferError):
    """Decoded data does not have the expected structure."""

    default_message = "The export data is not in the expected format."

    def __init__(self, field_errors: Optional[Dict[str, List[str]]] = None):
        self.field_errors = field_errors or {}
        details = "; ".join(
            f"{field}: {message}" if field else message
            for field, messages in self.field_errors.items()
            for message in messages
        )
        message = f"{self.default_message[:-1]}: {details}" if details else None
        super().__init__(message)


class OriginMismatchError(TransferError):
    """Export was produced by a different exporter than the one importing it."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"This looks like a {actual} export, but a {expected} export was expected."
        )

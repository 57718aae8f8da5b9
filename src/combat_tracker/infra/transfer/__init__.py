"""Signed export/import of sessions and library snapshots."""

from .errors import (
    DecodeFailureError,
    IntegrityFailureError,
    MalformedEnvelopeError,
    OriginMismatchError,
    SchemaMismatchError,
    TransferError,
)
from .export_codec import (
    TransferJSONEncoder,
    create_export_bytes,
    create_export_string,
    export_library,
    export_session,
)
from .import_codec import (
    import_library,
    import_session,
    parse_import_bytes,
    parse_import_string,
)
from .signing import generate_hmac, verify_hmac

__all__ = [
    "TransferError",
    "MalformedEnvelopeError",
    "IntegrityFailureError",
    "DecodeFailureError",
    "SchemaMismatchError",
    "OriginMismatchError",
    "TransferJSONEncoder",
    "create_export_string",
    "create_export_bytes",
    "export_session",
    "export_library",
    "parse_import_string",
    "parse_import_bytes",
    "import_session",
    "import_library",
    "generate_hmac",
    "verify_hmac",
]

"""HMAC-SHA256 signing of export data.

The key ships with the application (see ``config.settings``), so signatures
detect corruption or hand edits made in transit; they do not keep anyone
who has the key from forging an export.
"""
import hashlib
import hmac
from typing import Optional

from combat_tracker.config.settings import get_settings


def _resolve_key(secret_key: Optional[str]) -> bytes:
    key = secret_key if secret_key is not None else get_settings().export_secret_key
    if not key:
        raise ValueError("Export signing key is not configured")
    return key.encode("utf-8")


def generate_hmac(data: str, secret_key: Optional[str] = None) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``data``."""
    return hmac.new(_resolve_key(secret_key), data.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_hmac(data: str, provided_hmac: str, secret_key: Optional[str] = None) -> bool:
    """Check ``provided_hmac`` against a freshly computed signature."""
    expected = generate_hmac(data, secret_key).encode("utf-8")
    return hmac.compare_digest(expected, provided_hmac.lower().encode("utf-8"))

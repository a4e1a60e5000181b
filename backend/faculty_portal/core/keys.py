from __future__ import annotations

import base64
import binascii


def faculty_key_from_email(email: str | None) -> str:
    """Stable per-faculty key: the trimmed, lower-cased email as unpadded base64url."""
    normalized = (email or "").strip().lower()
    encoded = base64.urlsafe_b64encode(normalized.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def email_from_faculty_key(key: str | None) -> str | None:
    raw = (key or "").strip()
    if not raw:
        return None
    padded = raw + "=" * (-len(raw) % 4)
    try:
        return base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        return None

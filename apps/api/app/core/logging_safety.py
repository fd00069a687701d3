"""Helpers for keeping identities and credentials out of log lines."""

from __future__ import annotations

import hashlib
from typing import Any


def safe_log_identifier(value: Any, *, prefix: str) -> str:
    """Fingerprint an identifier (email, user id, correlation id) for log correlation.

    The same input always yields the same short token, so log lines about one
    caller can be joined without the raw value ever being written.
    """
    text = str(value or "").strip()
    if not text:
        return f"{prefix}-missing"

    fingerprint = hashlib.sha256(text.encode("utf-8")).hexdigest()[:12]
    return f"{prefix}-{fingerprint}"


def reason_for(exc: BaseException) -> str:
    """Turn an exception class name into a log-friendly ``snake_case`` reason."""
    name = type(exc).__name__
    chars: list[str] = []
    for index, char in enumerate(name):
        if char.isupper() and index:
            chars.append("_")
        chars.append(char.lower())
    return "".join(chars)

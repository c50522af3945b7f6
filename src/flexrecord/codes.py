"""Diagnostic code constants for flexrecord.

These constants prevent stringly-typed diagnostic codes and ensure
client code matches on the correct values.
"""

from enum import Enum


class DiagnosticCode(str, Enum):
    """Codes for non-fatal decode and encode diagnostics."""

    # Decode (the field or key is skipped, decoding continues)
    TYPED_DECODE_MISMATCH = "TYPED_DECODE_MISMATCH"
    COERCION_EXHAUSTED = "COERCION_EXHAUSTED"

    # Encode (the dynamic entry is not written)
    KEY_COLLISION = "KEY_COLLISION"

"""JSON wire codec for flat record objects.

This module provides the one place where wire objects are turned into JSON
text and back.

Rules:
- UTF-8 text (no ASCII escaping)
- Compact separators (",", ":")
- Key order is preserved, never sorted (typed fields come before dynamic ones)
- The top level must be a JSON object
"""

import json
from typing import Any, Dict, Mapping, Union

from flexrecord.errors import WireFormatError


def wire_dumps(obj: Mapping[str, Any]) -> str:
    """
    Serialize a flat wire object to JSON text.

    Args:
        obj: Wire object (wire key -> scalar value)

    Returns:
        Compact JSON string with insertion-ordered keys
    """
    return json.dumps(
        obj,
        separators=(",", ":"),
        ensure_ascii=False  # UTF-8 encoding
    )


def wire_loads(data: Union[str, bytes]) -> Dict[str, Any]:
    """
    Parse JSON text into a flat wire object.

    Args:
        data: JSON text or UTF-8 bytes

    Returns:
        Wire object as a dict (input key order preserved)

    Raises:
        WireFormatError: If data is not valid JSON or the top level is not an object
    """
    try:
        payload = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise WireFormatError(f"Wire payload is not valid JSON: {e}") from e
    except TypeError as e:
        raise WireFormatError(f"Wire payload must be str or bytes: {e}") from e

    if not isinstance(payload, dict):
        raise WireFormatError(
            f"Wire payload must be a JSON object, got {type(payload).__name__}"
        )
    return payload

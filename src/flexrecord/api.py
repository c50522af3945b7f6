"""Public API for flexrecord package.

High-level functions bound to the progressive review codec. Callers with
their own typed model build a RecordCodec directly.
"""

from typing import Any, Dict, Mapping, Optional, Union

from flexrecord.kernel.codec import DecodeResult, RecordCodec
from flexrecord.kernel.record import ExtensibleRecord
from flexrecord.reviews import ProgressiveReviewFields, progressive_review_codec

_DEFAULT_CODEC = progressive_review_codec()


def _codec(codec: Optional[RecordCodec]) -> RecordCodec:
    return codec if codec is not None else _DEFAULT_CODEC


def encode(record: ExtensibleRecord, codec: Optional[RecordCodec] = None) -> Dict[str, Any]:
    """Encode a record to a flat wire object."""
    return _codec(codec).encode(record)


def decode(wire: Mapping[str, Any], codec: Optional[RecordCodec] = None) -> ExtensibleRecord:
    """Decode a flat wire object to a record (unsupported values are dropped silently)."""
    return _codec(codec).decode(wire)


def decode_with_report(wire: Mapping[str, Any], codec: Optional[RecordCodec] = None) -> DecodeResult:
    """Decode a flat wire object and report skipped fields and dropped keys."""
    return _codec(codec).decode_with_report(wire)


def dumps(record: ExtensibleRecord, codec: Optional[RecordCodec] = None) -> str:
    """Encode a record to JSON text."""
    return _codec(codec).dumps(record)


def loads(data: Union[str, bytes], codec: Optional[RecordCodec] = None) -> ExtensibleRecord:
    """Decode a record from JSON text or bytes.

    Raises:
        WireFormatError: If data is not a JSON object
    """
    return _codec(codec).loads(data)


def new_record() -> ExtensibleRecord[ProgressiveReviewFields]:
    """Create an empty progressive review record."""
    return _DEFAULT_CODEC.empty()

"""flexrecord: typed records with open-ended dynamic fields on a flat wire object."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("flexrecord")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
# Note: encode/decode/dumps/loads live in flexrecord.api, not at the root
from flexrecord.codes import DiagnosticCode
from flexrecord.contracts import Diagnostic
from flexrecord.errors import FlexRecordError, SchemaError, UnknownFieldError, WireFormatError
from flexrecord.kernel.codec import DecodeResult, RecordCodec
from flexrecord.kernel.key_mapping import FieldKey, KeyMapping
from flexrecord.kernel.record import ExtensibleRecord
from flexrecord.reviews import (
    PROGRESSIVE_REVIEW_KEYS,
    ProgressiveReviewFields,
    new_progressive_review,
    progressive_review_codec,
)

__all__ = [
    "__version__",
    "DecodeResult",
    "Diagnostic",
    "DiagnosticCode",
    "ExtensibleRecord",
    "FieldKey",
    "FlexRecordError",
    "KeyMapping",
    "PROGRESSIVE_REVIEW_KEYS",
    "ProgressiveReviewFields",
    "RecordCodec",
    "SchemaError",
    "UnknownFieldError",
    "WireFormatError",
    "new_progressive_review",
    "progressive_review_codec",
]

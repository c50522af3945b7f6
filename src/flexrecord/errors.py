"""Exception hierarchy for flexrecord."""


class FlexRecordError(Exception):
    """Base class for all flexrecord errors."""
    pass


class WireFormatError(FlexRecordError, ValueError):
    """Raised when wire input is not a flat key-value object.

    This is the only failure that aborts a decode.
    """
    pass


class SchemaError(FlexRecordError, ValueError):
    """Raised when a typed model and its key mapping do not agree."""
    pass


class UnknownFieldError(FlexRecordError, KeyError):
    """Raised when a key mapping is asked for an internal name it does not define."""
    pass

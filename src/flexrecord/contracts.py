"""Public diagnostic models for flexrecord package."""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from flexrecord.codes import DiagnosticCode


class Diagnostic(BaseModel):
    """A non-fatal issue found while decoding or encoding a record."""
    code: DiagnosticCode
    wire_key: str
    message: str
    field: Optional[str] = None  # Internal field name, for typed mismatches and collisions
    value_type: Optional[str] = None  # Python type name of the offending wire value

    model_config = ConfigDict(frozen=True)

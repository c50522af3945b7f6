"""Key mapping: bidirectional association of typed field names and wire keys."""

import json
from typing import Any, Dict, Iterable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from flexrecord.errors import UnknownFieldError


class FieldKey(BaseModel):
    """One typed field and the wire key it is serialized under."""
    name: str  # Internal field identifier, e.g. "agreedToTerms"
    wire_key: str  # Externally visible key, e.g. "agreedtotermsandconditions"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('name', 'wire_key')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only identifiers."""
        if not v or not v.strip():
            raise ValueError("Field names and wire keys must be non-empty strings")
        return v


class KeyMapping(BaseModel):
    """Injective mapping between internal field names and wire keys.

    Order of `fields` is informational; emission order is owned by the typed
    model. Lookups in both directions are total: unknown wire keys map to None,
    which is the normal route to the dynamic bag.
    """
    format: str = "flexrecord.key_mapping"
    version: str = "0.1"
    fields: Tuple[FieldKey, ...] = Field(..., description="Typed fields and their wire keys")

    _by_name: Dict[str, str] = PrivateAttr(default_factory=dict)
    _by_wire_key: Dict[str, str] = PrivateAttr(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode='after')
    def validate_injective(self) -> 'KeyMapping':
        """Internal names and wire keys must each be pairwise distinct."""
        for attr, label in (("name", "field names"), ("wire_key", "wire keys")):
            seen = set()
            duplicates = set()
            for entry in self.fields:
                value = getattr(entry, attr)
                if value in seen:
                    duplicates.add(value)
                seen.add(value)
            if duplicates:
                raise ValueError(f"Duplicate {label} not allowed: {sorted(duplicates)}")
        return self

    def model_post_init(self, __context: Any) -> None:
        # Lookup indexes, built once per mapping
        self._by_name = {entry.name: entry.wire_key for entry in self.fields}
        self._by_wire_key = {entry.wire_key: entry.name for entry in self.fields}

    def wire_key(self, name: str) -> str:
        """Get the wire key for an internal field name.

        Raises:
            UnknownFieldError: If the name is not part of this mapping
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def field_name(self, wire_key: str) -> Optional[str]:
        """Get the internal field name for a wire key, or None if unmapped."""
        return self._by_wire_key.get(wire_key)

    def is_mapped(self, wire_key: str) -> bool:
        """Check whether a wire key belongs to a typed field."""
        return wire_key in self._by_wire_key

    def as_dict(self) -> Dict[str, str]:
        """Get name -> wire_key as a new dict in mapping order."""
        return {entry.name: entry.wire_key for entry in self.fields}

    def names(self) -> List[str]:
        """Get internal field names in mapping order."""
        return [entry.name for entry in self.fields]

    def wire_keys(self) -> List[str]:
        """Get wire keys in mapping order."""
        return [entry.wire_key for entry in self.fields]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "KeyMapping":
        """Build a mapping from (name, wire_key) pairs."""
        return cls(fields=tuple(FieldKey(name=name, wire_key=wire_key) for name, wire_key in pairs))

    @classmethod
    def from_json_bytes(cls, data: bytes) -> "KeyMapping":
        """Load a key mapping from JSON bytes (pure, no I/O)."""
        payload = json.loads(data)
        return cls(**payload)

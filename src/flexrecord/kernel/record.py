"""Extensible record: a typed model plus an open-ended bag of string fields.

The record is an immutable value. Every update returns a new record, so a
record can be shared across threads and copies never affect each other.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Generic, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel


TypedModel = TypeVar("TypedModel", bound=BaseModel)

DynamicEntries = Tuple[Tuple[str, str], ...]


def _normalize_dynamic(dynamic: Union[Mapping[str, str], DynamicEntries]) -> DynamicEntries:
    """Validate dynamic entries and freeze them into an ordered tuple of pairs."""
    items = dynamic.items() if isinstance(dynamic, Mapping) else dynamic
    entries: Dict[str, str] = {}
    for key, value in items:
        if not isinstance(key, str):
            raise TypeError(f"Dynamic field names must be strings, got {type(key).__name__}")
        if not isinstance(value, str):
            raise TypeError(
                f"Dynamic field '{key}' must have a string value, got {type(value).__name__}"
            )
        entries[key] = value
    return tuple(entries.items())


@dataclass(frozen=True)
class ExtensibleRecord(Generic[TypedModel]):
    """A record with fixed typed fields and dynamically named string fields.

    Attributes:
        typed: Frozen pydantic model; a field set to None is absent
        dynamic: Dynamic fields as (name, value) pairs in insertion order
    """
    typed: TypedModel
    dynamic: DynamicEntries = field(default=())

    def __post_init__(self):
        if not isinstance(self.typed, BaseModel):
            raise TypeError(f"typed must be a pydantic model, got {type(self.typed).__name__}")
        if not type(self.typed).model_config.get("frozen"):
            raise TypeError(f"{type(self.typed).__name__} must be a frozen pydantic model")
        object.__setattr__(self, "dynamic", _normalize_dynamic(self.dynamic))

    @classmethod
    def empty(cls, typed_model: Type[TypedModel]) -> "ExtensibleRecord[TypedModel]":
        """Create a record with all typed fields absent and no dynamic fields."""
        return cls(typed=typed_model())

    # Dynamic fields

    def get(self, name: str) -> Optional[str]:
        """Get a dynamic field value, or None if it is not set."""
        for key, value in self.dynamic:
            if key == name:
                return value
        return None

    def set(self, name: str, value: str) -> "ExtensibleRecord[TypedModel]":
        """Return a new record with a dynamic field set.

        Replacing an existing field keeps its original position.
        """
        entries = dict(self.dynamic)
        entries[name] = value
        return replace(self, dynamic=tuple(entries.items()))

    def remove(self, name: str) -> "ExtensibleRecord[TypedModel]":
        """Return a new record without the given dynamic field (no-op if absent)."""
        if self.get(name) is None:
            return self
        return replace(self, dynamic=tuple((k, v) for k, v in self.dynamic if k != name))

    def list_all(self) -> Dict[str, str]:
        """Get all dynamic fields as a new dict (changes do not affect the record)."""
        return dict(self.dynamic)

    # Typed fields

    def with_typed(self, **changes: Any) -> "ExtensibleRecord[TypedModel]":
        """Return a new record with typed fields changed.

        Passing None unsets a field. Values are validated by the typed model.
        """
        values = self.typed.model_dump()
        values.update(changes)
        return replace(self, typed=type(self.typed).model_validate(values))

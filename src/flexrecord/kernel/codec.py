"""Merge-encode and split-decode between extensible records and flat wire objects.

Encode:
1. Present typed fields are written under their mapped wire keys, in the
   typed model's declaration order. Absent (None) fields are omitted.
2. Dynamic fields follow, verbatim, in insertion order. A dynamic key equal to
   a mapped wire key is skipped (KEY_COLLISION): the typed field owns that key.

Decode:
1. Mapped wire keys are decoded at the typed field's kind. A type mismatch
   leaves the field absent (TYPED_DECODE_MISMATCH) and decoding continues.
   A mapped key never lands in the dynamic bag.
2. Unmapped wire keys are coerced to strings. Values that are not string,
   integer or boolean are dropped (COERCION_EXHAUSTED).

Diagnostics are silent by default. They are collected by decode_with_report(),
delivered to an optional on_diagnostic callback, and logged at DEBUG level.
"""

import logging
import typing
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from flexrecord._internal.wire_json import wire_dumps, wire_loads
from flexrecord.codes import DiagnosticCode
from flexrecord.contracts import Diagnostic
from flexrecord.errors import SchemaError, WireFormatError
from .coercion import FAILED, Coercion, ScalarKind, coerce_dynamic, decode_scalar
from .key_mapping import KeyMapping
from .record import ExtensibleRecord, TypedModel

logger = logging.getLogger(__name__)

_KIND_BY_TYPE: Dict[type, ScalarKind] = {
    str: "string",
    int: "integer",
    bool: "boolean",
}


@dataclass
class DecodeResult(Generic[TypedModel]):
    """Result of a decode with diagnostics."""
    record: ExtensibleRecord[TypedModel]
    diagnostics: List[Diagnostic] = field(default_factory=list)  # In wire key order

    @property
    def ok(self) -> bool:
        """True if every wire key landed in the record."""
        return not self.diagnostics


def _scalar_kind(annotation: Any) -> Optional[ScalarKind]:
    """Resolve Optional[int] / Optional[str] / Optional[bool] to a scalar kind."""
    args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
    if len(args) == 1:
        annotation = args[0]
    elif args:
        return None
    return _KIND_BY_TYPE.get(annotation)


def _typed_layout(typed_model: Type[BaseModel], mapping: KeyMapping) -> List[tuple]:
    """Pair every typed model field with its wire key and scalar kind.

    Returns:
        List of (name, wire_key, kind) in the model's declaration order

    Raises:
        SchemaError: If the model is not frozen, the model and mapping disagree,
            or a field type is unsupported
    """
    if not typed_model.model_config.get("frozen"):
        raise SchemaError(
            f"{typed_model.__name__} must set model_config frozen=True so records stay immutable"
        )

    model_fields = typed_model.model_fields
    model_names = set(model_fields)
    mapped_names = set(mapping.names())

    if model_names != mapped_names:
        missing = sorted(model_names - mapped_names)
        extra = sorted(mapped_names - model_names)
        raise SchemaError(
            f"Key mapping does not match {typed_model.__name__}: "
            f"unmapped model fields {missing}, unknown mapped fields {extra}"
        )

    layout = []
    for name, info in model_fields.items():
        kind = _scalar_kind(info.annotation)
        if kind is None:
            raise SchemaError(
                f"Field '{name}' of {typed_model.__name__} must be an optional "
                f"str, int or bool, got {info.annotation!r}"
            )
        if info.default is not None:
            raise SchemaError(
                f"Field '{name}' of {typed_model.__name__} must default to None (absent)"
            )
        layout.append((name, mapping.wire_key(name), kind))
    return layout


class RecordCodec(Generic[TypedModel]):
    """Encodes and decodes extensible records for one typed model and key mapping.

    A codec holds no mutable state after construction and can be shared
    across threads.
    """

    def __init__(
        self,
        typed_model: Type[TypedModel],
        mapping: KeyMapping,
        on_diagnostic: Optional[Callable[[Diagnostic], None]] = None,
    ):
        self.typed_model = typed_model
        self.mapping = mapping
        self.on_diagnostic = on_diagnostic
        self._layout = _typed_layout(typed_model, mapping)
        self._kinds: Dict[str, ScalarKind] = {name: kind for name, _, kind in self._layout}

    def empty(self) -> ExtensibleRecord[TypedModel]:
        """Create an empty record for this codec's typed model."""
        return ExtensibleRecord.empty(self.typed_model)

    def _validate_field(self, name: str, value: Any) -> Tuple[Coercion, Optional[str]]:
        """Run the typed model's own constraints on a single field value.

        Returns:
            (Coercion, None) on success, or (failed Coercion, pydantic error message)
        """
        try:
            validated = self.typed_model.model_validate({name: value})
        except ValidationError as e:
            return FAILED, e.errors()[0]["msg"]
        return Coercion(ok=True, value=getattr(validated, name)), None

    def _emit(
        self,
        diagnostic: Diagnostic,
        sink: Optional[List[Diagnostic]] = None,
        level: int = logging.DEBUG,
    ) -> None:
        logger.log(level, "%s: %s", diagnostic.code.value, diagnostic.message)
        if sink is not None:
            sink.append(diagnostic)
        if self.on_diagnostic is not None:
            self.on_diagnostic(diagnostic)

    def encode(self, record: ExtensibleRecord[TypedModel]) -> Dict[str, Any]:
        """Merge typed and dynamic fields into one flat wire object.

        Returns:
            Dict of wire key -> scalar value (typed fields first, then dynamic)
        """
        if not isinstance(record.typed, self.typed_model):
            raise TypeError(
                f"Record holds {type(record.typed).__name__}, "
                f"codec expects {self.typed_model.__name__}"
            )

        wire: Dict[str, Any] = {}
        for name, wire_key, _ in self._layout:
            value = getattr(record.typed, name)
            if value is not None:
                wire[wire_key] = value

        for key, value in record.dynamic:
            owner = self.mapping.field_name(key)
            if owner is not None:
                self._emit(Diagnostic(
                    code=DiagnosticCode.KEY_COLLISION,
                    wire_key=key,
                    field=owner,
                    value_type=type(value).__name__,
                    message=f"Dynamic field '{key}' collides with typed field '{owner}'; not written",
                ), level=logging.WARNING)
                continue
            wire[key] = value

        return wire

    def decode_with_report(self, wire: Mapping[str, Any]) -> DecodeResult[TypedModel]:
        """Split a flat wire object into typed and dynamic fields, collecting diagnostics.

        Raises:
            WireFormatError: If wire is not a mapping with string keys
        """
        if not isinstance(wire, Mapping):
            raise WireFormatError(f"Wire object must be a mapping, got {type(wire).__name__}")

        diagnostics: List[Diagnostic] = []
        typed_values: Dict[str, Any] = {}
        dynamic: Dict[str, str] = {}

        for key, value in wire.items():
            if not isinstance(key, str):
                raise WireFormatError(f"Wire keys must be strings, got {type(key).__name__}")

            name = self.mapping.field_name(key)
            if name is not None:
                kind = self._kinds[name]
                result = decode_scalar(kind, value)
                if not result.ok:
                    problem = f"expected {kind}, got {type(value).__name__}"
                else:
                    result, problem = self._validate_field(name, result.value)
                if result.ok:
                    typed_values[name] = result.value
                else:
                    self._emit(Diagnostic(
                        code=DiagnosticCode.TYPED_DECODE_MISMATCH,
                        wire_key=key,
                        field=name,
                        value_type=type(value).__name__,
                        message=f"Invalid value for '{key}' ({problem}); field left absent",
                    ), diagnostics)
                continue

            coerced = coerce_dynamic(value)
            if coerced.ok:
                dynamic[key] = coerced.value
            else:
                self._emit(Diagnostic(
                    code=DiagnosticCode.COERCION_EXHAUSTED,
                    wire_key=key,
                    value_type=type(value).__name__,
                    message=f"Unsupported value type {type(value).__name__} for '{key}'; key dropped",
                ), diagnostics)

        record = ExtensibleRecord(
            typed=self.typed_model.model_validate(typed_values),
            dynamic=tuple(dynamic.items()),
        )
        return DecodeResult(record=record, diagnostics=diagnostics)

    def decode(self, wire: Mapping[str, Any]) -> ExtensibleRecord[TypedModel]:
        """Split a flat wire object into a record (best effort, silent)."""
        return self.decode_with_report(wire).record

    def dumps(self, record: ExtensibleRecord[TypedModel]) -> str:
        """Encode a record to JSON text."""
        return wire_dumps(self.encode(record))

    def loads(self, data: Union[str, bytes]) -> ExtensibleRecord[TypedModel]:
        """Decode a record from JSON text or bytes.

        Raises:
            WireFormatError: If data is not a JSON object
        """
        return self.decode(wire_loads(data))

    def loads_with_report(self, data: Union[str, bytes]) -> DecodeResult[TypedModel]:
        """Decode a record from JSON text or bytes, collecting diagnostics."""
        return self.decode_with_report(wire_loads(data))

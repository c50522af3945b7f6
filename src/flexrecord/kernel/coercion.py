"""Scalar decoding and coercion of untyped wire values.

Wire values arrive without a declared type. Two operations are built on the
same per-kind attempts:

- decode_scalar(): decode a value at a field's declared kind (typed fields)
- coerce_dynamic(): normalize a value to the string form kept for dynamic fields

Rules:
- Only string, integer and boolean are supported scalar kinds
- bool is never accepted as an integer (Python's bool subclasses int)
- Floats, None, lists and dicts fail every attempt
- Attempts return a Coercion result; no exception drives the control flow
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Literal, Tuple


ScalarKind = Literal["string", "integer", "boolean"]

TRUE_TOKEN = "true"
FALSE_TOKEN = "false"


@dataclass(frozen=True)
class Coercion:
    """Outcome of a single decode or coercion attempt."""
    ok: bool
    value: Any = None


FAILED = Coercion(ok=False)


def as_string(value: Any) -> Coercion:
    """Accept native strings only."""
    if isinstance(value, str):
        return Coercion(ok=True, value=value)
    return FAILED


def as_integer(value: Any) -> Coercion:
    """Accept ints, rejecting bools."""
    if isinstance(value, int) and not isinstance(value, bool):
        return Coercion(ok=True, value=value)
    return FAILED


def as_boolean(value: Any) -> Coercion:
    """Accept bools only."""
    if isinstance(value, bool):
        return Coercion(ok=True, value=value)
    return FAILED


SCALAR_DECODERS: Dict[str, Callable[[Any], Coercion]] = {
    "string": as_string,
    "integer": as_integer,
    "boolean": as_boolean,
}


def _render_boolean(value: bool) -> str:
    return TRUE_TOKEN if value else FALSE_TOKEN


# Priority order for dynamic fields: first successful attempt wins.
DYNAMIC_ATTEMPTS: Tuple[Tuple[Callable[[Any], Coercion], Callable[[Any], str]], ...] = (
    (as_string, str),
    (as_integer, str),
    (as_boolean, _render_boolean),
)


def decode_scalar(kind: ScalarKind, value: Any) -> Coercion:
    """Decode a wire value at the given semantic kind.

    Args:
        kind: "string", "integer" or "boolean"
        value: Untyped wire value

    Returns:
        Coercion with ok=True and the native value, or a failed Coercion

    Raises:
        ValueError: If kind is not a supported scalar kind
    """
    decoder = SCALAR_DECODERS.get(kind)
    if decoder is None:
        raise ValueError(f"Unsupported scalar kind: {kind!r}")
    return decoder(value)


def coerce_dynamic(value: Any) -> Coercion:
    """Coerce a wire value to the string representation used for dynamic fields.

    Tries string, then integer (decimal string), then boolean ("true"/"false").

    Returns:
        Coercion with ok=True and the string value, or a failed Coercion when
        the value matches none of the supported kinds
    """
    for attempt, render in DYNAMIC_ATTEMPTS:
        result = attempt(value)
        if result.ok:
            return Coercion(ok=True, value=render(result.value))
    return FAILED

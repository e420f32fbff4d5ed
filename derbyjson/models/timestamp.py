"""Polymorphic timestamps.

A timestamp names one instant in one of five encodings. On the wire it is
either tagged, a single-key object such as ``{"period": "12:34"}``, or bare,
a plain string or number.

Bare values are ambiguous: ``wall`` and ``period`` are both strings, and
``epoch``, ``seconds`` and ``jam`` are all numbers. A bare value is read as
the first kind in ``DECODE_ORDER`` whose primitive shape fits, so bare
strings become ``wall`` and bare numbers become ``epoch``. Callers that know
better restrict the candidates through the validation context::

    Period.model_validate(data, context={"timestamp_kinds": ["period", "seconds"]})

The shape a timestamp was read with is kept, and it encodes back to the
same shape. Kinds are never converted into one another.
"""

from enum import Enum
from typing import Any, NamedTuple

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationInfo,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticCustomError


class TimestampKind(str, Enum):
    """Encodings a timestamp may use."""

    WALL = "wall"  # wall-clock time string
    EPOCH = "epoch"  # seconds since the Unix epoch
    PERIOD = "period"  # period clock string, e.g. "12:34"
    SECONDS = "seconds"  # seconds elapsed in the period
    JAM = "jam"  # jam index


STRING_KINDS = frozenset({TimestampKind.WALL, TimestampKind.PERIOD})
NUMERIC_KINDS = frozenset({TimestampKind.EPOCH, TimestampKind.SECONDS, TimestampKind.JAM})

# Candidate order for bare values; first structural match wins.
DECODE_ORDER: tuple[TimestampKind, ...] = (
    TimestampKind.WALL,
    TimestampKind.EPOCH,
    TimestampKind.PERIOD,
    TimestampKind.SECONDS,
    TimestampKind.JAM,
)

CONTEXT_KEY = "timestamp_kinds"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def shape_matches(kind: TimestampKind, value: Any) -> bool:
    """Whether ``value`` has the primitive type ``kind`` carries."""
    if kind in STRING_KINDS:
        return isinstance(value, str)
    return _is_number(value)


def allowed_kinds(context: Any) -> tuple[TimestampKind, ...]:
    """Candidate kinds for this validation, in decode order."""
    if not isinstance(context, dict) or context.get(CONTEXT_KEY) is None:
        return DECODE_ORDER
    pinned = {TimestampKind(kind) for kind in context[CONTEXT_KEY]}
    return tuple(kind for kind in DECODE_ORDER if kind in pinned)


class _Parts(NamedTuple):
    kind: Any
    value: Any
    tagged: Any


class Timestamp(BaseModel):
    """One point in time, in exactly one encoding.

    Build one in code with ``Timestamp(kind=..., value=...)``. Validation
    only accepts the wire shapes, so ``{"kind": "wall", "value": "x"}`` is
    not a timestamp.
    """

    model_config = ConfigDict(frozen=True)

    kind: TimestampKind
    value: StrictStr | StrictInt | StrictFloat
    tagged: bool = True

    def __init__(self, kind: TimestampKind | str, value: str | int | float, tagged: bool = True) -> None:
        self.__pydantic_validator__.validate_python(_Parts(kind, value, tagged), self_instance=self)

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any, info: ValidationInfo) -> Any:
        if isinstance(data, Timestamp):
            return data
        if isinstance(data, _Parts):
            return data._asdict()
        candidates = allowed_kinds(info.context)

        if isinstance(data, dict):
            if len(data) != 1:
                raise PydanticCustomError(
                    "timestamp_shape",
                    "Tagged timestamp must have exactly one key, got {keys}",
                    {"keys": sorted(data)},
                )
            key, value = next(iter(data.items()))
            if key in {kind.value for kind in TimestampKind} and TimestampKind(key) not in candidates:
                raise PydanticCustomError(
                    "timestamp_kind_not_allowed",
                    "Timestamp kind {kind} is not accepted here",
                    {"kind": key},
                )
            return {"kind": key, "value": value}

        if isinstance(data, str) or _is_number(data):
            for kind in candidates:
                if shape_matches(kind, data):
                    return {"kind": kind, "value": data, "tagged": False}
            raise PydanticCustomError(
                "timestamp_kind_not_allowed",
                "No accepted timestamp kind takes a bare {type} value",
                {"type": type(data).__name__},
            )

        raise PydanticCustomError(
            "timestamp_shape",
            "Timestamp must be a string, a number or a single-key object",
        )

    @model_validator(mode="after")
    def _check_value_shape(self) -> "Timestamp":
        if not shape_matches(self.kind, self.value):
            expected = "string" if self.kind in STRING_KINDS else "number"
            raise PydanticCustomError(
                "timestamp_value_type",
                "{kind} timestamps carry a {expected} value",
                {"kind": self.kind.value, "expected": expected},
            )
        return self

    @model_serializer
    def _to_wire(self) -> Any:
        if self.tagged:
            return {self.kind.value: self.value}
        return self.value

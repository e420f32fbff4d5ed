"""Typed decode errors.

Pydantic reports every structural problem as a ``ValidationError``.
``translate_validation_error`` turns one into the most specific error
below, keeping pydantic's full error list on ``errors``. Locations are
pydantic locations, so they include the tag of the union variant that was
selected along the way.
"""

from typing import Any

from pydantic import ValidationError

Location = tuple[int | str, ...]


class DerbyJSONError(Exception):
    """Base class for all DerbyJSON decode failures."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class MalformedInput(DerbyJSONError):
    """The input is not well-formed JSON."""

    def __init__(self, detail: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(f"Malformed input: {detail}", errors)
        self.detail = detail


class UnrecognizedEventKind(DerbyJSONError):
    def __init__(self, tag: Any, location: Location = (), errors: list[dict[str, Any]] | None = None):
        super().__init__(f"Unrecognized jam event kind {tag!r} at {format_location(location)}", errors)
        self.tag = tag
        self.location = location


class AmbiguousClockEvent(DerbyJSONError):
    """A timeline entry did not validate as a timeout, a jam or a note.

    ``attempts`` maps each variant whose required fields were present to the
    errors it failed with, so a jam with a bad event still says why.
    """

    def __init__(
        self,
        fields: list[str],
        location: Location = (),
        errors: list[dict[str, Any]] | None = None,
        attempts: dict[str, list[dict[str, Any]]] | None = None,
    ):
        super().__init__(
            f"Timeline entry at {format_location(location)} with fields {fields} "
            "is not a timeout, jam or note",
            errors,
        )
        self.fields = fields
        self.location = location
        self.attempts = attempts or {}


class UnexpectedField(DerbyJSONError):
    def __init__(self, name: str, location: Location = (), errors: list[dict[str, Any]] | None = None):
        super().__init__(f"Unexpected field {name!r}", errors)
        self.name = name
        self.location = location


class UnexpectedType(DerbyJSONError):
    def __init__(self, actual: Any, errors: list[dict[str, Any]] | None = None):
        super().__init__(f"Unexpected document type {actual!r}", errors)
        self.actual = actual


class UnexpectedVersion(DerbyJSONError):
    def __init__(self, actual: str):
        super().__init__(f"Unexpected DerbyJSON version {actual!r}")
        self.actual = actual


class SchemaViolation(DerbyJSONError):
    """Any other structural problem: missing field, wrong type, bad value."""

    def __init__(self, location: Location, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(f"{format_location(location)}: {message}", errors)
        self.location = location
        self.message = message


def format_location(location: Location) -> str:
    if not location:
        return "<root>"
    return ".".join(str(part) for part in location)


def translate_validation_error(exc: ValidationError) -> DerbyJSONError:
    """Most specific ``DerbyJSONError`` for a pydantic validation failure."""
    errors = exc.errors(include_url=False)
    by_type: dict[str, dict[str, Any]] = {}
    for error in errors:
        by_type.setdefault(error["type"], error)

    if "json_invalid" in by_type:
        error = by_type["json_invalid"]
        return MalformedInput(error.get("ctx", {}).get("error", error["msg"]), errors)

    if "unrecognized_event_kind" in by_type:
        error = by_type["unrecognized_event_kind"]
        raw = error.get("input")
        tag = raw.get("event") if isinstance(raw, dict) else raw
        return UnrecognizedEventKind(tag, tuple(error["loc"]), errors)

    if "ambiguous_clock_event" in by_type:
        error = by_type["ambiguous_clock_event"]
        ctx = error.get("ctx", {})
        return AmbiguousClockEvent(
            ctx.get("fields", []), tuple(error["loc"]), errors, ctx.get("attempts")
        )

    if "extra_forbidden" in by_type:
        error = by_type["extra_forbidden"]
        return UnexpectedField(str(error["loc"][-1]), tuple(error["loc"]), errors)

    for error in errors:
        if tuple(error["loc"]) == ("type",) and error["type"] == "enum":
            return UnexpectedType(error.get("input"), errors)

    error = errors[0]
    return SchemaViolation(tuple(error["loc"]), error["msg"], errors)

"""DerbyJSON document model and validator."""

from .errors import (
    AmbiguousClockEvent,
    DerbyJSONError,
    MalformedInput,
    SchemaViolation,
    UnexpectedField,
    UnexpectedType,
    UnexpectedVersion,
    UnrecognizedEventKind,
)
from .loader import dump, dumps, load_document, load_roster, parse_document, parse_roster
from .models import SUPPORTED_VERSION, DerbyJSON, ObjectType, Rosters

__all__ = [
    # Loader
    "load_roster",
    "parse_roster",
    "load_document",
    "parse_document",
    "dump",
    "dumps",
    # Documents
    "SUPPORTED_VERSION",
    "DerbyJSON",
    "ObjectType",
    "Rosters",
    # Errors
    "DerbyJSONError",
    "MalformedInput",
    "UnrecognizedEventKind",
    "AmbiguousClockEvent",
    "UnexpectedField",
    "UnexpectedType",
    "UnexpectedVersion",
    "SchemaViolation",
]

"""Load, validate and dump DerbyJSON documents."""

from typing import IO, Any

import structlog
from pydantic import ValidationError

from .errors import DerbyJSONError, UnexpectedType, UnexpectedVersion, translate_validation_error
from .models import SUPPORTED_VERSION, DerbyJSON, DerbyModel, ObjectType, Rosters

logger = structlog.get_logger()


def _decode(model: type[DerbyModel], data: str | bytes, context: dict[str, Any] | None) -> Any:
    # Wire keys are matched by alias only; field names are for building in code.
    try:
        return model.model_validate_json(data, context=context, by_alias=True, by_name=False)
    except ValidationError as e:
        error = translate_validation_error(e)
        logger.warning(
            "document_rejected",
            schema=model.__name__,
            kind=type(error).__name__,
            error=str(error),
        )
        raise error from e


def _reject(error: DerbyJSONError) -> DerbyJSONError:
    logger.warning("document_rejected", kind=type(error).__name__, error=str(error))
    return error


def check_version(version: str | None) -> None:
    """Reject any version other than the supported one. Absent is fine."""
    if version is not None and version != SUPPORTED_VERSION:
        raise _reject(UnexpectedVersion(version))


def check_object_type(actual: ObjectType, expected: ObjectType) -> None:
    if actual != expected:
        raise _reject(UnexpectedType(actual.value))


def parse_roster(data: str | bytes, *, context: dict[str, Any] | None = None) -> Rosters:
    """
    Decode a roster document.

    Args:
        data: DerbyJSON text
        context: Validation context, e.g. {"timestamp_kinds": [...]}

    Returns:
        The validated Rosters value

    Raises:
        DerbyJSONError: The document is malformed, has fields outside the
            roster schema, is not of type "rosters", or has an unsupported
            version.
    """
    rosters: Rosters = _decode(Rosters, data, context)
    check_object_type(rosters.objecttype, ObjectType.ROSTERS)
    check_version(rosters.version)

    logger.debug(
        "roster_loaded",
        teams=len(rosters.teams),
        leagues=len(rosters.leagues),
        persons=rosters.total_persons,
    )
    return rosters


def load_roster(stream: IO[str] | IO[bytes], *, context: dict[str, Any] | None = None) -> Rosters:
    """Load a roster from an open stream, checking it is a valid roster object."""
    return parse_roster(stream.read(), context=context)


def parse_document(
    data: str | bytes,
    *,
    expected_type: ObjectType | None = None,
    context: dict[str, Any] | None = None,
) -> DerbyJSON:
    """
    Decode a full document.

    Unknown top-level keys are kept rather than rejected. The type is only
    checked when ``expected_type`` is given.
    """
    document: DerbyJSON = _decode(DerbyJSON, data, context)
    if expected_type is not None:
        check_object_type(document.objecttype, expected_type)
    check_version(document.version)

    logger.debug(
        "document_loaded",
        type=document.objecttype.value,
        teams=len(document.teams),
        periods=len(document.periods),
        extra_fields=sorted(document.extra_fields),
    )
    return document


def load_document(
    stream: IO[str] | IO[bytes],
    *,
    expected_type: ObjectType | None = None,
    context: dict[str, Any] | None = None,
) -> DerbyJSON:
    """Load a full document from an open stream."""
    return parse_document(stream.read(), expected_type=expected_type, context=context)


def dumps(document: DerbyModel, *, indent: int | None = None) -> str:
    """Encode a document (or any DerbyJSON object) to text."""
    return document.to_json(indent=indent)


def dump(document: DerbyModel, stream: IO[str], *, indent: int | None = None) -> None:
    stream.write(dumps(document, indent=indent))

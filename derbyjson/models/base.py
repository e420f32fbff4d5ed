"""Shared base model and small value types."""

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


def kebab(name: str) -> str:
    """Wire spelling for multi-word fields on hyphenated objects."""
    return name.replace("_", "-")


class DerbyModel(BaseModel):
    """Base for every DerbyJSON object.

    Models are immutable once built. Fields left unset are omitted on
    encode instead of being written as null.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        absent = set()
        for name, field in type(self).model_fields.items():
            if getattr(self, name) is None:
                absent.update((name, field.alias or name))
        return {key: value for key, value in data.items() if key not in absent}

    def to_wire(self) -> dict[str, Any]:
        """Encode to plain JSON-compatible Python values."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = None) -> str:
        """Encode to DerbyJSON text."""
        return self.model_dump_json(by_alias=True, indent=indent)


class Note(DerbyModel):
    """A note about something that happened.

    Notes can be attached to most objects in a document, and a bare note
    can also stand on its own in a period's timeline.
    """

    note: str
    author: str | None = None

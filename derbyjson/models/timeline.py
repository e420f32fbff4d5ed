"""Periods and their timelines.

A period's timeline is a list of clock events. An entry carries no tag, so
its variant is picked by shape: ``CLOCK_EVENT_SHAPES`` lists the required
fields of each variant in the order they are tried, most constrained first.
The first variant that validates wins, so an entry with both a ``number``
and a ``note`` is a jam.
"""

from enum import Enum
from typing import Annotated, Any, Union

from pydantic import Field, PlainValidator, ValidationError, ValidationInfo
from pydantic_core import PydanticCustomError

from .base import DerbyModel, Note
from .events import JamEvent
from .timestamp import Timestamp


class TeamType(str, Enum):
    HOME = "Home"
    AWAY = "Away"
    OFFICIALS = "Officials"


class Jam(DerbyModel):
    """The basic unit of play. Periods are broken into jams."""

    number: int = Field(ge=0)  # Position within the period
    timestamp: Timestamp | None = None
    duration: int | None = Field(default=None, ge=0)
    events: list[JamEvent] = []
    notes: list[Note] = []

    def events_of(self, *types: type[DerbyModel]) -> list[DerbyModel]:
        """Events of the given variant classes, in jam order."""
        return [event for event in self.events if isinstance(event, types)]


class Timeout(DerbyModel):
    """A stoppage of the game clock.

    Covers team timeouts, official reviews and official timeouts.
    """

    timeout: TeamType
    notes: list[Note] = []
    injury: str | None = None  # Skater
    duration: int = Field(ge=0)  # Seconds, including lineup time
    timestamp: Timestamp | None = None
    review: str | None = None
    resolution: str | None = None
    retained: bool | None = None


CLOCK_EVENT_SHAPES: tuple[tuple[frozenset[str], type[DerbyModel]], ...] = (
    (frozenset({"timeout", "duration"}), Timeout),
    (frozenset({"number"}), Jam),
    (frozenset({"note"}), Note),
)


def _decode_clock_event(value: Any, info: ValidationInfo) -> DerbyModel:
    """Decode one timeline entry, trying each shape in order.

    A shape is only attempted when its required fields are present. When an
    attempt fails validation the next shape is tried, so ``{"number": -1,
    "note": "x"}`` is a note. Dict entries are wire objects and are read by
    alias only.
    """
    if isinstance(value, (Timeout, Jam, Note)):
        return value
    if not isinstance(value, dict):
        raise PydanticCustomError("ambiguous_clock_event", "Timeline entry must be an object")

    failures = {}
    for required, model in CLOCK_EVENT_SHAPES:
        if not required <= value.keys():
            continue
        try:
            return model.model_validate(value, context=info.context, by_alias=True, by_name=False)
        except ValidationError as e:
            failures[model.__name__] = [
                {"loc": error["loc"], "type": error["type"], "msg": error["msg"]}
                for error in e.errors(include_url=False)
            ]

    raise PydanticCustomError(
        "ambiguous_clock_event",
        "Timeline entry with fields {fields} is not a timeout, jam or note",
        {"fields": sorted(value), "attempts": failures},
    )


ClockEvent = Annotated[Union[Timeout, Jam, Note], PlainValidator(_decode_clock_event)]


class Period(DerbyModel):
    timestamp: Timestamp | None = None
    end: Timestamp | None = None
    jams: list[ClockEvent] = []

    @property
    def played_jams(self) -> list[Jam]:
        return [entry for entry in self.jams if isinstance(entry, Jam)]

    @property
    def timeouts(self) -> list[Timeout]:
        return [entry for entry in self.jams if isinstance(entry, Timeout)]

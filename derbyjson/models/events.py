"""Jam events.

Everything that happens inside a jam is recorded as a jam event: lineups,
passes, penalties, box trips and so on. Each event object carries an
``event`` tag that selects which fields it may hold. ``JAM_EVENT_TYPES`` is
the complete tag table; ``JamEvent`` is the union type used wherever a list
of events appears.
"""

from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Discriminator, Field, Tag

from .base import DerbyModel, Note, kebab
from .timestamp import Timestamp


class Position(str, Enum):
    """A skater's position in a jam."""

    JAMMER = "jammer"
    PIVOT = "pivot"
    BLOCKER = "blocker"


class PenaltySeverity(str, Enum):
    """How serious a penalty was. An expulsion removes the skater from the game."""

    NO = "no"
    MINOR = "minor"
    MAJOR = "major"
    EXPULSION = "expulsion"


class PrematureExitReason(str, Enum):
    """Why a skater left the box early.

    Officiating error, the skater leaving early, a rescinded penalty, or a
    skater who reported to the box by mistake.
    """

    OFFICIAL = "official"
    SKATER = "skater"
    RESCINDED = "rescinded"
    MISTAKE = "mistake"


class LeaveTrackReason(str, Enum):
    """Why a skater left the track mid-jam."""

    PENALTY = "penalty"
    INJURY = "injury"
    MALFUNCTION = "malfunction"
    OTHER = "other"


class GhostPointType(str, Enum):
    """Why a ghost point was awarded.

    Lap of jammer, Jammer in box, Blocker in box, Pivot in box, Not on the
    track, Out of play, or unknown cause (G).
    """

    L = "L"
    J = "J"
    B = "B"
    P = "P"
    N = "N"
    O = "O"  # noqa: E741
    G = "G"


class GhostPoint(DerbyModel):
    """A point scored by means other than passing an opponent's hips."""

    skater: str | None = None
    ghost_point: GhostPointType


class Involved(DerbyModel):
    skater: str
    notes: list[Note] = []


class Substitute(DerbyModel):
    skater: str
    reason: str


class LineupEvent(DerbyModel):
    """One skater who skated in the jam. A typical jam has ten of these."""

    event: Literal["line up"] = "line up"
    skater: str
    start_in_box: bool
    position: Position


class PackLapEvent(DerbyModel):
    event: Literal["pack lap"] = "pack lap"
    timestamp: Timestamp | None = None
    count: int | None = Field(default=None, ge=0)


class PenaltyEvent(DerbyModel):
    """A penalty called on a skater, with any other skaters involved."""

    event: Literal["penalty"] = "penalty"
    timestamp: Timestamp | None = None
    skater: str
    penalty: str
    severity: PenaltySeverity | None = None
    rescinded: bool | None = None
    involved: list[Involved] = []
    cue: str | None = None


class PassEvent(DerbyModel):
    """A scoring pass (or the initial pass) by a jammer."""

    event: Literal["pass"] = "pass"
    timestamp: Timestamp | None = None
    completed: bool | None = None
    number: int = Field(ge=0)
    points: int | None = Field(default=None, ge=0)
    skater: str | None = None
    ghost_points: list[GhostPoint] | None = None


class StarPassEvent(DerbyModel):
    """The jammer handing the helmet cover to the pivot."""

    event: Literal["star pass"] = "star pass"
    timestamp: Timestamp | None = None
    skater: str | None = None
    team: str | None = None
    completed: bool | None = None
    failure: str | None = None


class LeadEvent(DerbyModel):
    event: Literal["lead"] = "lead"
    timestamp: Timestamp | None = None
    skater: str


class LostLeadEvent(DerbyModel):
    event: Literal["lost lead"] = "lost lead"
    timestamp: Timestamp | None = None
    skater: str


class CallEvent(DerbyModel):
    event: Literal["call"] = "call"
    timestamp: Timestamp | None = None
    skater: str | None = None
    team: str | None = None
    official: str | None = None


class EnterBoxEvent(DerbyModel):
    """A skater sitting down in the penalty box."""

    event: Literal["enter box"] = "enter box"
    timestamp: Timestamp | None = None
    skater: str
    duration: int | float | None = None
    substitute: Substitute | None = None
    notes: list[Note] = []


class ExitBoxEvent(DerbyModel):
    """A skater released from the penalty box, possibly early."""

    model_config = ConfigDict(alias_generator=kebab)

    event: Literal["exit box"] = "exit box"
    timestamp: Timestamp | None = None
    skater: str
    duration: int | float | None = None
    premature: PrematureExitReason | None = None
    no_skater: bool | None = None


class BoxTimeEvent(DerbyModel):
    """Box time placeholder.

    The format names this event but defines no fields for it. Anything
    besides the tag is ignored.
    """

    event: Literal["box time"] = "box time"


class InjuryEvent(DerbyModel):
    event: Literal["injury"] = "injury"
    timestamp: Timestamp | None = None
    skater: str


class NoteEvent(DerbyModel):
    event: Literal["note"] = "note"
    note: str
    author: str | None = None
    date: str | None = None
    notes: list[Note] = []


class LeaveTrackEvent(DerbyModel):
    """A skater leaving the track during a jam."""

    model_config = ConfigDict(alias_generator=kebab)

    event: Literal["leave track"] = "leave track"
    timestamp: Timestamp | None = None
    skater: str
    reason: LeaveTrackReason | None = None
    opposing_pass: int = Field(ge=0)


class ReturnTrackEvent(DerbyModel):
    model_config = ConfigDict(alias_generator=kebab)

    event: Literal["return track"] = "return track"
    timestamp: Timestamp | None = None
    skater: str
    opposing_pass: int = Field(ge=0)


JAM_EVENT_TYPES: MappingProxyType[str, type[DerbyModel]] = MappingProxyType(
    {
        "line up": LineupEvent,
        "pack lap": PackLapEvent,
        "penalty": PenaltyEvent,
        "pass": PassEvent,
        "star pass": StarPassEvent,
        "lead": LeadEvent,
        "lost lead": LostLeadEvent,
        "call": CallEvent,
        "enter box": EnterBoxEvent,
        "exit box": ExitBoxEvent,
        "box time": BoxTimeEvent,
        "injury": InjuryEvent,
        "note": NoteEvent,
        "leave track": LeaveTrackEvent,
        "return track": ReturnTrackEvent,
    }
)


def jam_event_type(tag: str) -> type[DerbyModel] | None:
    """Variant class for an ``event`` tag, or None if the tag is unknown."""
    return JAM_EVENT_TYPES.get(tag)


def event_tag(value: Any) -> str | None:
    """Tag of a raw event object or event model, if it is a known one."""
    if isinstance(value, dict):
        tag = value.get("event")
    else:
        tag = getattr(value, "event", None)
    if isinstance(tag, str) and tag in JAM_EVENT_TYPES:
        return tag
    return None


JamEvent = Annotated[
    Union[
        Annotated[LineupEvent, Tag("line up")],
        Annotated[PackLapEvent, Tag("pack lap")],
        Annotated[PenaltyEvent, Tag("penalty")],
        Annotated[PassEvent, Tag("pass")],
        Annotated[StarPassEvent, Tag("star pass")],
        Annotated[LeadEvent, Tag("lead")],
        Annotated[LostLeadEvent, Tag("lost lead")],
        Annotated[CallEvent, Tag("call")],
        Annotated[EnterBoxEvent, Tag("enter box")],
        Annotated[ExitBoxEvent, Tag("exit box")],
        Annotated[BoxTimeEvent, Tag("box time")],
        Annotated[InjuryEvent, Tag("injury")],
        Annotated[NoteEvent, Tag("note")],
        Annotated[LeaveTrackEvent, Tag("leave track")],
        Annotated[ReturnTrackEvent, Tag("return track")],
    ],
    Discriminator(
        event_tag,
        custom_error_type="unrecognized_event_kind",
        custom_error_message="Unrecognized jam event kind",
    ),
]

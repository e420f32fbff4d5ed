"""Pydantic data models for DerbyJSON documents."""

from .base import DerbyModel, Note
from .timestamp import DECODE_ORDER, Timestamp, TimestampKind
from .team import Association, Certification, League, Logo, Person, Team, TeamLevel, Venue
from .events import (
    JAM_EVENT_TYPES,
    BoxTimeEvent,
    CallEvent,
    EnterBoxEvent,
    ExitBoxEvent,
    GhostPoint,
    GhostPointType,
    InjuryEvent,
    Involved,
    JamEvent,
    LeadEvent,
    LeaveTrackEvent,
    LeaveTrackReason,
    LineupEvent,
    LostLeadEvent,
    NoteEvent,
    PackLapEvent,
    PassEvent,
    PenaltyEvent,
    PenaltySeverity,
    Position,
    PrematureExitReason,
    ReturnTrackEvent,
    StarPassEvent,
    Substitute,
    jam_event_type,
)
from .timeline import CLOCK_EVENT_SHAPES, ClockEvent, Jam, Period, TeamType, Timeout
from .document import (
    SUPPORTED_VERSION,
    DerbyJSON,
    DocumentCore,
    Expulsion,
    ObjectType,
    Rosters,
    Ruleset,
    Timer,
    Timers,
)

__all__ = [
    # Base
    "DerbyModel",
    "Note",
    # Timestamp
    "DECODE_ORDER",
    "Timestamp",
    "TimestampKind",
    # Team
    "Association",
    "Certification",
    "League",
    "Logo",
    "Person",
    "Team",
    "TeamLevel",
    "Venue",
    # Events
    "JAM_EVENT_TYPES",
    "JamEvent",
    "jam_event_type",
    "LineupEvent",
    "PackLapEvent",
    "PenaltyEvent",
    "PassEvent",
    "StarPassEvent",
    "LeadEvent",
    "LostLeadEvent",
    "CallEvent",
    "EnterBoxEvent",
    "ExitBoxEvent",
    "BoxTimeEvent",
    "InjuryEvent",
    "NoteEvent",
    "LeaveTrackEvent",
    "ReturnTrackEvent",
    "GhostPoint",
    "GhostPointType",
    "Involved",
    "Substitute",
    "Position",
    "PenaltySeverity",
    "PrematureExitReason",
    "LeaveTrackReason",
    # Timeline
    "CLOCK_EVENT_SHAPES",
    "ClockEvent",
    "Jam",
    "Period",
    "TeamType",
    "Timeout",
    # Document
    "SUPPORTED_VERSION",
    "DerbyJSON",
    "DocumentCore",
    "Expulsion",
    "ObjectType",
    "Rosters",
    "Ruleset",
    "Timer",
    "Timers",
]

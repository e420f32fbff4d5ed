"""Top-level DerbyJSON documents."""

from enum import Enum
from typing import Any, Final

from pydantic import ConfigDict, Field

from .base import DerbyModel, Note, kebab
from .team import Association, League, Team, Venue
from .timeline import Period

SUPPORTED_VERSION: Final = "0.2"


class ObjectType(str, Enum):
    """What a document describes. Decides which fields are meaningful."""

    GAME = "game"
    ROSTERS = "rosters"
    STATS = "stats"
    LEAGUE = "league"


class Timer(DerbyModel):
    duration: int = Field(ge=0)
    counts_down: bool
    running: bool


class Timers(DerbyModel):
    countdown: Timer | None = None
    period: Timer
    halftime: Timer | None = None
    jam: Timer | None = None


class Ruleset(DerbyModel):
    """The ruleset a game was played under."""

    model_config = ConfigDict(alias_generator=kebab)

    version: str
    period_count: int = Field(ge=0)
    period: str
    jam: str
    lineup: str
    timeout: str
    timeout_count: int = Field(ge=0)
    official_review_count: int = Field(ge=0)
    official_review_retained: bool
    official_review_maximum: int = Field(ge=0)
    penalty: str
    minors: bool
    minors_per_major: int = Field(ge=0)
    foulout: int = Field(ge=0)


class Expulsion(DerbyModel):
    skater: str
    suspension: bool
    notes: list[Note] = []


class DocumentCore(DerbyModel):
    """Fields every document kind shares."""

    version: str | None = None
    objecttype: ObjectType = Field(alias="type")
    teams: dict[str, Team]
    uuid: list[str] = []
    notes: list[Note] = []

    @property
    def total_persons(self) -> int:
        return sum(len(team.persons) for team in self.teams.values())

    def get_team(self, name: str) -> Team | None:
        """Find a team by its key in ``teams``."""
        return self.teams.get(name)


class Rosters(DocumentCore):
    """Roster-only view of a document.

    Closed schema: a top-level key outside the fields below is an error.
    """

    model_config = ConfigDict(extra="forbid")

    metadata: dict[str, Any] | None = None
    leagues: list[League] = []

    @classmethod
    def new(cls, teams: dict[str, Team]) -> "Rosters":
        """Build a roster document at the supported version."""
        return cls(version=SUPPORTED_VERSION, objecttype=ObjectType.ROSTERS, teams=teams)


class DerbyJSON(DocumentCore):
    """A full document: a game, a league, or a stats record.

    Open schema: unrecognized top-level keys are kept in ``extra_fields``
    and written back on encode.
    """

    model_config = ConfigDict(extra="allow")

    metadata: dict[str, Any] = {}
    periods: list[Period] = []
    ruleset: Ruleset | None = None
    venue: Venue | None = None
    date: str | None = None
    time: str | None = None
    end_time: str | None = None
    leagues: list[League] | None = None
    timers: Timers | None = None
    tournament: str | None = None
    host_league: str | None = Field(default=None, alias="host-league")
    expulsions: list[Expulsion] = []
    suspensions: list[str] = []
    signatures: list[Any] = []
    sanctioned: bool | None = None
    association: Association | None = None

    @property
    def extra_fields(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

"""Team, league and person models."""

from enum import Enum

from .base import DerbyModel, Note


class Association(str, Enum):
    WFTDA = "WFTDA"
    MRDA = "MRDA"
    JRDA = "JRDA"
    OTHER = "Other"


class TeamLevel(str, Enum):
    ALL_STAR = "All Star"
    B = "B"
    C = "C"
    REC = "Rec"
    OFFICIALS = "Officials"
    HOME = "Home"
    ADHOC = "Adhoc"


class Logo(DerbyModel):
    """Team or league logo.

    Each field may hold a URL for that size/style. A logo with a single
    variant only sets ``url``.
    """

    url: str | None = None
    small: str | None = None
    medium: str | None = None
    large: str | None = None
    small_dark: str | None = None
    medium_dark: str | None = None
    large_dark: str | None = None
    small_light: str | None = None
    medium_light: str | None = None
    large_light: str | None = None
    small_greyscale: str | None = None
    medium_greyscale: str | None = None
    large_greyscale: str | None = None


class Venue(DerbyModel):
    """Where a game is played."""

    name: str
    city: str
    state: str
    url: str | None = None
    country: str | None = None
    email: str | None = None
    fax: str | None = None
    otheraddr: str | None = None
    phone: str | None = None
    pob: str | None = None
    postcode: str | None = None
    street: str | None = None
    notes: list[Note] = []
    uuid: list[str] = []
    logo: list[Logo] = []


class Certification(DerbyModel):
    association: Association
    certification: str
    level: int | None = None
    endorsement: str | None = None


class Person(DerbyModel):
    """A skater or official."""

    name: str
    number: str | None = None  # Required for skaters; not checked here
    league: str | None = None
    certifications: list[Certification] | None = None
    legal: str | None = None
    roles: list[str] = []
    skated: bool | None = None
    uuid: list[str] | None = None
    insurance: list[str] | None = None


class Team(DerbyModel):
    """A collection of skaters or officials."""

    # Unique within the league. May be "" for the only team in its league.
    name: str
    league: str | None = None
    abbreviation: str | None = None
    persons: list[Person]
    level: TeamLevel | None = None
    date: str | None = None  # Date as of which this roster is current
    color: str | None = None
    logo: Logo | None = None

    def get_person_by_name(self, name: str) -> Person | None:
        """Find a person by name."""
        for person in self.persons:
            if person.name == name:
                return person
        return None

    def get_person_by_number(self, number: str) -> Person | None:
        """Find a person by roster number."""
        for person in self.persons:
            if person.number == number:
                return person
        return None


class League(DerbyModel):
    """A collection of teams."""

    name: str
    abbreviation: str | None = None
    uuid: list[str] | None = None
    venue: Venue | None = None
    teams: list[Team]
    logo: Logo | None = None

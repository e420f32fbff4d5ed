"""Tests for loading and validating documents."""

import io
import json

import pytest

from derbyjson import (
    SUPPORTED_VERSION,
    AmbiguousClockEvent,
    DerbyJSON,
    MalformedInput,
    ObjectType,
    Rosters,
    SchemaViolation,
    UnexpectedField,
    UnexpectedType,
    UnexpectedVersion,
    dump,
    dumps,
    load_document,
    load_roster,
    parse_document,
    parse_roster,
)
from derbyjson.models import Jam, Note, Team, Timeout

MINIMAL_ROSTER = '{"type":"rosters","teams":{"Home":{"name":"Home","persons":[]}}}'


class TestLoadRoster:
    """Tests for load_roster."""

    def test_fixture(self, rosters_path):
        """Test loading a two-team roster file."""
        with rosters_path.open("rb") as stream:
            rosters = load_roster(stream)

        assert len(rosters.teams) == 2
        assert rosters.version == SUPPORTED_VERSION
        assert rosters.metadata == {"producer": "Scoreboard 4.1", "date": "2016-05-14"}
        assert rosters.teams["Away"].get_person_by_number("340").name == "Bonnie Thunders"
        assert rosters.leagues[0].teams[0].persons == []
        assert rosters.total_persons == 5

    def test_minimal_document(self):
        """Test the smallest roster document."""
        rosters = load_roster(io.StringIO(MINIMAL_ROSTER))

        assert len(rosters.teams) == 1
        assert len(rosters.teams["Home"].persons) == 0
        assert rosters.version is None

    def test_defaults_populated(self):
        """Test omitted list fields come back as empty lists."""
        rosters = parse_roster(MINIMAL_ROSTER)

        assert rosters.uuid == []
        assert rosters.notes == []
        assert rosters.leagues == []

    def test_bytes_and_text(self):
        """Test byte and text streams decode the same."""
        from_bytes = load_roster(io.BytesIO(MINIMAL_ROSTER.encode("utf-8")))
        from_text = load_roster(io.StringIO(MINIMAL_ROSTER))

        assert from_bytes == from_text

    def test_unknown_field(self):
        """Test an extra top-level field is a hard error."""
        data = '{"type":"rosters","teams":{},"periods":[]}'

        with pytest.raises(UnexpectedField) as excinfo:
            parse_roster(data)

        assert excinfo.value.name == "periods"

    def test_field_name_is_not_wire_key(self):
        """Test objecttype is rejected as an undeclared key on a roster."""
        with pytest.raises(UnexpectedField) as excinfo:
            parse_roster('{"objecttype":"rosters","type":"rosters","teams":{}}')

        assert excinfo.value.name == "objecttype"

    def test_field_name_without_wire_key(self):
        """Test a roster with only objecttype does not load."""
        with pytest.raises(UnexpectedField):
            parse_roster('{"objecttype":"rosters","teams":{}}')

    def test_without_unknown_field(self):
        """Test the same document without the extra field loads."""
        assert parse_roster('{"type":"rosters","teams":{}}').teams == {}

    def test_wrong_type(self):
        """Test a game document is not a roster."""
        with pytest.raises(UnexpectedType) as excinfo:
            parse_roster('{"type":"game","teams":{}}')

        assert excinfo.value.actual == "game"

    def test_unknown_type(self):
        """Test a type outside the known kinds."""
        with pytest.raises(UnexpectedType) as excinfo:
            parse_roster('{"type":"scoreboard","teams":{}}')

        assert excinfo.value.actual == "scoreboard"

    def test_wrong_version(self):
        """Test an unsupported version string."""
        with pytest.raises(UnexpectedVersion) as excinfo:
            parse_roster('{"type":"rosters","version":"9.9","teams":{}}')

        assert excinfo.value.actual == "9.9"

    def test_supported_version(self):
        """Test the supported version loads."""
        rosters = parse_roster('{"type":"rosters","version":"0.2","teams":{"A":{"name":"A","persons":[]}}}')

        assert rosters.version == "0.2"

    def test_malformed(self):
        """Test input that is not JSON."""
        with pytest.raises(MalformedInput):
            parse_roster('{"type": "rosters", "teams": ')

    def test_missing_teams(self):
        """Test a missing required field."""
        with pytest.raises(SchemaViolation) as excinfo:
            parse_roster('{"type":"rosters"}')

        assert excinfo.value.location == ("teams",)

    def test_original_error_chained(self):
        """Test the pydantic error stays attached for diagnosis."""
        with pytest.raises(UnexpectedField) as excinfo:
            parse_roster('{"type":"rosters","teams":{},"venue":{}}')

        assert excinfo.value.__cause__ is not None
        assert excinfo.value.errors[0]["type"] == "extra_forbidden"

    def test_round_trip(self, rosters_path):
        """Test a roster survives dump and load."""
        rosters = parse_roster(rosters_path.read_text())

        assert parse_roster(dumps(rosters)) == rosters

    def test_new_roster_loads(self):
        """Test a programmatically built roster passes validation."""
        rosters = Rosters.new({"Home": Team(name="Home", persons=[])})
        stream = io.StringIO()
        dump(rosters, stream)

        assert load_roster(io.StringIO(stream.getvalue())) == rosters


class TestLoadDocument:
    """Tests for load_document."""

    def test_game_fixture(self, game_path):
        """Test loading a full game."""
        with game_path.open("rb") as stream:
            game = load_document(stream)

        assert game.objecttype == ObjectType.GAME
        assert game.host_league == "Rose City Rollers"
        assert game.ruleset.period_count == 2
        assert game.timers.period.duration == 1800
        assert len(game.periods) == 2
        assert [type(entry) for entry in game.periods[0].jams] == [Jam, Timeout, Note, Jam]
        assert game.periods[0].jams[0].events[6].no_skater is False

    def test_unknown_fields_kept(self, game_path):
        """Test unknown top-level keys survive a round-trip."""
        game = parse_document(game_path.read_text())

        assert game.extra_fields == {"scoreboard-layout": "classic"}
        assert parse_document(dumps(game)) == game
        assert "scoreboard-layout" in game.to_wire()

    def test_expected_type(self, game_path):
        """Test the type gate is applied only when asked."""
        with pytest.raises(UnexpectedType):
            parse_document(game_path.read_text(), expected_type=ObjectType.LEAGUE)

        game = parse_document(game_path.read_text(), expected_type=ObjectType.GAME)
        assert isinstance(game, DerbyJSON)

    def test_wrong_version(self):
        """Test the version gate on full documents."""
        with pytest.raises(UnexpectedVersion):
            parse_document('{"type":"league","version":"0.1","teams":{}}')

    def test_unknown_event(self):
        """Test a bad event tag deep in the timeline."""
        data = (
            '{"type":"game","teams":{},"periods":[{"jams":['
            '{"number":1,"events":[{"event":"apex jump","skater":"A"}]}]}]}'
        )

        with pytest.raises(AmbiguousClockEvent) as excinfo:
            parse_document(data)

        assert excinfo.value.location == ("periods", 0, "jams", 0)
        assert excinfo.value.fields == ["events", "number"]
        assert [failure["type"] for failure in excinfo.value.attempts["Jam"]] == ["unrecognized_event_kind"]

    def test_hyphenated_field_by_wire_name_only(self):
        """Test no_skater is not a wire key for an exit box event."""
        data = (
            '{"type":"game","teams":{},"periods":[{"jams":[{"number":1,"events":['
            '{"event":"exit box","skater":"A","no_skater":true},'
            '{"event":"exit box","skater":"A","no-skater":true}]}]}]}'
        )

        events = parse_document(data).periods[0].jams[0].events

        assert events[0].no_skater is None
        assert events[1].no_skater is True

    def test_ruleset_by_wire_names_only(self, game_path):
        """Test ruleset keys spelled like field names do not satisfy the schema."""
        game = parse_document(game_path.read_text())
        wire = game.to_wire()
        wire["ruleset"] = {key.replace("-", "_"): value for key, value in wire["ruleset"].items()}

        with pytest.raises(SchemaViolation) as excinfo:
            parse_document(json.dumps(wire))

        assert excinfo.value.location[0] == "ruleset"

    def test_context_hint(self):
        """Test the timestamp hint reaches the decoder."""
        data = '{"type":"game","teams":{},"periods":[{"timestamp":"30:00","jams":[]}]}'

        game = parse_document(data, context={"timestamp_kinds": ["period"]})

        assert game.periods[0].timestamp.kind.value == "period"
        assert game.to_wire()["periods"][0]["timestamp"] == "30:00"

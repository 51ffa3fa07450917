"""Unit tests for the presentation rules"""

from datetime import datetime, timezone

import pytest

from worldcup.config import FLAG_EXCEPTIONS, STAGE_ORDER
from worldcup.models.match import Country, Match
from worldcup.rules import (
    TEMPLATE_HELPERS,
    Side,
    decorate_match,
    flag_code,
    format_updated,
    is_addressable,
    is_boring_match,
    is_final,
    is_first_stage,
    is_quarter_final,
    is_round_of_sixteen,
    is_semi_final,
    is_tbd,
    is_third_place,
    spoilers_suppressed,
    stage_sections,
)


def make_match(
    id: int = 58,
    stage_name: str = "Quarter-final",
    time: str | None = "full-time",
    home_goals: int = 0,
    away_goals: int = 0,
    home: tuple[str, str] = ("NED", "Netherlands"),
    away: tuple[str, str] = ("ARG", "Argentina"),
) -> Match:
    """Helper function to create a Match with sensible defaults"""
    return Match(
        id=id,
        stage_name=stage_name,
        time=time,
        home_team=Country(country=home[0], name=home[1], goals=home_goals),
        away_team=Country(country=away[0], name=away[1], goals=away_goals),
    )


@pytest.mark.unit
class TestFlagCode:
    """Test flag code derivation"""

    @pytest.mark.parametrize(
        "code,expected",
        [("CRO", "HRV"), ("ENG", "GB-ENG"), ("NED", "NLD"), ("POR", "PRT"), ("SUI", "CHE")],
    )
    def test_exception_table(self, code, expected):
        country = Country(country=code, name="Somewhere")
        assert flag_code(country, Side.HOME) == expected
        assert flag_code(country, Side.AWAY) == expected

    def test_unknown_code_passes_through(self):
        country = Country(country="BRA", name="Brazil")
        assert flag_code(country, Side.HOME) == "BRA"

    def test_home_tbd_gets_fifa_flag(self):
        # Even a code from the exception table loses to the TBD rule
        country = Country(country="CRO", name="To Be Determined")
        assert flag_code(country, Side.HOME) == "FIFA"

    def test_away_tbd_gets_host_flag(self):
        country = Country(country="TBD", name="To Be Determined")
        assert flag_code(country, Side.AWAY) == "Qatar"

    def test_tbd_match_is_case_sensitive(self):
        country = Country(country="TBD", name="to be determined")
        assert flag_code(country, Side.HOME) == "TBD"

    def test_exception_table_is_read_only(self):
        with pytest.raises(TypeError):
            FLAG_EXCEPTIONS["BRA"] = "XXX"  # type: ignore[index]


@pytest.mark.unit
class TestDecorateMatch:
    """Test match decoration"""

    def test_sets_both_flags_and_timestamp(self):
        match = make_match(home=("CRO", "Croatia"), away=("BRA", "Brazil"))
        result = decorate_match(match, "2022-12-09 18:00:00 +03")

        assert result is match
        assert match.home_team.flag == "HRV"
        assert match.away_team.flag == "BRA"
        assert match.updated == "2022-12-09 18:00:00 +03"

    def test_overrides_upstream_flag(self):
        match = make_match(home=("ENG", "England"))
        match.home_team.flag = "ENG"
        decorate_match(match, "")
        assert match.home_team.flag == "GB-ENG"

    def test_both_slots_tbd(self):
        tbd = ("TBD", "To Be Determined")
        match = decorate_match(make_match(home=tbd, away=tbd), "")
        assert match.home_team.flag == "FIFA"
        assert match.away_team.flag == "Qatar"


@pytest.mark.unit
class TestFormatUpdated:
    """Test fetch timestamp formatting"""

    def test_localized_to_qatar(self):
        now = datetime(2022, 12, 18, 15, 0, 0, tzinfo=timezone.utc)
        assert format_updated(now) == "2022-12-18 18:00:00 +03"

    def test_other_zone(self):
        now = datetime(2022, 12, 18, 15, 0, 0, tzinfo=timezone.utc)
        assert format_updated(now, timezone="UTC") == "2022-12-18 15:00:00 UTC"

    def test_defaults_to_now(self):
        assert format_updated().endswith("+03")


@pytest.mark.unit
class TestIsTBD:
    """Test TBD display names"""

    @pytest.mark.parametrize(
        "code,name,expected",
        [
            ("TBD", "To Be Determined", "TBD"),
            ("W57", "To Be Determined", "W57"),
            ("NED", "Netherlands", "Netherlands"),
            ("XYZ", "", ""),
            ("TBD", "TO BE DETERMINED", "TO BE DETERMINED"),
        ],
    )
    def test_is_tbd(self, code, name, expected):
        assert is_tbd(Country(country=code, name=name)) == expected


@pytest.mark.unit
class TestIsBoringMatch:
    """Test boring match detection"""

    def test_goalless_full_time_is_boring(self):
        assert is_boring_match(make_match(time="full-time")) is True

    @pytest.mark.parametrize("home,away", [(1, 0), (0, 1), (2, 2)])
    def test_goals_are_never_boring(self, home, away):
        match = make_match(time="full-time", home_goals=home, away_goals=away)
        assert is_boring_match(match) is False

    @pytest.mark.parametrize("status", ["in progress", "half-time", "67'", "Full-Time", ""])
    def test_unfinished_goalless_is_not_boring(self, status):
        assert is_boring_match(make_match(time=status)) is False

    def test_not_started_is_not_boring(self):
        assert is_boring_match(make_match(time=None)) is False


@pytest.mark.unit
class TestStagePredicates:
    """Test exact stage matching"""

    @pytest.mark.parametrize(
        "predicate,stage",
        [
            (is_first_stage, "First stage"),
            (is_round_of_sixteen, "Round of 16"),
            (is_quarter_final, "Quarter-final"),
            (is_semi_final, "Semi-final"),
            (is_third_place, "Play-off for third place"),
            (is_final, "Final"),
        ],
    )
    def test_exact_label(self, predicate, stage):
        assert predicate(make_match(stage_name=stage)) is True

    def test_only_one_predicate_matches(self):
        match = make_match(stage_name="Semi-final")
        predicates = [
            is_first_stage,
            is_round_of_sixteen,
            is_quarter_final,
            is_semi_final,
            is_third_place,
            is_final,
        ]
        assert [p(match) for p in predicates].count(True) == 1

    @pytest.mark.parametrize("stage", ["final", "FINAL", "Final ", "Grand Final"])
    def test_no_fuzzy_matching(self, stage):
        assert is_final(make_match(stage_name=stage)) is False

    def test_helpers_exposed_to_templates(self):
        assert TEMPLATE_HELPERS["is_final"] is is_final
        assert TEMPLATE_HELPERS["is_tbd"] is is_tbd
        assert TEMPLATE_HELPERS["is_boring_match"] is is_boring_match


@pytest.mark.unit
class TestRequestRules:
    """Test addressability and spoiler suppression"""

    @pytest.mark.parametrize("match_id,expected", [(1, False), (48, False), (49, True), (64, True), (65, False)])
    def test_is_addressable(self, match_id, expected):
        assert is_addressable(make_match(id=match_id)) is expected

    def test_spoiler_key_presence_is_enough(self):
        assert spoilers_suppressed({"boring": ""}) is True
        assert spoilers_suppressed({"boring": "no"}) is True

    def test_no_spoiler_key(self):
        assert spoilers_suppressed({}) is False
        assert spoilers_suppressed({"Boring": "1"}) is False


@pytest.mark.unit
class TestStageSections:
    """Test list view grouping"""

    def test_bracket_order_and_upstream_order_within_stage(self):
        matches = [
            make_match(id=64, stage_name="Final"),
            make_match(id=50, stage_name="Round of 16"),
            make_match(id=1, stage_name="First stage"),
            make_match(id=49, stage_name="Round of 16"),
        ]

        sections = stage_sections(matches)

        assert [stage for stage, _ in sections] == ["First stage", "Round of 16", "Final"]
        assert [m.id for m in sections[1][1]] == [50, 49]

    def test_unknown_stage_goes_last(self):
        matches = [
            make_match(id=99, stage_name="Exhibition"),
            make_match(id=64, stage_name="Final"),
        ]
        assert [stage for stage, _ in stage_sections(matches)] == ["Final", "Exhibition"]

    def test_empty(self):
        assert stage_sections([]) == []

    def test_stage_order_covers_all_knockout_rounds(self):
        assert STAGE_ORDER[-1] == "Final"
        assert len(STAGE_ORDER) == 6

import pytest

from brawl.logic.enums import OfferResult
from brawl.server.rolls import feed_lines, parse_roll_line


class TestParseRollLine:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Random! Na'talee Riverspear rolls a 512.", ("Na'talee Riverspear", 512)),
            ("Random! You roll a 7.", ("You", 7)),
            ("Random! Bob JonesGilgamesh rolls a 0.", ("Bob JonesGilgamesh", 0)),
            ("  Random! Alice rolls a 99.\n", ("Alice", 99)),
        ],
    )
    def test_parses_roll_lines(self, text, expected):
        assert parse_roll_line(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "Alice: hello there",
            "Random! Alice rolls a lot.",
            "Random! Alice rolls a 99",
            "Alice rolls a 99.",
        ],
    )
    def test_ignores_other_text(self, text):
        assert parse_roll_line(text) is None


class TestFeedLines:
    def test_counts_outcomes(self, session):
        session.configure_solo("Alice Smith", "Bob Jones")
        lines = [
            "Alice Smith: good luck",
            "Random! Alice Smith rolls a 60.",
            "Random! Alice Smith rolls a 90.",
            "Random! Carol Day rolls a 10.",
            "",
            "Random! Bob JonesGilgamesh rolls a 40.",
        ]

        outcomes = feed_lines(session, lines)

        assert outcomes[OfferResult.ACCEPTED] == 2
        assert outcomes[OfferResult.DUPLICATE] == 1
        assert outcomes[OfferResult.NOT_RECOGNIZED] == 1
        (record,) = session.rounds
        assert record.damage_dealt == 20

    def test_unconfigured_match_ignores_rolls(self, session):
        outcomes = feed_lines(session, ["Random! Alice rolls a 5."])

        assert outcomes == {OfferResult.MATCH_NOT_ACTIVE: 1}

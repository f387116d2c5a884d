import pytest

from brawl.logic.enums import MatchMode, Side
from brawl.logic.roster import SoloRoster, TagRoster
from brawl.logic.settings import BLACK_TEAM_NAME, BLUE_TEAM_NAME, SOLO_ROUNDS, TAG_ROUNDS


class TestSoloRoster:
    def test_membership(self):
        roster = SoloRoster(black="alice", blue="bob")
        assert roster.membership("alice") is Side.BLACK
        assert roster.membership("bob") is Side.BLUE
        assert roster.membership("carol") is None

    def test_empty_identity_is_never_a_member(self):
        roster = SoloRoster(black="alice", blue="")
        assert roster.membership("") is None

    def test_expects_one_roll_per_side(self):
        assert SoloRoster(black="alice", blue="bob").expected_counts() == {Side.BLACK: 1, Side.BLUE: 1}

    def test_side_names_are_identities(self):
        roster = SoloRoster(black="alice", blue="bob")
        assert roster.side_name(Side.BLACK) == "alice"
        assert roster.side_name(Side.BLUE) == "bob"

    def test_mode_and_rounds(self):
        roster = SoloRoster(black="alice", blue="bob")
        assert roster.mode is MatchMode.SOLO
        assert roster.rounds_to_play == SOLO_ROUNDS == 8

    def test_ready_only_with_both_names(self):
        assert SoloRoster(black="alice", blue="bob").is_ready
        assert not SoloRoster(black="alice", blue="").is_ready

    def test_same_player_on_both_sides_rejected(self):
        with pytest.raises(ValueError, match="both sides"):
            SoloRoster(black="alice", blue="alice")


class TestTagRoster:
    def test_membership(self):
        roster = TagRoster(black=("a1", "a2"), blue=("b1",))
        assert roster.membership("a2") is Side.BLACK
        assert roster.membership("b1") is Side.BLUE
        assert roster.membership("c1") is None

    def test_expects_full_roster_from_each_side(self):
        roster = TagRoster(black=("a1", "a2", "a3"), blue=("b1", "b2"))
        assert roster.expected_counts() == {Side.BLACK: 3, Side.BLUE: 2}

    def test_team_side_names(self):
        roster = TagRoster(black=("a1",), blue=("b1",))
        assert roster.side_name(Side.BLACK) == BLACK_TEAM_NAME
        assert roster.side_name(Side.BLUE) == BLUE_TEAM_NAME

    def test_mode_and_rounds(self):
        roster = TagRoster(black=("a1",), blue=("b1",))
        assert roster.mode is MatchMode.TAG
        assert roster.rounds_to_play == TAG_ROUNDS == 6

    def test_from_identities_drops_empty_and_repeated_entries(self):
        roster = TagRoster.from_identities(["a1", "", "a2", "a1"], ["b1"])
        assert roster.black == ("a1", "a2")

    def test_overlapping_rosters_rejected(self):
        with pytest.raises(ValueError, match="both sides"):
            TagRoster(black=("a1", "x"), blue=("x", "b1"))

    def test_empty_team_is_not_ready(self):
        assert not TagRoster(black=("a1",), blue=()).is_ready

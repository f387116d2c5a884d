from brawl.logic.aggregator import RollAggregator
from brawl.logic.enums import OfferResult, Side
from brawl.logic.roster import SoloRoster, TagRoster


class TestSoloAggregation:
    def test_accepts_rostered_identity(self):
        aggregator = RollAggregator(SoloRoster(black="alice", blue="bob"))

        assert aggregator.offer("alice", 50) is OfferResult.ACCEPTED

        (entry,) = aggregator.pending()
        assert (entry.identity, entry.roll, entry.side) == ("alice", 50, Side.BLACK)

    def test_rejects_unknown_identity(self):
        aggregator = RollAggregator(SoloRoster(black="alice", blue="bob"))

        assert aggregator.offer("carol", 99) is OfferResult.NOT_RECOGNIZED
        assert aggregator.pending() == ()

    def test_duplicate_keeps_first_roll(self):
        aggregator = RollAggregator(SoloRoster(black="alice", blue="bob"))
        aggregator.offer("alice", 50)

        assert aggregator.offer("alice", 999) is OfferResult.DUPLICATE

        (entry,) = aggregator.pending()
        assert entry.roll == 50

    def test_complete_with_one_roll_per_side(self):
        aggregator = RollAggregator(SoloRoster(black="alice", blue="bob"))
        aggregator.offer("alice", 50)
        assert not aggregator.is_complete

        aggregator.offer("bob", 80)
        assert aggregator.is_complete

    def test_clear_empties_buffer(self):
        aggregator = RollAggregator(SoloRoster(black="alice", blue="bob"))
        aggregator.offer("alice", 50)

        aggregator.clear()

        assert len(aggregator) == 0
        assert aggregator.offer("alice", 60) is OfferResult.ACCEPTED


class TestTagAggregation:
    def test_partial_team_never_completes(self):
        aggregator = RollAggregator(TagRoster(black=("a1", "a2", "a3"), blue=("b1", "b2", "b3")))
        for identity in ("a1", "a2", "b1", "b2", "b3"):
            aggregator.offer(identity, 10)

        assert not aggregator.is_complete
        assert aggregator.counts() == {Side.BLACK: 2, Side.BLUE: 3}

    def test_completes_when_every_member_rolled(self):
        aggregator = RollAggregator(TagRoster(black=("a1", "a2"), blue=("b1",)))
        for identity in ("b1", "a2", "a1"):
            aggregator.offer(identity, 10)

        assert aggregator.is_complete

    def test_pending_keeps_arrival_order(self):
        aggregator = RollAggregator(TagRoster(black=("a1", "a2"), blue=("b1",)))
        for identity in ("b1", "a2", "a1"):
            aggregator.offer(identity, 10)

        assert [entry.identity for entry in aggregator.pending()] == ["b1", "a2", "a1"]

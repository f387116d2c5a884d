from brawl.session.match import Session


def play_solo_rounds(session: Session, black: str, blue: str, rolls: list[tuple[int, int]]) -> None:
    """Feed (black_roll, blue_roll) pairs, one pair per round."""
    for black_roll, blue_roll in rolls:
        session.ingest(black, black_roll)
        session.ingest(blue, blue_roll)

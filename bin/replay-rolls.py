"""Replay a chat log of dice rolls through a brawl match.

Reads "Random! <name> rolls a <n>." lines from a text file, feeds them to a
freshly configured match, and prints the rounds and the result. Finished
matches are appended to the history file from BRAWL_HISTORY_FILE.

Usage:
    uv run python bin/replay-rolls.py chat.txt --black "Alice Smith" --blue "Bob Jones"
    uv run python bin/replay-rolls.py chat.txt --black "A One" "A Two" --blue "B One" "B Two"
    uv run python bin/replay-rolls.py chat.txt --black Alice --blue Bob --you Alice
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from brawl.logic.exceptions import HistorySaveError
from brawl.server.app import create_session
from brawl.server.rolls import feed_lines
from brawl.server.settings import BrawlSettings
from brawl.session.announce import round_line, status_line, winner_announcement
from shared.logging import setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay dice-roll chat lines through a brawl match")
    parser.add_argument("chat_log", type=Path, help="text file with one chat line per line")
    parser.add_argument("--black", nargs="+", required=True, help="black side player name(s)")
    parser.add_argument("--blue", nargs="+", required=True, help="blue side player name(s)")
    parser.add_argument("--tag", action="store_true", help="play a Tag match even with one player per side")
    parser.add_argument("--you", default=None, help="name to use for rolls reported as 'You'")
    args = parser.parse_args()

    if not args.chat_log.exists():
        print(f"Chat log not found: {args.chat_log}", file=sys.stderr)
        sys.exit(1)

    settings = BrawlSettings()
    if args.you is not None:
        settings = settings.model_copy(update={"observer_name": args.you})
    setup_logging(log_dir=settings.log_dir)

    session = create_session(settings)
    try:
        if args.tag or len(args.black) > 1 or len(args.blue) > 1:
            session.configure_teams(args.black, args.blue)
        else:
            session.configure_solo(args.black[0], args.blue[0])
    except ValueError as exc:
        print(f"Invalid rosters: {exc}", file=sys.stderr)
        sys.exit(1)

    lines = args.chat_log.read_text(encoding="utf-8").splitlines()
    try:
        outcomes = feed_lines(session, lines)
    except HistorySaveError as exc:
        print(f"Match finished but history was not saved: {exc}", file=sys.stderr)
        outcomes = None

    snapshot = session.snapshot()
    print(status_line(snapshot))
    for record in snapshot.rounds:
        print(f"  {round_line(record, session.display_name)}")
    print(f"{session.display_name(snapshot.black_name)}: {snapshot.black_total} total damage")
    print(f"{session.display_name(snapshot.blue_name)}: {snapshot.blue_total} total damage")
    print(f"Winner: {session.display_name(session.winner())}")
    announcement = winner_announcement(snapshot, session.display_name)
    if announcement is not None:
        print(announcement)
    if outcomes is not None:
        summary = ", ".join(f"{result.value}={count}" for result, count in sorted(outcomes.items()))
        print(f"Roll lines: {summary or 'none'}")


if __name__ == "__main__":
    main()

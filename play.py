"""
Command-line Codenames board.

Every invocation reloads the saved game (like reopening the page), applies one
action and saves again.

Examples:
    python play.py new --start blue --teams 2
    python play.py reveal 7
    python play.py reveal lantern
    python play.py pass
    python play.py share --base-url https://example.org/board
    python play.py leader "https://example.org/board?key=..."
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence
import argparse
import logging
import sys

from core.config import STORAGE_FILE_NAME, GameConfig, default_data_dir
from core.errors import GameDataError, NoActiveGame
from core.game_state import GamePhase, GameState
from core.preferences import clear_all_game_data, load_rule_preference, save_rule_preference
from core.snapshot import build_share_link, extract_token
from core.team_color import TeamColor
from ui.observers import ConsoleObserver
from utils.storage import FileStore
from utils.wordlist import DEFAULT_DICTIONARY, load_dictionary

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a Codenames board from the terminal.")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Directory for saved state (default: $CODENAMES_BOARD_DATA_DIR or ~/.codenames_board)")
    parser.add_argument("--dictionary", type=Path, default=None,
                        help="Word dictionary (.json list of {id, word} or one word per line)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for new boards")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    new = sub.add_parser("new", help="Start a new game")
    new.add_argument("--start", choices=["blue", "red", "green"], default="blue", help="Starting team")
    new.add_argument("--teams", type=int, choices=[2, 3], default=2, help="Number of teams")
    new.add_argument("--pass-on-miss", action=argparse.BooleanOptionalAction, default=None,
                     help="Pass the turn when a team reveals another colour (default: saved preference)")

    reveal = sub.add_parser("reveal", help="Reveal a card by position or word")
    reveal.add_argument("card", help="Board position (0-24) or word")

    sub.add_parser("pass", help="Pass the turn to the next team")
    sub.add_parser("show", help="Show the current board")
    sub.add_parser("key", help="Print the secret key grid")

    share = sub.add_parser("share", help="Print a link for the spy leader")
    share.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Address of the leader view")

    leader = sub.add_parser("leader", help="Show the full key from a shared link or token")
    leader.add_argument("token", help="Share link or bare token")

    sub.add_parser("reset", help="Discard the current game")

    rule = sub.add_parser("rule", help="Set the default turn-pass rule for new games")
    rule.add_argument("mode", choices=["pass", "no-pass"])

    sub.add_parser("clear-all", help="Delete the saved game, word history and preferences")
    return parser


def _resolve_card(game: GameState, card: str) -> int:
    if card.isdigit():
        return int(card)
    return game.board.word_view.get_index(card)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    data_dir = args.data_dir or default_data_dir()
    storage = FileStore(data_dir / STORAGE_FILE_NAME)
    console = ConsoleObserver()

    if args.command == "clear-all":
        clear_all_game_data(storage)
        print("All saved data deleted.")
        return 0
    if args.command == "rule":
        save_rule_preference(storage, args.mode == "pass")
        print(f"New games will use: {args.mode}")
        return 0

    try:
        dictionary = load_dictionary(args.dictionary) if args.dictionary else DEFAULT_DICTIONARY
        game = GameState(dictionary, storage, seed=args.seed)
    except (OSError, ValueError) as exc:
        print(f"Cannot use dictionary: {exc}", file=sys.stderr)
        return 2

    if args.command == "leader":
        try:
            view = game.store.import_token(extract_token(args.token))
        except GameDataError as exc:
            logger.debug(f"Token rejected: {exc}")
            print("Could not load the key: the link is not valid.", file=sys.stderr)
            return 1
        console.on_leader_view(view)
        return 0

    if args.command == "new":
        pass_on_miss = args.pass_on_miss
        if pass_on_miss is None:
            pass_on_miss = load_rule_preference(storage)
        config = GameConfig(team_count=args.teams, turn_pass_on_miss=pass_on_miss)
        game.observers.append(console)
        try:
            game.start_new_game(TeamColor.from_name(args.start), config)
        except ValueError as exc:
            print(f"Cannot start game: {exc}", file=sys.stderr)
            return 2
        return 0

    loaded = game.load_saved_game()
    if args.command == "reset":
        game.reset()
        print("Game discarded.")
        return 0
    if not loaded:
        print("No game in progress. Start one with: play.py new", file=sys.stderr)
        return 1

    if args.command == "share":
        try:
            token = game.store.read_token()
        except NoActiveGame as exc:
            print(f"{exc}.", file=sys.stderr)
            return 1
        print(build_share_link(args.base_url, token))
        return 0
    if args.command == "key":
        print(game.key_grid())
        return 0

    game.observers.append(console)
    if args.command == "show":
        console.on_scores(game.remaining_counts(), game.team_count)
        console.on_turn(game.current_team, game.finished, game.end_message)
        console.on_board(game.cards(), game.finished)
    elif args.command == "pass":
        game.pass_turn()
    elif args.command == "reveal":
        try:
            index = _resolve_card(game, args.card)
            result = game.reveal_card(index)
        except (ValueError, IndexError) as exc:
            print(f"Cannot reveal {args.card!r}: {exc}", file=sys.stderr)
            return 2
        if not result.applied:
            print("Nothing to reveal: card already revealed or game over.", file=sys.stderr)

    if game.phase == GamePhase.FINISHED:
        print("The game is over. Start a new one with: play.py new")
    return 0


if __name__ == "__main__":
    sys.exit(main())

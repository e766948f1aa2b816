#!/usr/bin/env python3
"""
Gomoku move engine - command line entry point.

    python main.py move BOARD_FILE --color black [--suggest H8] [--json]
    python main.py selfplay [--max-moves 225]
"""

import argparse
import json
import logging
import sys

from gomoku.game.board import Board, BLACK, WHITE
from gomoku.game.rules import Rules, GameStatus
from gomoku.ai.engine import AIEngine, NoLegalMoveError
from gomoku.ai.heuristic import Heuristic
from gomoku.ai.suggestion import parse_suggestion, format_move

COLORS = {'black': BLACK, 'white': WHITE}
COLOR_NAMES = {BLACK: 'Black', WHITE: 'White'}


class SelfPlayGame:
    """Engine vs engine from an empty board."""

    def __init__(self, engine: AIEngine, max_moves: int = 225):
        self.engine = engine
        self.max_moves = max_moves
        self.board = Board()
        self.current_turn = BLACK
        self.move_count = 0

    def run(self) -> GameStatus:
        """Play until someone wins, the board fills, or max_moves is reached."""
        status = Rules.game_status(self.board)
        while status == GameStatus.PLAYING and self.move_count < self.max_moves:
            decision = self.engine.get_move(self.board, self.current_turn)
            self.board.place_stone(decision.row, decision.col, self.current_turn)
            self.move_count += 1

            detail = decision.reason.value if decision.is_forced else f'{decision.score:.1f}'
            print(f'{self.move_count:3d}. {COLOR_NAMES[self.current_turn]:5s} '
                  f'{format_move(decision.row, decision.col):4s} ({detail})')

            self.current_turn = Rules.opposite(self.current_turn)
            status = Rules.game_status(self.board)

        print()
        print(self.board)
        print()
        line = Rules.find_five_line(self.board)
        if line:
            color, positions = line
            cells = ' '.join(format_move(r, c) for r, c in positions)
            print(f'{COLOR_NAMES[color]} wins: {cells}')
        else:
            print(f'Result: {status.value}')
        return status


def read_board(path: str) -> Board:
    """Read a board from a file, or stdin when path is '-'."""
    if path == '-':
        return Board.from_text(sys.stdin.read())
    with open(path, encoding='utf-8') as f:
        return Board.from_text(f.read())


def run_move(args) -> int:
    board = read_board(args.board)
    color = COLORS[args.color]

    suggestion = None
    if args.suggest:
        suggestion = parse_suggestion(args.suggest)
        if suggestion is None:
            logging.getLogger(__name__).warning(
                "Ignoring unparseable suggestion %r", args.suggest
            )

    engine = AIEngine(attack_weight=args.attack_weight,
                      accept_ratio=args.accept_ratio)
    decision = engine.get_move(board, color, suggestion=suggestion)

    if args.json:
        print(json.dumps(decision.to_dict()))
    else:
        detail = (decision.reason.value if decision.is_forced
                  else f'score {decision.score:.1f}')
        print(f'{format_move(decision.row, decision.col)} '
              f'(row {decision.row}, col {decision.col}) - {detail}')
    return 0


def run_selfplay(args) -> int:
    engine = AIEngine(attack_weight=args.attack_weight,
                      accept_ratio=args.accept_ratio)
    SelfPlayGame(engine, max_moves=args.max_moves).run()
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Gomoku move-selection engine")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Log engine decisions")
    ap.add_argument("--attack-weight", type=float, default=Heuristic.ATTACK_WEIGHT,
                    help="Weight of our own placement score (default: 1.1)")
    ap.add_argument("--accept-ratio", type=float, default=AIEngine.SUGGESTION_ACCEPT_RATIO,
                    help="Share of the best score a suggestion must reach (default: 0.8)")
    sub = ap.add_subparsers(dest="mode", required=True)

    ap_move = sub.add_parser("move", help="Pick a move for a board file")
    ap_move.add_argument("board", help="Board file ('-' for stdin)")
    ap_move.add_argument("--color", choices=sorted(COLORS), required=True,
                         help="Side to move")
    ap_move.add_argument("--suggest", help="Advisory move such as H8")
    ap_move.add_argument("--json", action="store_true",
                         help="Print the decision as JSON")

    ap_self = sub.add_parser("selfplay", help="Let the engine play itself")
    ap_self.add_argument("--max-moves", type=int, default=225)

    return ap


def main(argv=None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.mode == "move":
            return run_move(args)
        return run_selfplay(args)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 0
    except (ValueError, OSError, NoLegalMoveError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

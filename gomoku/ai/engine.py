"""
AI Engine for Gomoku.
Picks a move with a single-ply heuristic guarded by forced-move detection.

Pipeline:
- Critical move tiers (win, block win, open four, block open four)
- Candidate generation near existing stones
- Pattern scoring: attack value plus denial value
- Optional blending with an external suggestion
"""

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Optional

from ..game.board import Board, CENTER
from .heuristic import Heuristic
from .movegen import MoveGenerator
from .suggestion import SuggestionClient, format_move
from .threats import CriticalReason, find_critical_move

logger = logging.getLogger(__name__)


class NoLegalMoveError(Exception):
    """Raised when the board has no empty cell left."""


@dataclass
class AIDebugInfo:
    """Debug information from the last decision."""
    thinking_time: float = 0.0
    best_move: Optional[tuple] = None
    best_score: Optional[float] = None
    reason: Optional[CriticalReason] = None
    candidates_evaluated: int = 0
    top_moves: list = field(default_factory=list)
    suggestion: Optional[tuple] = None
    suggestion_score: Optional[int] = None
    suggestion_used: bool = False


@dataclass(frozen=True)
class Decision:
    """
    The chosen move.

    reason is set for forced moves; score is set on the heuristic path
    (combined score, or the accepted suggestion's own score).
    """
    row: int
    col: int
    reason: Optional[CriticalReason] = None
    score: Optional[float] = None
    suggestion: Optional[tuple] = None
    suggestion_used: bool = False
    source: str = "rule-engine"

    @property
    def move(self) -> tuple:
        return (self.row, self.col)

    @property
    def is_forced(self) -> bool:
        return self.reason is not None

    def to_dict(self) -> dict:
        """JSON-ready payload: row, col and a debug block."""
        debug = {'source': self.source}
        if self.is_forced:
            debug['reason'] = self.reason.value
        else:
            debug['score'] = self.score
            debug['llmSuggestion'] = (
                {'row': self.suggestion[0], 'col': self.suggestion[1]}
                if self.suggestion else None
            )
        return {'row': self.row, 'col': self.col, 'debug': debug}


class AIEngine:
    """
    Gomoku AI using forced-move tiers and a pattern heuristic.

    Stateless between calls apart from the debug info of the last decision.
    The board passed in is only touched by paired place/remove brackets and
    is unchanged when a call returns.
    """

    # Accept a suggestion scoring at least this share of the heuristic best
    SUGGESTION_ACCEPT_RATIO = 0.8

    # Entries kept in debug_info.top_moves
    TOP_MOVES = 5

    def __init__(self, attack_weight: float = Heuristic.ATTACK_WEIGHT,
                 defense_weight: float = Heuristic.DEFENSE_WEIGHT,
                 accept_ratio: float = SUGGESTION_ACCEPT_RATIO,
                 radius: int = MoveGenerator.RADIUS):
        self.heuristic = Heuristic(attack_weight, defense_weight)
        self.move_gen = MoveGenerator(self.heuristic, radius)
        self.accept_ratio = accept_ratio

        # Debug info
        self.debug_info = AIDebugInfo()

    def set_weights(self, attack_weight: float = None,
                    defense_weight: float = None,
                    accept_ratio: float = None):
        """Retune scoring weights and the suggestion threshold."""
        if attack_weight is not None:
            self.heuristic.attack_weight = attack_weight
        if defense_weight is not None:
            self.heuristic.defense_weight = defense_weight
        if accept_ratio is not None:
            self.accept_ratio = accept_ratio

    def get_move(self, board, color: int, suggestion: Optional[tuple] = None,
                 advisor: Optional[SuggestionClient] = None) -> Decision:
        """
        Get the move to play for the given position.

        Args:
            board: Board, or a 15x15 grid accepted by Board.from_grid
            color: Color to play
            suggestion: Optional advisory (row, col)
            advisor: Asked for a suggestion when none is given; only
                consulted on the heuristic path, after the heuristic move
                has been computed

        Returns:
            Decision for the chosen move

        Raises:
            NoLegalMoveError: the board is full
        """
        if not isinstance(board, Board):
            board = Board.from_grid(board)

        start_time = time.time()
        decision = self.select_move(board, color)

        if decision.is_forced:
            if suggestion is not None:
                logger.debug("Ignoring suggestion %s: forced move", suggestion)
            return decision

        if suggestion is None and advisor is not None:
            suggestion = advisor.suggest(board, color)

        decision = self.blend(decision, suggestion, board, color)
        self.debug_info.thinking_time = time.time() - start_time
        return decision

    def select_move(self, board: Board, color: int) -> Decision:
        """
        Pick the best move without any external suggestion.

        Forced moves come first and skip scoring entirely. Otherwise every
        candidate is scored and the strictly greatest combined score wins,
        the earliest candidate keeping ties.
        """
        start_time = time.time()
        self.debug_info = AIDebugInfo()

        if board.is_full():
            raise NoLegalMoveError("No valid moves available")

        # ==================== FORCED MOVE CHECK ====================
        critical = find_critical_move(board, color)
        if critical is not None:
            logger.info("Critical move found: %s at %s",
                        critical.reason.value, format_move(critical.row, critical.col))
            self.debug_info.thinking_time = time.time() - start_time
            self.debug_info.best_move = critical.move
            self.debug_info.reason = critical.reason
            return Decision(critical.row, critical.col, reason=critical.reason)

        # ==================== HEURISTIC SCORING ====================
        candidates = self.move_gen.generate_candidates(board)
        if not candidates:
            # Unreachable on a non-full board; keep a legal fallback anyway
            candidates = [CENTER] if board.is_empty(*CENTER) else board.empty_cells()[:1]

        scored = self.move_gen.score_candidates(board, color, candidates)

        best_score, best_move = scored[0]
        for score, move in scored[1:]:
            if score > best_score:
                best_score, best_move = score, move

        logger.debug("Heuristic best %s score=%.1f (%d candidates)",
                     format_move(*best_move), best_score, len(scored))

        self.debug_info.thinking_time = time.time() - start_time
        self.debug_info.best_move = best_move
        self.debug_info.best_score = best_score
        self.debug_info.candidates_evaluated = len(scored)
        self.debug_info.top_moves = sorted(
            scored, key=lambda x: x[0], reverse=True
        )[:self.TOP_MOVES]

        return Decision(best_move[0], best_move[1], score=best_score)

    def blend(self, decision: Decision, suggested: Optional[tuple],
              board: Board, color: int) -> Decision:
        """
        Swap in an external suggestion when it is good enough.

        The suggestion is used only if its cell is empty and its own
        placement score reaches accept_ratio of the heuristic score. Forced
        moves are never replaced.
        """
        if suggested is None or decision.is_forced:
            return decision

        self.debug_info.suggestion = suggested
        result = replace(decision, suggestion=suggested)

        row, col = suggested
        if not board.is_empty(row, col):
            logger.info("Suggestion %s rejected: cell not playable", suggested)
            return result

        suggested_score = self.heuristic.score_placement(board, row, col, color)
        self.debug_info.suggestion_score = suggested_score

        threshold = (decision.score or 0) * self.accept_ratio
        if suggested_score >= threshold:
            logger.info("Using suggestion %s (score %d >= %.1f)",
                        format_move(row, col), suggested_score, threshold)
            self.debug_info.suggestion_used = True
            self.debug_info.best_move = suggested
            self.debug_info.best_score = suggested_score
            return replace(result, row=row, col=col, score=suggested_score,
                           suggestion_used=True)

        logger.info("Suggestion %s scored %d below %.1f, keeping %s",
                    format_move(row, col), suggested_score, threshold,
                    format_move(decision.row, decision.col))
        return result

    def get_debug_info(self) -> dict:
        """Get debug information as dictionary."""
        return {
            'thinking_time': self.debug_info.thinking_time,
            'best_move': self.debug_info.best_move,
            'best_score': self.debug_info.best_score,
            'reason': self.debug_info.reason.value if self.debug_info.reason else None,
            'candidates_evaluated': self.debug_info.candidates_evaluated,
            'top_moves': self.debug_info.top_moves,
            'suggestion': self.debug_info.suggestion,
            'suggestion_score': self.debug_info.suggestion_score,
            'suggestion_used': self.debug_info.suggestion_used,
        }

from .engine import AIEngine, Decision, NoLegalMoveError
from .threats import CriticalReason, CriticalMove, find_critical_move
from .suggestion import SuggestionClient, parse_suggestion, format_move

__all__ = [
    'AIEngine', 'Decision', 'NoLegalMoveError',
    'CriticalReason', 'CriticalMove', 'find_critical_move',
    'SuggestionClient', 'parse_suggestion', 'format_move',
]

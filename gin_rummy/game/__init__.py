"""Game logic."""

from .analyzer import HandAnalysis, analyze_hand
from .deadwood import card_points, deadwood
from .melds import find_runs, find_sets
from .scoring import RoundOutcome, RoundResult, resolve_knock, score_round
from .turn import TurnEngine, TurnPhase, TurnResult, TurnView, run_turn
from .validator import DrawSource, KnockEligibility, check_knock
from .engine import GameEngine, RoundReport

__all__ = [
    "HandAnalysis",
    "analyze_hand",
    "card_points",
    "deadwood",
    "find_runs",
    "find_sets",
    "RoundOutcome",
    "RoundResult",
    "resolve_knock",
    "score_round",
    "TurnEngine",
    "TurnPhase",
    "TurnResult",
    "TurnView",
    "run_turn",
    "DrawSource",
    "KnockEligibility",
    "check_knock",
    "GameEngine",
    "RoundReport",
]

"""
Scoring Module

Scores a guess about a chess position against the reference engine.

Key Components:
    - PositionContext, Variation, EngineEvaluation, Answer: scorer inputs
    - QuestionResult: the three inputs bundled for one question
    - ScoreBreakdown: the per-signal result and its total
    - ScoringConfig: point table constants
    - score / score_answer: the scorer

Data Flow:
    QuestionResult → score() → ScoreBreakdown
"""

from chess_guess.scoring.config import DEFAULT_CONFIG, ScoringConfig
from chess_guess.scoring.models import (
    Answer,
    EngineEvaluation,
    PositionContext,
    QuestionResult,
    ScoreBreakdown,
    Variation,
)
from chess_guess.scoring.points import (
    best_move_multiplier,
    eval_points,
    found_best_move,
    found_player_or_tournament,
    found_winning_side,
    score,
    score_all,
    score_answer,
    total_points,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ScoringConfig",
    "Answer",
    "EngineEvaluation",
    "PositionContext",
    "QuestionResult",
    "ScoreBreakdown",
    "Variation",
    "best_move_multiplier",
    "eval_points",
    "found_best_move",
    "found_player_or_tournament",
    "found_winning_side",
    "score",
    "score_all",
    "score_answer",
    "total_points",
]

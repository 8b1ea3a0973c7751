"""
Answer Scoring

Scores one guess about a position against the engine's ranked variations.

Point table (default ScoringConfig):

    1. 20 points if the guess favors the same side as the engine.
       Either evaluation being exactly 0 never counts as a match.

    2. Eval points = -16 * |guess - actual| + 50

       difference   0    0.5   1    2    3    4     5     10
       points      50    42   34   18    2   -14   -30  -110

    3. Naming a reported move multiplies the eval points by
       max(-0.75 * |move_eval - best_eval| + 3, 1)

       gap          0     1     2     8/3 or more
       multiplier  x3.0  x2.25 x1.5  x1.0

       Negative eval points are multiplied too.

    4. 10 points if any guessed word is a word of a player name or
       of the tournament.

Every function here is pure: inputs are never modified and repeated calls
with the same inputs return the same result.
"""

import logging
from typing import Iterable, List, Optional, Set

from chess_guess.scoring.config import DEFAULT_CONFIG, ScoringConfig
from chess_guess.scoring.models import (
    Answer,
    EngineEvaluation,
    PositionContext,
    QuestionResult,
    ScoreBreakdown,
    Variation,
)

logger = logging.getLogger(__name__)


def found_winning_side(guess: float, actual: float) -> bool:
    """
    Check whether the guess favors the same side as the engine.

    Args:
        guess: Guessed evaluation
        actual: Engine's top evaluation

    Returns:
        True if both evaluations are non-zero and share a sign
    """
    return guess * actual > 0


def eval_points(guess: float, actual: float, config: Optional[ScoringConfig] = None) -> float:
    """
    Points for the evaluation guess.

    Linear in the absolute error, with no floor: large errors score
    negative.

    Args:
        guess: Guessed evaluation
        actual: Engine's top evaluation
        config: Point table (None = defaults)

    Returns:
        Eval points
    """
    config = config or DEFAULT_CONFIG
    return -config.eval_slope * abs(guess - actual) + config.eval_base


def find_guessed_move(
    engine_evaluation: EngineEvaluation, move: str
) -> Optional[Variation]:
    """Return the best-ranked variation playing ``move``, or None."""
    return engine_evaluation.find(move)


def found_best_move(engine_evaluation: EngineEvaluation, move: str) -> bool:
    """True if ``move`` is anywhere in the engine's variations."""
    return find_guessed_move(engine_evaluation, move) is not None


def best_move_multiplier(
    engine_evaluation: EngineEvaluation,
    move: str,
    config: Optional[ScoringConfig] = None,
) -> float:
    """
    Multiplier applied to eval points for the move guess.

    Args:
        engine_evaluation: Ranked engine variations
        move: Guessed move identifier
        config: Point table (None = defaults)

    Returns:
        1 if the move was not reported, otherwise a factor that decays
        linearly from multiplier_max with the gap between the move's
        evaluation and the top evaluation, never below multiplier_floor
    """
    config = config or DEFAULT_CONFIG
    variation = find_guessed_move(engine_evaluation, move)
    if variation is None:
        return 1.0

    gap = abs(variation.evaluation - engine_evaluation.top.evaluation)
    return max(-config.multiplier_slope * gap + config.multiplier_max, config.multiplier_floor)


def context_words(context: PositionContext) -> Set[str]:
    """Whitespace-separated words of both player names and the tournament."""
    words = set()
    for text in (context.white, context.black, context.tournament):
        words.update(text.split())
    return words


def found_player_or_tournament(context: PositionContext, guess: str) -> bool:
    """
    Check whether the guess names a player or the tournament.

    Matching is per word and exact: "Carlsen" matches "Magnus Carlsen",
    "carlsen" and "Carlsen's" do not.

    Args:
        context: Players and tournament of the question
        guess: Free text from the answer

    Returns:
        True if at least one guessed word is a context word
    """
    words = context_words(context)
    return any(word in words for word in guess.split())


def total_points(
    winning_side: bool,
    points: float,
    multiplier: float,
    player_or_tournament: bool,
    config: Optional[ScoringConfig] = None,
) -> float:
    """Combine the individual signals into the question total."""
    config = config or DEFAULT_CONFIG
    return (
        (config.winning_side_points if winning_side else 0.0)
        + points * multiplier
        + (config.player_points if player_or_tournament else 0.0)
    )


def score_answer(
    context: PositionContext,
    engine_evaluation: EngineEvaluation,
    answer: Answer,
    config: Optional[ScoringConfig] = None,
) -> ScoreBreakdown:
    """
    Score one answer.

    Args:
        context: Players and tournament of the question
        engine_evaluation: Ranked engine variations (best first)
        answer: The guess to score
        config: Point table (None = defaults)

    Returns:
        ScoreBreakdown with every signal and the total
    """
    config = config or DEFAULT_CONFIG
    actual = engine_evaluation.top.evaluation

    winning_side = found_winning_side(answer.evaluation, actual)
    points = eval_points(answer.evaluation, actual, config)
    best_move = found_best_move(engine_evaluation, answer.best_move)
    multiplier = best_move_multiplier(engine_evaluation, answer.best_move, config)
    player = found_player_or_tournament(context, answer.player_or_tournament)

    breakdown = ScoreBreakdown(
        found_winning_side=winning_side,
        eval_points=points,
        found_best_move=best_move,
        best_move_multiplier=multiplier,
        found_player_or_tournament=player,
        total=total_points(winning_side, points, multiplier, player, config),
    )
    logger.debug(f"Scored answer {answer} against {engine_evaluation.top}: {breakdown}")
    return breakdown


def score(result: QuestionResult, config: Optional[ScoringConfig] = None) -> ScoreBreakdown:
    """Score a question result (see :func:`score_answer`)."""
    return score_answer(result.context, result.engine_evaluation, result.answer, config)


def score_all(
    results: Iterable[QuestionResult], config: Optional[ScoringConfig] = None
) -> List[ScoreBreakdown]:
    """Score several independent question results, preserving order."""
    return [score(result, config) for result in results]

"""
Conversion of python-chess engine analysis into ranked variations.

The reference engine is run elsewhere (typically Stockfish with MultiPV 3);
this module only reshapes what ``chess.engine`` returns into the
EngineEvaluation the scorer consumes.
"""

import logging
from typing import List, Mapping, Sequence

import chess
import chess.engine

from chess_guess.scoring.models import EngineEvaluation, Variation

logger = logging.getLogger(__name__)

MATE_VALUE = 100.0  # Pawn value reported for forced mates
NOTATIONS = ("san", "uci")


def score_to_pawns(pov_score: chess.engine.PovScore, mate_value: float = MATE_VALUE) -> float:
    """
    Convert an engine score to pawns from White's perspective.

    Mate scores are converted to ±mate_value regardless of the distance
    to mate.

    Args:
        pov_score: Score as reported in an engine info dict
        mate_value: Pawn value used for forced mates

    Returns:
        Evaluation in pawns, positive for White advantage
    """
    white = pov_score.white()
    if white.is_mate():
        return mate_value if white.score(mate_score=100000) > 0 else -mate_value
    return white.score() / 100.0


def format_move(board: chess.Board, move: chess.Move, notation: str = "san") -> str:
    """
    Render a move as an identifier.

    Args:
        board: Position the move is played from
        move: Move to render
        notation: "san" (e.g. "Nf3") or "uci" (e.g. "g1f3")

    Returns:
        Move identifier

    Raises:
        ValueError: If notation is unknown
    """
    if notation == "san":
        return board.san(move)
    if notation == "uci":
        return move.uci()
    raise ValueError(f"Unknown move notation: {notation!r} (expected one of {NOTATIONS})")


def variation_from_info(
    board: chess.Board,
    info: Mapping,
    notation: str = "san",
    mate_value: float = MATE_VALUE,
) -> Variation:
    """
    Build a variation from one engine info dict.

    Args:
        board: Analysed position
        info: chess.engine.InfoDict with "pv" and "score"
        notation: Move notation for the identifier
        mate_value: Pawn value used for forced mates

    Returns:
        Variation for the first move of the principal variation

    Raises:
        ValueError: If the info has no principal variation or score
    """
    pv = info.get("pv")
    pov_score = info.get("score")
    if not pv or pov_score is None:
        raise ValueError("Engine info needs both 'pv' and 'score'")

    return Variation(
        move=format_move(board, pv[0], notation),
        evaluation=score_to_pawns(pov_score, mate_value),
    )


def evaluation_from_analysis(
    board: chess.Board,
    infos: Sequence[Mapping],
    notation: str = "san",
    mate_value: float = MATE_VALUE,
) -> EngineEvaluation:
    """
    Build the ranked engine evaluation from a multipv analysis.

    Info dicts are ordered by their "multipv" rank; infos without a rank
    keep their position in the input. Infos missing a principal variation
    or a score are skipped.

    Args:
        board: Analysed position
        infos: Result of ``engine.analyse(board, limit, multipv=n)``
        notation: Move notation for the identifiers
        mate_value: Pawn value used for forced mates

    Returns:
        EngineEvaluation, best variation first

    Raises:
        ValueError: If no usable variation remains
    """
    if notation not in NOTATIONS:
        raise ValueError(f"Unknown move notation: {notation!r} (expected one of {NOTATIONS})")

    if isinstance(infos, Mapping):
        infos = [infos]

    ranked = sorted(
        enumerate(infos),
        key=lambda item: (item[1].get("multipv", item[0] + 1), item[0]),
    )

    variations: List[Variation] = []
    for index, info in ranked:
        try:
            variations.append(variation_from_info(board, info, notation, mate_value))
        except ValueError as e:
            logger.warning(f"Skipping engine line {index + 1}: {e}")

    if not variations:
        raise ValueError(f"No usable engine lines for position {board.fen()}")

    logger.debug(
        f"Engine evaluation for {board.fen()}: "
        + ", ".join(f"{v.move} {v.evaluation:+.2f}" for v in variations)
    )
    return EngineEvaluation(tuple(variations))

"""
Adapters turning external engine output into scorer inputs.
"""

from chess_guess.data.engine_lines import (
    MATE_VALUE,
    evaluation_from_analysis,
    format_move,
    score_to_pawns,
    variation_from_info,
)

__all__ = [
    "MATE_VALUE",
    "evaluation_from_analysis",
    "format_move",
    "score_to_pawns",
    "variation_from_info",
]

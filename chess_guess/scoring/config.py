"""
Point table configuration for answer scoring.
"""

import math
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ScoringConfig:
    """Constants of the scoring formulas.

    The defaults are the published point table:

        total = winning_side_points * [same winning side]
              + (eval_base - eval_slope * |guess - actual|) * multiplier
              + player_points * [player or tournament named]

        multiplier = max(multiplier_max - multiplier_slope * |move_eval - best_eval|,
                         multiplier_floor)      if the guessed move was reported
                   = 1                          otherwise
    """

    winning_side_points: float = 20.0
    """Awarded when the guess and the engine favor the same side"""

    eval_base: float = 50.0
    """Eval points for an exact evaluation guess"""

    eval_slope: float = 16.0
    """Eval points lost per pawn of evaluation error"""

    multiplier_max: float = 3.0
    """Multiplier when the guessed move evaluates like the best move"""

    multiplier_slope: float = 0.75
    """Multiplier lost per pawn between the guessed and best move"""

    multiplier_floor: float = 1.0
    """Lowest multiplier for a reported move"""

    player_points: float = 10.0
    """Awarded when a player or the tournament is named"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{field.name} must be a finite number, got {value!r}")
            try:
                finite = math.isfinite(value)
            except OverflowError:
                finite = False
            if not finite:
                raise ValueError(f"{field.name} must be a finite number, got {value!r}")

        if self.eval_slope < 0:
            raise ValueError(f"eval_slope must be non-negative, got {self.eval_slope}")

        if self.multiplier_slope < 0:
            raise ValueError(
                f"multiplier_slope must be non-negative, got {self.multiplier_slope}"
            )

        if self.multiplier_max < self.multiplier_floor:
            raise ValueError(
                f"multiplier_max ({self.multiplier_max}) must be at least "
                f"multiplier_floor ({self.multiplier_floor})"
            )


DEFAULT_CONFIG = ScoringConfig()

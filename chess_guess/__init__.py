"""
chess_guess

Scores guesses about a chess position against a reference engine.

## Architecture

1. **scoring**: The scorer and its value objects
   - PositionContext / EngineEvaluation / Answer inputs
   - ScoreBreakdown output (four signals plus total)
   - ScoringConfig point table

2. **data**: Adapters for external collaborators
   - Convert python-chess engine analysis into ranked variations

## Quick Start

```python
from chess_guess.scoring import (
    Answer, EngineEvaluation, PositionContext, QuestionResult, score,
)

result = QuestionResult(
    context=PositionContext("Magnus Carlsen", "Ian Nepomniachtchi", "World Championship 2021"),
    engine_evaluation=EngineEvaluation.from_pairs([("e4", 1.0), ("d4", 0.8)]),
    answer=Answer(evaluation=1.0, best_move="e4", player_or_tournament="Carlsen"),
)
print(score(result).total)  # 180.0
```

### Scoring a JSON file

```bash
python tools/score_answers.py answers.json --output scores.json
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chess_guess.scoring import (
    Answer,
    EngineEvaluation,
    PositionContext,
    QuestionResult,
    ScoreBreakdown,
    ScoringConfig,
    Variation,
    score,
    score_answer,
)

__all__ = [
    "Answer",
    "EngineEvaluation",
    "PositionContext",
    "QuestionResult",
    "ScoreBreakdown",
    "ScoringConfig",
    "Variation",
    "score",
    "score_answer",
]

"""
Value objects consumed and produced by the scorer.

Every object here is a frozen dataclass: the scorer only reads its inputs
and derives new values from them.

Conventions:
    - Evaluations are in pawn units from White's perspective
    - Positive = White advantage, Negative = Black advantage, 0 = balanced
    - Move identifiers are compared by exact text equality
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import chess.pgn


def _check_finite(value: float, name: str) -> float:
    """Coerce a numeric evaluation to float, rejecting NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {value!r}")
    try:
        value = float(value)
    except OverflowError:
        raise ValueError(f"{name} must be finite, got an integer too large for a float")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


def _check_text(value: str, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")


def _header_value(headers: Mapping[str, str], key: str) -> str:
    value = headers.get(key, "")
    return "" if value in (None, "?") else value


@dataclass(frozen=True)
class PositionContext:
    """
    Players and tournament the question position was taken from.

    Attributes:
        white: Name of the White player
        black: Name of the Black player
        tournament: Name of the event
    """

    white: str
    black: str
    tournament: str

    def __post_init__(self):
        _check_text(self.white, "white")
        _check_text(self.black, "black")
        _check_text(self.tournament, "tournament")

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "PositionContext":
        """
        Build a context from PGN game headers.

        Unknown values ("?" in PGN) and missing tags become empty strings.

        Args:
            headers: chess.pgn.Headers or any mapping with White/Black/Event

        Returns:
            PositionContext for the game
        """
        return cls(
            white=_header_value(headers, "White"),
            black=_header_value(headers, "Black"),
            tournament=_header_value(headers, "Event"),
        )

    @classmethod
    def from_game(cls, game: chess.pgn.Game) -> "PositionContext":
        """Build a context from a parsed PGN game."""
        return cls.from_headers(game.headers)


@dataclass(frozen=True)
class Variation:
    """One engine candidate move and the evaluation it leads to."""

    move: str
    evaluation: float

    def __post_init__(self):
        _check_text(self.move, "move")
        object.__setattr__(
            self, "evaluation", _check_finite(self.evaluation, f"evaluation of {self.move}")
        )


@dataclass(frozen=True)
class EngineEvaluation:
    """
    Candidate moves ranked best-to-worst by the reference engine.

    The first variation is authoritative for both the position's
    evaluation and the engine's best move.

    Attributes:
        variations: Ranked variations, best first (never empty)

    Raises:
        ValueError: If no variations are given
    """

    variations: Tuple[Variation, ...]

    def __post_init__(self):
        variations = tuple(self.variations)
        if not variations:
            raise ValueError("Engine evaluation needs at least one variation")
        for variation in variations:
            if not isinstance(variation, Variation):
                raise TypeError(
                    f"Expected Variation, got {type(variation).__name__}"
                )
        object.__setattr__(self, "variations", variations)

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[str, float]]) -> "EngineEvaluation":
        """Build from ``(move, evaluation)`` pairs, best first."""
        return cls(tuple(Variation(move, evaluation) for move, evaluation in pairs))

    @property
    def top(self) -> Variation:
        """The engine's best variation."""
        return self.variations[0]

    def find(self, move: str) -> Optional[Variation]:
        """
        Find the variation playing ``move``.

        Scans in rank order so the best-ranked entry wins if the same
        identifier appears more than once.

        Args:
            move: Move identifier, compared by exact equality

        Returns:
            Matching variation, or None if the move was not reported
        """
        for variation in self.variations:
            if variation.move == move:
                return variation
        return None

    def __len__(self) -> int:
        return len(self.variations)

    def __iter__(self):
        return iter(self.variations)

    def __getitem__(self, index: int) -> Variation:
        return self.variations[index]


@dataclass(frozen=True)
class Answer:
    """
    A guesser's submission for one question.

    Attributes:
        evaluation: Guessed evaluation in pawns (White's perspective)
        best_move: Guessed best move, same notation as the engine evaluation
        player_or_tournament: Free text naming a player or the event
    """

    evaluation: float
    best_move: str
    player_or_tournament: str

    def __post_init__(self):
        object.__setattr__(
            self, "evaluation", _check_finite(self.evaluation, "answer evaluation")
        )
        _check_text(self.best_move, "best_move")
        _check_text(self.player_or_tournament, "player_or_tournament")


@dataclass(frozen=True)
class QuestionResult:
    """A question, the engine's evaluation of it, and the answer given."""

    context: PositionContext
    engine_evaluation: EngineEvaluation
    answer: Answer

    def __post_init__(self):
        for name, expected in (
            ("context", PositionContext),
            ("engine_evaluation", EngineEvaluation),
            ("answer", Answer),
        ):
            value = getattr(self, name)
            if not isinstance(value, expected):
                raise TypeError(
                    f"{name} must be a {expected.__name__}, got {type(value).__name__}"
                )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QuestionResult":
        """
        Build from a JSON-style record.

        Expected layout::

            {
                "question": {"players": {"white": ..., "black": ...},
                             "tournament": ...},
                "stockfishEval": [{"move": ..., "evaluation": ...}, ...],
                "answer": {"evaluation": ..., "bestMove": ...,
                           "playerOrTournament": ...}
            }

        Raises:
            ValueError: If a required key is missing or a value is out of range
            TypeError: If a value has the wrong type
        """
        try:
            question = data["question"]
            players = question["players"]
            answer = data["answer"]
            context = PositionContext(
                white=players["white"],
                black=players["black"],
                tournament=question["tournament"],
            )
            engine_evaluation = EngineEvaluation(
                tuple(
                    Variation(entry["move"], entry["evaluation"])
                    for entry in data["stockfishEval"]
                )
            )
            guess = Answer(
                evaluation=answer["evaluation"],
                best_move=answer["bestMove"],
                player_or_tournament=answer["playerOrTournament"],
            )
        except KeyError as e:
            raise ValueError(f"Question result is missing key {e}") from e

        return cls(context=context, engine_evaluation=engine_evaluation, answer=guess)

    def to_dict(self) -> Dict[str, Any]:
        """Inverse of :meth:`from_dict`."""
        return {
            "question": {
                "players": {"white": self.context.white, "black": self.context.black},
                "tournament": self.context.tournament,
            },
            "stockfishEval": [
                {"move": v.move, "evaluation": v.evaluation}
                for v in self.engine_evaluation
            ],
            "answer": {
                "evaluation": self.answer.evaluation,
                "bestMove": self.answer.best_move,
                "playerOrTournament": self.answer.player_or_tournament,
            },
        }


@dataclass(frozen=True)
class ScoreBreakdown:
    """
    Scoring signals for one answer and their total.

    Attributes:
        found_winning_side: Guess and engine agree on who is better
        eval_points: Points from the evaluation guess (may be negative)
        found_best_move: Guessed move is among the engine's variations
        best_move_multiplier: Factor applied to eval_points (>= floor)
        found_player_or_tournament: A guessed word names a player or event
        total: Combined score
    """

    found_winning_side: bool
    eval_points: float
    found_best_move: bool
    best_move_multiplier: float
    found_player_or_tournament: bool
    total: float

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "foundWinningSide": self.found_winning_side,
            "evalPoints": self.eval_points,
            "foundBestMove": self.found_best_move,
            "bestMoveMultiplier": self.best_move_multiplier,
            "foundPlayerOrTournament": self.found_player_or_tournament,
            "total": self.total,
        }

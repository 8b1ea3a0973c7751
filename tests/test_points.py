"""
Unit Tests for Answer Scoring

Tests for the scoring signals and their combination:
    - Winning side agreement (including the zero-evaluation cases)
    - Eval points curve
    - Best move lookup and multiplier
    - Player/tournament word matching
    - Total score and worked examples
"""

import pytest

from chess_guess.scoring import (
    Answer,
    EngineEvaluation,
    PositionContext,
    QuestionResult,
    ScoreBreakdown,
    ScoringConfig,
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


@pytest.fixture
def context():
    """Players and event of a well-known game."""
    return PositionContext(
        white="Magnus Carlsen",
        black="Ian Nepomniachtchi",
        tournament="FIDE World Championship 2021",
    )


@pytest.fixture
def engine_evaluation():
    """Three ranked engine lines, White better."""
    return EngineEvaluation.from_pairs([("e4", 1.0), ("d4", 0.5), ("c4", -1.0)])


class TestWinningSide:
    """Tests for found_winning_side."""

    @pytest.mark.parametrize(
        "guess, actual",
        [(1.0, 2.0), (0.1, 5.0), (-0.3, -1.2), (-7.0, -0.01)],
    )
    def test_same_sign_matches(self, guess, actual):
        """Non-zero evaluations with the same sign match."""
        assert found_winning_side(guess, actual) is True

    @pytest.mark.parametrize("guess, actual", [(1.0, -1.0), (-0.5, 0.5)])
    def test_opposite_sign_does_not_match(self, guess, actual):
        """Opposite signs never match."""
        assert found_winning_side(guess, actual) is False

    @pytest.mark.parametrize(
        "guess, actual",
        [(0.0, 2.0), (0.0, -2.0), (3.0, 0.0), (-3.0, 0.0), (0.0, 0.0), (-0.0, 0.0)],
    )
    def test_zero_never_matches(self, guess, actual):
        """
        A zero evaluation on either side is never a match.

        This includes guessing a draw for a position the engine calls drawn.
        """
        assert found_winning_side(guess, actual) is False


class TestEvalPoints:
    """Tests for the eval points curve."""

    def test_exact_guess(self):
        """An exact guess scores 50."""
        assert eval_points(1.3, 1.3) == 50

    @pytest.mark.parametrize(
        "difference, expected",
        [(0.5, 42), (1, 34), (2, 18), (3, 2), (4, -14), (5, -30), (6, -46), (10, -110)],
    )
    def test_point_table(self, difference, expected):
        """Points follow 50 - 16 * difference."""
        assert eval_points(difference, 0.0) == pytest.approx(expected)
        assert eval_points(0.0, difference) == pytest.approx(expected)

    def test_negative_after_threshold(self):
        """Errors above 3.125 pawns score negative."""
        assert eval_points(3.125, 0.0) == pytest.approx(0.0)
        assert eval_points(3.2, 0.0) < 0

    def test_no_floor(self):
        """Huge errors keep losing points."""
        assert eval_points(-100.0, 100.0) == pytest.approx(50 - 16 * 200)

    def test_monotonically_non_increasing(self):
        """Larger errors never score more."""
        points = [eval_points(d / 4, 0.0) for d in range(0, 60)]
        assert all(a >= b for a, b in zip(points, points[1:]))

    def test_custom_config(self):
        """Slope and base come from the config."""
        config = ScoringConfig(eval_base=100.0, eval_slope=10.0)
        assert eval_points(2.0, 0.0, config) == pytest.approx(80.0)


class TestBestMove:
    """Tests for best move lookup and multiplier."""

    def test_top_move_found(self, engine_evaluation):
        """The engine's top move is found and earns x3."""
        assert found_best_move(engine_evaluation, "e4") is True
        assert best_move_multiplier(engine_evaluation, "e4") == pytest.approx(3.0)

    def test_lower_ranked_move_found(self, engine_evaluation):
        """Any reported move counts, not only the first."""
        assert found_best_move(engine_evaluation, "c4") is True

    def test_absent_move(self, engine_evaluation):
        """A move the engine did not report is neutral."""
        assert found_best_move(engine_evaluation, "Nf3") is False
        assert best_move_multiplier(engine_evaluation, "Nf3") == 1.0

    def test_exact_text_comparison(self, engine_evaluation):
        """Identifiers are not normalized."""
        assert found_best_move(engine_evaluation, "E4") is False
        assert found_best_move(engine_evaluation, " e4") is False
        assert found_best_move(engine_evaluation, "e2e4") is False

    @pytest.mark.parametrize(
        "gap, expected",
        [(0.0, 3.0), (0.5, 2.625), (1.0, 2.25), (2.0, 1.5), (2.5, 1.125)],
    )
    def test_linear_decay(self, gap, expected):
        """The multiplier decays by 0.75 per pawn of gap."""
        evaluation = EngineEvaluation.from_pairs([("e4", 1.0), ("d4", 1.0 - gap)])
        assert best_move_multiplier(evaluation, "d4") == pytest.approx(expected)

    @pytest.mark.parametrize("gap", [8 / 3, 3.0, 5.0, 50.0])
    def test_floor(self, gap):
        """The multiplier never drops below 1 once the gap reaches 8/3."""
        evaluation = EngineEvaluation.from_pairs([("e4", 2.0), ("h4", 2.0 - gap)])
        assert best_move_multiplier(evaluation, "h4") == pytest.approx(1.0)
        assert best_move_multiplier(evaluation, "h4") >= 1.0

    def test_gap_uses_absolute_difference(self):
        """A move rated higher than the top move is treated like a lower one."""
        evaluation = EngineEvaluation.from_pairs([("e4", 0.0), ("d4", 1.0)])
        assert best_move_multiplier(evaluation, "d4") == pytest.approx(2.25)

    def test_duplicate_identifier_uses_best_rank(self):
        """The earliest-ranked entry wins when identifiers repeat."""
        evaluation = EngineEvaluation.from_pairs([("e4", 1.0), ("d4", 1.0), ("d4", -3.0)])
        assert best_move_multiplier(evaluation, "d4") == pytest.approx(3.0)


class TestPlayerOrTournament:
    """Tests for player/tournament word matching."""

    def test_surname_matches(self, context):
        """A single correct word is enough."""
        assert found_player_or_tournament(context, "Carlsen") is True

    def test_garbage_around_correct_word(self, context):
        """Other guessed words do not matter."""
        assert found_player_or_tournament(context, "xyz Nepomniachtchi qwerty") is True

    def test_tournament_word(self, context):
        """Tournament words count too."""
        assert found_player_or_tournament(context, "2021") is True

    def test_full_field_matches(self, context):
        """A guess identical to a context field matches."""
        assert found_player_or_tournament(context, "Ian Nepomniachtchi") is True
        assert found_player_or_tournament(context, "FIDE World Championship 2021") is True

    def test_no_overlap(self, context):
        """Unrelated guesses do not match."""
        assert found_player_or_tournament(context, "Hikaru Nakamura") is False

    def test_case_sensitive(self, context):
        """Matching is case-sensitive."""
        assert found_player_or_tournament(context, "carlsen") is False

    def test_no_substring_matching(self, context):
        """Misspelled or partial words do not match."""
        assert found_player_or_tournament(context, "Carlson Nepo") is False
        assert found_player_or_tournament(context, "Carlsen's") is False

    def test_empty_guess(self, context):
        """An empty or blank guess has no words."""
        assert found_player_or_tournament(context, "") is False
        assert found_player_or_tournament(context, "   ") is False

    def test_whitespace_runs(self):
        """Any whitespace separates words."""
        context = PositionContext("Magnus  Carlsen", "", "Tata\tSteel")
        assert found_player_or_tournament(context, "Steel") is True
        assert found_player_or_tournament(context, "x\nCarlsen") is True
        assert found_player_or_tournament(context, " ") is False


class TestTotal:
    """Tests for the combined score."""

    @pytest.mark.parametrize("winning", [True, False])
    @pytest.mark.parametrize("player", [True, False])
    def test_sum_formula(self, winning, player):
        """Total is the documented sum for every combination of flags."""
        expected = (20 if winning else 0) + 18 * 1.5 + (10 if player else 0)
        assert total_points(winning, 18.0, 1.5, player) == pytest.approx(expected)

    def test_custom_points(self):
        """Flag points come from the config."""
        config = ScoringConfig(winning_side_points=5.0, player_points=1.0)
        assert total_points(True, 10.0, 2.0, True, config) == pytest.approx(26.0)

    def test_example_perfect_guess(self, context):
        """Exact eval and top move, no name: 20 + 50*3 + 0 = 170."""
        result = QuestionResult(
            context=context,
            engine_evaluation=EngineEvaluation.from_pairs([("e4", 1.0)]),
            answer=Answer(evaluation=1.0, best_move="e4", player_or_tournament="Hikaru"),
        )

        breakdown = score(result)

        assert breakdown.found_winning_side is True
        assert breakdown.eval_points == pytest.approx(50.0)
        assert breakdown.found_best_move is True
        assert breakdown.best_move_multiplier == pytest.approx(3.0)
        assert breakdown.found_player_or_tournament is False
        assert breakdown.total == pytest.approx(170.0)

    def test_example_draw_guess_with_player(self, context):
        """Guessing 0 for +2 with a correct name: 0 + 18 + 10 = 28."""
        result = QuestionResult(
            context=context,
            engine_evaluation=EngineEvaluation.from_pairs([("e4", 2.0), ("d4", 1.8)]),
            answer=Answer(evaluation=0.0, best_move="a4", player_or_tournament="Carlsen"),
        )

        breakdown = score(result)

        assert breakdown.found_winning_side is False
        assert breakdown.eval_points == pytest.approx(18.0)
        assert breakdown.found_best_move is False
        assert breakdown.best_move_multiplier == 1.0
        assert breakdown.found_player_or_tournament is True
        assert breakdown.total == pytest.approx(28.0)

    def test_negative_points_are_amplified(self, context):
        """A correct move guess multiplies negative eval points too."""
        evaluation = EngineEvaluation.from_pairs([("e4", 5.0), ("d4", 5.0)])
        with_move = Answer(evaluation=-1.0, best_move="d4", player_or_tournament="")
        without_move = Answer(evaluation=-1.0, best_move="b4", player_or_tournament="")

        amplified = score_answer(context, evaluation, with_move)
        plain = score_answer(context, evaluation, without_move)

        assert plain.total == pytest.approx(-46.0)
        assert amplified.total == pytest.approx(-138.0)
        assert amplified.total < plain.total

    def test_all_signals(self, context, engine_evaluation):
        """Every signal contributes to the total."""
        answer = Answer(evaluation=1.5, best_move="d4", player_or_tournament="World")

        breakdown = score_answer(context, engine_evaluation, answer)

        # eval: 50 - 16*0.5 = 42, multiplier: 3 - 0.75*0.5 = 2.625
        assert breakdown.total == pytest.approx(20 + 42 * 2.625 + 10)

    def test_idempotent(self, context, engine_evaluation):
        """Repeated scoring gives identical results."""
        answer = Answer(evaluation=-0.7, best_move="c4", player_or_tournament="Ian")

        first = score_answer(context, engine_evaluation, answer)
        second = score_answer(context, engine_evaluation, answer)

        assert first == second

    def test_inputs_unchanged(self, context, engine_evaluation):
        """Scoring does not modify its inputs."""
        answer = Answer(evaluation=0.2, best_move="d4", player_or_tournament="Magnus")
        before = (context, engine_evaluation.variations, answer)

        score_answer(context, engine_evaluation, answer)

        assert (context, engine_evaluation.variations, answer) == before

    def test_score_all_preserves_order(self, context, engine_evaluation):
        """Batch scoring returns one breakdown per result in order."""
        results = [
            QuestionResult(context, engine_evaluation, Answer(1.0, "e4", "")),
            QuestionResult(context, engine_evaluation, Answer(-9.0, "x", "")),
        ]

        breakdowns = score_all(results)

        assert len(breakdowns) == 2
        assert all(isinstance(b, ScoreBreakdown) for b in breakdowns)
        assert breakdowns[0].total > breakdowns[1].total

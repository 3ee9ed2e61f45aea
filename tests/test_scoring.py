"""
Pytest tests for the Scorer
Covers correctness counting, point accrual, rounding and malformed answer keys
"""

import pytest

from edugamify.domain.scoring import (
    QuestionKey,
    Scorer,
    normalize_points,
    round_half_up,
)


def make_key(correct_answers, points=25):
    return [
        QuestionKey(
            question=f"Q{i + 1}",
            options=("A", "B", "C", "D"),
            correct_answer=answer,
            points=points,
        )
        for i, answer in enumerate(correct_answers)
    ]


class TestScorer:
    """Test Scorer.score"""

    def setup_method(self):
        """Set up test fixtures"""
        self.questions = make_key([0, 1, 2, 0])

    def test_all_correct(self):
        """Four of four correct earns every point"""
        outcome = Scorer.score(self.questions, [0, 1, 2, 0])

        assert outcome.correct_count == 4
        assert outcome.total_questions == 4
        assert outcome.percentage == 100
        assert outcome.points_earned == 100
        assert outcome.is_perfect
        assert all(q.is_correct for q in outcome.per_question)

    def test_one_wrong(self):
        """One wrong answer drops a quarter of the score"""
        outcome = Scorer.score(self.questions, [0, 1, 1, 0])

        assert outcome.correct_count == 3
        assert outcome.percentage == 75
        assert outcome.points_earned == 75
        assert not outcome.is_perfect

        wrong = outcome.per_question[2]
        assert wrong.is_correct is False
        assert wrong.user_answer == 1
        assert wrong.correct_answer == 2
        assert wrong.points == 0

    def test_unanswered_questions_are_incorrect(self):
        """Missing and null answers count as wrong and never raise"""
        outcome = Scorer.score(self.questions, [0, None])

        assert outcome.correct_count == 1
        assert outcome.percentage == 25
        assert [q.user_answer for q in outcome.per_question] == [0, None, None, None]

    def test_empty_quiz_scores_zero_percent(self):
        """A quiz with no questions yields 0% instead of dividing by zero"""
        outcome = Scorer.score([], [])

        assert outcome.total_questions == 0
        assert outcome.percentage == 0
        assert outcome.points_earned == 0
        assert not outcome.is_perfect

    def test_points_follow_each_question(self):
        """Points earned is the sum over correctly answered questions"""
        questions = [
            QuestionKey("Q1", ("A", "B"), 0, 10),
            QuestionKey("Q2", ("A", "B"), 1, 30),
            QuestionKey("Q3", ("A", "B"), 0, 60),
        ]

        outcome = Scorer.score(questions, [0, 0, 0])

        assert outcome.points_earned == 70
        assert [q.points for q in outcome.per_question] == [10, 0, 60]

    @pytest.mark.parametrize("total", [1, 3, 7, 8, 11])
    def test_percentage_bounds_and_formula(self, total):
        """Percentage stays within 0..100 and matches the rounded ratio"""
        questions = make_key([0] * total)
        for correct in range(total + 1):
            answers = [0] * correct + [1] * (total - correct)
            outcome = Scorer.score(questions, answers)

            assert 0 <= outcome.percentage <= 100
            assert outcome.percentage == round_half_up(100 * correct / total)
            assert outcome.points_earned == 25 * correct


class TestAnswerKeyNormalization:
    """Test loading stored questions into QuestionKey"""

    def test_missing_points_default_to_zero(self):
        """Questions without usable points contribute 0, never NaN or negative"""
        docs = [
            {"question": "Q1", "options": ["A", "B"], "correctAnswer": 0},
            {"question": "Q2", "options": ["A", "B"], "correctAnswer": 0, "points": None},
            {"question": "Q3", "options": ["A", "B"], "correctAnswer": 0, "points": "abc"},
            {"question": "Q4", "options": ["A", "B"], "correctAnswer": 0, "points": -5},
            {"question": "Q5", "options": ["A", "B"], "correctAnswer": 0, "points": 20},
        ]

        questions = Scorer.load_answer_key(docs)
        outcome = Scorer.score(questions, [0, 0, 0, 0, 0])

        assert [q.points for q in questions] == [0, 0, 0, 0, 20]
        assert outcome.points_earned == 20

    def test_missing_correct_answer_never_matches(self):
        """A question without an answer key cannot be answered correctly"""
        questions = Scorer.load_answer_key([{"question": "Q1", "options": ["A", "B"]}])

        outcome = Scorer.score(questions, [0])

        assert outcome.correct_count == 0

    @pytest.mark.parametrize(
        "value,expected",
        [(None, 0), (True, 0), ("7", 7), (12.9, 12), (float("nan"), 0), (float("inf"), 0), (-3, 0)],
    )
    def test_normalize_points(self, value, expected):
        """normalize_points always returns a non-negative int"""
        assert normalize_points(value) == expected

    @pytest.mark.parametrize("value,expected", [(12.5, 13), (87.5, 88), (66.666, 67), (0.4, 0)])
    def test_round_half_up(self, value, expected):
        """Halves round up like the frontend's Math.round"""
        assert round_half_up(value) == expected

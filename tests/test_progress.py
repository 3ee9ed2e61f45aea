"""
Pytest tests for progress summaries
"""

from types import SimpleNamespace

import pytest

from edugamify.core.errors import NotFoundError
from edugamify.domain.progress import average_percentage, summarize_progress
from edugamify.domain.scoring import Scorer
from edugamify.services.ledger import AccountLedger
from edugamify.services.progress import ProgressService


class TestSummarizeProgress:
    """Test the pure aggregation"""

    def test_empty_history(self):
        """No results averages to 0 with nothing recent"""
        snapshot = summarize_progress(3, 0, [], [])

        assert snapshot.completed_count == 0
        assert snapshot.average_score == 0
        assert snapshot.recent_results == []
        assert snapshot.total_quizzes_available == 3

    def test_average_rounds_half_up(self):
        """Average of 100 and 75 is 87.5, shown as 88"""
        assert average_percentage([100, 75]) == 88
        assert average_percentage([]) == 0

    def test_recent_is_capped(self):
        """Only the first five results (newest first) are recent"""
        results = [SimpleNamespace(percentage=p) for p in range(10, 80, 10)]

        snapshot = summarize_progress(3, 0, [], results, recent_limit=5)

        assert snapshot.completed_count == 7
        assert [r.percentage for r in snapshot.recent_results] == [10, 20, 30, 40, 50]

    def test_unearned_badges_filtered(self):
        """Only earned badges are listed"""
        badges = [SimpleNamespace(name="a", earned=True), SimpleNamespace(name="b", earned=False)]

        snapshot = summarize_progress(1, 0, badges, [])

        assert [b.name for b in snapshot.earned_badges] == ["a"]


class TestProgressService:
    """Test ProgressService against the database"""

    @pytest.fixture(autouse=True)
    def setup(self, db, make_user, make_quiz):
        """Set up test fixtures"""
        self.db = db
        self.user = make_user(name="Bea")
        self.quiz = make_quiz()

    def _submit(self, answers, time_spent=60):
        outcome = Scorer.score(Scorer.load_answer_key(self.quiz.questions), answers)
        return AccountLedger(self.db).apply(self.user.id, self.quiz, outcome, [], time_spent)

    def test_zero_results(self):
        """A user with no results gets zeros and no error"""
        progress = ProgressService(self.db).get_user_progress(self.user.id).progress

        assert progress.average_score == 0
        assert progress.completed_count == 0
        assert progress.recent_results == []
        assert progress.total_points == 0
        assert progress.total_quizzes_available == 1

    def test_history(self):
        """Counts, average and newest-first ordering"""
        self._submit([0, 1, 2, 0])
        self._submit([0, 1, 1, 0])
        self._submit([3, 3, 3, 3])

        progress = ProgressService(self.db).get_user_progress(self.user.id).progress

        assert progress.completed_count == 3
        assert progress.total_points == 175
        # (100 + 75 + 0) / 3 = 58.33
        assert progress.average_score == 58
        assert [r.percentage for r in progress.recent_results] == [0, 75, 100]

    def test_recent_limit(self):
        """At most five recent results"""
        for _ in range(7):
            self._submit([0, 1, 2, 0])

        progress = ProgressService(self.db).get_user_progress(self.user.id).progress

        assert progress.completed_count == 7
        assert len(progress.recent_results) == 5

    def test_unknown_user(self):
        """Unknown users raise NotFoundError"""
        with pytest.raises(NotFoundError):
            ProgressService(self.db).get_user_progress(4242)

"""Unit tests for answer ranking."""

from stackit.domain.model import ScoredAnswer
from stackit.domain.service import rank_answers, top_answer
from tests.conftest import make_answer, make_question, make_user


def _scored(scores: list[int]) -> list[ScoredAnswer]:
    author = make_user("answerer")
    question = make_question(make_user("asker"))
    return [
        ScoredAnswer(
            answer=make_answer(question, author, body=f"answer {i}", offset_seconds=i),
            score=score,
        )
        for i, score in enumerate(scores)
    ]


class TestRankAnswers:
    """Tests for rank_answers()."""

    def test_orders_by_descending_score(self):
        """Higher score should come first."""
        # Arrange
        answers = _scored([3, 3, 5, -1])

        # Act
        ranked = rank_answers(answers)

        # Assert
        assert [a.score for a in ranked] == [5, 3, 3, -1]

    def test_ties_keep_input_order(self):
        """Equal scores should keep their creation order."""
        # Arrange
        answers = _scored([3, 3, 5, -1])

        # Act
        ranked = rank_answers(answers)

        # Assert
        assert ranked[1] is answers[0]
        assert ranked[2] is answers[1]

    def test_does_not_mutate_input(self):
        answers = _scored([1, 2])
        rank_answers(answers)
        assert [a.score for a in answers] == [1, 2]

    def test_empty(self):
        assert rank_answers([]) == []


class TestTopAnswer:
    """Tests for top_answer()."""

    def test_first_positive_answer_is_top(self):
        """The first ranked answer is top when its score is positive."""
        ranked = rank_answers(_scored([1, 4, 2]))
        top = top_answer(ranked)
        assert top is ranked[0]
        assert top.score == 4

    def test_zero_score_is_not_top(self):
        """A leading score of zero earns no badge."""
        assert top_answer(rank_answers(_scored([0, -2]))) is None

    def test_negative_scores_have_no_top(self):
        assert top_answer(rank_answers(_scored([-1, -3]))) is None

    def test_no_answers_no_top(self):
        assert top_answer([]) is None

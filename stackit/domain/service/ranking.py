"""Answer ranking."""

from typing import Optional, Sequence

from stackit.domain.model.answer import ScoredAnswer


def rank_answers(answers: Sequence[ScoredAnswer]) -> list[ScoredAnswer]:
    """Order answers by descending score.

    The sort is stable: answers with equal scores keep their input order.
    Callers pass answers in creation order, so ties stay chronological.
    """
    return sorted(answers, key=lambda scored: scored.score, reverse=True)


def top_answer(ranked: Sequence[ScoredAnswer]) -> Optional[ScoredAnswer]:
    """Return the answer to badge as top, if any.

    Only the first ranked answer qualifies, and only with a strictly
    positive score. The badge is display-only and never stored.
    """
    if ranked and ranked[0].score > 0:
        return ranked[0]
    return None

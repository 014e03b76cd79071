"""Unit tests for vote aggregation and the vote toggle."""

from uuid import uuid4

import pytest

from stackit.adapter.realtime import InMemoryNotificationPublisher
from stackit.domain.error import NotFoundError
from stackit.domain.model import Vote
from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    UserRepository,
    VoteRepository,
)
from stackit.domain.service import VoteService, aggregate_votes, next_vote_state
from stackit.domain.value import (
    AnswerId,
    NotificationKind,
    Polarity,
    UserId,
    VoteId,
    VoteState,
)
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _vote(answer_id: AnswerId, polarity: Polarity, voter_id: UserId | None = None):
    return Vote(
        id=VoteId(uuid4()),
        voter_id=voter_id or UserId(uuid4()),
        answer_id=answer_id,
        polarity=polarity,
    )


class TestAggregateVotes:
    """Tests for aggregate_votes()."""

    def test_sums_polarities(self):
        answer_id = AnswerId(uuid4())
        votes = [
            _vote(answer_id, Polarity.UP),
            _vote(answer_id, Polarity.UP),
            _vote(answer_id, Polarity.DOWN),
        ]

        tally = aggregate_votes(answer_id, votes)

        assert tally.score == 1
        assert tally.viewer_vote is None

    def test_duplicate_rows_from_one_voter_are_summed(self):
        """Rows are counted as given; one vote per voter is the store's job."""
        answer_id = AnswerId(uuid4())
        voter_id = UserId(uuid4())
        votes = [
            _vote(answer_id, Polarity.UP, voter_id),
            _vote(answer_id, Polarity.UP, voter_id),
        ]

        tally = aggregate_votes(answer_id, votes, viewer_id=voter_id)

        assert tally.score == 2
        assert tally.viewer_vote == Polarity.UP

    def test_no_votes_scores_zero(self):
        answer_id = AnswerId(uuid4())
        tally = aggregate_votes(answer_id, [])
        assert tally.score == 0
        assert tally.viewer_state == VoteState.NONE

    def test_ignores_votes_for_other_answers(self):
        """Rows for a different answer must not leak into the tally."""
        answer_id = AnswerId(uuid4())
        other_id = AnswerId(uuid4())
        votes = [_vote(answer_id, Polarity.UP), _vote(other_id, Polarity.DOWN)]

        assert aggregate_votes(answer_id, votes).score == 1

    def test_reports_viewer_vote(self):
        """The viewer's own polarity should be reported."""
        answer_id = AnswerId(uuid4())
        viewer_id = UserId(uuid4())
        votes = [
            _vote(answer_id, Polarity.UP),
            _vote(answer_id, Polarity.DOWN, voter_id=viewer_id),
        ]

        tally = aggregate_votes(answer_id, votes, viewer_id=viewer_id)

        assert tally.score == 0
        assert tally.viewer_vote == Polarity.DOWN
        assert tally.viewer_state == VoteState.DOWNVOTED


class TestNextVoteState:
    """Tests for the vote toggle transition."""

    @pytest.mark.parametrize(
        ("current", "polarity", "expected"),
        [
            (VoteState.NONE, Polarity.UP, VoteState.UPVOTED),
            (VoteState.NONE, Polarity.DOWN, VoteState.DOWNVOTED),
            (VoteState.UPVOTED, Polarity.UP, VoteState.NONE),
            (VoteState.UPVOTED, Polarity.DOWN, VoteState.DOWNVOTED),
            (VoteState.DOWNVOTED, Polarity.DOWN, VoteState.NONE),
            (VoteState.DOWNVOTED, Polarity.UP, VoteState.UPVOTED),
        ],
    )
    def test_transitions(self, current, polarity, expected):
        assert next_vote_state(current, polarity) == expected


async def _seed(unit_env):
    """Save a question author, an answerer and a voter plus one answer."""
    user_repo = await unit_env.get(UserRepository)
    answer_repo = await unit_env.get(AnswerRepository)

    asker = await user_repo.save(make_user("asker"))
    answerer = await user_repo.save(make_user("answerer"))
    voter = await user_repo.save(make_user("voter"))
    answer = await answer_repo.save(make_answer(make_question(asker), answerer))
    return answerer, voter, answer


class TestApplyVote:
    """Tests for VoteService.apply_vote()."""

    @pytest.mark.asyncio
    async def test_first_upvote(self, unit_env):
        """Casting +1 with no prior vote should upvote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, voter, answer = await _seed(unit_env)

        # Act
        outcome = await vote_service.apply_vote(voter.id, answer.id, Polarity.UP)

        # Assert
        assert outcome.previous_state == VoteState.NONE
        assert outcome.state == VoteState.UPVOTED
        assert outcome.tally.score == 1
        assert outcome.tally.viewer_vote == Polarity.UP

    @pytest.mark.asyncio
    async def test_same_polarity_twice_withdraws(self, unit_env):
        """+1 then +1 should return to NONE with no net score change."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        _, voter, answer = await _seed(unit_env)

        # Act
        await vote_service.apply_vote(voter.id, answer.id, Polarity.UP)
        outcome = await vote_service.apply_vote(voter.id, answer.id, Polarity.UP)

        # Assert
        assert outcome.previous_state == VoteState.UPVOTED
        assert outcome.state == VoteState.NONE
        assert outcome.tally.score == 0
        assert outcome.tally.viewer_vote is None
        assert await vote_repo.find_by_voter_and_answer(voter.id, answer.id) is None

    @pytest.mark.asyncio
    async def test_switching_polarity_moves_score_by_two(self, unit_env):
        """+1 then -1 should replace the vote, a delta of -2."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        _, voter, answer = await _seed(unit_env)

        # Act
        first = await vote_service.apply_vote(voter.id, answer.id, Polarity.UP)
        second = await vote_service.apply_vote(voter.id, answer.id, Polarity.DOWN)

        # Assert
        assert second.tally.score - first.tally.score == -2
        assert second.state == VoteState.DOWNVOTED
        votes = await vote_repo.find_by_answer(answer.id)
        assert len(votes) == 1  # Replaced, not added

    @pytest.mark.asyncio
    async def test_switch_keeps_vote_identity(self, unit_env):
        """Switching polarity updates the existing row in place."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        _, voter, answer = await _seed(unit_env)

        await vote_service.apply_vote(voter.id, answer.id, Polarity.DOWN)
        original = await vote_repo.find_by_voter_and_answer(voter.id, answer.id)
        await vote_service.apply_vote(voter.id, answer.id, Polarity.UP)
        switched = await vote_repo.find_by_voter_and_answer(voter.id, answer.id)

        assert switched.id == original.id
        assert switched.polarity == Polarity.UP

    @pytest.mark.asyncio
    async def test_score_counts_all_voters(self, unit_env):
        """Votes from different users add up."""
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        _, voter, answer = await _seed(unit_env)
        other = await user_repo.save(make_user("other"))

        await vote_service.apply_vote(voter.id, answer.id, Polarity.UP)
        outcome = await vote_service.apply_vote(other.id, answer.id, Polarity.UP)

        assert outcome.tally.score == 2

    @pytest.mark.asyncio
    async def test_unknown_answer_raises_not_found(self, unit_env):
        """Voting on a missing answer should raise NotFoundError."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.apply_vote(
                UserId(uuid4()), AnswerId(uuid4()), Polarity.UP
            )


class TestVoteNotifications:
    """Tests for the upvote notification side effect."""

    @pytest.mark.asyncio
    async def test_upvote_by_other_user_notifies_author(self, unit_env):
        """An upvote from someone else should create one vote notification."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        notification_repo = await unit_env.get(NotificationRepository)
        publisher = await unit_env.get(InMemoryNotificationPublisher)
        answerer, voter, answer = await _seed(unit_env)

        # Act
        outcome = await vote_service.apply_vote(voter.id, answer.id, Polarity.UP)

        # Assert
        assert outcome.notification is not None
        notifications = await notification_repo.find_by_recipient(answerer.id)
        assert len(notifications) == 1
        assert notifications[0].kind == NotificationKind.VOTE
        assert notifications[0].message == "voter upvoted your answer"
        assert notifications[0].related_user_id == voter.id
        assert publisher.published == [answerer.id]

    @pytest.mark.asyncio
    async def test_own_upvote_does_not_notify(self, unit_env):
        """Upvoting one's own answer is silent."""
        vote_service = await unit_env.get(VoteService)
        notification_repo = await unit_env.get(NotificationRepository)
        answerer, _, answer = await _seed(unit_env)

        outcome = await vote_service.apply_vote(answerer.id, answer.id, Polarity.UP)

        assert outcome.notification is None
        assert await notification_repo.find_by_recipient(answerer.id) == []

    @pytest.mark.asyncio
    async def test_withdrawal_does_not_notify(self, unit_env):
        """Removing an upvote creates no second notification."""
        vote_service = await unit_env.get(VoteService)
        notification_repo = await unit_env.get(NotificationRepository)
        answerer, voter, answer = await _seed(unit_env)

        await vote_service.apply_vote(voter.id, answer.id, Polarity.UP)
        outcome = await vote_service.apply_vote(voter.id, answer.id, Polarity.UP)

        assert outcome.notification is None
        assert len(await notification_repo.find_by_recipient(answerer.id)) == 1

    @pytest.mark.asyncio
    async def test_downvote_does_not_notify(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        notification_repo = await unit_env.get(NotificationRepository)
        answerer, voter, answer = await _seed(unit_env)

        outcome = await vote_service.apply_vote(voter.id, answer.id, Polarity.DOWN)

        assert outcome.notification is None
        assert await notification_repo.find_by_recipient(answerer.id) == []

    @pytest.mark.asyncio
    async def test_switch_from_downvote_to_upvote_notifies(self, unit_env):
        """Ending in UPVOTED notifies even when switching from a downvote."""
        vote_service = await unit_env.get(VoteService)
        answerer, voter, answer = await _seed(unit_env)

        await vote_service.apply_vote(voter.id, answer.id, Polarity.DOWN)
        outcome = await vote_service.apply_vote(voter.id, answer.id, Polarity.UP)

        assert outcome.notification is not None
        assert outcome.notification.recipient_id == answerer.id


class TestGetTallies:
    """Tests for VoteService.get_tallies()."""

    @pytest.mark.asyncio
    async def test_every_requested_answer_gets_a_tally(self, unit_env):
        """Answers without votes should still appear with score 0."""
        vote_service = await unit_env.get(VoteService)
        _, voter, answer = await _seed(unit_env)
        unvoted = AnswerId(uuid4())
        await vote_service.apply_vote(voter.id, answer.id, Polarity.DOWN)

        tallies = await vote_service.get_tallies([answer.id, unvoted], voter.id)

        assert tallies[answer.id].score == -1
        assert tallies[answer.id].viewer_vote == Polarity.DOWN
        assert tallies[unvoted].score == 0

    @pytest.mark.asyncio
    async def test_no_answers(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        assert await vote_service.get_tallies([]) == {}

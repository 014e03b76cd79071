"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert

from stackit.domain.model import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import AnswerId, UserId
from stackit.persistence.database import PostgresRepository
from stackit.persistence.mappers import row_to_vote, vote_to_dict
from stackit.persistence.tables import votes_table


class PostgresVoteRepository(PostgresRepository, VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    async def find_by_voter_and_answer(
        self, voter_id: UserId, answer_id: AnswerId
    ) -> Optional[Vote]:
        """Find a voter's vote on an answer."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.answer_id == answer_id,
            )
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_answer(self, answer_id: AnswerId) -> List[Vote]:
        """Find all votes on an answer."""
        stmt = select(votes_table).where(votes_table.c.answer_id == answer_id)
        result = await self._execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> List[Vote]:
        """Find all votes on several answers (batch query)."""
        if not answer_ids:
            return []

        stmt = select(votes_table).where(votes_table.c.answer_id.in_(list(answer_ids)))
        result = await self._execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the polarity of the existing one.

        Concurrent casts by the same voter collapse onto the single
        (voter_id, answer_id) row.
        """
        stmt = (
            insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_update(
                index_elements=[votes_table.c.voter_id, votes_table.c.answer_id],
                set_={"polarity": int(vote.polarity)},
            )
            .returning(votes_table)
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else vote

    async def delete_by_voter_and_answer(
        self, voter_id: UserId, answer_id: AnswerId
    ) -> bool:
        """Delete a voter's vote on an answer."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.answer_id == answer_id,
            )
        )
        result = await self._execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

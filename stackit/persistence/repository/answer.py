"""PostgreSQL implementation of Answer repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import asc, func, insert, select

from stackit.domain.model import Answer
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId
from stackit.persistence.database import PostgresRepository
from stackit.persistence.mappers import answer_to_dict, row_to_answer
from stackit.persistence.tables import answers_table


class PostgresAnswerRepository(PostgresRepository, AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(asc(answers_table.c.created_at), asc(answers_table.c.id))
        )
        result = await self._execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count answers for several questions (batch query)."""
        if not question_ids:
            return {}

        stmt = (
            select(answers_table.c.question_id, func.count().label("answer_count"))
            .where(answers_table.c.question_id.in_(list(question_ids)))
            .group_by(answers_table.c.question_id)
        )
        result = await self._execute(stmt)
        counts = {QuestionId(row.question_id): row.answer_count for row in result}
        return {qid: counts.get(qid, 0) for qid in question_ids}

    async def save(self, answer: Answer) -> Answer:
        """Save a new answer."""
        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self._execute(stmt)
        await self.session.flush()
        return answer

    async def count(self) -> int:
        """Count all answers."""
        stmt = select(func.count()).select_from(answers_table)
        result = await self._execute(stmt)
        return result.scalar() or 0

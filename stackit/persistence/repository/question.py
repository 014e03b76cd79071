"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, desc, func, insert, or_, select

from stackit.domain.model import Question
from stackit.domain.repository.question import QuestionRepository, QuestionSortOrder
from stackit.domain.value import QuestionId
from stackit.persistence.database import PostgresRepository
from stackit.persistence.mappers import question_to_dict, row_to_question
from stackit.persistence.tables import questions_table


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so the search term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresQuestionRepository(PostgresRepository, QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def _apply_search(self, stmt, search: Optional[str]):
        if not search or not search.strip():
            return stmt
        pattern = f"%{_escape_like(search.strip())}%"
        return stmt.where(
            or_(
                questions_table.c.title.ilike(pattern, escape="\\"),
                questions_table.c.body.ilike(pattern, escape="\\"),
            )
        )

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self._execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Question not found", question_id=str(question_id))
                return None

            return row_to_question(row._asdict())

    async def find_all(
        self,
        search: Optional[str] = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with search and pagination."""
        with logfire.span(
            "question_repository.find_all",
            search=search,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_search(select(questions_table), search)

            if sort == QuestionSortOrder.OLDEST:
                stmt = stmt.order_by(
                    asc(questions_table.c.created_at), asc(questions_table.c.id)
                )
            else:
                stmt = stmt.order_by(
                    desc(questions_table.c.created_at), desc(questions_table.c.id)
                )

            stmt = stmt.limit(limit).offset(offset)

            result = await self._execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]

            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(self, search: Optional[str] = None) -> int:
        """Count questions matching the search."""
        stmt = self._apply_search(
            select(func.count()).select_from(questions_table), search
        )
        result = await self._execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a new question."""
        with logfire.span("question_repository.save", question_id=str(question.id)):
            stmt = insert(questions_table).values(**question_to_dict(question))
            await self._execute(stmt)
            await self.session.flush()
            return question

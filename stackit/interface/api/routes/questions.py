"""Question routes."""

from typing import Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from stackit.application.usecase.answer import (
    PostAnswerRequest,
    PostAnswerResponse,
    PostAnswerUseCase,
)
from stackit.application.usecase.question import (
    AskQuestionRequest,
    AskQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionResponse,
)
from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.repository import QuestionSortOrder
from stackit.domain.service import JWTService
from stackit.interface.api.session import require_session

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class AskQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str
    body: str
    tags: list[str] = Field(default_factory=list)


class PostAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    body: str


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    q: Optional[str] = Query(default=None, description="Search title and body"),
    sort: QuestionSortOrder = Query(default=QuestionSortOrder.NEWEST),
    page: int = Query(default=1, ge=1),
) -> ListQuestionsResponse:
    """List questions with search, sort and pagination.

    Args:
        list_questions_use_case: List questions use case from DI
        q: Case-insensitive search term
        sort: newest (default) or oldest
        page: 1-based page number

    Returns:
        One page of questions with answer counts and page totals
    """
    return await list_questions_use_case.execute(
        ListQuestionsRequest(search=q, sort=sort, page=page)
    )


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
async def ask_question(
    request: AskQuestionAPIRequest,
    ask_question_use_case: FromDishka[AskQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Ask a new question.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 400 if validation fails
    """
    session = require_session(jwt_service, auth_token, "ask a question")

    try:
        return await ask_question_use_case.execute(
            AskQuestionRequest(
                session=session,
                title=request.title,
                body=request.body,
                tags=request.tags,
            )
        )
    except ValidationError as e:
        logfire.warn("Question validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetQuestionResponse:
    """Get a question with its answers ranked by score.

    Authentication is optional; when present, each answer carries the
    viewer's own vote.

    Raises:
        HTTPException: 404 if the question does not exist
    """
    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(
                question_id=str(question_id),
                viewer=jwt_service.get_session(auth_token),
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/{question_id}/answers",
    response_model=PostAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_answer(
    question_id: UUID,
    request: PostAnswerAPIRequest,
    post_answer_use_case: FromDishka[PostAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostAnswerResponse:
    """Answer a question.

    Requires authentication. The question author and every @mentioned
    user are notified.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the question does
            not exist, 400 if the answer is empty
    """
    session = require_session(jwt_service, auth_token, "post an answer")

    try:
        return await post_answer_use_case.execute(
            PostAnswerRequest(
                session=session, question_id=str(question_id), body=request.body
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

from fastapi import APIRouter, HTTPException, status

from ....domain.errors import (
    ConcurrentUpdateError,
    EmptyQuizError,
    InvalidQuestionError,
    LoginRejectedError,
    NavigationError,
    QuestionSourceUnavailableError,
    QuizAppError,
    QuizNotFoundError,
    SessionNotFoundError,
)
from ....schemas.quiz_schemas import AnswerIn, AnswerOut, LoginIn, SessionCreateIn, SessionStateOut
from ..deps import ServiceDep

router = APIRouter(prefix="/sessions", tags=["sessions"])


def to_http(e: QuizAppError) -> HTTPException:
    if isinstance(e, (SessionNotFoundError, QuizNotFoundError)):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, (NavigationError, ConcurrentUpdateError)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if isinstance(e, LoginRejectedError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if isinstance(e, (EmptyQuizError, InvalidQuestionError)):
        return HTTPException(status_code=422, detail=str(e))
    if isinstance(e, QuestionSourceUnavailableError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("/", response_model=SessionStateOut, status_code=status.HTTP_201_CREATED)
async def start_session(payload: SessionCreateIn, svc: ServiceDep):
    questions = (
        [q.to_domain() for q in payload.questions] if payload.questions is not None else None
    )
    try:
        return await svc.start_session(questions=questions, quiz_id=payload.quizId)
    except QuizAppError as e:
        raise to_http(e)


@router.get("/{session_id}", response_model=SessionStateOut)
async def get_session(session_id: str, svc: ServiceDep):
    try:
        return await svc.get_session(session_id)
    except QuizAppError as e:
        raise to_http(e)


@router.post("/{session_id}/login", response_model=SessionStateOut)
async def login(session_id: str, payload: LoginIn, svc: ServiceDep):
    try:
        return await svc.login(session_id, payload.email)
    except QuizAppError as e:
        raise to_http(e)


@router.post("/{session_id}/answers", response_model=AnswerOut)
async def submit_answer(session_id: str, payload: AnswerIn, svc: ServiceDep):
    try:
        return await svc.submit_answer(session_id, payload.selectedIndex)
    except QuizAppError as e:
        raise to_http(e)


@router.post("/{session_id}/retry", response_model=SessionStateOut)
async def retry(session_id: str, svc: ServiceDep):
    try:
        return await svc.retry(session_id)
    except QuizAppError as e:
        raise to_http(e)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def end_session(session_id: str, svc: ServiceDep):
    try:
        await svc.end_session(session_id)
    except QuizAppError as e:
        raise to_http(e)
    return None

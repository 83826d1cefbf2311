from fastapi import APIRouter, HTTPException, status
from ....schemas.quiz_schemas import QuizListItem
from ....domain.errors import QuestionSourceUnavailableError
from ..deps import ServiceDep

router = APIRouter(prefix="/quizzes", tags=["quizzes"])


@router.get("/", response_model=list[QuizListItem])
async def list_quizzes(svc: ServiceDep):
    try:
        return svc.list_quizzes()
    except QuestionSourceUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

from typing import Annotated, List, Literal, Optional
from pydantic import BaseModel, Field, model_validator

from ..domain.model import Question


class QuestionIn(BaseModel):
    questionText: str = Field(..., min_length=1)
    answers: Annotated[list[str], Field(min_length=2)]
    correctAnswer: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_correct_answer(self) -> "QuestionIn":
        if self.correctAnswer >= len(self.answers):
            raise ValueError("correctAnswer must point to one of the answers")
        return self

    def to_domain(self) -> Question:
        return Question(
            question_text=self.questionText,
            answers=tuple(self.answers),
            correct_answer=self.correctAnswer,
        )


class SessionCreateIn(BaseModel):
    quizId: Optional[str] = None
    # порожній список пропускаємо — сервіс відхилить його як порожню вікторину
    questions: Optional[List[QuestionIn]] = None

    @model_validator(mode="after")
    def _one_source(self) -> "SessionCreateIn":
        if self.quizId is not None and self.questions is not None:
            raise ValueError("Pass either quizId or questions, not both")
        return self


class LoginIn(BaseModel):
    email: str


class AnswerIn(BaseModel):
    selectedIndex: int


class QuestionView(BaseModel):
    questionText: str
    answers: list[str]
    position: int


class SessionStateOut(BaseModel):
    sessionId: str
    quizId: Optional[str] = None
    screen: Literal["SPLASH", "LOGIN", "QUIZ", "SCORE"]
    email: Optional[str] = None
    attempt: int
    position: int
    total: int
    score: int
    finished: bool
    question: Optional[QuestionView] = None


class AnswerOut(SessionStateOut):
    accepted: bool
    correct: Optional[bool] = None


class QuizListItem(BaseModel):
    id: str
    title: str
    updatedAt: Optional[str] = None

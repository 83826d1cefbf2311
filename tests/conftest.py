import pytest
from fastapi.testclient import TestClient

from quizapp.main import app
from quizapp.api.v1.deps import get_service
from quizapp.domain.model import Question
from quizapp.repositories.session_store import InMemorySessionStore
from quizapp.services.quiz_service import QuizService

SPLASH_DELAY_MS = 2000
SESSION_TTL_SECONDS = 6 * 60 * 60


class FakeClock:
    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeQuizRepository:
    def __init__(self, quizzes: dict[str, list[Question]]) -> None:
        self.quizzes = quizzes

    def list_quizzes(self) -> list[dict]:
        return [
            {"id": quiz_id, "title": f"Quiz {quiz_id}", "updated_at": "2024-05-01T10:00:00+00:00"}
            for quiz_id in self.quizzes
        ]

    def get_questions(self, quiz_id: str):
        return self.quizzes.get(quiz_id)


@pytest.fixture
def two_questions() -> list[Question]:
    return [
        Question("2+2?", ("3", "4"), 1),
        Question("Capital?", ("Paris", "Rome"), 0),
    ]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def repo(two_questions) -> FakeQuizRepository:
    return FakeQuizRepository({"arith": two_questions})


@pytest.fixture
def service(clock) -> QuizService:
    return QuizService(InMemorySessionStore(SESSION_TTL_SECONDS), splash_delay_ms=SPLASH_DELAY_MS, clock=clock)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

import logging
import time
import uuid
from typing import Callable, List, Optional, Sequence, Tuple

from ..domain.errors import (
    LoginRejectedError,
    NavigationError,
    QuestionSourceUnavailableError,
    QuizNotFoundError,
    SessionNotFoundError,
)
from ..domain.model import Question, QuizSession
from ..domain.navigation import Navigator, Screen
from ..domain.question_bank import DEFAULT_QUESTIONS
from ..repositories.quiz_repository import QuizRepository
from ..repositories.session_store import SessionStore

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


class QuizService:
    """
    Керує спробами проходження вікторини одного гравця.

    Кожен запит завантажує запис сесії зі сховища, відновлює QuizSession і
    Navigator, подає сигнал і зберігає результат назад.
    """

    def __init__(
        self,
        store: SessionStore,
        repo: Optional[QuizRepository] = None,
        splash_delay_ms: int = 2000,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.store = store
        self.repo = repo
        self.splash_delay_ms = splash_delay_ms
        self.clock = clock

    # --- банк вікторин ---

    def list_quizzes(self) -> list[dict]:
        if self.repo is None:
            raise QuestionSourceUnavailableError("Quiz bank is not configured")
        return [
            {
                "id": i["id"],
                "title": i["title"],
                "updatedAt": str(i["updated_at"]) if i.get("updated_at") is not None else None,
            }
            for i in self.repo.list_quizzes()
        ]

    def _resolve_questions(
        self,
        questions: Optional[Sequence[Question]],
        quiz_id: Optional[str],
    ) -> List[Question]:
        if questions is not None:
            return list(questions)
        if quiz_id is None:
            return list(DEFAULT_QUESTIONS)
        if self.repo is None:
            raise QuestionSourceUnavailableError("Quiz bank is not configured")
        stored = self.repo.get_questions(quiz_id)
        if stored is None:
            raise QuizNotFoundError(quiz_id)
        return stored

    # --- завантаження / збереження ---

    async def _load(self, session_id: str) -> Tuple[dict, QuizSession, Navigator]:
        record = await self.store.get(session_id)
        if record is None:
            raise SessionNotFoundError(session_id)
        questions = [Question.from_dict(q) for q in record["questions"]]
        quiz = QuizSession.from_state(questions, record["quiz"])
        nav = Navigator.from_state(record["navigator"])
        return record, quiz, nav

    async def _save(self, record: dict, quiz: QuizSession, nav: Navigator, new: bool = False) -> None:
        # версія запису: паралельний запит, що прочитав стару версію, отримає ConcurrentUpdateError
        expected = None if new else record.get("version", 0)
        record["version"] = 0 if new else expected + 1
        record["quiz"] = quiz.to_state()
        record["navigator"] = nav.to_state()
        await self.store.save(record["sessionId"], record, expected_version=expected)

    def _view(self, record: dict, quiz: QuizSession, nav: Navigator) -> dict:
        question = quiz.current()
        return {
            "sessionId": record["sessionId"],
            "quizId": record.get("quizId"),
            "screen": nav.screen.value,
            "email": record.get("email"),
            "attempt": record["attempt"],
            "position": quiz.position,
            "total": quiz.total,
            "score": quiz.score,
            "finished": quiz.finished,
            # правильну відповідь клієнту не віддаємо
            "question": {
                "questionText": question.question_text,
                "answers": list(question.answers),
                "position": quiz.position,
            }
            if question is not None
            else None,
        }

    # --- операції ---

    async def start_session(
        self,
        questions: Optional[Sequence[Question]] = None,
        quiz_id: Optional[str] = None,
    ) -> dict:
        resolved = self._resolve_questions(questions, quiz_id)
        quiz = QuizSession(resolved)

        started = self.clock()
        nav = Navigator(started_at_ms=started, splash_delay_ms=self.splash_delay_ms)
        nav.on_timer_elapsed(started)

        record = {
            "sessionId": str(uuid.uuid4()),
            "quizId": quiz_id,
            "email": None,
            "attempt": 1,
            "createdAt": started,
            "questions": [q.to_dict() for q in quiz.questions],
        }
        await self._save(record, quiz, nav, new=True)

        logger.info(
            "Створено сесію %s з %d питаннями (quizId=%s)",
            record["sessionId"],
            quiz.total,
            quiz_id,
        )
        return self._view(record, quiz, nav)

    async def get_session(self, session_id: str) -> dict:
        record, quiz, nav = await self._load(session_id)
        if nav.on_timer_elapsed(self.clock()):
            await self._save(record, quiz, nav)
        return self._view(record, quiz, nav)

    async def login(self, session_id: str, email: str) -> dict:
        record, quiz, nav = await self._load(session_id)
        nav.on_timer_elapsed(self.clock())

        if not nav.on_login(email):
            raise LoginRejectedError("Email must not be empty")

        record["email"] = email
        await self._save(record, quiz, nav)
        logger.info("Гравець %s увійшов у сесію %s", email, session_id)
        return self._view(record, quiz, nav)

    async def submit_answer(self, session_id: str, selected_index: int) -> dict:
        record, quiz, nav = await self._load(session_id)
        nav.on_timer_elapsed(self.clock())

        if nav.screen not in (Screen.QUIZ, Screen.SCORE):
            raise NavigationError(nav.screen.value, "answer")

        # на екрані результатів повторні події від UI просто ігноруються
        accepted = not quiz.finished
        before = quiz.score
        quiz.submit(selected_index)
        correct = quiz.score > before if accepted else None

        if quiz.finished:
            nav.on_quiz_finished()

        if accepted:
            await self._save(record, quiz, nav)
            logger.info(
                "Сесія %s: відповідь %d (%s), рахунок %d/%d",
                session_id,
                selected_index,
                "правильно" if correct else "неправильно",
                quiz.score,
                quiz.total,
            )

        view = self._view(record, quiz, nav)
        view["accepted"] = accepted
        view["correct"] = correct
        return view

    async def retry(self, session_id: str) -> dict:
        record, quiz, nav = await self._load(session_id)
        nav.on_retry()

        # нова спроба — нова сесія цілком, питання ті самі
        quiz = QuizSession(quiz.questions)
        record["attempt"] += 1
        await self._save(record, quiz, nav)

        logger.info("Сесія %s: спроба %d", session_id, record["attempt"])
        return self._view(record, quiz, nav)

    async def end_session(self, session_id: str) -> None:
        if not await self.store.delete(session_id):
            raise SessionNotFoundError(session_id)
        logger.info("Сесію %s видалено", session_id)

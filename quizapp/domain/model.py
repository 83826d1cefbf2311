import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .errors import EmptyQuizError, InvalidQuestionError, InvalidSessionStateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Question:
    question_text: str
    answers: Tuple[str, ...]
    correct_answer: int

    def __post_init__(self) -> None:
        # списки з JSON/БД приводимо до tuple, щоб значення було незмінним
        object.__setattr__(self, "answers", tuple(self.answers))
        if len(self.answers) < 2:
            raise InvalidQuestionError(
                f"Question '{self.question_text}' needs at least 2 answers, got {len(self.answers)}"
            )
        if not 0 <= self.correct_answer < len(self.answers):
            raise InvalidQuestionError(
                f"Correct answer {self.correct_answer} is out of range for "
                f"{len(self.answers)} answers"
            )

    def is_correct(self, selected_index: int) -> bool:
        return selected_index == self.correct_answer

    def to_dict(self) -> dict:
        return {
            "question_text": self.question_text,
            "answers": list(self.answers),
            "correct_answer": self.correct_answer,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Question":
        # рядки з БД можуть бути неповними: null замість індексу, без answers
        try:
            return cls(
                question_text=data["question_text"],
                answers=data["answers"],
                correct_answer=int(data["correct_answer"]),
            )
        except InvalidQuestionError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidQuestionError(f"Malformed question data: {data!r}") from e


class QuizSession:
    """
    Прогрес однієї спроби проходження вікторини по фіксованому списку питань.

    Два стани: в процесі (position < total) і завершено (position == total).
    Завершений стан кінцевий. Єдина мутація — submit(); повтор вікторини
    замінює сесію цілком новою.
    """

    def __init__(self, questions: Sequence[Question]) -> None:
        if not questions:
            raise EmptyQuizError("A quiz session needs at least one question")
        self._questions: Tuple[Question, ...] = tuple(questions)
        self._position = 0
        self._score = 0

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def total(self) -> int:
        return len(self._questions)

    @property
    def position(self) -> int:
        return self._position

    @property
    def score(self) -> int:
        return self._score

    @property
    def finished(self) -> bool:
        return self._position == len(self._questions)

    def current(self) -> Optional[Question]:
        """Поточне питання або None, якщо всі питання вже пройдені."""
        if self.finished:
            return None
        return self._questions[self._position]

    def submit(self, selected_index: int) -> None:
        """
        Зараховує вибір гравця для поточного питання і переходить до наступного.

        Приймається будь-яке ціле число: індекс поза списком відповідей просто
        не збігається з правильним. Після останнього питання виклик нічого не змінює.
        """
        question = self.current()
        if question is None:
            logger.debug("Відповідь проігноровано: сесія вже завершена (score=%d)", self._score)
            return

        if question.is_correct(selected_index):
            self._score += 1
        self._position += 1

    # --- знімок стану ---

    def to_state(self) -> dict:
        return {"position": self._position, "score": self._score}

    @classmethod
    def from_state(cls, questions: Sequence[Question], state: dict) -> "QuizSession":
        session = cls(questions)
        try:
            position = int(state["position"])
            score = int(state["score"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidSessionStateError(f"Malformed session state: {state!r}") from e

        if not 0 <= position <= session.total:
            raise InvalidSessionStateError(
                f"Position {position} is outside 0..{session.total}"
            )
        if not 0 <= score <= position:
            raise InvalidSessionStateError(
                f"Score {score} is outside 0..{position}"
            )

        session._position = position
        session._score = score
        return session

import logging
from enum import Enum

from .errors import NavigationError

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    SPLASH = "SPLASH"
    LOGIN = "LOGIN"
    QUIZ = "QUIZ"
    SCORE = "SCORE"


class Navigator:
    """
    Скінченний автомат екранів застосунку:
    SPLASH -> LOGIN -> QUIZ -> SCORE, і SCORE -> QUIZ при повторі.

    Переходи запускаються незалежними сигналами: минув час заставки,
    надіслано логін, вікторину завершено, запитано повтор.
    """

    def __init__(
        self,
        started_at_ms: int,
        splash_delay_ms: int,
        screen: Screen = Screen.SPLASH,
    ) -> None:
        self.started_at_ms = started_at_ms
        self.splash_delay_ms = splash_delay_ms
        self.screen = Screen(screen)

    def _move(self, target: Screen) -> None:
        logger.info("Перехід екрану: %s -> %s", self.screen.value, target.value)
        self.screen = target

    def _require(self, screen: Screen, signal: str) -> None:
        if self.screen != screen:
            raise NavigationError(self.screen.value, signal)

    # --- сигнали ---

    def on_timer_elapsed(self, now_ms: int) -> bool:
        if self.screen != Screen.SPLASH:
            return False
        if now_ms < self.started_at_ms + self.splash_delay_ms:
            return False
        self._move(Screen.LOGIN)
        return True

    def on_login(self, email: str) -> bool:
        self._require(Screen.LOGIN, "login")
        # як і кнопка входу: порожній email не пускає далі
        if not email:
            return False
        self._move(Screen.QUIZ)
        return True

    def on_quiz_finished(self) -> None:
        if self.screen == Screen.SCORE:
            return
        self._require(Screen.QUIZ, "quiz_finished")
        self._move(Screen.SCORE)

    def on_retry(self) -> None:
        self._require(Screen.SCORE, "retry")
        self._move(Screen.QUIZ)

    # --- знімок стану ---

    def to_state(self) -> dict:
        return {
            "screen": self.screen.value,
            "startedAt": self.started_at_ms,
            "splashDelayMs": self.splash_delay_ms,
        }

    @classmethod
    def from_state(cls, state: dict) -> "Navigator":
        return cls(
            started_at_ms=int(state["startedAt"]),
            splash_delay_ms=int(state["splashDelayMs"]),
            screen=Screen(state["screen"]),
        )

class QuizAppError(Exception):
    """Base class for errors raised by the quiz domain and services."""


class InvalidQuestionError(QuizAppError, ValueError):
    pass


class EmptyQuizError(QuizAppError, ValueError):
    pass


class InvalidSessionStateError(QuizAppError, ValueError):
    pass


class NavigationError(QuizAppError):
    def __init__(self, screen: str, signal: str) -> None:
        super().__init__(f"Signal '{signal}' is not allowed on screen {screen}")
        self.screen = screen
        self.signal = signal


class LoginRejectedError(QuizAppError):
    pass


class SessionNotFoundError(QuizAppError):
    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id


class QuizNotFoundError(QuizAppError):
    def __init__(self, quiz_id: str) -> None:
        super().__init__(f"Quiz {quiz_id} not found")
        self.quiz_id = quiz_id


class QuestionSourceUnavailableError(QuizAppError):
    pass


class ConcurrentUpdateError(QuizAppError):
    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session {session_id} was changed by another request")
        self.session_id = session_id

import pytest

from quizapp.domain.errors import EmptyQuizError, InvalidQuestionError, InvalidSessionStateError
from quizapp.domain.model import Question, QuizSession
from quizapp.domain.question_bank import DEFAULT_QUESTIONS


def test_new_session_starts_at_first_question(two_questions):
    session = QuizSession(two_questions)
    assert session.position == 0
    assert session.score == 0
    assert session.finished is False
    assert session.current() == two_questions[0]
    # current() не змінює стан
    assert session.current() == two_questions[0]
    assert session.position == 0


def test_two_question_scenario(two_questions):
    session = QuizSession(two_questions)

    session.submit(1)
    assert (session.score, session.position, session.finished) == (1, 1, False)
    assert session.current() == two_questions[1]

    session.submit(1)
    assert (session.score, session.position, session.finished) == (1, 2, True)
    assert session.current() is None


def test_single_question_finishes_immediately():
    session = QuizSession([Question("2+2?", ("3", "4"), 1)])
    session.submit(1)
    assert session.score == 1
    assert session.finished is True
    assert session.current() is None


@pytest.mark.parametrize("selected", [-1, 2, 99, -100])
def test_out_of_range_index_is_just_wrong(two_questions, selected):
    session = QuizSession(two_questions)
    session.submit(selected)
    assert session.score == 0
    assert session.position == 1


def test_submit_after_finish_is_a_no_op(two_questions):
    session = QuizSession(two_questions)
    session.submit(1)
    session.submit(0)
    assert session.finished

    session.submit(1)
    session.submit(0)
    assert session.score == 2
    assert session.position == 2
    assert session.finished


def test_score_never_exceeds_answered_count():
    session = QuizSession(DEFAULT_QUESTIONS)
    picks = [1, 0, 1, 3, 2]
    scores = []
    for answered, pick in enumerate(picks, start=1):
        session.submit(pick)
        scores.append(session.score)
        assert session.score <= answered
        assert session.finished == (answered == len(DEFAULT_QUESTIONS))
    assert scores == sorted(scores)
    assert session.score == 3


def test_empty_session_fails_fast():
    with pytest.raises(EmptyQuizError):
        QuizSession([])


@pytest.mark.parametrize(
    "answers, correct",
    [(("only",), 0), (("a", "b"), 2), (("a", "b"), -1)],
)
def test_invalid_question_is_rejected(answers, correct):
    with pytest.raises(InvalidQuestionError):
        Question("?", answers, correct)


def test_question_answers_are_immutable():
    q = Question("?", ["a", "b"], 0)
    assert q.answers == ("a", "b")
    assert Question.from_dict(q.to_dict()) == q


def test_restore_from_state(two_questions):
    session = QuizSession(two_questions)
    session.submit(1)

    restored = QuizSession.from_state(two_questions, session.to_state())
    assert restored.position == 1
    assert restored.score == 1
    assert restored.current() == two_questions[1]


@pytest.mark.parametrize(
    "state",
    [
        {"position": 3, "score": 0},
        {"position": -1, "score": 0},
        {"position": 1, "score": 2},
        {"position": 1},
        {"position": "x", "score": 0},
    ],
)
def test_restore_rejects_broken_state(two_questions, state):
    with pytest.raises(InvalidSessionStateError):
        QuizSession.from_state(two_questions, state)


@pytest.mark.parametrize(
    "row",
    [
        {"question_text": "?", "answers": ["a", "b"], "correct_answer": None},
        {"question_text": "?", "correct_answer": 0},
        {"question_text": "?", "answers": ["a", "b"], "correct_answer": "first"},
        {"question_text": "?", "answers": ["a", "b"], "correct_answer": 5},
    ],
)
def test_malformed_question_data_is_invalid_question(row):
    with pytest.raises(InvalidQuestionError):
        Question.from_dict(row)

import pytest

from quizapp.domain.errors import NavigationError
from quizapp.domain.navigation import Navigator, Screen


def make_nav() -> Navigator:
    return Navigator(started_at_ms=1000, splash_delay_ms=2000)


def test_splash_holds_until_delay_elapses():
    nav = make_nav()
    assert nav.on_timer_elapsed(2999) is False
    assert nav.screen == Screen.SPLASH
    assert nav.on_timer_elapsed(3000) is True
    assert nav.screen == Screen.LOGIN
    # таймер спрацьовує лише один раз
    assert nav.on_timer_elapsed(10_000) is False
    assert nav.screen == Screen.LOGIN


def test_login_requires_email():
    nav = make_nav()
    nav.on_timer_elapsed(5000)
    assert nav.on_login("") is False
    assert nav.screen == Screen.LOGIN
    assert nav.on_login("player@example.com") is True
    assert nav.screen == Screen.QUIZ


def test_login_during_splash_is_rejected():
    nav = make_nav()
    with pytest.raises(NavigationError):
        nav.on_login("player@example.com")


def test_finish_and_retry_cycle():
    nav = make_nav()
    nav.on_timer_elapsed(5000)
    nav.on_login("player@example.com")

    with pytest.raises(NavigationError):
        nav.on_retry()

    nav.on_quiz_finished()
    assert nav.screen == Screen.SCORE
    nav.on_quiz_finished()
    assert nav.screen == Screen.SCORE

    nav.on_retry()
    assert nav.screen == Screen.QUIZ


def test_state_round_trip():
    nav = make_nav()
    nav.on_timer_elapsed(3000)
    restored = Navigator.from_state(nav.to_state())
    assert restored.screen == Screen.LOGIN
    assert restored.started_at_ms == 1000
    assert restored.splash_delay_ms == 2000

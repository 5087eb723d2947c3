from __future__ import annotations

from gigadb_ui.app.feedback_timer import FeedbackTimer
from gigadb_ui.tests.unit.helpers import FakeTimers


def _timer(timers: FakeTimers, changes=None) -> FeedbackTimer:
    return FeedbackTimer(
        timers.after,
        timers.after_cancel,
        duration_ms=2000,
        on_change=(lambda: changes.append(True)) if changes is not None else None,
        clock=timers.clock,
    )


def test_signal_expires_after_duration() -> None:
    timers = FakeTimers()
    timer = _timer(timers)

    timer.trigger()
    assert timer.active is True
    assert timer.expires_at == 2.0

    timers.advance(1999)
    assert timer.active is True
    timers.advance(1)
    assert timer.active is False
    assert timer.expires_at is None


def test_retrigger_restarts_delay() -> None:
    timers = FakeTimers()
    changes = []
    timer = _timer(timers, changes)

    timer.trigger()
    timers.advance(1500)
    timer.trigger()
    timers.advance(1500)
    assert timer.active is True
    assert timers.pending_count == 1

    timers.advance(500)
    assert timer.active is False
    # trigger, trigger, expire
    assert len(changes) == 3


def test_dispose_cancels_pending_expiry() -> None:
    timers = FakeTimers()
    timer = _timer(timers)

    timer.trigger()
    timer.dispose()
    timers.advance(5000)

    assert timers.pending_count == 0
    assert timer.active is True


def test_clear_switches_off_immediately() -> None:
    timers = FakeTimers()
    changes = []
    timer = _timer(timers, changes)

    timer.trigger()
    timer.clear()

    assert timer.active is False
    assert timers.pending_count == 0
    assert len(changes) == 2

    timer.clear()
    assert len(changes) == 2

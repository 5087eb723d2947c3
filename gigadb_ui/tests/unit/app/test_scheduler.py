from __future__ import annotations

from gigadb_ui.app.scheduler import TimerScheduler
from gigadb_ui.tests.unit.helpers import FakeTimers


def test_schedule_replaces_pending_timer_on_same_key() -> None:
    timers = FakeTimers()
    scheduler = TimerScheduler(timers.after, timers.after_cancel)
    fired = []

    scheduler.schedule("fetch", 500, lambda: fired.append("first"))
    scheduler.schedule("fetch", 500, lambda: fired.append("second"))
    timers.advance(500)

    assert fired == ["second"]
    assert scheduler.is_scheduled("fetch") is False


def test_independent_keys_and_cancel_all() -> None:
    timers = FakeTimers()
    scheduler = TimerScheduler(timers.after, timers.after_cancel)
    fired = []

    scheduler.schedule("a", 100, lambda: fired.append("a"))
    scheduler.schedule("b", 200, lambda: fired.append("b"))
    assert scheduler.handle_for("a") is not None

    timers.advance(100)
    assert fired == ["a"]
    assert scheduler.handle_for("a") is None

    scheduler.cancel_all()
    timers.advance(1000)
    assert fired == ["a"]
    assert timers.pending_count == 0


def test_callback_may_reschedule_its_own_key() -> None:
    timers = FakeTimers()
    scheduler = TimerScheduler(timers.after, timers.after_cancel)
    fired = []

    def tick() -> None:
        fired.append(timers.now_ms)
        if len(fired) < 3:
            scheduler.schedule("tick", 10, tick)

    scheduler.schedule("tick", 10, tick)
    timers.advance(100)

    assert fired == [10, 20, 30]

from __future__ import annotations

import pytest

from gigadb_ui.adapters.api_errors import ApiServerError, ApiTimeoutError
from gigadb_ui.app.list_controller import ListSyncController
from gigadb_ui.domain.entities import Failure, Page, Pending, Success
from gigadb_ui.tests.unit.helpers import FakeTimers, ManualRunner, StubUserPort, make_page
from gigadb_ui.usecases.fetch_user_page import FetchUserPage


def _controller(port: StubUserPort, timers: FakeTimers, runner: ManualRunner, **kwargs):
    changes = []
    controller = ListSyncController(
        fetch_page=FetchUserPage(port),
        schedule=timers.after,
        cancel=timers.after_cancel,
        runner=runner,
        on_change=lambda: changes.append(controller.state),
        **kwargs,
    )
    return controller, changes


def test_mount_fetches_first_page_after_debounce() -> None:
    port = StubUserPort(pages={1: make_page(1, 3)})
    timers, runner = FakeTimers(), ManualRunner()
    controller, _ = _controller(port, timers, runner)

    controller.mount()
    assert isinstance(controller.state, Pending)
    timers.advance(499)
    assert runner.jobs == []

    timers.advance(1)
    runner.complete_all()

    assert port.calls_named("get_page") == [1]
    assert isinstance(controller.state, Success)
    assert len(controller.page.items) == 3
    assert controller.loading is False


def test_rapid_page_changes_issue_single_fetch_for_last_index() -> None:
    port = StubUserPort(pages={4: make_page(4, 2)})
    timers, runner = FakeTimers(), ManualRunner()
    controller, _ = _controller(port, timers, runner)

    controller.set_page_index(2)
    timers.advance(300)
    controller.set_page_index(3)
    timers.advance(300)
    controller.set_page_index(4)
    timers.advance(499)
    assert runner.jobs == []

    timers.advance(1)
    runner.complete_all()

    assert port.calls_named("get_page") == [4]
    assert controller.page.index == 4


@pytest.mark.parametrize("late_first", [True, False])
def test_stale_response_does_not_overwrite_newer_index(late_first: bool) -> None:
    port = StubUserPort(pages={1: make_page(1, 2), 2: make_page(2, 5)})
    timers, runner = FakeTimers(), ManualRunner()
    controller, _ = _controller(port, timers, runner)

    controller.mount()
    timers.advance(500)
    assert len(runner.jobs) == 1  # page 1 in flight

    controller.set_page_index(2)
    timers.advance(500)
    assert len(runner.jobs) == 2

    if late_first:
        runner.complete(1)  # page 2 arrives first
        runner.complete(0)  # then the stale page 1
    else:
        runner.complete(0)  # stale page 1 arrives while page 2 pending
        assert isinstance(controller.state, Pending)
        runner.complete(0)

    assert isinstance(controller.state, Success)
    assert controller.page.index == 2
    assert len(controller.page.items) == 5


def test_refresh_fetches_immediately_and_keeps_index() -> None:
    port = StubUserPort(pages={3: make_page(3, 1)})
    timers, runner = FakeTimers(), ManualRunner()
    controller, _ = _controller(port, timers, runner, initial_index=3)

    controller.refresh()

    assert len(runner.jobs) == 1
    runner.complete_all()
    assert controller.page_index == 3
    assert port.calls_named("get_page") == [3]


def test_refresh_cancels_pending_debounce() -> None:
    port = StubUserPort()
    timers, runner = FakeTimers(), ManualRunner()
    controller, _ = _controller(port, timers, runner)

    controller.set_page_index(2)
    controller.refresh()
    timers.advance(1000)
    runner.complete_all()

    assert port.calls_named("get_page") == [2]


def test_failure_keeps_previous_page_and_stops_loading() -> None:
    port = StubUserPort(
        pages={
            1: make_page(1, 4),
            2: ApiServerError("boom", status=500),
        }
    )
    timers, runner = FakeTimers(), ManualRunner()
    controller, _ = _controller(port, timers, runner)

    controller.mount()
    timers.advance(500)
    runner.complete_all()
    controller.next_page()
    timers.advance(500)
    runner.complete_all()

    assert isinstance(controller.state, Failure)
    assert controller.state.code == "SERVICE_REJECTED"
    assert controller.loading is False
    assert controller.page is not None and controller.page.index == 1
    # No automatic retry.
    timers.advance(10_000)
    assert runner.jobs == []
    assert port.calls_named("get_page") == [1, 2]


def test_network_failure_maps_to_network_code() -> None:
    port = StubUserPort(pages={1: ApiTimeoutError("timeout")})
    timers, runner = FakeTimers(), ManualRunner()
    controller, _ = _controller(port, timers, runner)

    controller.mount()
    timers.advance(500)
    runner.complete_all()

    assert controller.failure == Failure("NETWORK_FAILURE", "Error connecting to server.")


def test_empty_page_is_success_not_failure() -> None:
    port = StubUserPort(pages={5: Page(index=5, items=(), server_latency_ms=0.01)})
    timers, runner = FakeTimers(), ManualRunner()
    controller, _ = _controller(port, timers, runner, initial_index=5)

    controller.mount()
    timers.advance(500)
    runner.complete_all()

    assert isinstance(controller.state, Success)
    assert controller.is_empty is True
    assert controller.failure is None


def test_missing_configuration_degrades_to_failure_state() -> None:
    timers, runner = FakeTimers(), ManualRunner()
    controller = ListSyncController(
        fetch_page=None,
        schedule=timers.after,
        cancel=timers.after_cancel,
        runner=runner,
    )

    controller.mount()
    timers.advance(500)

    assert runner.jobs == []
    assert controller.failure is not None
    assert controller.failure.code == "CONFIG_MISSING"


def test_dispose_cancels_timer_and_ignores_in_flight_response() -> None:
    port = StubUserPort(pages={1: make_page(1, 1), 2: make_page(2, 1)})
    timers, runner = FakeTimers(), ManualRunner()
    controller, changes = _controller(port, timers, runner)

    controller.mount()
    timers.advance(500)
    controller.set_page_index(2)
    controller.dispose()
    seen = len(changes)

    assert timers.pending_count == 0
    runner.complete_all()
    assert controller.page is None
    assert len(changes) == seen

    controller.refresh()
    assert runner.jobs == []


def test_page_index_validation_and_previous_clamps() -> None:
    timers, runner = FakeTimers(), ManualRunner()
    controller, _ = _controller(StubUserPort(), timers, runner)

    with pytest.raises(ValueError):
        controller.set_page_index(0)
    with pytest.raises(ValueError):
        controller.set_page_index(True)  # type: ignore[arg-type]

    controller.previous_page()
    assert controller.page_index == 1
    assert controller.can_go_previous is False
    assert timers.pending_count == 0

    controller.next_page()
    assert controller.page_index == 2
    assert controller.can_go_previous is True


def test_setting_same_index_is_noop() -> None:
    timers, runner = FakeTimers(), ManualRunner()
    controller, changes = _controller(StubUserPort(), timers, runner)

    controller.set_page_index(1)

    assert changes == []
    assert timers.pending_count == 0


def test_suspend_then_resume_keeps_controller_usable() -> None:
    port = StubUserPort(pages={1: make_page(1, 2), 2: make_page(2, 3), 3: make_page(3, 1)})
    timers, runner = FakeTimers(), ManualRunner()
    controller, changes = _controller(port, timers, runner)

    controller.mount()
    timers.advance(500)
    controller.set_page_index(2)
    controller.suspend()
    assert timers.pending_count == 0
    runner.complete_all()  # page 1 response lands while disconnected
    assert controller.page is None

    controller.resume()
    runner.complete_all()
    assert controller.page.index == 2

    controller.next_page()
    timers.advance(500)
    runner.complete_all()
    assert controller.page.index == 3
    assert port.calls_named("get_page") == [1, 2, 3]


def test_resume_without_suspend_does_not_fetch() -> None:
    timers, runner = FakeTimers(), ManualRunner()
    controller, _ = _controller(StubUserPort(), timers, runner)

    controller.mount()
    controller.resume()

    assert runner.jobs == []
    assert timers.pending_count == 1

from __future__ import annotations

from gigadb_ui.adapters.api_errors import ApiServerError
from gigadb_ui.app.form_controller import FormPhase, MutationFormController
from gigadb_ui.domain.entities import MutationOutcome
from gigadb_ui.tests.unit.helpers import ManualRunner, StubUserPort, make_user
from gigadb_ui.usecases.create_user import CreateUser


def _form(port: StubUserPort):
    runner = ManualRunner()
    refreshes = []
    notices = []
    form = MutationFormController(
        create_user=CreateUser(port),
        runner=runner,
        on_created=lambda: refreshes.append(True),
        notify=notices.append,
    )
    return form, runner, refreshes, notices


def _filled(port: StubUserPort):
    form, runner, refreshes, notices = _form(port)
    form.open()
    form.set_name("  Ada ")
    form.set_email("ada@example.org ")
    return form, runner, refreshes, notices


def test_open_starts_with_empty_input() -> None:
    form, _, _, _ = _form(StubUserPort())

    assert form.is_open is False
    form.open()

    assert form.phase is FormPhase.INPUT
    assert (form.name, form.email, form.outcome) == ("", "", None)
    assert form.can_submit is False


def test_blank_fields_block_submission_without_network() -> None:
    port = StubUserPort()
    form, runner, refreshes, notices = _form(port)
    form.open()
    form.set_name("   ")
    form.set_email("x@example.org")

    assert form.submit() is False

    assert form.phase is FormPhase.INPUT
    assert form.error == "Required field(s) missing: name."
    assert runner.jobs == []
    assert port.calls == []
    assert notices == []
    assert refreshes == []


def test_successful_create_shows_result_and_refreshes_once() -> None:
    created = MutationOutcome(make_user("101", "Ada"), server_latency_ms=1.25)
    port = StubUserPort(create_result=created)
    form, runner, refreshes, _ = _filled(port)

    assert form.submit() is True
    assert form.phase is FormPhase.SUBMITTING
    assert form.can_submit is False
    runner.complete_all()

    assert port.calls_named("create_user") == [("Ada", "ada@example.org")]
    assert form.phase is FormPhase.RESULT_SHOWN
    assert form.outcome == created
    assert refreshes == [True]


def test_submit_ignored_outside_input_phase() -> None:
    port = StubUserPort(create_result=MutationOutcome(make_user("1")))
    form, runner, refreshes, _ = _filled(port)

    form.submit()
    assert form.submit() is False
    runner.complete_all()
    assert form.submit() is False

    assert len(port.calls_named("create_user")) == 1
    assert refreshes == [True]


def test_failed_create_returns_to_input_with_message() -> None:
    port = StubUserPort(create_result=ApiServerError("boom", status=500))
    form, runner, refreshes, notices = _filled(port)

    form.submit()
    runner.complete_all()

    assert form.phase is FormPhase.INPUT
    assert form.error == "Server error, try again."
    assert notices == ["Server error, try again."]
    assert refreshes == []
    assert form.name == "  Ada "


def test_add_another_resets_fields_from_result() -> None:
    port = StubUserPort(create_result=MutationOutcome(make_user("1")))
    form, runner, _, _ = _filled(port)

    assert form.add_another() is False
    form.submit()
    runner.complete_all()

    assert form.add_another() is True
    assert form.phase is FormPhase.INPUT
    assert (form.name, form.email, form.outcome) == ("", "", None)


def test_close_while_submitting_still_refreshes_list() -> None:
    port = StubUserPort(create_result=MutationOutcome(make_user("1")))
    form, runner, refreshes, _ = _filled(port)

    form.submit()
    form.close()
    runner.complete_all()

    assert form.phase is FormPhase.CLOSED
    assert form.outcome is None
    assert refreshes == [True]


def test_missing_configuration_notifies() -> None:
    notices = []
    form = MutationFormController(
        create_user=None,
        runner=ManualRunner(),
        on_created=lambda: None,
        notify=notices.append,
    )
    form.open()
    form.set_name("Ada")
    form.set_email("ada@example.org")

    assert form.submit() is False
    assert notices == ["API URL is not configured."]
    assert form.phase is FormPhase.INPUT


def test_dispose_silences_late_failure() -> None:
    port = StubUserPort(create_result=ApiServerError("boom", status=503))
    form, runner, _, notices = _filled(port)

    form.submit()
    form.dispose()
    runner.complete_all()

    assert notices == []
    assert form.phase is FormPhase.SUBMITTING

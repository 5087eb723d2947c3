"""NiceGUI entrypoint for the GigaDB browser."""

from __future__ import annotations

import argparse
import os
from dataclasses import replace

from nicegui import ui

from gigadb_ui.app.form_controller import FormPhase
from gigadb_ui.app.settings import load_config
from gigadb_ui.utils.logging import configure_root
from gigadb_ui.viewmodels.list_vm import (
    LIST_STATUS_EMPTY,
    LIST_STATUS_ERROR,
    LIST_STATUS_LOADING,
    project_list,
)
from gigadb_ui.viewmodels.profile_vm import (
    not_found_message,
    project_created,
    project_profile,
)
from gigadb_ui.viewmodels.roadmap_vm import TIMELINE, progress_label
from gigadb_ui.viewmodels.timing_vm import ServerTimingView
from gigadb_ui.web_ui.runtime import WebRuntime


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
body { background: #0a0a0a; color: #e5e7eb; font-family: 'IBM Plex Mono', monospace; }
.giga-card {
  background: rgba(17, 24, 39, 0.6);
  border: 1px solid #1f2937;
  border-radius: 14px;
}
.giga-title { font-size: 3rem; font-weight: 900; color: #22d3ee; cursor: pointer; }
.giga-badge { border: 1px solid #22c55e; border-radius: 999px; padding: 4px 14px; }
.giga-admin { color: #c084fc; }
.giga-user { color: #67e8f9; }
</style>
        """
    )


def _notify_error(message: str) -> None:
    """Render failed user actions as blocking NiceGUI toasts."""
    ui.notify(message, color="negative", close_button="OK", timeout=0)


def _render_timing(timing: ServerTimingView | None) -> None:
    if timing is None:
        return
    with ui.column().classes("fixed top-5 right-5 items-end gap-2").style("z-index: 50"):
        ui.label(f"Speed: {timing.latency}").classes("giga-badge")
        if timing.page is not None:
            ui.label(f"Page: {timing.page}").classes("giga-badge")


async def _ask(question: str) -> bool:
    with ui.dialog() as dialog, ui.card().classes("giga-card"):
        ui.label(question)
        with ui.row():
            ui.button("Cancel", on_click=lambda: dialog.submit(False)).props("flat")
            ui.button("Delete", color="negative", on_click=lambda: dialog.submit(True))
    answer = await dialog
    dialog.clear()
    return bool(answer)


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    async def index() -> None:
        page_size = runtime.config.page_size

        @ui.refreshable
        def render_list() -> None:
            view = project_list(session.listing, page_size)
            _render_timing(view.timing)
            if view.status == LIST_STATUS_LOADING:
                with ui.grid(columns=2).classes("w-full"):
                    for _ in range(8):
                        ui.skeleton().classes("h-24 giga-card")
                return
            if view.status == LIST_STATUS_ERROR:
                ui.label(view.message or "Failed to fetch").classes("text-negative")
            if view.status == LIST_STATUS_EMPTY:
                ui.label("No entities on this page.").classes("text-grey-6")
                return
            with ui.grid(columns=2).classes("w-full"):
                for row in view.rows:
                    card = ui.card().classes("giga-card q-pa-md w-full cursor-pointer")
                    card.on("click", lambda _, href=row.href: ui.navigate.to(href))
                    with card:
                        with ui.row().classes("items-center"):
                            ui.label(f"#{row.serial}").classes("text-caption")
                            ui.label(row.name).classes("text-h6")
                            ui.label(row.role).classes(
                                "giga-admin" if row.is_admin else "giga-user"
                            )

        @ui.refreshable
        def render_pager() -> None:
            with ui.row().classes("items-center justify-center w-full q-mt-lg"):
                prev_btn = ui.button("← Prev", on_click=session.listing.previous_page)
                if not session.listing.can_go_previous:
                    prev_btn.disable()
                ui.label(f"Page {session.listing.page_index}").classes("text-h6")
                ui.button("Next →", on_click=session.listing.next_page)

        @ui.refreshable
        def render_form() -> None:
            form = session.form
            form_widgets.pop("submit", None)
            if not form.is_open:
                return
            with ui.card().classes("giga-card q-pa-lg"):
                if form.phase is FormPhase.RESULT_SHOWN and form.outcome is not None:
                    card = project_created(form.outcome)
                    ui.label("Entity Created").classes("text-h5")
                    ui.label(f"{card.name} has been successfully indexed in GigaDB.")
                    if card.write_latency:
                        ui.label(f"Write Latency: {card.write_latency}").classes("giga-badge")
                    ui.button("View Profile →", on_click=lambda: ui.navigate.to(card.href))
                    with ui.row():
                        ui.button("+ Add Another", on_click=form.add_another)
                        ui.button("Close", on_click=form.close).props("flat")
                    return
                ui.label("Add New Entity").classes("text-h5")
                ui.input(
                    "Full Name",
                    value=form.name,
                    on_change=lambda e: form.set_name(str(e.value or "")),
                ).props("outlined dense")
                ui.input(
                    "Secure Email",
                    value=form.email,
                    on_change=lambda e: form.set_email(str(e.value or "")),
                ).props("outlined dense type=email")
                if form.error:
                    ui.label(form.error).classes("text-negative text-caption")
                with ui.row():
                    ui.button("Cancel", on_click=form.close).props("flat")
                    submitting = form.phase is FormPhase.SUBMITTING
                    submit_btn = ui.button(
                        "Processing..." if submitting else "Create User →",
                        on_click=form.submit,
                    )
                    submit_btn.set_enabled(form.can_submit)
                    form_widgets["submit"] = submit_btn

        form_widgets: dict = {}
        last_form_key: dict = {"value": None}

        def on_form_change() -> None:
            # Field edits only toggle the submit button; redrawing would reset the inputs.
            form = session.form
            key = (form.phase, form.error, form.outcome)
            if key != last_form_key["value"]:
                last_form_key["value"] = key
                render_form.refresh()
                return
            submit_btn = form_widgets.get("submit")
            if submit_btn is not None:
                submit_btn.set_enabled(form.can_submit)

        session = runtime.build_home(
            notify=_notify_error,
            on_list_change=lambda: (render_list.refresh(), render_pager.refresh()),
            on_form_change=on_form_change,
        )
        # Reconnects reuse this page and its controllers.
        ui.context.client.on_disconnect(session.suspend)
        ui.context.client.on_connect(session.resume)

        _install_theme()
        with ui.column().classes("w-full items-center q-pa-lg"):
            ui.label("GIGA DB").classes("giga-title").on(
                "click", lambda: ui.navigate.to("/roadmap")
            )
            ui.label(runtime.status_message).classes("text-caption text-grey-6")
            ui.button("+ Add User", on_click=session.form.open)
            render_form()
            render_list()
            render_pager()
        session.listing.mount()

    @ui.page("/roadmap")
    def roadmap() -> None:
        _install_theme()
        with ui.column().classes("w-full items-center q-pa-lg"):
            ui.label("SYSTEM LOGS").classes("giga-title")
            ui.label(progress_label()).classes("text-caption")
            for item in TIMELINE:
                with ui.card().classes("giga-card q-pa-md w-full").style("max-width: 720px"):
                    ui.label(item.status).classes(
                        "text-positive" if item.is_completed else "text-grey-6"
                    )
                    ui.label(item.title).classes("text-h6")
                    ui.label(item.desc)
                    with ui.row():
                        for tech in item.tech:
                            ui.label(tech).classes("giga-badge text-caption")
            ui.link("← Back to Dashboard", "/")

    @ui.page("/{user_id}")
    async def profile(user_id: str) -> None:
        @ui.refreshable
        def render_profile() -> None:
            if detail.loading or detail.detail is None and not detail.not_found:
                ui.skeleton().classes("giga-card").style("width: 480px; height: 500px")
                return
            if detail.not_found or detail.detail is None:
                ui.label("SYSTEM FAILURE").classes("text-h3 text-negative")
                ui.label(not_found_message(detail.user_id)).classes("text-negative")
                ui.link("Return to Base", "/")
                return
            card = project_profile(detail.detail)
            _render_timing(card.timing)
            with ui.card().classes("giga-card q-pa-lg").style("width: 480px"):
                with ui.row().classes("items-center justify-between w-full"):
                    ui.label(f"UID: #{card.user_id}").classes("text-caption")
                    ui.button(
                        "Copied!" if detail.copied.active else "Copy ID",
                        on_click=detail.copy_id,
                    ).props("flat dense")
                ui.label(card.name).classes("text-h4")
                ui.label(card.role).classes("giga-admin" if card.is_admin else "giga-user")
                ui.label(card.email)
                ui.label(card.bio).classes("text-grey-5")
                ui.label(f"Latency: {card.latency_label}").classes("giga-badge")
                delete_btn = ui.button(
                    "Deleting..." if detail.deleting else "Terminate User",
                    color="negative",
                    on_click=on_delete,
                )
                if not detail.can_remove:
                    delete_btn.disable()
                ui.link("← Back to Dashboard", "/")

        async def on_delete() -> None:
            if not detail.can_remove or detail.detail is None:
                return
            user = detail.detail.user
            answer = await _ask(f"Delete user '{user.name}' ({user.id})? This cannot be undone.")
            detail.remove(confirm=lambda _question: answer)

        detail = runtime.build_detail(
            navigate=ui.navigate.to,
            notify=_notify_error,
            # Dialogs are asynchronous here; on_delete passes the answer per call.
            confirm=lambda _question: False,
            clipboard=ui.clipboard.write,
            on_change=render_profile.refresh,
        )
        ui.context.client.on_disconnect(detail.suspend)
        ui.context.client.on_connect(detail.resume)

        _install_theme()
        with ui.column().classes("w-full items-center q-pa-lg"):
            render_profile()
        detail.load(user_id)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the GigaDB browser web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--api-url", default=None, help="Override GIGADB_API_URL")
    parser.add_argument("--mock", action="store_true", help="Serve offline mock data")
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    configure_root()
    config = load_config()
    if args.api_url:
        config = replace(config, api_base_url=args.api_url)
    if args.mock:
        config = replace(config, use_mock=True)
    runtime = WebRuntime(config)
    if args.smoke_test:
        print("web-smoke-ok", runtime.status_message)
        return
    _build_ui(runtime)
    ui.run(
        host=args.host,
        port=args.port,
        title="GIGA DB",
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("GIGADB_WEB_STORAGE_SECRET", "gigadb-web-ui-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()

"""NiceGUI page for ingesting notes and asking questions."""

from nicegui import events, ui

from notes_client.controller.session import InteractionController
from notes_client.models.schemas import ControllerState, SelectedFile
from notes_client.ui.formatting import backend_label, chunks_label, excerpt

CUSTOM_CSS = """
<style>
    body { background: linear-gradient(135deg, #f8fafc 0%, #eef2ff 100%); min-height: 100vh; }
    .card { background: white; border-radius: 12px; box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1); }
</style>
"""


@ui.page("/")
def notes_page() -> None:
    """Main page. Each visit gets its own controller and session state."""
    ui.add_head_html(CUSTOM_CSS)
    controller = InteractionController()

    ingest_btn: ui.button
    reset_btn: ui.button
    ask_btn: ui.button
    chunks_text: ui.label

    @ui.refreshable
    def results(state: ControllerState) -> None:
        if state.error:
            ui.label(state.error).classes("text-red-600 text-sm mt-3")
        if state.answer:
            ui.label("Answer").classes("font-semibold text-slate-800 mt-5")
            ui.label(state.answer).classes("mt-2 whitespace-pre-wrap text-slate-700")
        if state.contexts:
            ui.label("Sources").classes("font-semibold text-slate-800 mt-6")
            with ui.element("ol").classes("list-decimal ml-5 mt-2 space-y-2 text-slate-700"):
                for context in state.contexts:
                    with ui.element("li"):
                        ui.label(excerpt(context))

    def on_change(state: ControllerState) -> None:
        ingest_btn.set_text("Processing…" if state.is_busy else "Ingest Files")
        for button in (ingest_btn, reset_btn, ask_btn):
            button.set_enabled(not state.is_busy)
        chunks_text.set_text(chunks_label(state.total_chunks_indexed))
        results.refresh(state)

    async def handle_selection(e: events.MultiUploadEventArguments) -> None:
        controller.select_files([
            SelectedFile(
                name=f.name,
                content=await f.read(),
                content_type=f.content_type or "application/octet-stream",
            )
            for f in e.files
        ])
        ui.notify(f"{len(e.files)} file(s) selected")

    async def run(operation) -> None:
        if not await operation():
            error = controller.snapshot().error
            if error:
                ui.notify(error, type="negative")

    async def ingest() -> None:
        await run(controller.ingest)

    async def reset() -> None:
        await run(controller.reset)

    async def ask() -> None:
        await run(controller.ask)

    state = controller.snapshot()

    # === UI Layout ===
    with ui.column().classes("w-full max-w-5xl mx-auto px-4 py-10"):
        ui.label("Course Notes RAG Chatbot").classes("text-3xl font-bold text-slate-800")
        ui.label(
            "Upload notes (PDF, TXT, MD), then ask questions. "
            "Uses embeddings + vector search with an open model."
        ).classes("text-slate-600 mt-2")

        with ui.row().classes("w-full mt-8 gap-6 items-start no-wrap"):
            # Ingest
            with ui.column().classes("card p-5 flex-1"):
                ui.label("1) Ingest your notes").classes("font-semibold text-slate-800")
                ui.upload(
                    multiple=True,
                    auto_upload=True,
                    on_multi_upload=handle_selection,
                ).props("flat bordered").classes("mt-4 w-full")
                with ui.row().classes("mt-4 gap-3"):
                    ingest_btn = ui.button("Ingest Files", on_click=ingest).props(
                        "unelevated color=indigo"
                    )
                    reset_btn = ui.button("Reset", on_click=reset).props("flat color=grey")
                chunks_text = ui.label(chunks_label(state.total_chunks_indexed)).classes(
                    "text-sm text-slate-600 mt-3"
                )

            # Ask
            with ui.column().classes("card p-5 flex-1"):
                ui.label("2) Ask a question").classes("font-semibold text-slate-800")
                with ui.row().classes("w-full mt-3 gap-3 items-center no-wrap"):
                    ui.input(
                        value=state.question,
                        placeholder="Ask about your course notes…",
                        on_change=lambda e: controller.set_question(e.value or ""),
                    ).classes("flex-grow")
                    ui.number(
                        value=state.top_k,
                        min=1,
                        max=10,
                        on_change=lambda e: controller.set_top_k(e.value),
                    ).props("dense").classes("w-20").tooltip("Top K")
                    ask_btn = ui.button("Ask", on_click=ask).props("unelevated color=positive")
                with ui.column().classes("w-full"):
                    results(state)

        ui.label(f"Backend URL: {backend_label(controller.base_url)}").classes(
            "mt-8 text-xs text-slate-500"
        )

    controller.on_change = on_change

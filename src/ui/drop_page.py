"""NiceGUI drop zone for PDF form extraction."""

import json

import httpx
from nicegui import events, ui

from src.api.config import get_server_config
from src.models.schemas import INITIAL_STATUS_TEXT

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .pdf-drop-zone {
        border: 2px dashed #9ca3af;
        border-radius: 12px;
        background: #f9fafb;
        transition: border-color 0.2s, background 0.2s;
    }
    .pdf-drop-zone:hover { border-color: #667eea; background: #eef2ff; }

    .output-box { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


class DropPageState:
    """Client-side view of the controller."""

    def __init__(self) -> None:
        self.status_text: str = INITIAL_STATUS_TEXT
        self.extracted_data: str = ""
        self.reset_trigger: float = 0


def pretty_output(extracted_data: str) -> str:
    """Indent the serialized result for display."""
    if not extracted_data:
        return ""
    try:
        return json.dumps(json.loads(extracted_data), indent=2, ensure_ascii=False)
    except json.JSONDecodeError:
        return extracted_data


def error_detail(response: httpx.Response) -> str:
    """Pull the ``detail`` message out of an API error response."""
    try:
        return str(response.json().get("detail", response.text))
    except ValueError:
        return response.text


@ui.page("/")
def drop_page() -> None:
    """Main drop zone page."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_server_config()
    api = config.api_url
    state = DropPageState()

    output_view: ui.code

    def show_alert(message: str) -> None:
        with ui.dialog() as dialog, ui.card().classes("items-center gap-4"):
            ui.label(message).classes("text-base")
            ui.button("OK", on_click=dialog.close).props("unelevated")
        dialog.open()

    def render_output() -> None:
        output_view.set_content(pretty_output(state.extracted_data) or "{}")

    async def refresh_output() -> None:
        async with httpx.AsyncClient(timeout=10.0) as client:
            try:
                output = await client.get(f"{api}/output")
                status = await client.get(f"{api}/status")
                output.raise_for_status()
                status.raise_for_status()
            except httpx.HTTPError:
                return
        state.extracted_data = output.json()["ExtractedData"]
        state.status_text = status.json()["status_text"]
        render_output()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        async with httpx.AsyncClient(timeout=120.0) as client:
            try:
                response = await client.post(
                    f"{api}/upload/pdf",
                    files={"file": (e.file.name, content, e.file.content_type)},
                )
            except httpx.RequestError as exc:
                show_alert(f"Connection failed: {exc}")
                return
        upload.reset()

        if response.status_code != 200:
            show_alert(error_detail(response))
            return

        data = response.json()
        state.extracted_data = data["extracted_data"]
        state.status_text = data["status_text"]
        render_output()

    async def push_reset_trigger(e: events.ValueChangeEventArguments) -> None:
        async with httpx.AsyncClient(timeout=10.0) as client:
            try:
                response = await client.post(
                    f"{api}/reset", json={"reset_trigger": e.value}
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                ui.notify(f"HTTP {exc.response.status_code}", type="negative")
                return
            except httpx.RequestError as exc:
                ui.notify(f"Connection failed: {exc}", type="negative")
                return

        data = response.json()
        state.reset_trigger = data["reset_trigger"]
        state.status_text = data["status_text"]
        if data["reset"]:
            state.extracted_data = ""
            render_output()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container"),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("picture_as_pdf").classes("text-white text-3xl")
                ui.label("PDF Form Extractor").classes("text-lg font-semibold text-white")
            ui.number(
                "Reset trigger", value=state.reset_trigger, on_change=push_reset_trigger
            ).props("dense dark outlined").classes("w-32")

        # Drop zone
        with ui.column().classes("w-full p-5 gap-3"):
            with ui.column().classes("w-full pdf-drop-zone p-6 items-center gap-3"):
                ui.icon("upload_file").classes("text-5xl text-gray-400")
                ui.label().bind_text_from(state, "status_text").classes(
                    "text-lg text-gray-600"
                )
                upload = (
                    ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                    .props("flat bordered")
                    .classes("w-full")
                )

            # Output
            ui.label("ExtractedData").classes("text-sm font-semibold text-gray-500")
            output_view = ui.code("{}", language="json").classes("w-full output-box")

    ui.timer(config.poll_interval, refresh_output)

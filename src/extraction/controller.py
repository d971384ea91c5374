"""Drop/reset controller for PDF form extraction.

Owns the only mutable state of the extractor and mediates between the host
(API and UI) and the pure extraction functions.

State transitions:

1. **Drop** - A dropped file with the accepted MIME type is read with pypdf,
   normalized, serialized and stored. Invalid input or a parse failure raises a
   user-facing alert and leaves the stored output untouched.

2. **Reset** - The host pushes a numeric trigger. Only a *change* of the value
   clears the output; repeating the same value is a no-op.

3. **Read** - ``get_output`` returns the stored string verbatim.

Drops are serialized with an ``asyncio.Lock`` so a second drop waits for the
first one to be applied. pypdf work runs in a worker thread to keep the event
loop responsive.
"""

import asyncio
import logging
from collections.abc import Callable

from src.extraction.config import ExtractorConfig, get_extractor_config
from src.extraction.extractor import extract_fields, serialize_result
from src.models.schemas import (
    INITIAL_STATUS_TEXT,
    ControllerState,
    DroppedFile,
    DropOutcome,
)
from src.parsing.pdf_parser import PDFParseError, parse_form_fields

logger = logging.getLogger(__name__)

INVALID_FILE_MESSAGE = "Please drop a valid PDF file."
PROCESSING_ERROR_MESSAGE = "Error extracting PDF data. Ensure it's a valid form PDF."
PROCESSED_STATUS_TEXT = "PDF processed. Data extracted."

OutputListener = Callable[[str], None]
AlertListener = Callable[[str], None]


class DropController:
    """Stateful adapter between drop/reset signals and the field extractor.

    Exposes three operations to the host layer:
    - ``on_drop``: process a dropped file
    - ``on_reset_signal``: edge-triggered output reset
    - ``get_output``: current serialized extraction result
    """

    def __init__(
        self,
        initial_reset_trigger: float | None = None,
        config: ExtractorConfig | None = None,
    ) -> None:
        """Initialize the controller in the idle state.

        Args:
            initial_reset_trigger: Trigger value supplied by the host at start.
                Falls back to the configured value; ``None`` counts as 0.
            config: Optional configuration. Loads from environment if not provided.
        """
        self._config = config or get_extractor_config()
        if initial_reset_trigger is None:
            initial_reset_trigger = self._config.initial_reset_trigger
        self._state = ControllerState(reset_trigger=initial_reset_trigger or 0)
        self._output_listeners: list[OutputListener] = []
        self._alert_listeners: list[AlertListener] = []
        self._drop_lock = asyncio.Lock()

    @property
    def state(self) -> ControllerState:
        """Snapshot of the current state."""
        return self._state.model_copy()

    def add_output_listener(self, listener: OutputListener) -> None:
        """Register a callback invoked with the new output whenever it changes."""
        self._output_listeners.append(listener)

    def add_alert_listener(self, listener: AlertListener) -> None:
        """Register a callback invoked with user-facing error messages."""
        self._alert_listeners.append(listener)

    def _notify_output_changed(self) -> None:
        for listener in self._output_listeners:
            listener(self._state.last_extracted_data)

    def _alert(self, message: str) -> None:
        for listener in self._alert_listeners:
            listener(message)

    def _is_accepted(self, file: DroppedFile | None) -> bool:
        return file is not None and file.content_type == self._config.accepted_mime_type

    async def on_drop(self, file: DroppedFile | None) -> DropOutcome:
        """Handle a file dropped onto the drop zone.

        Args:
            file: The dropped file, or None when the drop carried no file.

        Returns:
            DropOutcome describing what happened. The stored output only
            changes on ``DropOutcome.EXTRACTED``.
        """
        if not self._is_accepted(file):
            content_type = file.content_type if file else None
            logger.warning(f"Rejected drop with content type {content_type!r}")
            self._alert(INVALID_FILE_MESSAGE)
            return DropOutcome.INVALID_TYPE

        async with self._drop_lock:
            try:
                fields = await asyncio.to_thread(
                    parse_form_fields, file.content, self._config.max_file_size
                )
                result = extract_fields(fields)
            except PDFParseError as e:
                logger.warning(f"PDF processing error for {file.filename}: {e}")
                self._alert(PROCESSING_ERROR_MESSAGE)
                return DropOutcome.PARSE_FAILED
            except Exception:
                logger.exception(f"Unexpected error extracting fields from {file.filename}")
                self._alert(PROCESSING_ERROR_MESSAGE)
                return DropOutcome.PARSE_FAILED

            self._state.last_extracted_data = serialize_result(result)
            self._state.field_count = len(result.fields)
            self._state.status_text = PROCESSED_STATUS_TEXT
            logger.info(f"Extracted {self._state.field_count} fields from {file.filename}")

        self._notify_output_changed()
        return DropOutcome.EXTRACTED

    def on_reset_signal(self, new_value: float | None) -> bool:
        """Clear the output when the reset trigger changes.

        Args:
            new_value: Trigger value from the host; None counts as 0.

        Returns:
            True if the trigger changed and a reset happened.
        """
        new_value = 0 if new_value is None else new_value
        if new_value == self._state.reset_trigger:
            return False

        logger.info(f"Reset trigger changed {self._state.reset_trigger} -> {new_value}")
        self._state.last_extracted_data = ""
        self._state.field_count = 0
        self._state.status_text = INITIAL_STATUS_TEXT
        self._state.reset_trigger = new_value
        self._notify_output_changed()
        return True

    def get_output(self) -> str:
        """Return the serialized extraction result, or an empty string."""
        return self._state.last_extracted_data


# Module-level singleton instance
_controller: DropController | None = None


def get_controller() -> DropController:
    """Get or create the global drop controller.

    Returns:
        The DropController instance.
    """
    global _controller
    if _controller is None:
        _controller = DropController()
    return _controller


def reset_controller() -> None:
    """Discard the global controller and its state."""
    global _controller
    _controller = None

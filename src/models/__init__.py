"""Pydantic models shared by the reader, extractor, controller and API.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - FieldKind: Closed set of form field variants
    - FormField: A field as read from the PDF
    - ExtractionResult: Normalized name/value mapping plus ordered names
    - ControllerState: Drop controller state
    - DroppedFile: File handed over by the drop zone
    - DropResponse / ResetRequest / ResetResponse / ControllerOutput: API payloads
"""

from src.models.schemas import (
    INITIAL_STATUS_TEXT,
    UNSUPPORTED_FIELD_VALUE,
    ControllerOutput,
    ControllerState,
    ControllerStatus,
    DroppedFile,
    DropOutcome,
    DropResponse,
    ExtractedValue,
    ExtractionResult,
    FieldKind,
    FormField,
    ResetRequest,
    ResetResponse,
)

__all__ = [
    "INITIAL_STATUS_TEXT",
    "UNSUPPORTED_FIELD_VALUE",
    "ControllerOutput",
    "ControllerState",
    "ControllerStatus",
    "DropOutcome",
    "DropResponse",
    "DroppedFile",
    "ExtractedValue",
    "ExtractionResult",
    "FieldKind",
    "FormField",
    "ResetRequest",
    "ResetResponse",
]

from enum import Enum

from pydantic import BaseModel, Field, field_validator

UNSUPPORTED_FIELD_VALUE = "Unsupported field type"
INITIAL_STATUS_TEXT = "Drag and drop the PDF here"

ExtractedValue = bool | str | list[str]


class FieldKind(str, Enum):
    """Form field variants recognized by the extractor."""

    TEXT = "text"
    CHECKBOX = "checkbox"
    RADIO_GROUP = "radio_group"
    DROPDOWN = "dropdown"
    MULTI_SELECT = "multi_select"
    OTHER = "other"


class DropOutcome(str, Enum):
    """Result of handling a single file drop."""

    EXTRACTED = "extracted"
    INVALID_TYPE = "invalid_type"
    PARSE_FAILED = "parse_failed"


class FormField(BaseModel):
    """A form field as read from the PDF.

    Attributes:
        name: Fully qualified field name (``parent.child`` for nested fields).
        kind: Field variant.
        value: Raw stored value; ``None``, a string, or a list of strings.
        options: Export values from ``/Opt``, when the field declares them.
    """

    name: str
    kind: FieldKind
    value: str | list[str] | None = None
    options: list[str] | None = None


class ExtractionResult(BaseModel):
    """Normalized form data.

    Attributes:
        data: Field name to extracted value.
        fields: Field names in document order, duplicates included.
    """

    data: dict[str, ExtractedValue] = Field(default_factory=dict)
    fields: list[str] = Field(default_factory=list)


class ControllerState(BaseModel):
    """In-memory state owned by the drop controller."""

    last_extracted_data: str = ""
    field_count: int = 0
    reset_trigger: float = 0
    status_text: str = INITIAL_STATUS_TEXT


class DroppedFile(BaseModel):
    """A file handed over by the drop zone.

    Attributes:
        filename: Original file name.
        content_type: MIME type reported by the browser.
        content: Raw file bytes.
    """

    filename: str = ""
    content_type: str | None = None
    content: bytes = b""


class DropResponse(BaseModel):
    """Response after a successful PDF drop.

    Attributes:
        filename: Name of the uploaded file.
        success: Whether extraction succeeded.
        field_count: Number of fields read from the form.
        extracted_data: Serialized extraction result.
        status_text: Drop-zone label after processing.
    """

    filename: str
    success: bool
    field_count: int = Field(ge=0)
    extracted_data: str
    status_text: str


class ResetRequest(BaseModel):
    """Reset trigger value pushed by the host."""

    reset_trigger: float | None = None

    @field_validator("reset_trigger", mode="before")
    @classmethod
    def empty_string_is_none(cls, v: object) -> object:
        """Treat a blank form input as an absent trigger."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ResetResponse(BaseModel):
    """Result of a reset signal.

    Attributes:
        reset: Whether the trigger changed and the output was cleared.
        reset_trigger: Trigger value now stored by the controller.
        status_text: Drop-zone label after the signal.
    """

    reset: bool
    reset_trigger: float
    status_text: str


class ControllerOutput(BaseModel):
    """Host-facing output of the extractor."""

    extracted_data: str = Field(serialization_alias="ExtractedData")


class ControllerStatus(BaseModel):
    """Current drop-zone label and trigger value."""

    status_text: str
    reset_trigger: float
    has_data: bool

"""Extractor configuration with environment variable loading.

Pydantic-based configuration for the drop controller and form reader.
Environment values are validated like explicit arguments.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.parsing.pdf_parser import MAX_FILE_SIZE

# Load environment variables from .env file
load_dotenv()

PDF_MIME_TYPE = "application/pdf"


class ExtractorConfig(BaseModel):
    """Configuration for the drop controller.

    Attributes:
        max_file_size: Largest accepted PDF in bytes.
        initial_reset_trigger: Reset trigger value the controller starts from.
        accepted_mime_type: The only MIME type a dropped file may carry.
    """

    model_config = ConfigDict(validate_default=True)

    max_file_size: int = Field(
        default_factory=lambda: os.getenv("MAX_FILE_SIZE", str(MAX_FILE_SIZE)),
        ge=1,
        description="Maximum PDF size in bytes",
    )
    initial_reset_trigger: float | None = Field(
        default_factory=lambda: os.getenv("RESET_TRIGGER", "0"),
        description="Reset trigger value at startup (None is treated as 0)",
    )
    accepted_mime_type: str = Field(
        default_factory=lambda: os.getenv("ACCEPTED_MIME_TYPE", PDF_MIME_TYPE),
        description="MIME type a dropped file must have",
    )

    @field_validator("accepted_mime_type")
    @classmethod
    def validate_mime_type(cls, v: str) -> str:
        """Validate that the accepted MIME type is non-empty."""
        if not v or not v.strip():
            raise ValueError("accepted_mime_type must not be empty")
        return v.strip()


def get_extractor_config() -> ExtractorConfig:
    """Create extractor configuration from environment.

    Returns:
        Configured ExtractorConfig instance.

    Raises:
        ValidationError: If an environment value is malformed or out of range.
    """
    return ExtractorConfig()

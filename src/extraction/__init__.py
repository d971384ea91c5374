"""Form field extraction and drop handling.

Responsibilities:
    - Normalizing each field kind to a plain JSON value
    - Serializing the ``{data, fields}`` result
    - Holding the drop/reset state the host reads from

Keeps pypdf behind the parsing package and HTTP concerns in the API layer.
"""

from src.extraction.config import ExtractorConfig, get_extractor_config
from src.extraction.controller import DropController, get_controller, reset_controller
from src.extraction.extractor import extract_fields, normalize_value, serialize_result

__all__ = [
    "DropController",
    "ExtractorConfig",
    "extract_fields",
    "get_controller",
    "get_extractor_config",
    "normalize_value",
    "reset_controller",
    "serialize_result",
]

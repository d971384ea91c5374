"""PDF form reading module using pypdf.

Loads PDF bytes and lists the interactive form fields with their raw values.
"""

import io
import logging
from typing import Any

from pypdf import PdfReader
from pypdf.errors import PdfReadError
from pypdf.generic import DictionaryObject

from src.models.schemas import FieldKind, FormField

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"

# Field flags (PDF 32000-1, 12.7.4)
FLAG_RADIO = 1 << 15
FLAG_PUSHBUTTON = 1 << 16
FLAG_COMBO = 1 << 17

# Keys a terminal field may inherit from its ancestors
INHERITABLE_KEYS = ("/FT", "/Ff", "/V", "/Opt")


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


def _validate_pdf_bytes(file_content: bytes, max_file_size: int) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.
        max_file_size: Size limit in bytes.

    Raises:
        PDFParseError: If validation fails.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    if len(file_content) > max_file_size:
        size_mb = len(file_content) / (1024 * 1024)
        limit_mb = max_file_size / (1024 * 1024)
        raise PDFParseError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)"
        )

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _to_plain(obj: Any) -> str | list[str] | None:
    """Convert a pypdf value object into plain Python strings."""
    if obj is None:
        return None
    obj = obj.get_object()
    if isinstance(obj, list):
        return [item for item in (_to_plain(i) for i in obj) if isinstance(item, str)]
    if isinstance(obj, bytes):
        return obj.decode("latin-1")
    return str(obj)


def _to_options(obj: Any) -> list[str] | None:
    """Convert an /Opt array into export values.

    Entries are either a string or an ``[export, display]`` pair.
    """
    if obj is None:
        return None
    options: list[str] = []
    for entry in obj.get_object():
        entry = entry.get_object()
        if isinstance(entry, list):
            entry = entry[0] if entry else ""
        options.append(_to_plain(entry) or "")
    return options


def _classify(field_type: str | None, flags: int) -> FieldKind:
    """Map an AcroForm /FT entry and /Ff flags onto a field kind."""
    if field_type == "/Tx":
        return FieldKind.TEXT
    if field_type == "/Btn":
        if flags & FLAG_PUSHBUTTON:
            return FieldKind.OTHER
        if flags & FLAG_RADIO:
            return FieldKind.RADIO_GROUP
        return FieldKind.CHECKBOX
    if field_type == "/Ch":
        if flags & FLAG_COMBO:
            return FieldKind.DROPDOWN
        return FieldKind.MULTI_SELECT
    return FieldKind.OTHER


def _named_kids(node: DictionaryObject) -> list[DictionaryObject]:
    """Return child fields of a node, skipping bare widget annotations."""
    kids = node.get("/Kids")
    if kids is None:
        return []
    children = [kid.get_object() for kid in kids.get_object()]
    return [child for child in children if "/T" in child]


def _collect_fields(
    node: DictionaryObject,
    parent_name: str,
    inherited: dict[str, Any],
    out: list[FormField],
) -> None:
    """Depth-first walk of one field subtree, appending terminal fields.

    ``PdfReader.get_fields()`` keys its result by qualified name, which folds
    repeated names into one entry; every terminal field must be listed here.
    """
    partial = node.get("/T")
    if partial is not None:
        partial = _to_plain(partial)
    if parent_name and partial:
        name = f"{parent_name}.{partial}"
    else:
        name = partial or parent_name

    attrs = dict(inherited)
    for key in INHERITABLE_KEYS:
        if key in node:
            attrs[key] = node[key]

    children = _named_kids(node)
    if children:
        for child in children:
            _collect_fields(child, name, attrs, out)
        return

    field_type = attrs.get("/FT")
    flags = int(attrs.get("/Ff", 0) or 0)
    out.append(
        FormField(
            name=name,
            kind=_classify(str(field_type) if field_type is not None else None, flags),
            value=_to_plain(attrs.get("/V")),
            options=_to_options(attrs.get("/Opt")),
        )
    )


def parse_form_fields(file_content: bytes, max_file_size: int = MAX_FILE_SIZE) -> list[FormField]:
    """Parse a PDF file and list its interactive form fields.

    Args:
        file_content: Raw bytes of the PDF file.
        max_file_size: Size limit in bytes.

    Returns:
        Terminal form fields in document order.

    Raises:
        PDFParseError: If the file is invalid, too large, encrypted, corrupt,
            or has no interactive form.
    """
    _validate_pdf_bytes(file_content, max_file_size)

    try:
        reader = PdfReader(io.BytesIO(file_content))
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if reader.is_encrypted:
        raise PDFParseError("Encrypted PDF not supported")

    try:
        root = reader.trailer["/Root"].get_object()
        acro_form = root.get("/AcroForm")
        if acro_form is None:
            raise PDFParseError("PDF has no interactive form")
        acro_form = acro_form.get_object()

        top_level = acro_form.get("/Fields")
        fields: list[FormField] = []
        if top_level is not None:
            for ref in top_level.get_object():
                _collect_fields(ref.get_object(), "", {}, fields)
    except PDFParseError:
        raise
    except Exception as e:
        raise PDFParseError(f"Failed to read form fields: {e}") from e

    if not fields:
        logger.warning("PDF form contains no fields")

    logger.debug(f"Read {len(fields)} form fields")
    return fields

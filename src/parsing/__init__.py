"""PDF form reading on top of pypdf.

Turns a dropped document into the flat list of interactive form fields the
extractor works on.

Responsibilities:
    - Byte-level validation (empty, size cap, PDF header)
    - Rejecting encrypted and non-form documents
    - Walking the AcroForm field tree with fully qualified names
    - Classifying each terminal field into a FieldKind
"""

from src.parsing.pdf_parser import MAX_FILE_SIZE, PDFParseError, parse_form_fields

__all__ = ["MAX_FILE_SIZE", "PDFParseError", "parse_form_fields"]

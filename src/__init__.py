"""PDF Form Extractor - drop a PDF form, get its field values as JSON.

Combines pypdf for AcroForm reading, FastAPI for the host-facing API,
NiceGUI for the drop zone, and Pydantic for data validation.

Components:
    - parsing: pypdf-backed form field reading
    - extraction: field normalization and the drop/reset controller
    - api: HTTP endpoints for drops, resets and output reads
    - ui: Drop zone web interface
    - models: Shared schemas
"""

__version__ = "0.1.0"

"""FastAPI host surface for the PDF form extractor.

Plays the host-framework role: pushes drops and reset triggers into the
controller and exposes its output.

Endpoints:
    - GET /health: Service health status
    - POST /upload/pdf: Drop a PDF form for extraction
    - POST /reset: Push the reset trigger value
    - GET /output: Current ExtractedData string
    - GET /status: Drop-zone label and stored trigger
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]

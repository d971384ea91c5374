"""Test package for PDF Form Extractor.

Provides coverage for all components with unit tests for isolated logic
and integration tests for the HTTP workflow.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end workflow tests
    - pdf_factory.py: In-memory AcroForm PDFs built with pypdf

No mocks in integration tests.
Leverages pytest with pytest-check for soft assertions.
"""

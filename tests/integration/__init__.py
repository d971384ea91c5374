"""Integration tests for components working together as a system.

No mocks for core functionality - tests real interactions.

Coverage:
    - API endpoints with real HTTP requests
    - PDF form reading with generated documents
    - Full workflow from drop to output read and reset
"""

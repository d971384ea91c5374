"""NiceGUI interface - thin visualization layer for the drop zone.

Responsibilities:
    - Drop zone for a single PDF file with status label
    - Reset trigger input forwarded to the API
    - Blocking alert dialogs for rejected or unreadable files
    - Polled view of the ExtractedData output

Contains minimal business logic. Delegates all operations to the API.
Remains a pure presentation layer.
"""

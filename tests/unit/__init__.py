"""Unit tests for individual components in isolation.

Ensures fast execution with minimal dependencies.

Coverage:
    - extraction/: Field normalization, serialization, drop/reset controller
    - parsing/: AcroForm reading and rejection rules
    - config: Environment-driven settings

Follows single responsibility per test function. Leverages pytest-check for
multiple assertions per test.
"""

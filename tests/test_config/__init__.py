"""
Configuration Tests

Tests for dataclass validation and YAML loading/saving.
"""

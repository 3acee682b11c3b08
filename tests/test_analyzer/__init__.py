"""
Analyzer Tests

Tests for dispatch statistics collected from broker broadcasts.
"""

"""
Controller Tests

Tests for elevator allocation and the dispatch controller's call lifecycle,
including queue draining under fleet saturation.
"""

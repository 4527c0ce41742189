"""Scenario file parsing."""

"""Utility helpers for ddengine."""

"""Data model: states, layers, and the diagram configuration."""

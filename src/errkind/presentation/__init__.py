"""Presentation layer: HTTP boundary for annotated errors."""

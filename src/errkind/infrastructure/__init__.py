"""Infrastructure layer: logging adapters."""

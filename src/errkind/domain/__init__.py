"""Domain layer: protocols consumed by boundary code."""

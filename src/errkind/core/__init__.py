"""Core layer: kinds, error records and configuration."""

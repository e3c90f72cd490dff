"""CLI 진입점."""

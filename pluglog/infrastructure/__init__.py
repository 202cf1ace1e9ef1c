"""Infrastructure layer for pluglog."""

"""passlink API layer."""

"""HTTP API for note commands."""

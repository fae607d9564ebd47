"""HTTP API for video insights."""

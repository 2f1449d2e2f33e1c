"""HTTP API for the status service."""

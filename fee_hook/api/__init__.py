"""HTTP API for the fee hook."""

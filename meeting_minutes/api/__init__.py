"""HTTP API exposing the data access layer."""

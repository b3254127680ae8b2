"""In-memory stand-ins for downstream services."""

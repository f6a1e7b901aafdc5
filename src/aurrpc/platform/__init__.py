"""Infrastructure adapters: logging, HTTP transport, and JSON parsing."""

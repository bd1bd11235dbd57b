"""Infrastructure layer - adapters, stubs and observability."""

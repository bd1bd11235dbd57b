"""Application layer - transaction boundary, ports and read models."""

"""Application layer orchestrating resolution use cases."""

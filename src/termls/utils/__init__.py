"""Display pipeline utilities."""

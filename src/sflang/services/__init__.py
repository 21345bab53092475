"""Service layer — compile, format, and tag introspection operations."""

"""Core domain layer: exception hierarchy."""

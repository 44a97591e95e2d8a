"""Shared helpers: logging, errors, validation and the callable envelope."""

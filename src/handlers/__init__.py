"""Lambda entrypoints for the callable functions."""

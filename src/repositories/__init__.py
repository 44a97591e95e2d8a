"""Data access for the tickets table."""

"""Ambient infrastructure: configuration, errors and logging."""

"""Shared utilities: configuration, constants and logging."""

"""Shared helpers: error types, logging and progress reporting."""

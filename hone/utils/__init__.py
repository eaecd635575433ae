"""Shared helpers: logging setup, file and path utilities."""

"""Shared utilities: logging, errors and price parsing."""

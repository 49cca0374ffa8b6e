"""Logging, file and path helpers."""

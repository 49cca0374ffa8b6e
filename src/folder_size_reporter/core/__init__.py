"""Scanning, measuring and report writing."""

"""Maintenance jobs (console entry points)."""

"""Shared helpers: unit conversion and logging plumbing."""

"""Shared helpers for the finance tracker core."""

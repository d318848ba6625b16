"""Dependency wiring."""

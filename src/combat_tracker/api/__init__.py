"""Boundary-facing schemas."""

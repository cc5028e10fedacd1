"""Packaged JSON schemas for gridflow documents."""

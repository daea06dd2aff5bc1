"""Bundled sample data sets."""

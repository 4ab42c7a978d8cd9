"""Presentation layer: host pipeline hooks and command line."""

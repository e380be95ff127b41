"""Parsing and normalization services used by the schema mapper."""

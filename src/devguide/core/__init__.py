"""Core catalog, asset source and loader."""

"""Counting use cases: chunk reading, counting, and dispatch."""

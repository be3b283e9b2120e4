# scoring/__init__.py
"""Similarity and match scoring modules."""

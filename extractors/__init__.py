# extractors/__init__.py
"""Skill extraction modules."""

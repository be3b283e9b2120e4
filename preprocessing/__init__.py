# preprocessing/__init__.py
"""Text preprocessing modules."""

"""Core business logic layer.

Subpackages:
- filtering: meal catalog filtering and filter options
- planning: weekly windows and meal-to-day assignments
"""
__all__ = ["filtering", "planning"]

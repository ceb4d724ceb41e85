"""Core business logic layer.

Subpackages:
- planning: weekly plan generation
- shopping: building the categorized shopping list

Everything here is pure: it receives in-memory values and returns new ones.
"""
__all__ = ["planning", "shopping"]

"""Core business logic layer.

Subpackages:
- generation: weekly menu generation and staggered reveal
- shopping: building shopping lists
- recipes: recipe catalog search, filter and sort
- reporting: cost summaries
"""
__all__ = ["generation", "shopping", "recipes", "reporting"]

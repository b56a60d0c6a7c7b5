"""Build a LaTeX recipe book and a grocery list from eMeals recipe pages."""

__version__ = "0.1.0"
"""Dice helpers, scoring rules and the category rulebook."""

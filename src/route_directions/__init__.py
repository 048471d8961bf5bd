"""Immutable route model and turn-by-turn directions."""

"""Legality and scoring engine for grid-based word-placement games."""

"""Nuremento: memory journaling service with daily picks and time capsules."""

__version__ = "1.0.0"

"""Scoring rules for badminton games."""

from . import badminton

__all__ = [
    "badminton",
]

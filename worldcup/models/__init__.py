"""Data models."""

from .match import Country, Match

__all__ = ["Country", "Match"]

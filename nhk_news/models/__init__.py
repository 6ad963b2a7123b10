"""Typed models used across the package."""

from .article import Article

__all__ = ["Article"]

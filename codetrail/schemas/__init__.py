"""Schemas for the application."""

from .git import ChangeType

__all__ = ["ChangeType"]

"""
Package: validation
Description: Validation of raw user events against per-type rules.
"""

from .validator import EventValidator

__all__ = ["EventValidator"]

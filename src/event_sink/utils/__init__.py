"""
Module: utils
Description: Package initialization for utility functions.

Current utilities:
- logger: Structured logging configuration and helpers
- sanitizer: Recursive null pruning for outgoing payloads
"""

from .sanitizer import prune

__all__ = ["prune"]

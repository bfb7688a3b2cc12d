"""
Shared utilities: logging setup and common response envelopes.
"""

__all__ = []

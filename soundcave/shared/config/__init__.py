"""
Configuration package: environment-driven settings and the async database engine.
"""

__all__ = []

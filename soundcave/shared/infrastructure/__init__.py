"""
Infrastructure layer package for SoundCave.
Provides external storage clients.
"""

__all__ = []

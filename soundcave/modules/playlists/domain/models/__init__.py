"""
Playlist entities.
"""

from .playlist import Playlist, PlaylistSong

__all__ = ["Playlist", "PlaylistSong"]

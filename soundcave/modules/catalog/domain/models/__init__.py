"""
Catalog domain entities.
"""

from .album import Album, AlbumType
from .artist import Artist
from .music import Music

__all__ = ["Album", "AlbumType", "Artist", "Music"]

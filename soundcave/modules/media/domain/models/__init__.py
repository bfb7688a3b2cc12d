from .image import Image

__all__ = ["Image"]

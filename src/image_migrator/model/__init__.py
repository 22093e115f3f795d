"""Data models"""
from .base import BaseModel
from .legacy_image import LegacyImage
from .image import Image

__all__ = [
    "BaseModel",
    "LegacyImage",
    "Image",
]

from .assembler import BatchResult, ElementFailure, ResourceAssembler
from .hydrator import ImageResolver, ResourceHydrator
from .models import Artist, Artwork, Exhibition

__all__ = [
    "Artist",
    "Artwork",
    "BatchResult",
    "ElementFailure",
    "Exhibition",
    "ImageResolver",
    "ResourceAssembler",
    "ResourceHydrator",
]

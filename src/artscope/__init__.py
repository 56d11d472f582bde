"""artscope: query, image and hydration layer for the Art Institute of Chicago API."""

__version__ = "0.1.0"

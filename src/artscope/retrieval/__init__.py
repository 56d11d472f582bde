from .fetcher import ApiEnvelope, ApiFetcher, FetchFn, fetch_envelope, parse_envelope
from .iiif import build_image_url
from .query_urls import ResourceKind, build_query_url

__all__ = [
    "ApiEnvelope",
    "ApiFetcher",
    "FetchFn",
    "ResourceKind",
    "build_image_url",
    "build_query_url",
    "fetch_envelope",
    "parse_envelope",
]

"""Pytest configuration and fixtures."""

import copy

import pytest

from artscope.config.loader import Settings
from artscope.errors import TransportError
from artscope.retrieval.query_urls import ResourceKind, build_query_url
from artscope.resources.assembler import ResourceAssembler

IIIF_BASE = "https://www.artic.edu/iiif/2"


class FakeTransport:
    """In-memory stand-in for the HTTP transport, keyed by exact URL."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def add(self, url, payload):
        self.routes[url] = payload

    async def fetch(self, url):
        self.calls.append(url)
        if url not in self.routes:
            raise TransportError(f"No route for {url}", url=url, status_code=404)
        payload = self.routes[url]
        if isinstance(payload, Exception):
            raise payload
        return copy.deepcopy(payload)


def artwork_payload(artwork_id, image_id=None, **overrides):
    payload = {
        "api_model": "artworks",
        "api_link": f"https://api.artic.edu/api/v1/artworks/{artwork_id}",
        "id": artwork_id,
        "title": f"Artwork {artwork_id}",
        "image_id": image_id,
        "artist_id": 35809,
        "artist_display": "Claude Monet\nFrench, 1840-1926",
        "date_display": "1890",
        "date_start": 1890,
        "date_end": 1890,
        "short_description": "<p>A haystack.</p>",
        "description": "<p>Longer text.</p>",
        "alt_titles": None,
        "place_of_origin": "France",
        "medium_display": "Oil on canvas",
        "artist_ids": [35809],
        "artist_titles": ["Claude Monet"],
        "style_title": "Impressionism",
        "classification_title": "painting",
    }
    payload.update(overrides)
    return payload


def artist_payload(artist_id, **overrides):
    payload = {
        "api_model": "agents",
        "api_link": f"https://api.artic.edu/api/v1/agents/{artist_id}",
        "id": artist_id,
        "title": f"Artist {artist_id}",
        "birth_date": 1840,
        "death_date": 1926,
        "description": "<p>Painter.</p>",
    }
    payload.update(overrides)
    return payload


def exhibition_payload(exhibition_id, image_id=None, **overrides):
    payload = {
        "api_model": "exhibitions",
        "api_link": f"https://api.artic.edu/api/v1/exhibitions/{exhibition_id}",
        "id": exhibition_id,
        "title": f"Exhibition {exhibition_id}",
        "short_description": "Featured show.",
        "image_url": f"https://artic-web.imgix.net/hero-{exhibition_id}.jpg",
        "gallery_title": "Regenstein Hall",
        "artwork_ids": [1, 2],
        "image_id": image_id,
    }
    payload.update(overrides)
    return payload


def image_route(image_id, canonical_id=None):
    """Route (url, payload) for the image metadata lookup of image_id."""
    url = build_query_url(ResourceKind.IMAGE, [image_id], required_fields_only=False)
    payload = {
        "data": {"id": canonical_id or image_id, "api_model": "images", "title": "img"},
        "config": {"iiif_url": IIIF_BASE, "website_url": "http://www.artic.edu"},
    }
    return url, payload


def image_url_for(image_id, width=843):
    return f"{IIIF_BASE}/{image_id}/full/{width},/0/default.jpg"


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def assembler(transport, settings):
    return ResourceAssembler(transport, settings)

"""Turns raw API records into typed Artwork, Artist and Exhibition records.

Secondary lookups are injected so hydration can run against stubs:

- resolve_image(image_id) -> IIIF URL for the preferred image
- resolve_known_works(artist_id) -> list of Artwork records by that artist
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from artscope.config.loader import API_BASE_URL
from artscope.errors import InvalidArgument, SchemaViolation
from artscope.retrieval.fetcher import FetchFn, fetch_envelope
from artscope.retrieval.iiif import build_image_url
from artscope.retrieval.query_urls import ResourceKind, build_query_url, coerce_kind
from artscope.utils.logging import get_logger

from .models import Artist, Artwork, Exhibition
from .schemas import (
    AGENTS_TAG,
    ARTWORKS_TAG,
    EXHIBITIONS_TAG,
    ArtistPayload,
    ArtworkPayload,
    ExhibitionPayload,
    validate_payload,
)

logger = get_logger(__name__)

ImageResolverFn = Callable[[str], Awaitable[str]]
WorksResolverFn = Callable[[int], Awaitable[List[Artwork]]]

HYDRATABLE_KINDS = (ResourceKind.EXHIBIT, ResourceKind.ARTIST, ResourceKind.ARTWORK)

Resource = Union[Artwork, Artist, Exhibition]


class ImageResolver:
    """Resolves an image id to a IIIF URL via the image metadata endpoint."""

    def __init__(self, fetch: FetchFn, width: int = 843, base_url: str = API_BASE_URL):
        self.fetch = fetch
        self.width = width
        self.base_url = base_url

    async def resolve(self, image_id: str) -> str:
        """
        Fetch the image record and build its URL at the configured width.

        Raises:
            SchemaViolation: If the response lacks config.iiif_url or an image record
        """
        logger.debug(f"Resolving image {image_id}")
        url = build_query_url(ResourceKind.IMAGE, [image_id], required_fields_only=False, base_url=self.base_url)
        envelope = await fetch_envelope(self.fetch, url)

        if envelope.config is None or not envelope.config.iiif_url:
            raise SchemaViolation(f"Image response for {image_id} has no config.iiif_url")
        if not envelope.data or envelope.data[0].get("id") is None:
            raise SchemaViolation(f"Image response for {image_id} has no image record")

        return build_image_url(envelope.config.iiif_url, envelope.data[0]["id"], width=self.width)


class ResourceHydrator:
    """Validates raw records and maps them onto typed records."""

    def __init__(self, resolve_image: ImageResolverFn, resolve_known_works: WorksResolverFn):
        self.resolve_image = resolve_image
        self.resolve_known_works = resolve_known_works

    async def _image_url(self, image_id: Optional[str]) -> Optional[str]:
        if image_id is None:
            return None
        return await self.resolve_image(image_id)

    async def hydrate_exhibition(self, payload: Dict[str, Any]) -> Exhibition:
        data = validate_payload(payload, ExhibitionPayload, EXHIBITIONS_TAG)
        return Exhibition(
            api_link=data.api_link,
            id=data.id,
            title=data.title,
            short_description=data.short_description,
            hero_image_url=data.image_url,
            gallery_title=data.gallery_title,
            artwork_ids=data.artwork_ids or [],
            pref_image_id=data.image_id,
            pref_image_url=await self._image_url(data.image_id),
        )

    async def hydrate_artist(self, payload: Dict[str, Any]) -> Artist:
        data = validate_payload(payload, ArtistPayload, AGENTS_TAG)
        known_works = await self.resolve_known_works(data.id)
        return Artist(
            api_link=data.api_link,
            id=data.id,
            title=data.title,
            birth_date=data.birth_date,
            death_date=data.death_date,
            description=data.description,
            known_works=list(known_works),
        )

    async def hydrate_artwork(self, payload: Dict[str, Any]) -> Artwork:
        data = validate_payload(payload, ArtworkPayload, ARTWORKS_TAG)
        return Artwork(
            api_link=data.api_link,
            id=data.id,
            title=data.title,
            image_id=data.image_id,
            image_url=await self._image_url(data.image_id),
            artist_id=data.artist_id,
            artist_display=data.artist_display,
            date_display=data.date_display,
            date_start=data.date_start,
            date_end=data.date_end,
            short_description=data.short_description,
            description=data.description,
            alt_titles=data.alt_titles or [],
            place_of_origin=data.place_of_origin,
            medium_display=data.medium_display,
            artist_ids=data.artist_ids or [],
            artist_titles=data.artist_titles or [],
            style_title=data.style_title,
            classification_title=data.classification_title,
        )

    async def hydrate(self, kind: Union[ResourceKind, str], payload: Dict[str, Any]) -> Resource:
        """
        Hydrate payload with the entry point for kind.

        Raises:
            InvalidArgument: If kind is not exhibit, artist or artwork
        """
        kind = coerce_kind(kind)
        if kind is ResourceKind.EXHIBIT:
            return await self.hydrate_exhibition(payload)
        elif kind is ResourceKind.ARTIST:
            return await self.hydrate_artist(payload)
        elif kind is ResourceKind.ARTWORK:
            return await self.hydrate_artwork(payload)
        raise InvalidArgument(f"Resource kind '{kind.value}' cannot be hydrated")

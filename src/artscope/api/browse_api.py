"""Browse API: the featured, random-artist and artwork listings shown to users."""

import random
from typing import Any, List, Optional, Sequence, Union

from artscope.errors import InvalidArgument
from artscope.retrieval.fetcher import FetchFn, fetch_envelope
from artscope.retrieval.query_urls import ResourceKind, build_query_url
from artscope.resources.assembler import ResourceAssembler
from artscope.resources.models import Artist, Artwork, Exhibition
from artscope.utils.logging import get_logger

logger = get_logger(__name__)


async def search_ids(fetch: FetchFn, url: str) -> List[Any]:
    """Fetch a search URL and return the ids of its data entries, in order."""
    envelope = await fetch_envelope(fetch, url)
    return [record["id"] for record in envelope.data if record.get("id") is not None]


async def featured_exhibitions(
    assembler: ResourceAssembler,
    limit: Optional[int] = None,
) -> List[Exhibition]:
    """
    List featured exhibitions.

    Args:
        assembler: Assembler bound to a transport
        limit: Number of exhibitions to request. Defaults to browse.featured_limit.

    Returns:
        Hydrated exhibitions, empty if nothing is featured

    Raises:
        InvalidArgument: If limit is less than 1
    """
    if limit is None:
        limit = assembler.settings.browse.featured_limit
    elif limit < 1:
        raise InvalidArgument(f"Featured exhibition limit must be at least 1, got {limit}")
    url = build_query_url(ResourceKind.FEATURED_EXHIBITS, [limit], base_url=assembler.base_url)
    exhibit_ids = await search_ids(assembler.fetch, url)
    if not exhibit_ids:
        logger.info("No featured exhibitions returned")
        return []
    return await assembler.assemble_resources(ResourceKind.EXHIBIT, exhibit_ids)


async def random_artists(
    assembler: ResourceAssembler,
    page: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[Artist]:
    """
    List one page of artists, with their known works.

    Args:
        assembler: Assembler bound to a transport
        page: Page number. Drawn from 1..browse.random_artist_max_page when omitted.
        rng: Random source for the page draw
    """
    if page is None:
        rng = rng or random.Random()
        page = rng.randint(1, assembler.settings.browse.random_artist_max_page)
    logger.info(f"Loading artist page {page}")

    url = build_query_url(ResourceKind.RANDOM_ARTIST, [page], base_url=assembler.base_url)
    artist_ids = await search_ids(assembler.fetch, url)
    if not artist_ids:
        return []
    return await assembler.assemble_resources(ResourceKind.ARTIST, artist_ids)


async def artworks_by_ids(
    assembler: ResourceAssembler,
    artwork_ids: Sequence[Union[int, str]],
) -> List[Artwork]:
    return await assembler.assemble_resources(ResourceKind.ARTWORK, artwork_ids)

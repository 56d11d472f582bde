import asyncio
import random

import pytest

from artscope.api.browse_api import artworks_by_ids, featured_exhibitions, random_artists, search_ids
from artscope.config.loader import BrowseSettings, Settings
from artscope.errors import InvalidArgument
from artscope.resources.assembler import ResourceAssembler
from artscope.retrieval.query_urls import ResourceKind, build_query_url

from conftest import FakeTransport, artist_payload, artwork_payload, exhibition_payload


def test_search_ids_preserves_order(transport):
    transport.add("https://search.test", {"data": [{"id": 5}, {"id": 2}, {"title": "no id"}]})

    assert asyncio.run(search_ids(transport.fetch, "https://search.test")) == [5, 2]


def test_featured_exhibitions_searches_then_assembles(transport, assembler):
    transport.add(build_query_url(ResourceKind.FEATURED_EXHIBITS, [10]), {"data": [{"id": 1}, {"id": 2}]})
    transport.add(
        build_query_url(ResourceKind.EXHIBIT, [1, 2]),
        {"data": [exhibition_payload(1), exhibition_payload(2)]},
    )

    exhibitions = asyncio.run(featured_exhibitions(assembler))

    assert [exhibition.id for exhibition in exhibitions] == [1, 2]


def test_featured_exhibitions_custom_limit(transport, assembler):
    transport.add(build_query_url(ResourceKind.FEATURED_EXHIBITS, [3]), {"data": []})

    assert asyncio.run(featured_exhibitions(assembler, limit=3)) == []
    assert transport.calls == [build_query_url(ResourceKind.FEATURED_EXHIBITS, [3])]


def test_random_artists_draws_page_from_configured_range():
    transport = FakeTransport()
    assembler = ResourceAssembler(transport, Settings(browse=BrowseSettings(random_artist_max_page=1)))
    transport.add(build_query_url(ResourceKind.RANDOM_ARTIST, [1]), {"data": [{"id": 40}]})
    transport.add(build_query_url(ResourceKind.ARTIST, [40]), {"data": artist_payload(40)})
    transport.add(build_query_url(ResourceKind.ARTWORK_BY_ARTIST, [40]), {"data": []})

    artists = asyncio.run(random_artists(assembler, rng=random.Random(0)))

    assert [artist.id for artist in artists] == [40]


def test_random_artists_explicit_page(transport, assembler):
    transport.add(build_query_url(ResourceKind.RANDOM_ARTIST, [17]), {"data": []})

    assert asyncio.run(random_artists(assembler, page=17)) == []


def test_artworks_by_ids(transport, assembler):
    transport.add(build_query_url(ResourceKind.ARTWORK, [3, 4]), {"data": [artwork_payload(3), artwork_payload(4)]})

    artworks = asyncio.run(artworks_by_ids(assembler, ["3", "4"]))

    assert [artwork.id for artwork in artworks] == [3, 4]


@pytest.mark.parametrize("limit", [0, -3])
def test_featured_exhibitions_rejects_non_positive_limit(transport, assembler, limit):
    with pytest.raises(InvalidArgument):
        asyncio.run(featured_exhibitions(assembler, limit=limit))

    assert transport.calls == []

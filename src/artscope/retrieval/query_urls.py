"""REST query URL construction for the collection API."""

from enum import Enum
from typing import Dict, Sequence, Union

from artscope.config.loader import API_BASE_URL
from artscope.errors import InvalidArgument


class ResourceKind(str, Enum):
    """Endpoint and search kinds understood by build_query_url."""

    EXHIBIT = "exhibit"
    IMAGE = "image"
    ARTIST = "artist"
    ARTWORK = "artwork"
    FEATURED_EXHIBITS = "featured_exhibits"
    ARTWORK_BY_ARTIST = "artwork_by_artist"
    RANDOM_ARTIST = "random_artist"


ENDPOINTS: Dict[ResourceKind, str] = {
    ResourceKind.EXHIBIT: "exhibitions",
    ResourceKind.IMAGE: "images",
    ResourceKind.ARTIST: "agents",
    ResourceKind.ARTWORK: "artworks",
}

# Minimum fields needed to hydrate each record type
REQUIRED_FIELDS: Dict[ResourceKind, tuple[str, ...]] = {
    ResourceKind.EXHIBIT: (
        "api_model", "api_link", "id", "title", "short_description",
        "image_url", "gallery_title", "artwork_ids", "image_id",
    ),
    ResourceKind.IMAGE: ("id", "api_model", "api_link", "title", "image_id"),
    ResourceKind.ARTIST: (
        "api_model", "api_link", "id", "title", "death_date", "birth_date", "description",
    ),
    ResourceKind.ARTWORK: (
        "api_model", "api_link", "id", "title", "image_id", "artist_id",
        "artist_display", "date_display", "short_description", "alt_titles",
        "date_start", "date_end", "place_of_origin", "description",
        "medium_display", "artist_ids", "artist_titles", "style_title",
        "classification_title",
    ),
}

SEARCH_PAGE_SIZE = 10

SEARCH_TEMPLATES: Dict[ResourceKind, str] = {
    ResourceKind.FEATURED_EXHIBITS: "/exhibitions/search?query[term][is_featured]=true&page=1&limit={value}",
    ResourceKind.ARTWORK_BY_ARTIST: (
        "/artworks/search?query[term][artist_id]={value}&page=1&limit=" + str(SEARCH_PAGE_SIZE)
    ),
    ResourceKind.RANDOM_ARTIST: (
        "/agents?query[term][is_artist]=true&page={value}&limit=" + str(SEARCH_PAGE_SIZE)
    ),
}


def coerce_kind(kind: Union[ResourceKind, str]) -> ResourceKind:
    """Return kind as a ResourceKind, raising InvalidArgument for unknown values."""
    if isinstance(kind, ResourceKind):
        return kind
    try:
        return ResourceKind(kind)
    except ValueError:
        raise InvalidArgument(f"Unknown resource kind: {kind!r}") from None


def build_query_url(
    kind: Union[ResourceKind, str],
    characteristics: Sequence[Union[str, int]],
    required_fields_only: bool = True,
    base_url: str = API_BASE_URL,
) -> str:
    """
    Build the REST URL for a resource lookup or one of the fixed searches.

    Args:
        kind: Endpoint kind (exhibit, image, artist, artwork) or search kind
        characteristics: Ids for endpoint kinds; the single search value for search kinds
        required_fields_only: Append the kind's fields= projection (endpoint kinds only)
        base_url: API root, without trailing slash

    Returns:
        The query URL

    Raises:
        InvalidArgument: If characteristics is empty or a bare string, the kind
            is unknown, or a search kind is given other than exactly one value
    """
    if isinstance(characteristics, (str, bytes)):
        raise InvalidArgument(
            f"Characteristics must be a sequence of values, not a bare string: {characteristics!r}"
        )
    if len(characteristics) == 0:
        raise InvalidArgument("Characteristics should contain at least one value.")

    kind = coerce_kind(kind)
    values = [str(value) for value in characteristics]
    joined = ",".join(values)

    if kind in SEARCH_TEMPLATES:
        if len(values) != 1:
            raise InvalidArgument(
                f"Search kind '{kind.value}' takes exactly one value, got {len(values)}"
            )
        return base_url + SEARCH_TEMPLATES[kind].format(value=joined)

    url = f"{base_url}/{ENDPOINTS[kind]}"
    if len(values) > 1:
        url = f"{url}?ids={joined}"
    else:
        url = f"{url}/{joined}"

    if required_fields_only:
        separator = "&" if len(values) > 1 else "?"
        url = f"{url}{separator}fields={','.join(REQUIRED_FIELDS[kind])}"

    return url

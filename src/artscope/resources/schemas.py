"""Input schemas for raw collection API records.

Each payload model declares the fields the hydrator reads from one
resource type. Unknown fields are ignored; declared fields are type-checked
before any mapping happens.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from artscope.errors import SchemaViolation

ARTWORKS_TAG = "artworks"
AGENTS_TAG = "agents"
EXHIBITIONS_TAG = "exhibitions"


class ResourcePayload(BaseModel):
    """Fields common to every resource record."""
    api_model: str
    api_link: Optional[str] = None
    id: int
    title: Optional[str] = None


class ArtworkPayload(ResourcePayload):
    image_id: Optional[str] = None
    artist_id: Optional[int] = None
    artist_display: Optional[str] = None
    date_display: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None
    short_description: Optional[str] = None
    description: Optional[str] = None
    alt_titles: Optional[List[str]] = None
    place_of_origin: Optional[str] = None
    medium_display: Optional[str] = None
    artist_ids: Optional[List[int]] = None
    artist_titles: Optional[List[str]] = None
    style_title: Optional[str] = None
    classification_title: Optional[str] = None


class ArtistPayload(ResourcePayload):
    birth_date: Optional[int] = None
    death_date: Optional[int] = None
    description: Optional[str] = None


class ExhibitionPayload(ResourcePayload):
    short_description: Optional[str] = None
    image_url: Optional[str] = None  # hero image from the website
    gallery_title: Optional[str] = None
    artwork_ids: Optional[List[int]] = None
    image_id: Optional[str] = None


P = TypeVar("P", bound=ResourcePayload)


def check_resource_tag(payload: Dict[str, Any], expected: str) -> None:
    """
    Raise SchemaViolation unless payload['api_model'] equals expected.
    """
    actual = payload.get("api_model") if isinstance(payload, dict) else None
    if actual != expected:
        raise SchemaViolation(
            f"Provided data must belong to an {expected} resource (got api_model={actual!r}).",
            expected=expected,
        )


def validate_payload(payload: Dict[str, Any], schema: Type[P], expected: str) -> P:
    """
    Check the resource tag, then validate the payload against schema.

    Raises:
        SchemaViolation: On tag mismatch or field-level validation errors
    """
    check_resource_tag(payload, expected)
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise SchemaViolation(f"Malformed {expected} payload: {e}", expected=expected) from e

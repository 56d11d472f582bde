from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Artwork(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_link: Optional[str] = None
    id: int
    title: Optional[str] = None
    image_id: Optional[str] = None
    image_url: Optional[str] = None  # None when image_id is None
    artist_id: Optional[int] = None
    artist_display: Optional[str] = None
    date_display: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None
    short_description: Optional[str] = None
    description: Optional[str] = None
    alt_titles: List[str] = []
    place_of_origin: Optional[str] = None
    medium_display: Optional[str] = None
    artist_ids: List[int] = []
    artist_titles: List[str] = []
    style_title: Optional[str] = None
    classification_title: Optional[str] = None


class Artist(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_link: Optional[str] = None
    id: int
    title: Optional[str] = None
    birth_date: Optional[int] = None
    death_date: Optional[int] = None
    description: Optional[str] = None
    known_works: List[Artwork] = []  # resolved by the artworks-by-artist search


class Exhibition(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_link: Optional[str] = None
    id: int
    title: Optional[str] = None
    short_description: Optional[str] = None
    hero_image_url: Optional[str] = None
    gallery_title: Optional[str] = None
    artwork_ids: List[int] = []  # not expanded
    pref_image_id: Optional[str] = None
    pref_image_url: Optional[str] = None

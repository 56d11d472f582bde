"""Card view of hydrated records: image, title, description and drill-down ids.

Renderer-only: works on typed records and never fetches.
"""

import html
import json
import re
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel

from artscope.config.loader import DEFAULT_IMAGE_URL
from artscope.errors import InvalidArgument
from artscope.retrieval.query_urls import ResourceKind, coerce_kind
from artscope.resources.models import Artist, Artwork, Exhibition

_TAG_RE = re.compile(r"<\/?[^>]+(>|$)")


class Card(BaseModel):
    image_url: str
    title: str
    description: str = ""
    drill_down_ids: List[int] = []
    artwork_only: bool = False  # True: no "View Artworks" affordance

    @property
    def has_drill_down(self) -> bool:
        return not self.artwork_only and len(self.drill_down_ids) > 0


def strip_html(text: Optional[str]) -> str:
    if not text:
        return ""
    return html.unescape(_TAG_RE.sub("", text)).strip()


def _exhibition_card(exhibition: Exhibition, placeholder_url: str) -> Card:
    image_url = exhibition.pref_image_url or exhibition.hero_image_url or placeholder_url
    return Card(
        image_url=image_url,
        title=exhibition.title or "",
        description=strip_html(exhibition.short_description),
        drill_down_ids=list(exhibition.artwork_ids),
    )


def _artist_card(artist: Artist, placeholder_url: str) -> Card:
    image_url = placeholder_url
    if artist.known_works and artist.known_works[0].image_url:
        image_url = artist.known_works[0].image_url
    return Card(
        image_url=image_url,
        title=artist.title or "",
        description=strip_html(artist.description),
        drill_down_ids=[work.id for work in artist.known_works],
    )


def _artwork_card(artwork: Artwork, placeholder_url: str) -> Card:
    return Card(
        image_url=artwork.image_url or placeholder_url,
        title=artwork.title or "",
        description=strip_html(artwork.short_description),
        artwork_only=True,
    )


def build_cards(
    kind: Union[ResourceKind, str],
    resources: Sequence[Union[Artwork, Artist, Exhibition]],
    placeholder_url: str = DEFAULT_IMAGE_URL,
) -> List[Card]:
    """
    Build display cards for a list of records of one kind.

    Image fallbacks:
    - exhibition: preferred image, then hero image, then placeholder
    - artist: first known work's image, then placeholder
    - artwork: own image, then placeholder

    Raises:
        InvalidArgument: If kind is not exhibit, artist or artwork
    """
    kind = coerce_kind(kind)
    if kind is ResourceKind.EXHIBIT:
        return [_exhibition_card(item, placeholder_url) for item in resources]
    elif kind is ResourceKind.ARTIST:
        return [_artist_card(item, placeholder_url) for item in resources]
    elif kind is ResourceKind.ARTWORK:
        return [_artwork_card(item, placeholder_url) for item in resources]
    raise InvalidArgument("Provided data needs to be of type artwork, artist or exhibition.")


def render_markdown(cards: Sequence[Card], heading: str = "Collection") -> str:
    """Render cards as markdown."""
    lines = [f"# {heading}", ""]

    if not cards:
        lines.append("Nothing to show.")
        lines.append("")
        return "\n".join(lines)

    for card in cards:
        lines.append(f"## {card.title or 'Untitled'}")
        lines.append("")
        lines.append(f"![{card.title}]({card.image_url})")
        lines.append("")
        if card.description:
            lines.append(card.description)
            lines.append("")
        if card.has_drill_down:
            ids = ", ".join(str(i) for i in card.drill_down_ids)
            lines.append(f"- **View Artworks:** {ids}")
            lines.append("")

    return "\n".join(lines)


def render_json(cards: Sequence[Card]) -> str:
    """Render cards as JSON."""
    return json.dumps([card.model_dump() for card in cards], indent=2)

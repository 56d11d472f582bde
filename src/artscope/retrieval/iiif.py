"""IIIF image URL construction."""

import math
from typing import Optional, Union

from artscope.errors import RangeViolation

Number = Union[int, float]

FULL_REGION = (0, 0, 100, 100)


def _fmt(value: Number) -> str:
    # 10.0 -> "10", 12.5 -> "12.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_image_url(
    base_url: str,
    image_id: str,
    width: Optional[int] = None,
    height: Optional[int] = None,
    region_x: Number = 0,
    region_y: Number = 0,
    region_width: Number = 100,
    region_height: Number = 100,
    rotation: Number = 0,
    mirrored: bool = False,
) -> str:
    """
    Build an IIIF image URL.

    Layout: {base}/{id}/{region}/{size}[/!]/{rotation}/default.jpg

    Region values are percentages of the source image; the region renders as
    ``full`` only when it is exactly (0, 0, 100, 100). Size renders as
    ``{w},``, ``,{h}`` or ``{w},{h}``.

    Raises:
        RangeViolation: size not positive, both size values missing, region
            outside [0, 100], or rotation outside [0, 360]. NaN is out of
            range everywhere
    """
    # NaN compares false against every bound, so it is rejected explicitly
    if any(value is not None and (math.isnan(value) or value <= 0) for value in (width, height)):
        raise RangeViolation("Input for size must be greater than 0 or omitted.", parameter="size")

    if width is None and height is None:
        raise RangeViolation(
            "Input for size must be defined for at least one of: width or height.",
            parameter="size",
        )

    region = (region_x, region_y, region_width, region_height)
    if any(math.isnan(value) or value < 0 or value > 100 for value in region):
        raise RangeViolation("Input for region must be between 0 and 100, inclusive.", parameter="region")

    if math.isnan(rotation) or rotation < 0 or rotation > 360:
        raise RangeViolation("Input for rotation must be between 0 and 360, inclusive.", parameter="rotation")

    if region == FULL_REGION:
        region_segment = "full"
    else:
        region_segment = "pct:" + ",".join(_fmt(value) for value in region)

    size_segment = f"{_fmt(width) if width is not None else ''},{_fmt(height) if height is not None else ''}"

    segments = [base_url.rstrip("/"), str(image_id), region_segment, size_segment]
    if mirrored:
        segments.append("!")
    segments.extend([_fmt(rotation), "default.jpg"])
    return "/".join(segments)

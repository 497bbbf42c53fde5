from __future__ import annotations

from typing import List

from PIL import Image


def clamp(value: int, low: int = 0, high: int = 255) -> int:
    return min(high, max(low, value))


def as_rgba(img: Image.Image) -> Image.Image:
    """Return an ``RGBA`` copy of ``img``.

    Modes without alpha come back fully opaque. ``convert`` always allocates, so
    the caller's image is never handed back or written to.
    """

    return img.convert("RGBA")


def identity_lut() -> List[int]:
    return list(range(256))


def channel_lut(delta: int) -> List[int]:
    return [clamp(value + delta) for value in range(256)]


def apply_luts(img: Image.Image, red: List[int], green: List[int], blue: List[int]) -> Image.Image:
    # ``point`` on RGBA expects one 256-entry table per band, alpha last.
    return as_rgba(img).point(red + green + blue + identity_lut())

from __future__ import annotations

from PIL import Image

from ..config import COOL_LEGACY, COOL_MODES, COOL_SYMMETRIC, SETTINGS
from .channels import apply_luts, as_rgba, channel_lut, identity_lut


def grey_scale(img: Image.Image) -> Image.Image:
    """Replace R, G and B with the pixel's luma.

    ``luma = (R*299 + G*587 + B*114) // 1000``. The division truncates; Pillow's
    ``convert("L")`` rounds instead, which differs by one on some inputs, so it
    is not used here.
    """

    src = as_rgba(img)
    width, height = src.size
    out = Image.new("RGBA", (width, height))
    if width == 0 or height == 0:
        return out
    src_pixels = src.load()
    dst_pixels = out.load()
    for y in range(height):
        for x in range(width):
            r, g, b, a = src_pixels[x, y]
            luma = (r * 299 + g * 587 + b * 114) // 1000
            dst_pixels[x, y] = (luma, luma, luma, a)
    return out


def warm(img: Image.Image, delta: int) -> Image.Image:
    """Shift toward yellow by adding ``delta`` to red and green."""
    shifted = channel_lut(delta)
    return apply_luts(img, shifted, shifted, identity_lut())


def cool(img: Image.Image, delta: int, mode: str | None = None) -> Image.Image:
    """Shift toward blue.

    ``symmetric`` adds ``delta`` to blue, mirroring :func:`warm`. ``legacy``
    reproduces the historical output, where blue receives the red value and
    ``delta`` has no effect.
    """

    mode = (mode or SETTINGS.cool_mode).lower()
    if mode == COOL_SYMMETRIC:
        return apply_luts(img, identity_lut(), identity_lut(), channel_lut(delta))
    if mode == COOL_LEGACY:
        red, green, _, alpha = as_rgba(img).split()
        return Image.merge("RGBA", (red, green, red.copy(), alpha))
    raise ValueError(f"Unknown cool mode {mode!r}; expected one of {', '.join(COOL_MODES)}")


def brightness(img: Image.Image, delta: int) -> Image.Image:
    shifted = channel_lut(delta)
    return apply_luts(img, shifted, shifted, shifted)

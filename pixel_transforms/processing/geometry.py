from __future__ import annotations

from PIL import Image, ImageOps

from .channels import as_rgba


def horizontal(img: Image.Image) -> Image.Image:
    """Mirror left-right: output column ``x`` is input column ``width - 1 - x``."""
    return ImageOps.mirror(as_rgba(img))


def vertical(img: Image.Image) -> Image.Image:
    """Mirror top-bottom: output row ``y`` is input row ``height - 1 - y``."""
    return ImageOps.flip(as_rgba(img))

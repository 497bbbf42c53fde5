from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from PIL import Image

from ..config import SETTINGS, TransformSettings
from .geometry import horizontal, vertical
from .kernel import simple_smooth
from .tone import brightness, cool, grey_scale, warm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformSpec:
    name: str
    label: str
    func: Callable[..., Image.Image]
    uses_delta: bool = False


TRANSFORMS: Dict[str, TransformSpec] = {
    spec.name: spec
    for spec in (
        TransformSpec("greyscale", "Grey Scale", grey_scale),
        TransformSpec("warm", "Warm", warm, uses_delta=True),
        TransformSpec("cool", "Cool", cool, uses_delta=True),
        TransformSpec("brightness", "Brightness", brightness, uses_delta=True),
        TransformSpec("horizontal", "Mirror Horizontal", horizontal),
        TransformSpec("vertical", "Mirror Vertical", vertical),
        TransformSpec("smooth", "Simple Smooth", simple_smooth),
    )
}


def get_transform(name: str) -> TransformSpec:
    key = (name or "").strip().lower()
    try:
        return TRANSFORMS[key]
    except KeyError:
        known = ", ".join(TRANSFORMS)
        raise ValueError(f"Unknown transform {name!r}; expected one of {known}") from None


def apply_transform(
    name: str,
    img: Image.Image,
    delta: int = 0,
    settings: TransformSettings = SETTINGS,
    cool_mode: str | None = None,
) -> Image.Image:
    spec = get_transform(name)
    logger.debug("Applying %s to %dx%d image (delta=%d)", spec.name, img.width, img.height, delta)

    if spec.name == "cool":
        return cool(img, delta, mode=cool_mode or settings.cool_mode)
    if spec.uses_delta:
        return spec.func(img, delta)
    return spec.func(img)

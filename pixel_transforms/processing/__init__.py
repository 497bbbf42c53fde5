"""Pure raster transforms operating on Pillow images."""

from .channels import as_rgba, channel_lut, clamp
from .geometry import horizontal, vertical
from .kernel import SMOOTH_KERNEL, Kernel, convolve, simple_smooth
from .pipeline import TRANSFORMS, TransformSpec, apply_transform, get_transform
from .tone import brightness, cool, grey_scale, warm

__all__ = [
    "as_rgba",
    "channel_lut",
    "clamp",
    "horizontal",
    "vertical",
    "SMOOTH_KERNEL",
    "Kernel",
    "convolve",
    "simple_smooth",
    "TRANSFORMS",
    "TransformSpec",
    "apply_transform",
    "get_transform",
    "brightness",
    "cool",
    "grey_scale",
    "warm",
]

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from PIL import Image

from .channels import as_rgba, clamp


Weights = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class Kernel:
    """Square convolution kernel with odd side length.

    ``weights`` is indexed ``[dy][dx]`` with the center cell at ``[radius][radius]``.
    ``divisor`` defaults to the sum of the weights.
    """

    weights: Weights
    divisor: Optional[int] = None
    radius: int = field(init=False)

    def __post_init__(self) -> None:
        weights = tuple(tuple(int(value) for value in row) for row in self.weights)
        side = len(weights)
        if side == 0 or side % 2 == 0:
            raise ValueError(f"Kernel side must be odd, got {side}")
        if any(len(row) != side for row in weights):
            raise ValueError("Kernel must be square")
        if any(value < 0 for row in weights for value in row):
            raise ValueError("Kernel weights must be non-negative")

        divisor = sum(sum(row) for row in weights) if self.divisor is None else self.divisor
        if divisor <= 0:
            raise ValueError(f"Kernel divisor must be positive, got {divisor}")

        object.__setattr__(self, "weights", weights)
        object.__setattr__(self, "divisor", divisor)
        object.__setattr__(self, "radius", side // 2)

    def taps(self) -> List[Tuple[int, int, int]]:
        """Return ``(dx, dy, weight)`` for every non-zero cell."""
        r = self.radius
        return [
            (dx - r, dy - r, weight)
            for dy, row in enumerate(self.weights)
            for dx, weight in enumerate(row)
            if weight
        ]


SMOOTH_KERNEL = Kernel(
    (
        (0, 0, 1, 0, 0),
        (0, 1, 3, 1, 0),
        (1, 3, 7, 3, 1),
        (0, 1, 3, 1, 0),
        (0, 0, 1, 0, 0),
    ),
    divisor=27,
)


def convolve(img: Image.Image, kernel: Kernel) -> Image.Image:
    """Apply ``kernel`` to R, G and B, leaving a ``radius`` wide border untouched.

    The border is copied from the source rather than padded. Sums are read from
    the source only, never from pixels already written to the output. Alpha is
    carried over unchanged.
    """

    src = as_rgba(img)
    out = src.copy()
    width, height = src.size
    radius = kernel.radius
    if width <= 2 * radius or height <= 2 * radius:
        return out

    taps = kernel.taps()
    divisor = kernel.divisor
    src_pixels = src.load()
    dst_pixels = out.load()

    for y in range(radius, height - radius):
        for x in range(radius, width - radius):
            r = g = b = 0
            for dx, dy, weight in taps:
                pr, pg, pb, _ = src_pixels[x + dx, y + dy]
                r += pr * weight
                g += pg * weight
                b += pb * weight
            dst_pixels[x, y] = (
                clamp(r // divisor),
                clamp(g // divisor),
                clamp(b // divisor),
                src_pixels[x, y][3],
            )

    return out


def simple_smooth(img: Image.Image) -> Image.Image:
    return convolve(img, SMOOTH_KERNEL)

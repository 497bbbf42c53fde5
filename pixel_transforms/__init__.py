"""Deterministic raster transforms.

Importing the package only loads the Pillow-based ``processing`` core. The
Flask front end lives in :mod:`pixel_transforms.app` (WSGI path
``pixel_transforms.app:app``).
"""

from . import processing
from .processing import TRANSFORMS, apply_transform

__version__ = "1.0.0"

__all__ = ["__version__", "TRANSFORMS", "apply_transform", "processing"]

"""Top-level package for GelAnalysis.

Image-analysis primitives for locating a gel within a grayscale image and for
extracting foreground content from image sequences. The processing operations
live in :mod:`gel_analysis.processing`; the geometric value types in
:mod:`gel_analysis.types`.
"""

import logging

from .types import Point, Size, Rect
from .config_loader import load_gel_analysis_config

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


__all__ = [
    "Point",
    "Size",
    "Rect",
    "load_gel_analysis_config",
]

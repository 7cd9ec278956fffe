"""
Center-weighted mask synthesis.

Generates a floating-point weighting mask that is 1.0 at the center of the
image and decays towards the edges, by running a distance transform over an
all-ones image surrounded by a zero border. The mask is sensitive to the
aspect ratio of the requested size: the decay follows the nearest edge.
"""

import logging
from typing import Optional, Tuple, Union

import cv2
import numpy as np

from ..types import Array2D, Size
from .config_models import CenterMaskConfig, DistanceMetric

logger = logging.getLogger(__name__)

_DISTANCE_TYPES = {
    DistanceMetric.CHESSBOARD: cv2.DIST_C,
    DistanceMetric.L1: cv2.DIST_L1,
    DistanceMetric.L2: cv2.DIST_L2,
}


def pad_image(image: Array2D, padding: int = 1, value: float = 0) -> Array2D:
    """Surround ``image`` with a constant border ``padding`` pixels wide."""
    return cv2.copyMakeBorder(
        image, padding, padding, padding, padding, cv2.BORDER_CONSTANT, value=value
    )


def remove_padding(image: Array2D, padding: int = 1) -> Array2D:
    """Strip a border of ``padding`` pixels added by :func:`pad_image`."""
    if padding == 0:
        return image.copy()
    return image[padding:-padding, padding:-padding].copy()


def generate_enhanced_center_mask(
    size: Union[Size, Tuple[int, int]], config: Optional[CenterMaskConfig] = None
) -> Array2D:
    """
    Generate a mask with value 1.0 in the center and near 0.0 along the edges.

    Parameters
    ----------
    size : Size or tuple of int
        Requested mask size as ``(width, height)``.
    config : CenterMaskConfig, optional
        Border width, distance metric and transform mask size. Defaults to a
        one-pixel border and the chessboard metric with a 3x3 mask.

    Returns
    -------
    Array2D
        ``float32`` array of shape ``(height, width)`` with values in [0, 1].
        The pixel at ``(height // 2, width // 2)`` is exactly 1.0 and values
        do not increase along any ray from there to the border.

    Raises
    ------
    ValueError
        If ``size`` has zero width or height.
    """
    if not isinstance(size, Size):
        width, height = size
        size = Size(width=width, height=height)
    if size.area == 0:
        raise ValueError(f"Mask size must be non-zero, got {size.as_tuple()}")

    config = config or CenterMaskConfig()

    ones = np.ones((size.height, size.width), dtype=np.uint8)
    padded = pad_image(ones, config.padding)

    distances = cv2.distanceTransform(
        padded, _DISTANCE_TYPES[config.metric], config.mask_size
    )

    _, max_distance, _, _ = cv2.minMaxLoc(distances)
    if max_distance <= 0:
        logger.warning("Distance transform is zero everywhere, returning empty mask")
        mask = np.zeros_like(distances)
    else:
        mask = distances / np.float32(max_distance)

    mask = remove_padding(mask, config.padding)
    logger.debug(
        f"Generated center mask of size {size.as_tuple()} (max distance {max_distance})"
    )
    return mask

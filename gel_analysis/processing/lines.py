"""
Structural line isolation via directional morphological opening.

An opening with a long, one-pixel-thick rectangular structuring element
removes every run shorter than the element while keeping longer runs intact.
With the default element length of half the image extent, only the dominant
horizontal (or vertical) lines of the image survive.
"""

import logging
from typing import Optional, Union

import cv2

from ..types import Array2D
from ..utils import validate_image
from .config_models import LineIsolationConfig, LineOrientation

logger = logging.getLogger(__name__)


def find_largest_lines(
    image: Array2D,
    orientation: Union[LineOrientation, str] = LineOrientation.HORIZONTAL,
    length_fraction: float = 0.5,
) -> Array2D:
    """
    Keep only the long line structures of one orientation.

    Parameters
    ----------
    image : Array2D
        Single-channel input image.
    orientation : LineOrientation or str
        ``"horizontal"`` uses a ``(length, 1)`` element, ``"vertical"`` a
        ``(1, length)`` element.
    length_fraction : float
        Element length as a fraction of the image width (horizontal) or
        height (vertical). The length is clamped to at least one pixel.

    Returns
    -------
    Array2D
        Opened image of the same shape and dtype as ``image``.

    Raises
    ------
    ValueError
        If the image is empty or ``length_fraction`` is outside (0, 1].
    """
    validate_image(image)
    orientation = LineOrientation(orientation)
    if not 0.0 < length_fraction <= 1.0:
        raise ValueError(f"length_fraction must be in (0, 1], got {length_fraction}")

    height, width = image.shape
    if orientation == LineOrientation.HORIZONTAL:
        length = max(int(width * length_fraction), 1)
        element_size = (length, 1)
        erode_anchor = (length // 2, 0)
        dilate_anchor = (length - 1 - length // 2, 0)
    else:
        length = max(int(height * length_fraction), 1)
        element_size = (1, length)
        erode_anchor = (0, length // 2)
        dilate_anchor = (0, length - 1 - length // 2)

    # element_size is (width, height) in OpenCV order. The dilation uses the
    # mirrored anchor so that even-length elements do not shift the result.
    element = cv2.getStructuringElement(cv2.MORPH_RECT, element_size)
    eroded = cv2.erode(image, element, anchor=erode_anchor)
    lines = cv2.dilate(eroded, element, anchor=dilate_anchor)

    logger.debug(
        f"Isolated {orientation.value} lines with structuring element {element_size}"
    )
    return lines


def find_largest_horizontal_lines(image: Array2D) -> Array2D:
    """Keep horizontal runs at least half the image width long."""
    return find_largest_lines(image, LineOrientation.HORIZONTAL)


def find_largest_vertical_lines(image: Array2D) -> Array2D:
    """Keep vertical runs at least half the image height long."""
    return find_largest_lines(image, LineOrientation.VERTICAL)


def apply_line_isolation_config(
    image: Array2D, config: Optional[LineIsolationConfig] = None
) -> Array2D:
    """Run :func:`find_largest_lines` with parameters from a config model."""
    config = config or LineIsolationConfig()
    return find_largest_lines(image, config.orientation, config.length_fraction)

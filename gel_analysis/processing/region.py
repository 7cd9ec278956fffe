"""
Region localization by pixel scanning.

Both scans operate on a single-channel image in which 0 is background and any
non-zero value is foreground, typically the output of thresholding, line
isolation or gradient extraction.

The ``compute_*`` functions return a raw :class:`~gel_analysis.types.Rect`
that may have zero or negative extent when nothing is found. The ``find_*``
functions return ``None`` in that case instead, and
:func:`find_gel_location` widens the box to include its last row and column.
"""

import logging
from typing import Optional

import numpy as np

from ..types import Array2D, Point, Rect
from ..utils import validate_image

logger = logging.getLogger(__name__)


def _image_center(image: Array2D) -> Point:
    height, width = image.shape[:2]
    return Point(x=width // 2, y=height // 2)


def compute_innermost_rectangle(image: Array2D) -> Rect:
    """
    Find the innermost rectangle bounded by foreground pixels around the center.

    Starting at the image center, the column through the center is scanned
    upward and downward, and the row through the center leftward and
    rightward. Each scan stops at the first non-zero pixel; the center pixel
    itself is part of every scan.

    Directions in which nothing is found fall back to the image edges: up to
    row 0, down to ``height``, left to column 0 and right to ``width``.

    Parameters
    ----------
    image : Array2D
        Single-channel image; non-zero pixels are foreground.

    Returns
    -------
    Rect
        ``Rect(left, up, right - left, down - up)``. The extent can be zero
        (non-zero center pixel) or negative under degenerate input.
    """
    validate_image(image)
    height, width = image.shape
    center = _image_center(image)

    column = image[:, center.x] != 0
    row = image[center.y, :] != 0

    above = np.flatnonzero(column[: center.y + 1])
    up = int(above[-1]) if above.size else 0

    below = np.flatnonzero(column[center.y :])
    down = center.y + int(below[0]) if below.size else height

    left_of = np.flatnonzero(row[: center.x + 1])
    left = int(left_of[-1]) if left_of.size else 0

    right_of = np.flatnonzero(row[center.x :])
    right = center.x + int(right_of[0]) if right_of.size else width

    rect = Rect(x=left, y=up, width=right - left, height=down - up)
    logger.debug(f"Innermost rectangle around {center.as_tuple()}: {rect.as_tuple()}")
    return rect


def compute_gel_location(image: Array2D) -> Rect:
    """
    Find the bounding box of all foreground pixels.

    The extremes start at ``left = width - 1``, ``top = height - 1`` and
    ``right = bottom = 0``, so an all-background image produces a rectangle
    with negative extent rather than raising.

    Parameters
    ----------
    image : Array2D
        Single-channel image; non-zero pixels are foreground.

    Returns
    -------
    Rect
        ``Rect(left, top, right - left, bottom - top)``. A single foreground
        pixel at ``(x0, y0)`` gives ``Rect(x0, y0, 0, 0)``. Unlike other
        rectangles, ``Rect.right``/``Rect.bottom`` here point at the last
        foreground column/row itself; use :func:`find_gel_location` for a box
        that can be cropped.
    """
    validate_image(image)
    height, width = image.shape

    rows, cols = np.nonzero(image)
    if rows.size == 0:
        logger.warning("No foreground pixels found while locating gel")
        return Rect(x=width - 1, y=height - 1, width=1 - width, height=1 - height)

    left, right = int(cols.min()), int(cols.max())
    top, bottom = int(rows.min()), int(rows.max())

    rect = Rect(x=left, y=top, width=right - left, height=bottom - top)
    logger.debug(f"Gel located at {rect.as_tuple()}")
    return rect


def find_innermost_rectangle(image: Array2D) -> Optional[Rect]:
    """
    Innermost rectangle around the center, or ``None`` if it is degenerate.

    See :func:`compute_innermost_rectangle`. A rectangle with non-positive
    width or height is reported as ``None``.
    """
    rect = compute_innermost_rectangle(image)
    if rect.is_empty:
        logger.info(f"Innermost rectangle is degenerate: {rect.as_tuple()}")
        return None
    return rect


def find_gel_location(image: Array2D) -> Optional[Rect]:
    """
    Pixel-inclusive bounding box of the foreground, or ``None`` if there is none.

    Unlike :func:`compute_gel_location`, the returned rectangle covers every
    foreground pixel: its exclusive ``right``/``bottom`` edges lie one past
    the last foreground column/row, so it can be passed straight to
    :func:`crop_to_rect`. A single foreground pixel at ``(x0, y0)`` gives
    ``Rect(x0, y0, 1, 1)``. Only an image without any non-zero pixel yields
    ``None``.
    """
    validate_image(image)
    if not np.any(image):
        return None
    rect = compute_gel_location(image)
    return Rect(x=rect.x, y=rect.y, width=rect.width + 1, height=rect.height + 1)


def crop_to_rect(image: Array2D, rect: Rect) -> Array2D:
    """
    Copy the pixels of ``rect`` out of ``image``.

    Parameters
    ----------
    image : Array2D
        Source image (2-D or multi-channel).
    rect : Rect
        Region to crop. Must have positive extent and lie inside the image.

    Returns
    -------
    Array2D
        A copy of ``image[rect.y:rect.bottom, rect.x:rect.right]``.

    Raises
    ------
    ValueError
        If the rectangle is empty or extends past the image.
    """
    validate_image(image, allow_color=True)
    height, width = image.shape[:2]

    if rect.is_empty:
        raise ValueError(f"Cannot crop to empty rectangle {rect.as_tuple()}")
    if rect.x < 0 or rect.y < 0 or rect.right > width or rect.bottom > height:
        raise ValueError(
            f"Rectangle {rect.as_tuple()} outside image of size {width}x{height}"
        )

    return image[rect.y : rect.bottom, rect.x : rect.right].copy()

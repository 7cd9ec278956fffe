"""Rendering helpers for overlaying detection results on gel images."""

from __future__ import annotations

from typing import Tuple

import cv2

from gel_analysis.types import Array2D, Rect
from gel_analysis.utils import ensure_uint8, validate_image

# OpenCV color order is BGR
RED = (0, 0, 255)


def draw_rect_on_image(
    image: Array2D,
    rect: Rect,
    thickness: int = 1,
    color: Tuple[int, int, int] = RED,
) -> Array2D:
    """Draw a rectangle outline on a copy of a grayscale image.

    The grayscale input is converted to a 3-channel BGR image so the
    rectangle can be drawn in color; the input is left untouched.

    Parameters
    ----------
    image : Array2D
        Single-channel 8-bit image.
    rect : Rect
        Rectangle to draw, e.g. from ``compute_gel_location``.
    thickness : int
        Line thickness in pixels.
    color : tuple of int
        BGR line color. Defaults to red.

    Returns
    -------
    Array2D
        ``uint8`` array of shape ``(height, width, 3)``. An empty rectangle
        leaves the converted image undecorated.

    Raises
    ------
    ValueError
        If the image is empty or ``thickness`` is not positive.
    """
    validate_image(image)
    if thickness <= 0:
        raise ValueError(f"thickness must be positive, got {thickness}")

    overlay = cv2.cvtColor(ensure_uint8(image), cv2.COLOR_GRAY2BGR)
    if rect.is_empty:
        return overlay

    # right/bottom are exclusive, the outline is drawn on the last pixel inside
    cv2.rectangle(
        overlay,
        (rect.x, rect.y),
        (rect.right - 1, rect.bottom - 1),
        color,
        thickness,
    )
    return overlay

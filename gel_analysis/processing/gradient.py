"""
Edge/gradient extraction for gel images.

This module computes an approximate gradient magnitude image from horizontal
and vertical Sobel derivatives. The result is an 8-bit single-channel image
suitable as input to the region-locating scans.
"""

import logging
from typing import Optional

import cv2

from ..types import Array2D
from ..utils import ensure_uint8, validate_image
from .config_models import GradientConfig

logger = logging.getLogger(__name__)


def compute_gradient_image(
    image: Array2D, config: Optional[GradientConfig] = None
) -> Array2D:
    """
    Compute the approximate total gradient magnitude of an image.

    The horizontal and vertical derivatives are computed independently with a
    Sobel filter and reflective border handling, converted to absolute
    magnitudes saturated to 8 bits, and blended as
    ``weight_x * |dx| + weight_y * |dy|``.

    Parameters
    ----------
    image : Array2D
        Single-channel 8-bit input image.
    config : GradientConfig, optional
        Sobel and blending parameters. Defaults to a 3x3 kernel, unit scale,
        zero offset and equal 0.5/0.5 weights.

    Returns
    -------
    Array2D
        ``uint8`` gradient magnitude image of the same shape as ``image``.

    Raises
    ------
    ValueError
        If the image is empty or not two-dimensional.
    """
    validate_image(image)
    config = config or GradientConfig()
    image = ensure_uint8(image)

    # Signed depth so that negative slopes survive until the absolute value
    grad_x = cv2.Sobel(
        image,
        cv2.CV_16S,
        1,
        0,
        ksize=config.kernel_size,
        scale=config.scale,
        delta=config.delta,
        borderType=cv2.BORDER_DEFAULT,
    )
    grad_y = cv2.Sobel(
        image,
        cv2.CV_16S,
        0,
        1,
        ksize=config.kernel_size,
        scale=config.scale,
        delta=config.delta,
        borderType=cv2.BORDER_DEFAULT,
    )

    abs_grad_x = cv2.convertScaleAbs(grad_x)
    abs_grad_y = cv2.convertScaleAbs(grad_y)

    gradient = cv2.addWeighted(abs_grad_x, config.weight_x, abs_grad_y, config.weight_y, 0)

    logger.debug(
        f"Computed gradient image of shape {gradient.shape} "
        f"(ksize={config.kernel_size}, max={int(gradient.max())})"
    )

    return gradient

"""
Intensity histogram computation and rendering.

Histograms are always binned the same way (256 bins over [0, 256)). Two
rendering presets are provided on top of a single renderer:

- :func:`compute_histogram`: connected polyline, min-max normalized, on a
  1024x800 canvas.
- :func:`plot_histogram`: one vertical bar per bin, scaled by the largest bin,
  on a 256x256 canvas.
"""

import logging
from typing import Optional

import cv2
import numpy as np

from ..types import Array1D, Array2D
from ..utils import ensure_uint8, validate_image
from .config_models import HistogramConfig, HistogramNormalization, HistogramStyle

logger = logging.getLogger(__name__)

NUM_BINS = 256
LINE_COLOR = 255

PLOT_HISTOGRAM_CONFIG = HistogramConfig(
    style=HistogramStyle.BARS,
    normalization=HistogramNormalization.MAX,
    canvas_width=NUM_BINS,
    canvas_height=NUM_BINS,
)


def compute_histogram_counts(image: Array2D) -> Array1D:
    """
    Count the pixels of each intensity level.

    Parameters
    ----------
    image : Array2D
        8-bit image. Other dtypes are converted to ``uint8`` first.

    Returns
    -------
    Array1D
        ``int64`` array of 256 counts; the counts sum to ``image.size``.
    """
    validate_image(image, allow_color=True)
    image = ensure_uint8(image)
    return np.bincount(image.ravel(), minlength=NUM_BINS).astype(np.int64)


def _normalize_counts(
    counts: np.ndarray, normalization: HistogramNormalization, height: int
) -> np.ndarray:
    """Scale counts to bin heights in canvas pixels."""
    if normalization == HistogramNormalization.MINMAX:
        low, high = counts.min(), counts.max()
        if high == low:
            logger.debug("Flat histogram, all bin heights set to zero")
            return np.zeros_like(counts)
        return (counts - low) * height / (high - low)

    peak = counts.max()
    if peak <= 0:
        logger.debug("Empty histogram, all bin heights set to zero")
        return np.zeros_like(counts)
    return counts * height / peak


def render_histogram(counts: Array1D, config: Optional[HistogramConfig] = None) -> Array2D:
    """
    Draw a 256-bin histogram into a single-channel image.

    Parameters
    ----------
    counts : Array1D
        256 bin counts, e.g. from :func:`compute_histogram_counts`.
    config : HistogramConfig, optional
        Style, normalization and canvas size. Defaults to the min-max
        normalized polyline on a 1024x800 canvas.

    Returns
    -------
    Array2D
        ``uint8`` canvas of shape ``(canvas_height, canvas_width)`` with the
        histogram drawn in white on black.

    Raises
    ------
    ValueError
        If ``counts`` does not hold exactly 256 bins or has negative entries.
    """
    config = config or HistogramConfig()
    counts = np.asarray(counts, dtype=np.float64)
    if counts.shape != (NUM_BINS,):
        raise ValueError(f"Expected {NUM_BINS} histogram bins, got shape {counts.shape}")
    if np.any(counts < 0):
        raise ValueError("Histogram counts must be non-negative")

    width, height = config.canvas_width, config.canvas_height
    canvas = np.zeros((height, width), dtype=np.uint8)
    heights = _normalize_counts(counts, config.normalization, height)
    bin_width = max(int(round(width / NUM_BINS)), 1)

    if config.style == HistogramStyle.POLYLINE:
        rounded = np.rint(heights).astype(int)
        for i in range(1, NUM_BINS):
            cv2.line(
                canvas,
                (bin_width * (i - 1), height - int(rounded[i - 1])),
                (bin_width * i, height - int(rounded[i])),
                LINE_COLOR,
            )
    else:
        for i in range(NUM_BINS):
            bin_height = int(heights[i])
            cv2.line(
                canvas,
                (bin_width * i, height - bin_height),
                (bin_width * i, height),
                LINE_COLOR,
            )

    return canvas


def compute_histogram(image: Array2D, config: Optional[HistogramConfig] = None) -> Array2D:
    """
    Render the histogram of ``image`` as a connected polyline.

    Bin heights are min-max normalized into the canvas height and consecutive
    bins are joined by line segments on a 1024x800 canvas by default.
    """
    counts = compute_histogram_counts(image)
    return render_histogram(counts, config or HistogramConfig())


def plot_histogram(image: Array2D) -> Array2D:
    """
    Render the histogram of ``image`` as bars on a 256x256 canvas.

    Each bin is drawn as a vertical line whose height is
    ``count * 256 / max_count``. An image where every pixel has the same
    intensity gives a single full-height bar.
    """
    counts = compute_histogram_counts(image)
    return render_histogram(counts, PLOT_HISTOGRAM_CONFIG)

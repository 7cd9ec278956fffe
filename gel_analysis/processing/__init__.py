"""Processing module for gel image analysis.

This module provides the image-analysis primitives used to locate a gel
within a larger grayscale image and to extract foreground content from an
image sequence:
- Gradient (edge magnitude) extraction
- Region localization by pixel scanning
- Line isolation via morphological opening
- Foreground extraction with an adaptive background model
- Histogram computation and rendering
- Center-weighted mask synthesis
"""

# Config models
from .config_models import (
    GradientConfig,
    LineIsolationConfig,
    BackgroundModelConfig,
    ForegroundConfig,
    HistogramConfig,
    CenterMaskConfig,
    GelAnalysisConfig,
    LineOrientation,
    HistogramStyle,
    HistogramNormalization,
    DistanceMetric,
)

from .gradient import compute_gradient_image

from .region import (
    compute_innermost_rectangle,
    compute_gel_location,
    find_innermost_rectangle,
    find_gel_location,
    crop_to_rect,
)

from .lines import (
    find_largest_lines,
    find_largest_horizontal_lines,
    find_largest_vertical_lines,
    apply_line_isolation_config,
)

from .foreground import (
    BackgroundModel,
    ForegroundExtractor,
    apply_foreground_mask,
    extract_foreground,
    compute_foreground_image,
    compute_foreground_images,
)

from .histogram import (
    compute_histogram_counts,
    render_histogram,
    compute_histogram,
    plot_histogram,
)

from .center_mask import (
    generate_enhanced_center_mask,
    pad_image,
    remove_padding,
)

# Registry for dynamic lookup of image -> image operations
PROCESSING_FUNCTIONS = {
    "gradient": compute_gradient_image,
    "horizontal_lines": find_largest_horizontal_lines,
    "vertical_lines": find_largest_vertical_lines,
    "histogram": compute_histogram,
    "histogram_plot": plot_histogram,
}

__all__ = [
    # Gradient
    "compute_gradient_image",
    # Region location
    "compute_innermost_rectangle",
    "compute_gel_location",
    "find_innermost_rectangle",
    "find_gel_location",
    "crop_to_rect",
    # Line isolation
    "find_largest_lines",
    "find_largest_horizontal_lines",
    "find_largest_vertical_lines",
    "apply_line_isolation_config",
    # Foreground extraction
    "BackgroundModel",
    "ForegroundExtractor",
    "apply_foreground_mask",
    "extract_foreground",
    "compute_foreground_image",
    "compute_foreground_images",
    # Histograms
    "compute_histogram_counts",
    "render_histogram",
    "compute_histogram",
    "plot_histogram",
    # Center mask
    "generate_enhanced_center_mask",
    "pad_image",
    "remove_padding",
    # Configuration models
    "GradientConfig",
    "LineIsolationConfig",
    "BackgroundModelConfig",
    "ForegroundConfig",
    "HistogramConfig",
    "CenterMaskConfig",
    "GelAnalysisConfig",
    "LineOrientation",
    "HistogramStyle",
    "HistogramNormalization",
    "DistanceMetric",
    # Function registry
    "PROCESSING_FUNCTIONS",
]

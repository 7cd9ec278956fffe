"""
Pydantic configuration models for gel image processing functions.

This module defines configuration models for the processing operations:
gradient extraction, line isolation, foreground extraction, histogram
rendering and center-mask synthesis. All models use Pydantic for validation
and automatic YAML/JSON serialization. Defaults reproduce the behavior of the
plain function entry points.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, Union
from pathlib import Path
from enum import Enum


class LineOrientation(str, Enum):
    """Direction of the line structures kept by line isolation."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class HistogramStyle(str, Enum):
    """Supported histogram drawing styles."""

    POLYLINE = "polyline"
    BARS = "bars"


class HistogramNormalization(str, Enum):
    """How bin counts are scaled into canvas pixels."""

    MINMAX = "minmax"
    MAX = "max"


class DistanceMetric(str, Enum):
    """Distance metrics accepted by the center-mask distance transform."""

    CHESSBOARD = "chessboard"
    L1 = "l1"
    L2 = "l2"


class GradientConfig(BaseModel):
    """
    Configuration for Sobel-based gradient magnitude extraction.

    Attributes
    ----------
    kernel_size : int
        Sobel aperture size. Must be 1, 3, 5 or 7.
    scale : float
        Scale factor applied to the computed derivatives.
    delta : float
        Offset added to the derivatives before taking the absolute value.
    weight_x : float
        Weight of the horizontal magnitude in the combined image.
    weight_y : float
        Weight of the vertical magnitude in the combined image.
    """

    kernel_size: int = Field(3, description="Sobel aperture size")
    scale: float = Field(1.0, gt=0.0, description="Derivative scale factor")
    delta: float = Field(0.0, description="Derivative offset")
    weight_x: float = Field(0.5, ge=0.0, description="Weight of |d/dx|")
    weight_y: float = Field(0.5, ge=0.0, description="Weight of |d/dy|")

    @field_validator("kernel_size")
    def validate_kernel_size(cls, v):
        """Ensure the aperture is one OpenCV's Sobel accepts."""
        if v not in (1, 3, 5, 7):
            raise ValueError("kernel_size must be one of 1, 3, 5, 7")
        return v


class LineIsolationConfig(BaseModel):
    """
    Configuration for morphological line isolation.

    Attributes
    ----------
    orientation : LineOrientation
        Keep horizontal or vertical structures.
    length_fraction : float
        Structuring element length as a fraction of the image extent along
        ``orientation``. Shorter runs are removed by the opening.
    """

    orientation: LineOrientation = Field(
        LineOrientation.HORIZONTAL, description="Line direction to keep"
    )
    length_fraction: float = Field(
        0.5, gt=0.0, le=1.0, description="Element length relative to image extent"
    )


class BackgroundModelConfig(BaseModel):
    """
    Parameters of the adaptive mixture-of-Gaussians background model.

    Attributes
    ----------
    history : int
        Number of frames that influence the model.
    var_threshold : float
        Squared Mahalanobis distance threshold deciding whether a pixel is
        explained by the background.
    detect_shadows : bool
        Mark shadows (value 127) separately from foreground (value 255).
    learning_rate : float
        Model update rate in [0, 1]; negative selects the automatic rate.
    """

    history: int = Field(500, gt=0, description="Frames of model history")
    var_threshold: float = Field(16.0, gt=0.0, description="Variance threshold")
    detect_shadows: bool = Field(True, description="Detect and mark shadows")
    learning_rate: float = Field(-1.0, le=1.0, description="Learning rate, <0 = auto")


class ForegroundConfig(BaseModel):
    """
    Configuration for foreground extraction over an image sequence.

    Attributes
    ----------
    model : BackgroundModelConfig
        Background model parameters.
    warmup_frames_to_discard : int
        Number of leading results dropped while the model stabilizes.
    return_all_frames : bool
        Return every retained frame, or only the last one.
    include_shadows : bool
        Treat pixels flagged as shadow as foreground.
    output_dir : Optional[Union[str, Path]]
        If set, each retained frame is written to this directory.
    filename_prefix : str
        Prefix of the written frame files.
    """

    model: BackgroundModelConfig = Field(default_factory=BackgroundModelConfig)
    warmup_frames_to_discard: int = Field(
        1, ge=0, description="Leading frames dropped as model warm-up"
    )
    return_all_frames: bool = Field(True, description="Return all retained frames")
    include_shadows: bool = Field(True, description="Copy shadow pixels too")
    output_dir: Optional[Union[str, Path]] = Field(
        None, description="Directory for written foreground frames"
    )
    filename_prefix: str = Field("fg", description="Prefix of written frame files")


class HistogramConfig(BaseModel):
    """
    Configuration for histogram rendering.

    Attributes
    ----------
    style : HistogramStyle
        Connected polyline or one vertical bar per bin.
    normalization : HistogramNormalization
        Min-max scaling into the canvas height, or scaling by the maximum bin.
    canvas_width : int
        Width of the rendered image in pixels.
    canvas_height : int
        Height of the rendered image in pixels.
    """

    style: HistogramStyle = Field(HistogramStyle.POLYLINE, description="Drawing style")
    normalization: HistogramNormalization = Field(
        HistogramNormalization.MINMAX, description="Bin height normalization"
    )
    canvas_width: int = Field(1024, gt=0, description="Canvas width in pixels")
    canvas_height: int = Field(800, gt=0, description="Canvas height in pixels")


class CenterMaskConfig(BaseModel):
    """
    Configuration for the distance-transform center mask.

    Attributes
    ----------
    padding : int
        Width of the zero border added before the distance transform.
    metric : DistanceMetric
        Distance metric of the transform.
    mask_size : int
        Neighborhood size of the transform (3 or 5).
    """

    padding: int = Field(1, ge=1, description="Zero border width in pixels")
    metric: DistanceMetric = Field(
        DistanceMetric.CHESSBOARD, description="Distance transform metric"
    )
    mask_size: int = Field(3, description="Distance transform mask size")

    @field_validator("mask_size")
    def validate_mask_size(cls, v):
        """Only the 3x3 and 5x5 approximations are supported."""
        if v not in (3, 5):
            raise ValueError("mask_size must be 3 or 5")
        return v


class GelAnalysisConfig(BaseModel):
    """
    Aggregate configuration for all gel processing operations.

    Each section falls back to its defaults when omitted, so an empty YAML
    file yields the same behavior as calling the functions without a config.
    """

    gradient: GradientConfig = Field(default_factory=GradientConfig)
    lines: LineIsolationConfig = Field(default_factory=LineIsolationConfig)
    foreground: ForegroundConfig = Field(default_factory=ForegroundConfig)
    histogram: HistogramConfig = Field(default_factory=HistogramConfig)
    center_mask: CenterMaskConfig = Field(default_factory=CenterMaskConfig)

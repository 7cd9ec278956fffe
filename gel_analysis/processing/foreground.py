"""
Foreground extraction over an ordered image sequence.

An adaptive per-pixel mixture-of-Gaussians background model is fed the frames
of a sequence one at a time. For each frame the model returns a foreground
mask, and the frame's pixels under that mask are copied into an otherwise
zero image.

The model has no prior observations on the first frame, so its first mask is
unreliable (every pixel is foreground). The number of leading results to drop
is configurable through ``ForegroundConfig.warmup_frames_to_discard``.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import cv2
import numpy as np

from ..types import Array2D
from ..utils import build_filename, ensure_uint8, validate_image, write_image
from .config_models import BackgroundModelConfig, ForegroundConfig

logger = logging.getLogger(__name__)

FOREGROUND_VALUE = 255
SHADOW_VALUE = 127


class BackgroundModel:
    """
    Adaptive background model for a single image sequence.

    Wraps OpenCV's MOG2 background subtractor. One instance must be used for
    exactly one sequence; create a new instance for every sequence.

    Attributes
    ----------
    config : BackgroundModelConfig
        Model parameters.
    frames_seen : int
        Number of frames applied so far.
    """

    def __init__(self, config: Optional[BackgroundModelConfig] = None):
        """
        Create an empty model.

        Parameters
        ----------
        config : BackgroundModelConfig, optional
            Model parameters; defaults match OpenCV's MOG2 defaults.
        """
        self.config = config or BackgroundModelConfig()
        self.frames_seen = 0
        self._frame_shape: Optional[Tuple[int, ...]] = None
        self._subtractor = cv2.createBackgroundSubtractorMOG2(
            history=self.config.history,
            varThreshold=self.config.var_threshold,
            detectShadows=self.config.detect_shadows,
        )

    def apply(self, frame: Array2D) -> Array2D:
        """
        Update the model with ``frame`` and classify its pixels.

        Parameters
        ----------
        frame : Array2D
            8-bit frame. All frames of a sequence must share one shape.

        Returns
        -------
        Array2D
            ``uint8`` mask: 255 foreground, 127 shadow (if enabled), 0 background.

        Raises
        ------
        ValueError
            If the frame shape differs from the first frame's shape.
        """
        if self._frame_shape is None:
            self._frame_shape = frame.shape
        elif frame.shape != self._frame_shape:
            raise ValueError(
                f"Frame {self.frames_seen} has shape {frame.shape}, "
                f"expected {self._frame_shape}"
            )

        mask = self._subtractor.apply(frame, learningRate=self.config.learning_rate)
        self.frames_seen += 1
        return mask


def apply_foreground_mask(
    frame: Array2D, mask: Array2D, include_shadows: bool = True
) -> Array2D:
    """
    Copy the pixels of ``frame`` selected by ``mask`` into a zero image.

    Parameters
    ----------
    frame : Array2D
        Source frame (single- or multi-channel).
    mask : Array2D
        Single-channel mask from :meth:`BackgroundModel.apply`.
    include_shadows : bool
        If True every non-zero mask value selects a pixel; otherwise only
        pixels marked as full foreground are copied.

    Returns
    -------
    Array2D
        New image of the frame's shape and dtype.
    """
    if include_shadows:
        selected = mask != 0
    else:
        selected = mask == FOREGROUND_VALUE

    foreground = np.zeros_like(frame)
    foreground[selected] = frame[selected]
    return foreground


def extract_foreground(
    images: Iterable[Array2D],
    config: Optional[ForegroundConfig] = None,
    model: Optional[BackgroundModel] = None,
) -> List[Array2D]:
    """
    Extract the masked foreground of every frame in a sequence.

    Parameters
    ----------
    images : Iterable[Array2D]
        Frames in sequence order.
    config : ForegroundConfig, optional
        Warm-up, output and model settings. Defaults drop the first frame and
        return all remaining ones.
    model : BackgroundModel, optional
        Model to feed. A new model is created from ``config.model`` if
        omitted; pass one explicitly to inspect it after the call.

    Returns
    -------
    List[Array2D]
        Foreground images after the warm-up frames. With
        ``return_all_frames=False`` the list holds at most the last one. An
        empty sequence gives an empty list.

    Raises
    ------
    ValueError
        If a frame is empty or its shape differs from the first frame.
    """
    config = config or ForegroundConfig()
    if model is None:
        model = BackgroundModel(config.model)

    output_prefix = None
    if config.output_dir is not None:
        output_prefix = Path(config.output_dir) / config.filename_prefix

    retained: List[Array2D] = []
    for index, frame in enumerate(images, start=1):
        validate_image(frame, allow_color=True)
        frame = ensure_uint8(frame)

        mask = model.apply(frame)
        foreground = apply_foreground_mask(frame, mask, config.include_shadows)

        if index <= config.warmup_frames_to_discard:
            logger.debug(f"Discarding warm-up frame {index}")
            continue

        if output_prefix is not None:
            write_image(build_filename(output_prefix, index), foreground)

        if config.return_all_frames:
            retained.append(foreground)
        else:
            retained = [foreground]

    logger.debug(
        f"Processed {model.frames_seen} frames, returning {len(retained)} foreground images"
    )
    return retained


def compute_foreground_images(
    images: Iterable[Array2D], config: Optional[ForegroundConfig] = None
) -> List[Array2D]:
    """
    Foreground image of every frame except the warm-up frames.

    With the default config the first frame is dropped, so a single-frame
    sequence yields an empty list.
    """
    config = config or ForegroundConfig()
    config = config.model_copy(update={"return_all_frames": True})
    return extract_foreground(images, config)


def compute_foreground_image(
    images: Iterable[Array2D], config: Optional[ForegroundConfig] = None
) -> Optional[Array2D]:
    """
    Foreground image of the last frame in the sequence.

    No warm-up frames are skipped here: a single-frame sequence returns that
    frame's (unreliable) result. Returns ``None`` for an empty sequence.
    """
    config = config or ForegroundConfig()
    config = config.model_copy(
        update={"warmup_frames_to_discard": 0, "return_all_frames": False}
    )
    results = extract_foreground(images, config)
    if not results:
        logger.warning("No frames given, no foreground image computed")
        return None
    return results[-1]


class ForegroundExtractor:
    """
    Configured foreground extraction, reusable across sequences.

    A fresh :class:`BackgroundModel` is created for every call, so
    successive sequences never share model state.

    Attributes
    ----------
    config : ForegroundConfig
        Extraction configuration.
    """

    def __init__(self, config: Optional[ForegroundConfig] = None):
        self.config = config or ForegroundConfig()

    def create_model(self) -> BackgroundModel:
        """Return a new, empty background model for one sequence."""
        return BackgroundModel(self.config.model)

    def process(self, images: Iterable[Array2D]) -> List[Array2D]:
        """Extract foreground images from one sequence."""
        return extract_foreground(images, self.config, self.create_model())

    def process_last(self, images: Iterable[Array2D]) -> Optional[Array2D]:
        """Foreground image of the last retained frame, or ``None``."""
        config = self.config.model_copy(update={"return_all_frames": False})
        results = extract_foreground(images, config, self.create_model())
        return results[-1] if results else None

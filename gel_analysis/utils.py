"""Utility functions for validating, reading and writing images."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

import cv2
import numpy as np
from imageio.v3 import imread, imwrite

if TYPE_CHECKING:
    from .types import Array2D

logger = logging.getLogger(__name__)


def validate_image(image: "Array2D", allow_color: bool = False) -> None:
    """
    Check that ``image`` is a non-empty NumPy image.

    Parameters
    ----------
    image : Array2D
        Image to check.
    allow_color : bool
        Also accept 3-D (height, width, channels) arrays.

    Raises
    ------
    TypeError
        If ``image`` is not a NumPy array.
    ValueError
        If the image has the wrong number of dimensions or zero area.
    """
    if not isinstance(image, np.ndarray):
        raise TypeError(f"Expected a numpy.ndarray image, got {type(image).__name__}")

    valid_ndims = (2, 3) if allow_color else (2,)
    if image.ndim not in valid_ndims:
        raise ValueError(
            f"Expected an image with ndim in {valid_ndims}, got shape {image.shape}"
        )

    if image.shape[0] == 0 or image.shape[1] == 0:
        raise ValueError(f"Image must have non-zero area, got shape {image.shape}")


def ensure_uint8(image: "Array2D") -> "Array2D":
    """
    Return ``image`` as an 8-bit unsigned array.

    ``uint8`` input is returned unchanged. Other dtypes are clipped to
    [0, 255] and rounded, which is logged since it usually means the caller
    passed raw camera data.
    """
    if image.dtype == np.uint8:
        return image

    logger.warning(f"Converting image of dtype {image.dtype} to uint8")
    return np.clip(np.rint(image), 0, 255).astype(np.uint8)


def build_filename(prefix: Union[Path, str], index: int, extension: str = ".png") -> Path:
    """
    Build a numbered image filename such as ``fg3.png``.

    Parameters
    ----------
    prefix : Union[Path, str]
        Path prefix, e.g. ``out_dir / "fg"``.
    index : int
        Number appended to the prefix.
    extension : str
        File extension including the dot.

    Returns
    -------
    Path
        The assembled file path.
    """
    prefix = Path(prefix)
    return prefix.with_name(f"{prefix.name}{index:d}{extension}")


def _is_three_channel(image: np.ndarray) -> bool:
    return image.ndim == 3 and image.shape[2] == 3


def read_image(file_path: Union[Path, str]) -> np.ndarray:
    """
    Read an image file into a NumPy array.

    Counterpart of :func:`write_image` for callers that load frame sequences
    or gel images from disk before handing them to the processing functions.

    Parameters
    ----------
    file_path : Union[Path, str]
        Path to the image file. ``.npy`` files are loaded with NumPy, anything
        else goes through imageio.

    Returns
    -------
    np.ndarray
        Loaded image data. 3-channel images are returned in OpenCV's BGR
        channel order.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Image file not found: {file_path}")

    if file_path.suffix.lower() == ".npy":
        return np.load(file_path)

    image = imread(file_path)
    if _is_three_channel(image):
        # imageio returns RGB
        image = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
    return image


def write_image(file_path: Union[Path, str], image: np.ndarray) -> Path:
    """
    Write an image to disk, creating the parent directory if needed.

    Parameters
    ----------
    file_path : Union[Path, str]
        Destination path; the format follows the extension.
    image : np.ndarray
        Image data to write. 3-channel images are taken to be in OpenCV's BGR
        order and are stored as RGB in image files; ``.npy`` files store the
        array as given.

    Returns
    -------
    Path
        The path written to.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    if file_path.suffix.lower() == ".npy":
        np.save(file_path, image)
    else:
        if _is_three_channel(image):
            image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        imwrite(file_path, image)

    logger.debug(f"Wrote image of shape {image.shape} to {file_path}")
    return file_path

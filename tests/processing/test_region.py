"""Tests for the region locating scans."""

import numpy as np
import pytest

from gel_analysis.processing.region import (
    compute_gel_location,
    compute_innermost_rectangle,
    crop_to_rect,
    find_gel_location,
    find_innermost_rectangle,
)
from gel_analysis.types import Rect


@pytest.fixture
def box_outline():
    """11x11 image with a rectangle outline around the center pixel (5, 5)."""
    image = np.zeros((11, 11), dtype=np.uint8)
    image[2, :] = 255
    image[8, :] = 255
    image[:, 1] = 255
    image[:, 9] = 255
    return image


class TestComputeGelLocation:
    def test_all_background_returns_sentinel(self):
        image = np.zeros((6, 10), dtype=np.uint8)
        rect = compute_gel_location(image)

        assert rect == Rect(x=9, y=5, width=-9, height=-5)
        assert rect.is_empty

    def test_single_pixel(self):
        image = np.zeros((6, 10), dtype=np.uint8)
        image[4, 7] = 1

        assert compute_gel_location(image) == Rect(x=7, y=4, width=0, height=0)

    def test_block(self):
        image = np.zeros((10, 12), dtype=np.uint8)
        image[2:5, 3:8] = 255

        assert compute_gel_location(image) == Rect(x=3, y=2, width=4, height=2)

    def test_scattered_pixels(self):
        image = np.zeros((20, 20), dtype=np.uint8)
        image[3, 15] = 9
        image[17, 2] = 9
        image[10, 10] = 9

        assert compute_gel_location(image) == Rect(x=2, y=3, width=13, height=14)


class TestFindGelLocation:
    def test_no_foreground_is_none(self):
        assert find_gel_location(np.zeros((5, 5), dtype=np.uint8)) is None

    def test_single_pixel_is_found(self):
        image = np.zeros((5, 5), dtype=np.uint8)
        image[0, 0] = 3

        assert find_gel_location(image) == Rect(x=0, y=0, width=1, height=1)

    def test_single_pixel_can_be_cropped(self):
        image = np.zeros((6, 10), dtype=np.uint8)
        image[2, 3] = 7

        cropped = crop_to_rect(image, find_gel_location(image))
        np.testing.assert_array_equal(cropped, [[7]])

    def test_crop_keeps_whole_gel(self):
        image = np.zeros((10, 12), dtype=np.uint8)
        image[2:5, 3:8] = 255

        rect = find_gel_location(image)
        assert rect == Rect(x=3, y=2, width=5, height=3)

        cropped = crop_to_rect(image, rect)
        assert cropped.shape == (3, 5)
        assert np.all(cropped == 255)

    def test_gel_touching_far_edges(self):
        image = np.zeros((6, 8), dtype=np.uint8)
        image[4:, 5:] = 1

        cropped = crop_to_rect(image, find_gel_location(image))
        np.testing.assert_array_equal(cropped, image[4:, 5:])


class TestComputeInnermostRectangle:
    def test_box_outline(self, box_outline):
        assert compute_innermost_rectangle(box_outline) == Rect(
            x=1, y=2, width=8, height=6
        )

    def test_all_background_uses_image_edges(self):
        image = np.zeros((7, 9), dtype=np.uint8)

        assert compute_innermost_rectangle(image) == Rect(x=0, y=0, width=9, height=7)

    def test_all_foreground_collapses_on_center(self):
        image = np.full((7, 9), 255, dtype=np.uint8)
        rect = compute_innermost_rectangle(image)

        assert rect == Rect(x=4, y=3, width=0, height=0)
        assert rect.is_empty

    def test_missing_directions_fall_back_to_edges(self):
        image = np.zeros((10, 10), dtype=np.uint8)
        # Only a line above the center (5, 5)
        image[1, :] = 255

        assert compute_innermost_rectangle(image) == Rect(
            x=0, y=1, width=10, height=9
        )

    def test_off_axis_pixels_ignored(self, box_outline):
        image = box_outline.copy()
        image[3, 3] = 255

        assert compute_innermost_rectangle(image) == compute_innermost_rectangle(
            box_outline
        )


class TestFindInnermostRectangle:
    def test_valid_rectangle(self, box_outline):
        assert find_innermost_rectangle(box_outline) == Rect(
            x=1, y=2, width=8, height=6
        )

    def test_degenerate_is_none(self):
        image = np.full((5, 5), 1, dtype=np.uint8)
        assert find_innermost_rectangle(image) is None


class TestCropToRect:
    def test_crop(self):
        image = np.arange(100, dtype=np.uint8).reshape(10, 10)
        cropped = crop_to_rect(image, Rect(x=2, y=3, width=4, height=2))

        np.testing.assert_array_equal(cropped, image[3:5, 2:6])
        cropped[0, 0] = 0
        assert image[3, 2] == 32

    def test_empty_rect_raises(self):
        image = np.zeros((10, 10), dtype=np.uint8)
        with pytest.raises(ValueError):
            crop_to_rect(image, Rect(x=9, y=9, width=-9, height=-9))

    def test_rect_outside_image_raises(self):
        image = np.zeros((10, 10), dtype=np.uint8)
        with pytest.raises(ValueError):
            crop_to_rect(image, Rect(x=5, y=5, width=6, height=2))


def test_empty_image_raises():
    with pytest.raises(ValueError):
        compute_gel_location(np.zeros((4, 0), dtype=np.uint8))
    with pytest.raises(ValueError):
        compute_innermost_rectangle(np.zeros((0, 4), dtype=np.uint8))


def test_scans_are_deterministic():
    rng = np.random.default_rng(3)
    image = (rng.random((25, 31)) > 0.7).astype(np.uint8) * 255

    assert compute_gel_location(image) == compute_gel_location(image)
    assert compute_innermost_rectangle(image) == compute_innermost_rectangle(image)
    assert find_gel_location(image) == find_gel_location(image)

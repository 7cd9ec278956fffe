"""Tests for the gradient module."""

import numpy as np
import pytest
from pydantic import ValidationError

from gel_analysis.processing.config_models import GradientConfig
from gel_analysis.processing.gradient import compute_gradient_image


@pytest.fixture
def step_image():
    """10x10 image with a vertical edge between columns 4 and 5."""
    image = np.zeros((10, 10), dtype=np.uint8)
    image[:, 5:] = 200
    return image


class TestComputeGradientImage:
    """Test suite for compute_gradient_image."""

    def test_constant_image_has_no_gradient(self):
        image = np.full((8, 12), 77, dtype=np.uint8)
        gradient = compute_gradient_image(image)

        assert gradient.shape == (8, 12)
        assert gradient.dtype == np.uint8
        assert not gradient.any()

    def test_vertical_edge(self, step_image):
        gradient = compute_gradient_image(step_image)

        # Strong response on both sides of the edge, uniform down the column
        assert np.all(gradient[:, 4] > 100)
        assert np.all(gradient[:, 5] > 100)
        assert np.all(gradient[:, 4] == gradient[0, 4])

        # Flat areas away from the edge
        assert not gradient[:, :3].any()
        assert not gradient[:, 7:].any()

    def test_horizontal_edge_matches_transposed_vertical_edge(self, step_image):
        vertical = compute_gradient_image(step_image)
        horizontal = compute_gradient_image(np.ascontiguousarray(step_image.T))

        np.testing.assert_array_equal(horizontal, vertical.T)

    def test_falling_edge_detected(self, step_image):
        # A bright-to-dark edge must give the same magnitude as dark-to-bright
        rising = compute_gradient_image(step_image)
        falling = compute_gradient_image(np.ascontiguousarray(step_image[:, ::-1]))

        np.testing.assert_array_equal(falling, rising[:, ::-1])

    def test_input_not_modified(self, step_image):
        original = step_image.copy()
        compute_gradient_image(step_image)
        np.testing.assert_array_equal(step_image, original)

    def test_deterministic(self):
        rng = np.random.default_rng(0)
        image = rng.integers(0, 256, size=(32, 48), dtype=np.uint8)

        np.testing.assert_array_equal(
            compute_gradient_image(image), compute_gradient_image(image)
        )

    def test_weights_select_direction(self, step_image):
        config = GradientConfig(weight_x=0.0, weight_y=1.0)
        gradient = compute_gradient_image(step_image, config)

        # Only vertical derivatives are kept, and there are none
        assert not gradient.any()

    def test_empty_image_raises(self):
        with pytest.raises(ValueError):
            compute_gradient_image(np.zeros((0, 5), dtype=np.uint8))

    def test_color_image_raises(self):
        with pytest.raises(ValueError):
            compute_gradient_image(np.zeros((5, 5, 3), dtype=np.uint8))

    def test_invalid_kernel_size(self):
        with pytest.raises(ValidationError):
            GradientConfig(kernel_size=4)

"""Tests for histogram computation and rendering."""

import numpy as np
import pytest

from gel_analysis.processing.config_models import (
    HistogramConfig,
    HistogramNormalization,
    HistogramStyle,
)
from gel_analysis.processing.histogram import (
    compute_histogram,
    compute_histogram_counts,
    plot_histogram,
    render_histogram,
)


@pytest.fixture
def random_image():
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(37, 53), dtype=np.uint8)


class TestComputeHistogramCounts:
    def test_counts_sum_to_pixel_count(self, random_image):
        counts = compute_histogram_counts(random_image)

        assert counts.shape == (256,)
        assert counts.sum() == random_image.size

    def test_known_counts(self):
        image = np.array([[0, 0, 5], [255, 5, 5]], dtype=np.uint8)
        counts = compute_histogram_counts(image)

        assert counts[0] == 2
        assert counts[5] == 3
        assert counts[255] == 1
        assert counts.sum() == 6

    def test_empty_image_raises(self):
        with pytest.raises(ValueError):
            compute_histogram_counts(np.zeros((0, 10), dtype=np.uint8))


class TestComputeHistogram:
    def test_canvas(self, random_image):
        canvas = compute_histogram(random_image)

        assert canvas.shape == (800, 1024)
        assert canvas.dtype == np.uint8
        assert set(np.unique(canvas)) <= {0, 255}
        assert canvas.any()

    def test_single_peak_reaches_top(self):
        counts = np.zeros(256)
        counts[128] = 10
        canvas = render_histogram(counts)

        # Bin 128 sits at x = 4 * 128 and is normalized to the full height
        assert canvas[0, 512] == 255
        assert not canvas[0, :500].any()

    def test_deterministic(self, random_image):
        np.testing.assert_array_equal(
            compute_histogram(random_image), compute_histogram(random_image)
        )


class TestPlotHistogram:
    def test_uniform_image_draws_one_bar(self):
        image = np.full((16, 16), 100, dtype=np.uint8)
        canvas = plot_histogram(image)

        assert canvas.shape == (256, 256)
        assert np.all(canvas[:, 100] == 255)
        canvas[:, 100] = 0
        assert not canvas.any()

    def test_bar_heights_scale_with_max(self):
        image = np.full((4, 4), 10, dtype=np.uint8)
        image[2, :] = 20

        canvas = plot_histogram(image)

        # 12 pixels at 10 is the maximum bin; 4 pixels at 20 give a third
        assert np.all(canvas[:, 10] == 255)
        bar = np.flatnonzero(canvas[:, 20])
        assert bar.size > 0
        assert bar[0] == 256 - int(4 * 256 / 12)
        assert bar[-1] == 255


class TestRenderHistogram:
    def test_zero_counts_render_blank(self):
        config = HistogramConfig(
            style=HistogramStyle.BARS,
            normalization=HistogramNormalization.MAX,
            canvas_width=256,
            canvas_height=256,
        )
        canvas = render_histogram(np.zeros(256), config)
        assert not canvas.any()

    def test_custom_canvas_size(self, random_image):
        config = HistogramConfig(canvas_width=512, canvas_height=300)
        canvas = render_histogram(compute_histogram_counts(random_image), config)
        assert canvas.shape == (300, 512)

    def test_wrong_bin_count_raises(self):
        with pytest.raises(ValueError):
            render_histogram(np.ones(100))

    def test_negative_counts_raise(self):
        counts = np.zeros(256)
        counts[3] = -1
        with pytest.raises(ValueError):
            render_histogram(counts)

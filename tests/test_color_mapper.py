import numpy as np
import pytest

from disparity_view.color_mapper import (
    ColorImage,
    DegenerateRangeError,
    DisparityFrame,
    MalformedFrameError,
    MappingError,
    UnsupportedEncodingError,
    disparity_to_array,
    disparity_to_index,
    map_to_color,
)
from disparity_view.color_table import COLOR_TABLE_RGB


def _indices(image: ColorImage) -> np.ndarray:
    """Recover table indices from an RGB image (every pixel must match a table entry)."""
    pixels = image.array.reshape(-1, 1, 3)
    matches = np.all(pixels == COLOR_TABLE_RGB[np.newaxis, :, :], axis=2)
    assert matches.any(axis=1).all(), "pixel not found in color table"
    return matches.argmax(axis=1).reshape(image.height, image.width)


class TestMapToColor:

    def test_two_pixel_frame_maps_to_first_and_last_entries(self, make_frame):
        image = map_to_color(make_frame([[0.0, 10.0]], 0.0, 10.0))

        assert (image.width, image.height, image.step) == (2, 1, 6)
        assert image.array[0, 0].tolist() == COLOR_TABLE_RGB[0].tolist()
        assert image.array[0, 1].tolist() == COLOR_TABLE_RGB[255].tolist()
        assert image.array[0, 0].tolist() == [150, 150, 150]
        assert image.array[0, 1].tolist() == [0, 0, 255]

    def test_every_pixel_is_a_table_entry(self, make_frame):
        rng = np.random.default_rng(0)
        values = rng.uniform(-5.0, 70.0, size=(12, 17))
        image = map_to_color(make_frame(values, 2.0, 64.0))

        assert image.array.dtype == np.uint8
        assert image.array.shape == (12, 17, 3)
        _indices(image)

    def test_output_is_deterministic(self, make_frame):
        rng = np.random.default_rng(1)
        frame = make_frame(rng.uniform(0.0, 32.0, size=(8, 9)), 0.0, 32.0)

        assert map_to_color(frame).tobytes() == map_to_color(frame).tobytes()

    def test_rounds_half_up(self, make_frame):
        # scale == 1: index = trunc(d + 0.5)
        image = map_to_color(make_frame([[0.49, 0.5, 1.49, 254.5]], 0.0, 255.0))

        assert _indices(image).tolist() == [[0, 1, 1, 255]]

    def test_out_of_range_samples_are_clamped(self, make_frame):
        image = map_to_color(make_frame([[-100.0, -0.04, 20.0, 1e30]], 0.0, 10.0))

        assert _indices(image).tolist() == [[0, 0, 255, 255]]

    def test_non_finite_samples(self, make_frame):
        image = map_to_color(make_frame([[np.nan, np.inf, -np.inf]], 0.0, 10.0))

        assert _indices(image).tolist() == [[0, 255, 0]]

    def test_nonzero_min_disparity(self, make_frame):
        # scale = 255 / 51 = 5
        image = map_to_color(make_frame([[13.0, 14.0, 64.0]], 13.0, 64.0))

        assert _indices(image).tolist() == [[0, 5, 255]]

    def test_row_stride_padding_is_skipped(self):
        width, height, step = 2, 2, 16  # 8 bytes of padding per row
        rows = np.zeros((height, step // 4), dtype="<f4")
        rows[:, :width] = [[0.0, 10.0], [10.0, 0.0]]
        rows[:, width:] = 5.0  # padding must never show up in the output
        frame = DisparityFrame(width=width, height=height, step=step, encoding="32FC1",
                               data=rows.tobytes(), min_disparity=0.0, max_disparity=10.0)

        image = map_to_color(frame)

        assert image.array.shape == (2, 2, 3)
        assert image.step == 6
        assert _indices(image).tolist() == [[0, 255], [255, 0]]

    def test_big_endian_samples(self):
        data = np.array([[0.0, 10.0]], dtype=">f4").tobytes()
        frame = DisparityFrame(width=2, height=1, step=8, encoding="32FC1", data=data,
                               min_disparity=0.0, max_disparity=10.0, is_bigendian=True)

        assert _indices(map_to_color(frame)).tolist() == [[0, 255]]

    def test_accepts_numpy_buffer(self):
        # rosbags hands out message data as uint8 arrays
        data = np.frombuffer(np.array([[0.0, 10.0]], dtype="<f4").tobytes(), dtype=np.uint8)
        frame = DisparityFrame(width=2, height=1, step=8, encoding="32FC1", data=data,
                               min_disparity=0.0, max_disparity=10.0)

        assert _indices(map_to_color(frame)).tolist() == [[0, 255]]

    def test_empty_frame(self, make_frame):
        image = map_to_color(make_frame(np.zeros((0, 4)), 0.0, 10.0))

        assert image.array.shape == (0, 4, 3)
        assert image.tobytes() == b""


class TestRejectedFrames:

    def test_zero_range_is_degenerate(self, make_frame):
        with pytest.raises(DegenerateRangeError):
            map_to_color(make_frame([[1.0, 2.0]], 0.0, 0.0))

    def test_equal_bounds_are_degenerate(self, make_frame):
        with pytest.raises(DegenerateRangeError):
            map_to_color(make_frame([[5.0]], 5.0, 5.0))

    def test_nan_bounds_are_degenerate(self, make_frame):
        with pytest.raises(DegenerateRangeError):
            map_to_color(make_frame([[5.0]], 0.0, float("nan")))

    def test_wrong_encoding(self):
        frame = DisparityFrame(width=1, height=1, step=2, encoding="16UC1", data=b"\x00\x00",
                               min_disparity=0.0, max_disparity=10.0)

        with pytest.raises(UnsupportedEncodingError):
            map_to_color(frame)

    def test_degenerate_range_is_checked_before_encoding(self):
        frame = DisparityFrame(width=1, height=1, step=2, encoding="16UC1", data=b"\x00\x00",
                               min_disparity=0.0, max_disparity=0.0)

        with pytest.raises(DegenerateRangeError):
            map_to_color(frame)

    def test_step_smaller_than_row(self):
        frame = DisparityFrame(width=2, height=1, step=4, encoding="32FC1", data=bytes(8),
                               min_disparity=0.0, max_disparity=10.0)

        with pytest.raises(MalformedFrameError):
            map_to_color(frame)

    def test_short_buffer(self):
        frame = DisparityFrame(width=2, height=2, step=8, encoding="32FC1", data=bytes(12),
                               min_disparity=0.0, max_disparity=10.0)

        with pytest.raises(MalformedFrameError):
            map_to_color(frame)

    def test_errors_share_a_recoverable_base(self):
        assert issubclass(DegenerateRangeError, MappingError)
        assert issubclass(UnsupportedEncodingError, MappingError)
        assert issubclass(MalformedFrameError, MappingError)
        assert issubclass(MappingError, ValueError)


def test_disparity_to_array_strips_padding():
    rows = np.arange(6, dtype="<f4").reshape(2, 3)
    frame = DisparityFrame(width=2, height=2, step=12, encoding="32FC1", data=rows.tobytes(),
                           min_disparity=0.0, max_disparity=1.0)

    disp = disparity_to_array(frame)

    assert disp.dtype == np.float32
    assert disp.tolist() == [[0.0, 1.0], [3.0, 4.0]]


def test_disparity_to_index_bounds():
    disp = np.array([[0.0, 10.0]], dtype=np.float32)

    index = disparity_to_index(disp, 0.0, np.float32(25.5))

    assert index.dtype == np.uint8
    assert index.tolist() == [[0, 255]]


def test_from_array_rejects_non_2d():
    with pytest.raises(ValueError):
        DisparityFrame.from_array(np.zeros(4), 0.0, 1.0)

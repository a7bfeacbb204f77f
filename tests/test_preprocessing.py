"""
Rasterizer adapters and aspect-ratio correction.
"""

import unittest

import numpy as np

from ascii_ramp.errors import DecodeError
from ascii_ramp.preprocessing import (
    Rasterizer,
    LuminanceBuffer,
    OpenCVRasterizer,
    PillowRasterizer,
    aspect_corrected_height,
    decode_and_resize,
    get_rasterizer,
    list_backends,
)
from tests.helpers import make_png


class TestAspectCorrection(unittest.TestCase):

    def test_halves_row_count(self):
        self.assertEqual(aspect_corrected_height(40), 20)

    def test_floors_odd_counts(self):
        self.assertEqual(aspect_corrected_height(41), 20)

    def test_single_row_gives_zero(self):
        self.assertEqual(aspect_corrected_height(1), 0)


class TestLuminanceBuffer(unittest.TestCase):

    def test_dimensions(self):
        buffer = LuminanceBuffer.from_rows([[0, 1, 2], [3, 4, 5]])
        self.assertEqual(buffer.width, 3)
        self.assertEqual(buffer.height, 2)
        self.assertEqual(buffer[1][2], 5)
        self.assertEqual(buffer[0, 1], 1)

    def test_read_only(self):
        buffer = LuminanceBuffer(np.zeros((2, 2), dtype=np.uint8))
        with self.assertRaises(ValueError):
            buffer.samples[0, 0] = 9

    def test_does_not_alias_source(self):
        source = np.zeros((2, 2), dtype=np.uint8)
        buffer = LuminanceBuffer(source)
        source[0, 0] = 200
        self.assertEqual(buffer[0, 0], 0)

    def test_rejects_out_of_range(self):
        with self.assertRaises(ValueError):
            LuminanceBuffer.from_rows([[0, 256]])

    def test_rejects_wrong_rank(self):
        with self.assertRaises(ValueError):
            LuminanceBuffer(np.zeros((2, 2, 3), dtype=np.uint8))

    def test_from_empty_rows(self):
        buffer = LuminanceBuffer.from_rows([])
        self.assertEqual((buffer.width, buffer.height), (0, 0))


class RasterizerContract:
    """Checks shared by every backend. Mixed into TestCase subclasses below."""

    rasterizer = None

    def test_exact_output_size(self):
        buffer = self.rasterizer.decode_and_resize(make_png((64, 48)), 10, 5)
        self.assertEqual((buffer.width, buffer.height), (10, 5))
        self.assertEqual(buffer.samples.dtype, np.uint8)

    def test_white_stays_bright(self):
        buffer = self.rasterizer.decode_and_resize(make_png(color=255), 4, 4)
        self.assertTrue((buffer.samples >= 250).all())

    def test_black_stays_dark(self):
        buffer = self.rasterizer.decode_and_resize(make_png(color=0), 4, 4)
        self.assertTrue((buffer.samples <= 5).all())

    def test_color_image_becomes_single_channel(self):
        buffer = self.rasterizer.decode_and_resize(make_png(color=(255, 0, 0), mode="RGB"), 6, 3)
        self.assertEqual(buffer.samples.shape, (3, 6))

    def test_corrupt_bytes(self):
        with self.assertRaises(DecodeError):
            self.rasterizer.decode_and_resize(b"definitely not an image", 10, 5)

    def test_truncated_png(self):
        with self.assertRaises(DecodeError):
            self.rasterizer.decode_and_resize(make_png()[:20], 10, 5)

    def test_empty_bytes(self):
        with self.assertRaises(DecodeError):
            self.rasterizer.decode_and_resize(b"", 10, 5)

    def test_zero_height(self):
        with self.assertRaises(DecodeError):
            self.rasterizer.decode_and_resize(make_png(), 10, 0)

    def test_negative_width(self):
        with self.assertRaises(DecodeError):
            self.rasterizer.decode_and_resize(make_png(), -1, 5)

    def test_non_bytes(self):
        with self.assertRaises(DecodeError):
            self.rasterizer.decode_and_resize("image.png", 10, 5)


class TestPillowRasterizer(RasterizerContract, unittest.TestCase):
    rasterizer = PillowRasterizer()


class TestOpenCVRasterizer(RasterizerContract, unittest.TestCase):
    rasterizer = OpenCVRasterizer()


class BrokenRasterizer(Rasterizer):
    name = "broken"

    def _decode_and_resize(self, data, width_px, height_px):
        raise RuntimeError("codec crashed")


class WrongShapeRasterizer(Rasterizer):
    name = "wrong-shape"

    def _decode_and_resize(self, data, width_px, height_px):
        return np.zeros((height_px, width_px, 3), dtype=np.uint8)


class TestBackendErrorWrapping(unittest.TestCase):
    """Any backend failure comes out as DecodeError."""

    def test_unexpected_exception(self):
        with self.assertRaises(DecodeError) as ctx:
            BrokenRasterizer().decode_and_resize(b"img", 4, 2)
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)
        self.assertIn("broken", str(ctx.exception))

    def test_bad_buffer_shape(self):
        with self.assertRaises(DecodeError):
            WrongShapeRasterizer().decode_and_resize(b"img", 4, 2)

    def test_unimplemented_backend_propagates(self):
        with self.assertRaises(NotImplementedError):
            Rasterizer().decode_and_resize(b"img", 4, 2)


class TestBackendRegistry(unittest.TestCase):

    def test_names(self):
        self.assertEqual(list_backends(), ["pillow", "opencv"])
        self.assertIsInstance(get_rasterizer("opencv"), OpenCVRasterizer)

    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            get_rasterizer("imagemagick")

    def test_module_function(self):
        buffer = decode_and_resize(make_png(), 3, 2, backend="opencv")
        self.assertEqual((buffer.width, buffer.height), (3, 2))


if __name__ == "__main__":
    unittest.main()

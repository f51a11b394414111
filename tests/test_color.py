"""Unit tests for the hex color codec."""
import unittest
from countdays import color
from countdays.color import RGB


class TestColorCodec(unittest.TestCase):
    """Test encode/decode of #RRGGBB strings."""

    def test_encode_formats_uppercase_with_hash(self) -> None:
        """Channels are scaled to 0-255 and written as uppercase hex."""
        self.assertEqual(color.encode(RGB(1.0, 0.0, 0.0)), "#FF0000")
        self.assertEqual(color.encode(RGB(0.0, 0.0, 0.0)), "#000000")
        self.assertEqual(color.encode(RGB(1.0, 1.0, 1.0)), "#FFFFFF")

    def test_encode_truncates_channels(self) -> None:
        """0.5 * 255 = 127.5 truncates to 127 (0x7F)."""
        self.assertEqual(color.encode(RGB(0.5, 0.5, 0.5)), "#7F7F7F")

    def test_encode_clamps_out_of_range(self) -> None:
        self.assertEqual(color.encode(RGB(1.2, -0.1, 0.0)), "#FF0000")

    def test_decode_with_and_without_hash(self) -> None:
        """Leading # is optional."""
        expected = RGB(160 / 255.0, 240 / 255.0, 208 / 255.0)
        self.assertEqual(color.decode("#A0F0D0"), expected)
        self.assertEqual(color.decode("a0f0d0"), expected)

    def test_decode_rejects_bad_input(self) -> None:
        for bad in ("", "#FFF", "#GGGGGG", "#1234567", "red"):
            with self.subTest(value=bad):
                with self.assertRaises(ValueError):
                    color.decode(bad)

    def test_round_trip_within_one_step(self) -> None:
        """decode(encode(c)) differs from c by at most 1/255 per channel."""
        samples = [
            RGB(0.0, 0.0, 0.0),
            RGB(0.123, 0.456, 0.789),
            RGB(0.999, 0.001, 0.5),
            RGB(0.686, 0.322, 0.871),
        ]
        for original in samples:
            decoded = color.decode(color.encode(original))
            for before, after in zip(original, decoded):
                self.assertLessEqual(abs(before - after), 1 / 255.0 + 1e-9)

    def test_round_trip_is_stable(self) -> None:
        """Re-encoding a decoded color gives the same hex."""
        self.assertEqual(color.encode(color.decode("#A0F0D0")), "#A0F0D0")

    def test_normalize(self) -> None:
        self.assertEqual(color.normalize("a0f0d0"), "#A0F0D0")
        self.assertEqual(color.normalize(" #ff00aa "), "#FF00AA")


if __name__ == "__main__":
    unittest.main()

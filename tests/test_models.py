"""Unit tests for CountdownEvent."""
import unittest
import datetime
from countdays.color import RGB
from countdays.models import CountdownEvent


class TestCountdownEvent(unittest.TestCase):
    """Test record construction and serialization."""

    def setUp(self) -> None:
        self.target = datetime.datetime(2025, 5, 1, 20, 30, 0)

    def test_create_assigns_unique_ids(self) -> None:
        a = CountdownEvent.create("A", self.target, RGB(1.0, 0.0, 0.0))
        b = CountdownEvent.create("B", self.target, RGB(1.0, 0.0, 0.0))
        self.assertTrue(a.id)
        self.assertNotEqual(a.id, b.id)
        self.assertEqual(a.color_hex, "#FF0000")

    def test_create_keeps_given_id(self) -> None:
        event = CountdownEvent.create("A", self.target, RGB(0, 0, 0), event_id="fixed")
        self.assertEqual(event.id, "fixed")

    def test_color_hex_is_canonicalized(self) -> None:
        event = CountdownEvent(title="A", target_date=self.target, color_hex="a0f0d0")
        self.assertEqual(event.color_hex, "#A0F0D0")

    def test_invalid_color_hex_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CountdownEvent(title="A", target_date=self.target, color_hex="#12345")

    def test_with_changes_keeps_id(self) -> None:
        event = CountdownEvent.create("A", self.target, RGB(0, 0, 0))
        edited = event.with_changes(title="B", id="other")
        self.assertEqual(edited.id, event.id)
        self.assertEqual(edited.title, "B")
        self.assertEqual(event.title, "A")

    def test_card_color_applies_opacity(self) -> None:
        event = CountdownEvent(title="A", target_date=self.target, color_hex="#FF0000")
        self.assertEqual(tuple(event.card_color(0.3)), (1.0, 0.0, 0.0, 0.3))

    def test_dict_uses_preserved_field_names(self) -> None:
        event = CountdownEvent(id="e1", title="Launch", target_date=self.target,
                               color_hex="#00FF00", image_data=b"\x89PNG")
        data = event.to_dict()
        self.assertEqual(set(data), {"id", "title", "targetDate", "colorHex", "imageData"})
        self.assertEqual(data["targetDate"], "2025-05-01T20:30:00")
        self.assertEqual(CountdownEvent.from_dict(data), event)

    def test_missing_image_serializes_as_null(self) -> None:
        event = CountdownEvent(title="A", target_date=self.target, color_hex="#000000")
        self.assertIsNone(event.to_dict()["imageData"])
        self.assertIsNone(CountdownEvent.from_dict(event.to_dict()).image_data)

    def test_from_dict_rejects_malformed(self) -> None:
        good = {"id": "e1", "title": "A", "targetDate": "2025-05-01T20:30:00",
                "colorHex": "#000000", "imageData": None}
        broken = [
            {k: v for k, v in good.items() if k != "title"},
            dict(good, targetDate="tomorrow"),
            dict(good, colorHex="#XYZXYZ"),
            dict(good, imageData="not base64!"),
            dict(good, id=42),
            dict(good, targetDate="2025-05-01T20:30:00+02:00"),
        ]
        for data in broken:
            with self.subTest(data=data):
                with self.assertRaises(ValueError):
                    CountdownEvent.from_dict(data)


if __name__ == "__main__":
    unittest.main()

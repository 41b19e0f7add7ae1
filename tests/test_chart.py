import unittest

from src.chart import (
    ChartSession,
    UnsupportedKeyError,
    choose_initial_key,
    detect_original_key,
)
from src.resolver import render_plain

SONG = """Original Key: G

Verse 1
1 . 4 . | 5/7 . 6m . |
Chorus
4 5 1 1
"""


class TestKeyDetection(unittest.TestCase):
    def test_detect_header_key(self):
        self.assertEqual(detect_original_key(SONG), "G")
        self.assertEqual(detect_original_key("original key: bb\n1 4 5"), "Bb")
        self.assertEqual(detect_original_key("Original Key:F#\n"), "F#")
        self.assertEqual(detect_original_key("Original Key: Ab major\n"), "Ab")

    def test_header_after_blank_lines(self):
        self.assertEqual(detect_original_key("\n\n  Original Key: D\n1"), "D")

    def test_header_must_be_first_line(self):
        self.assertIsNone(detect_original_key("Amazing Grace\nOriginal Key: D\n"))

    def test_no_or_invalid_header(self):
        self.assertIsNone(detect_original_key("1 4 5"))
        self.assertIsNone(detect_original_key(""))
        self.assertIsNone(detect_original_key("Original Key: G#\n"))
        self.assertIsNone(detect_original_key("Original Key: H\n"))
        self.assertIsNone(detect_original_key("Original Key: Gm\n"))

    def test_detect_respects_supported_keys(self):
        self.assertIsNone(detect_original_key(SONG, supported_keys=("C", "D")))

    def test_choose_initial_key(self):
        self.assertEqual(choose_initial_key(SONG), "G")
        self.assertEqual(choose_initial_key("1 4 5"), "C")
        self.assertEqual(choose_initial_key("1 4 5", default="Eb"), "Eb")
        self.assertEqual(choose_initial_key("1 4 5", supported_keys=("D", "E")), "D")


class TestChartSession(unittest.TestCase):
    def test_initial_key_from_header(self):
        session = ChartSession(SONG, render=render_plain)
        self.assertEqual(session.current_key, "G")
        self.assertIn("G . C . | D/F# . Em . |", session.display)
        self.assertIn("Verse 1\n", session.display)

    def test_explicit_initial_key(self):
        session = ChartSession("1 4 5", key="D", render=render_plain)
        self.assertEqual(session.display, "D G A")

    def test_select_key_reconverts_original_text(self):
        session = ChartSession("1 4 5", render=render_plain)
        self.assertEqual(session.display, "C F G")
        self.assertEqual(session.select_key("Bb"), "Bb Eb F")
        self.assertEqual(session.select_key("E"), "E A B")
        self.assertEqual(session.text, "1 4 5")

    def test_unsupported_key_keeps_state(self):
        session = ChartSession("1 4 5", render=render_plain)
        with self.assertRaises(UnsupportedKeyError):
            session.select_key("G#")
        with self.assertRaises(ValueError):
            session.select_key("Z")
        self.assertEqual(session.current_key, "C")
        self.assertEqual(session.display, "C F G")

    def test_key_outside_session_keys_rejected(self):
        session = ChartSession("1", supported_keys=("C", "G"))
        with self.assertRaises(UnsupportedKeyError):
            session.select_key("D")

    def test_unsupported_initial_key(self):
        with self.assertRaises(UnsupportedKeyError):
            ChartSession("1 4 5", key="Z")

    def test_key_picker(self):
        session = ChartSession("1", key="Db")
        picker = session.key_picker()
        self.assertEqual(len(picker), 14)
        self.assertEqual([k for k, selected in picker if selected], ["Db"])

        markup = session.render_key_picker()
        self.assertIn('<a href="#" class="selected">Db</a>', markup)
        self.assertIn('<a href="#">C#</a>', markup)
        self.assertEqual(markup.count("<a "), 14)

if __name__ == '__main__':
    unittest.main()

import unittest

import music21

from src.constants import MAJOR_SCALE_INTERVALS, SUPPORTED_KEYS
from src.notes import degree_pitch_class, resolve_note, use_flats_for_key


def _m21_name(note_name):
    return note_name[0] + note_name[1:].replace("b", "-")


class TestUseFlats(unittest.TestCase):
    def test_flat_and_sharp_names(self):
        self.assertTrue(use_flats_for_key("Bb"))
        self.assertTrue(use_flats_for_key("Db"))
        self.assertFalse(use_flats_for_key("C#"))
        self.assertFalse(use_flats_for_key("F#"))

    def test_natural_keys(self):
        self.assertTrue(use_flats_for_key("F"))
        for key in ("C", "G", "D", "A", "E", "B"):
            self.assertFalse(use_flats_for_key(key), key)


class TestResolveNote(unittest.TestCase):
    def test_degrees_in_c(self):
        notes = [resolve_note("C", d) for d in range(1, 8)]
        self.assertEqual(notes, ["C", "D", "E", "F", "G", "A", "B"])

    def test_key_spelling(self):
        self.assertEqual(resolve_note("F", 4), "Bb")
        self.assertEqual(resolve_note("E", 7), "D#")
        self.assertEqual(resolve_note("Eb", 5), "Bb")
        self.assertEqual(resolve_note("F#", 7), "F")
        # Gb's fourth is written Cb in the chord table but named by pitch class here
        self.assertEqual(resolve_note("Gb", 4), "B")

    def test_accidentals(self):
        self.assertEqual(resolve_note("C", 7, "b"), "Bb")
        self.assertEqual(resolve_note("C", 3, "b"), "Eb")
        self.assertEqual(resolve_note("C", 4, "#"), "F#")
        self.assertEqual(resolve_note("G", 7, "b"), "F")
        self.assertEqual(resolve_note("F", 4, "#"), "B")
        self.assertEqual(resolve_note("C", 1, "b"), "B")

    def test_degree_out_of_range(self):
        self.assertIsNone(resolve_note("C", 0))
        self.assertIsNone(resolve_note("C", 8))
        self.assertIsNone(degree_pitch_class("C", -1))

    def test_unknown_root(self):
        self.assertIsNone(resolve_note("H", 1))
        self.assertIsNone(resolve_note("Cb", 1))
        self.assertIsNone(resolve_note("", 1))

    def test_key_outside_table_still_resolves(self):
        # Note resolution only needs a pitch-class name, not a key-table entry
        self.assertEqual(resolve_note("G#", 5), "D#")
        self.assertEqual(resolve_note("A#", 4), "D#")

    def test_against_music21_scales(self):
        for key in SUPPORTED_KEYS:
            m21_scale = music21.scale.MajorScale(_m21_name(key))
            for degree in range(1, 8):
                expected = m21_scale.pitchFromDegree(degree).pitchClass
                self.assertEqual(degree_pitch_class(key, degree), expected, f"{key} {degree}")

    def test_pitch_classes_in_range_and_deterministic(self):
        for key in SUPPORTED_KEYS:
            tonic_pc = music21.pitch.Pitch(_m21_name(key)).pitchClass
            for degree in range(1, 8):
                for accidental, shift in (("", 0), ("b", -1), ("#", 1)):
                    pc = degree_pitch_class(key, degree, accidental)
                    self.assertTrue(0 <= pc <= 11)
                    self.assertEqual(pc, (tonic_pc + MAJOR_SCALE_INTERVALS[degree - 1] + shift) % 12)

                    note = resolve_note(key, degree, accidental)
                    self.assertEqual(note, resolve_note(key, degree, accidental))
                    self.assertEqual(music21.pitch.Pitch(_m21_name(note)).pitchClass, pc)

if __name__ == '__main__':
    unittest.main()

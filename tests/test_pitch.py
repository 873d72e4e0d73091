import unittest
from pathlib import Path
import sys

import numpy as np

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

import pitchnotation as pn  # noqa: E402


class TestPitch(unittest.TestCase):
    def test_parse(self):
        testData = (
            ("C4", (0, 0, 4, 0)),
            ("g4", (4, 0, 4, 0)),
            ("a4", (5, 0, 4, 0)),
            ("B#3", (6, 1, 3, 0)),
            ("Db4", (1, -1, 4, 0)),
            ("D##4", (1, 2, 4, 0)),
            ("Ebbbb2", (2, -4, 2, 0)),
            ("Fxx10", (3, 4, 10, 0)),
            ("C0", (0, 0, 0, 0)),
        )
        for src, ans in testData:
            with self.subTest(src=src):
                result = pn.parsePitch(src)
                self.assertIsInstance(result, pn.Pitch)
                self.assertEqual(result, ans)

    def test_parse_pitch_class(self):
        testData = (
            ("C", (0, 0)),
            ("Ebb", (2, -2)),
            ("Bb", (6, -1)),
            ("fx", (3, 2)),
            ("f#", (3, 1)),
            ("Bbb", (6, -2)),
        )
        for src, ans in testData:
            with self.subTest(src=src):
                result = pn.parsePitch(src)
                self.assertIsInstance(result, pn.PitchClass)
                self.assertEqual(result, ans)

    def test_parse_invalid(self):
        for src in (
            None,
            "",
            "blah",
            "H4",
            "C#####",
            "Cbbbbb",
            "Cxxx",
            "C#b",
            "C-1",
            "C4\n",
            "3M",
            4,
            b"C4",
        ):
            with self.subTest(src=src):
                self.assertIsNone(pn.parsePitch(src))

    def test_build(self):
        testData = (
            ((0, 0, 4, 0), "C4"),
            ((4, 0, 4, 0), "G4"),
            ((5, 0, 4, 0), "A4"),
            ((6, 1, 3, 0), "B#3"),
            ((1, -1, 4, 0), "Db4"),
            ((4, -3, 1, 0), "Gbbb1"),
            ((2, -1, 3), "Eb3"),
            ((5, 2, 2, 0), "A##2"),
            ((0, 0, 0, 0), "C0"),
        )
        for arr, ans in testData:
            with self.subTest(arr=arr):
                self.assertEqual(pn.buildPitch(list(arr)), ans)
                self.assertEqual(pn.buildPitch(arr), ans)

    def test_build_pitch_class(self):
        testData = (
            ((0, 0, None, 0), "C"),
            ((0, -3, None, 0), "Cbbb"),
            ((4, 1, None, 0), "G#"),
            ((6, -2), "Bbb"),
            ((3,), "F"),
        )
        for arr, ans in testData:
            with self.subTest(arr=arr):
                self.assertEqual(pn.buildPitch(list(arr)), ans)

    def test_step_wraps(self):
        # negative and large steps are wrapped with `abs(step) % 7` instead of rejected
        self.assertEqual(pn.buildPitch([-1, 0, 0, 0]), "D0")
        self.assertEqual(pn.buildPitch([7, 0, 1, 0]), "C1")
        self.assertEqual(pn.buildPitch([-9, 1]), "E#")

    def test_build_numpy(self):
        self.assertEqual(pn.buildPitch(np.array([1, -1, 4, 0])), "Db4")
        self.assertEqual(pn.buildPitch([1.0, -1.0, 4.0, 0]), "Db4")

    def test_build_invalid(self):
        for arr in (None, "blah", [], [None], [1.5, 0], [0, "x"], [True, 0]):
            with self.subTest(arr=arr):
                self.assertIsNone(pn.buildPitch(arr))

    def test_reserved_slot(self):
        # the fourth slot is always 0 when parsed and never read when built
        self.assertEqual(pn.parsePitch("A4").reserved, 0)
        self.assertEqual(pn.buildPitch([5, 0, 4, 0]), pn.buildPitch([5, 0, 4, 99]))

    def test_round_trip(self):
        for step in range(7):
            for acci in range(-4, 5):
                for octave in (0, 1, 4, 9, 12):
                    src = pn.buildPitch([step, acci, octave, 0])
                    with self.subTest(src=src):
                        self.assertEqual(pn.parsePitch(src), (step, acci, octave, 0))
                        self.assertEqual(pn.buildPitch(pn.parsePitch(src)), src)

    def test_round_trip_scientific(self):
        # double sharps come back as "##", lowercase letters as uppercase
        testData = (("cbb", "Cbb"), ("fx", "F##"), ("gxx3", "G####3"), ("Bbb", "Bbb"))
        for src, ans in testData:
            with self.subTest(src=src):
                self.assertEqual(pn.buildPitch(pn.parsePitch(src)), ans)


if __name__ == "__main__":
    unittest.main()

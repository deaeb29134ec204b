"""
Tests for decoding band colors into a resistance reading.

Run from the repo root:
    pytest calc-app/tests/ -v
"""

import unittest
from unittest.mock import patch

from color_code import ResistorReading, decode, describe, format_value
from color_table import BandColor, COLOR_TABLE
from errors import InvalidColorForRole, InvalidFirstBand, UnknownColor


class TestDecodeFourBand(unittest.TestCase):

    def test_ten_kilohm_five_percent(self):
        r = decode(["Brown", "Black", "Orange", "Gold"], 4)
        self.assertAlmostEqual(r.ohms, 10_000.0)
        self.assertEqual(r.tolerance, 5.0)
        self.assertIsNone(r.tcr)
        self.assertEqual(r.display, "10.0 kΩ ±5%")

    def test_enum_members_accepted(self):
        r = decode([BandColor.YELLOW, BandColor.VIOLET, BandColor.RED, BandColor.GOLD], 4)
        self.assertEqual(r.display, "4.70 kΩ ±5%")
        self.assertEqual(
            r.bands,
            (BandColor.YELLOW, BandColor.VIOLET, BandColor.RED, BandColor.GOLD),
        )

    def test_gold_multiplier(self):
        r = decode(["Yellow", "Violet", "Gold", "Gold"], 4)
        self.assertAlmostEqual(r.ohms, 4.7)
        self.assertEqual(r.display, "4.70 Ω ±5%")

    def test_silver_multiplier(self):
        r = decode(["Brown", "Black", "Silver", "Silver"], 4)
        self.assertAlmostEqual(r.ohms, 0.1)
        self.assertEqual(r.display, "0.100 Ω ±10%")

    def test_none_tolerance_band(self):
        r = decode(["Red", "Red", "Brown", "None"], 4)
        self.assertEqual(r.display, "220 Ω ±20%")

    def test_megohm_range(self):
        r = decode(["Red", "Red", "Green", "Gold"], 4)
        self.assertEqual(r.display, "2.20 MΩ ±5%")

    def test_black_first_band_rejected(self):
        for second in ("Black", "Brown", "White", "Gold"):
            with self.assertRaises(InvalidFirstBand):
                decode(["Black", second, "Red", "Gold"], 4)

    def test_tolerance_band_without_tolerance(self):
        with self.assertRaises(InvalidColorForRole):
            decode(["Brown", "Black", "Red", "Orange"], 4)

    def test_digit_band_without_digit(self):
        with self.assertRaises(InvalidColorForRole):
            decode(["Brown", "Gold", "Red", "Gold"], 4)

    def test_first_band_without_digit(self):
        with self.assertRaises(InvalidColorForRole):
            decode(["Silver", "Black", "Red", "Gold"], 4)

    def test_multiplier_band_none(self):
        with self.assertRaises(InvalidColorForRole):
            decode(["Brown", "Black", "None", "Gold"], 4)

    def test_length_mismatch(self):
        with self.assertRaises(InvalidColorForRole):
            decode(["Brown", "Black", "Orange"], 4)

    def test_unsupported_band_count(self):
        with self.assertRaises(InvalidColorForRole):
            decode(["Brown", "Black", "Gold"], 3)

    def test_unknown_color_name(self):
        with self.assertRaises(UnknownColor):
            decode(["Brown", "Black", "Pink", "Gold"], 4)


class TestDecodeFiveBand(unittest.TestCase):

    def test_ten_kilohm_one_percent(self):
        r = decode(["Brown", "Black", "Black", "Red", "Brown"], 5)
        self.assertAlmostEqual(r.ohms, 10_000.0)
        self.assertEqual(r.tolerance, 1.0)
        self.assertEqual(r.display, "10.0 kΩ ±1%")

    def test_fractional_tolerance(self):
        r = decode(["Orange", "Orange", "Black", "Black", "Blue"], 5)
        self.assertEqual(r.display, "330 Ω ±0.25%")

    def test_grey_tolerance(self):
        r = decode(["Brown", "Black", "Black", "Black", "Grey"], 5)
        self.assertEqual(r.display, "100 Ω ±0.05%")

    def test_black_first_band_rejected(self):
        with self.assertRaises(InvalidFirstBand):
            decode(["Black", "Brown", "Black", "Red", "Brown"], 5)

    def test_largest_value_uses_exponent(self):
        r = decode(["White", "White", "White", "White", "Brown"], 5)
        self.assertAlmostEqual(r.ohms, 999e9)
        self.assertEqual(r.display, "9.99e+5 MΩ ±1%")


class TestDecodeSixBand(unittest.TestCase):

    def test_tcr_appended(self):
        r = decode(["Brown", "Black", "Black", "Red", "Brown", "Red"], 6)
        self.assertEqual(r.tcr, 50)
        self.assertEqual(r.display, "10.0 kΩ ±1% (50 ppm/K)")

    def test_black_first_band_allowed(self):
        # 6-band accepts a leading Black while 4/5-band do not; kept as observed.
        r = decode(["Black", "Brown", "Black", "Brown", "Brown", "Brown"], 6)
        self.assertAlmostEqual(r.ohms, 100.0)
        self.assertEqual(r.display, "100 Ω ±1% (100 ppm/K)")

    def test_all_black_digits(self):
        r = decode(["Black", "Black", "Black", "Black", "Gold", "Brown"], 6)
        self.assertEqual(r.ohms, 0)
        self.assertEqual(r.display, "0.00 Ω ±5% (100 ppm/K)")

    def test_green_accepted_as_tcr(self):
        r = decode(["Brown", "Black", "Black", "Black", "Brown", "Green"], 6)
        self.assertEqual(r.tcr, 20)

    def test_tcr_band_without_tcr(self):
        with self.assertRaises(InvalidColorForRole):
            decode(["Brown", "Black", "Black", "Red", "Brown", "Gold"], 6)


class TestDecodeProperties(unittest.TestCase):

    def test_deterministic(self):
        bands = ["Green", "Blue", "Black", "Orange", "Violet", "Yellow"]
        first = decode(bands, 6)
        for _ in range(5):
            self.assertEqual(decode(bands, 6), first)

    def test_table_not_mutated(self):
        before = dict(COLOR_TABLE)
        decode(["Brown", "Black", "Orange", "Gold"], 4)
        self.assertEqual(dict(COLOR_TABLE), before)

    def test_returns_reading(self):
        self.assertIsInstance(decode(["Red", "Red", "Red", "Gold"], 4), ResistorReading)

    def test_uses_role_accessors(self):
        with patch("color_code.tolerance", return_value=7.5) as mock_tol:
            r = decode(["Brown", "Black", "Orange", "Gold"], 4)
            mock_tol.assert_called_once_with(BandColor.GOLD)
        self.assertEqual(r.display, "10.0 kΩ ±7.5%")


class TestFormatValue(unittest.TestCase):

    def test_ohms(self):
        self.assertEqual(format_value(470.0), "470 Ω")
        self.assertEqual(format_value(1.0), "1.00 Ω")
        self.assertEqual(format_value(0.01), "0.0100 Ω")

    def test_kilohms(self):
        self.assertEqual(format_value(1_000.0), "1.00 kΩ")
        self.assertEqual(format_value(47_000.0), "47.0 kΩ")
        self.assertEqual(format_value(999_000.0), "999 kΩ")

    def test_megohms(self):
        self.assertEqual(format_value(1_000_000.0), "1.00 MΩ")
        self.assertEqual(format_value(680_000_000.0), "680 MΩ")


class TestDescribe(unittest.TestCase):

    def test_description(self):
        self.assertEqual(
            describe(["Yellow", "Violet", "Red", "Gold"]),
            "Yellow-Violet-Red-Gold (4.70 kΩ ±5%)",
        )

    def test_names_are_normalised(self):
        self.assertEqual(
            describe(["brown", "black", "orange", "gold"]),
            "Brown-Black-Orange-Gold (10.0 kΩ ±5%)",
        )

    def test_explicit_band_count_mismatch(self):
        with self.assertRaises(InvalidColorForRole):
            describe(["Brown", "Black", "Orange", "Gold"], 5)


if __name__ == "__main__":
    unittest.main()

"""
Tests for the degree/minute/second codec.
"""

import math
import unittest

from latlon.dms import (
    DmsFormat,
    DmsKind,
    format_degrees,
    parse_dms,
    to_brng,
    to_dms,
    to_lat,
    to_lon,
)
from latlon.unit import Degree


class TestParseDms(unittest.TestCase):
    """Test parsing DMS text."""

    def test_north_latitude(self):
        """Test a latitude with prime symbols and a north suffix."""
        self.assertAlmostEqual(parse_dms("51° 28′ 40.12″ N"), 51.477811, places=6)

    def test_west_longitude(self):
        """Test a west suffix makes the value negative."""
        self.assertAlmostEqual(parse_dms("000° 00′ 05.31″ W"), -0.001475, places=6)

    def test_separators(self):
        """Test a range of separators and suffix styles."""
        expected = 3 + 37 / 60 + 9 / 3600
        self.assertAlmostEqual(parse_dms("3° 37' 09\"W"), -expected)
        self.assertAlmostEqual(parse_dms("3:37:09 w"), -expected)
        self.assertAlmostEqual(parse_dms("3 37 09"), expected)
        self.assertAlmostEqual(parse_dms("51 30"), 51.5)
        self.assertAlmostEqual(parse_dms("51:30:00 s"), -51.5)
        self.assertAlmostEqual(parse_dms("  -51.5  "), -51.5)
        self.assertAlmostEqual(parse_dms("+51.5"), 51.5)
        self.assertAlmostEqual(parse_dms("151.2093E"), 151.2093)

    def test_numbers(self):
        """Test numeric input is returned unchanged."""
        self.assertEqual(parse_dms(12.5), 12.5)
        self.assertEqual(parse_dms(-7), -7.0)
        self.assertAlmostEqual(parse_dms(Degree(45)), 45)

    def test_malformed_gives_nan(self):
        """Test malformed text gives NaN instead of raising."""
        for text in ("", "   ", "N", "abc", "1 2 3 4", "1.2.3", "°′″"):
            self.assertTrue(math.isnan(parse_dms(text)), msg=text)
        self.assertTrue(math.isnan(parse_dms(math.inf)))
        self.assertTrue(math.isnan(parse_dms(math.nan)))

    def test_type_mismatch(self):
        """Test objects that are not numbers or text are rejected."""
        for value in (None, object(), ["51"], {"value": "51"}):
            with self.assertRaises(TypeError):
                parse_dms(value)


class TestToDms(unittest.TestCase):
    """Test the shared degree renderer."""

    def test_formats(self):
        """Test each layout with its default decimal places."""
        self.assertEqual(to_dms(51.477811, "d"), "051.4778°")
        self.assertEqual(to_dms(51.477811, DmsFormat.DM), "051°28.67′")
        self.assertEqual(to_dms(5.5), "005°30′00″")

    def test_decimal_places(self):
        """Test an explicit number of decimal places."""
        self.assertEqual(to_dms(0.001475, "dms", 2), "000°00′05.31″")
        self.assertEqual(to_dms(151.2093, "d", 1), "151.2°")

    def test_ties_round_up(self):
        """Test exact halves round up rather than to even."""
        self.assertEqual(to_dms(2.5, "d", 0), "003°")
        self.assertEqual(to_dms(4.125, "d", 2), "004.13°")
        self.assertEqual(to_lat(0.5, "d", 0), "01°N")

    def test_sign_is_dropped(self):
        """Test the absolute value is rendered."""
        self.assertEqual(to_dms(-5.5), to_dms(5.5))

    def test_unknown_format(self):
        """Test an unknown layout falls back to whole seconds."""
        self.assertEqual(to_dms(5.5, "xyz"), "005°30′00″")

    def test_nan(self):
        """Test NaN has no rendering."""
        self.assertIsNone(to_dms(math.nan))
        self.assertIsNone(to_dms("not a number"))

    def test_type_mismatch(self):
        """Test objects that are not numbers are rejected."""
        with self.assertRaises(TypeError):
            to_dms(object())


class TestCompassFormatting(unittest.TestCase):
    """Test latitude, longitude and bearing formatting."""

    def test_latitude(self):
        """Test latitude uses two degree digits and N/S."""
        self.assertEqual(to_lat(51.477811), "51°28′40″N")
        self.assertEqual(to_lat(-33.8688, "d"), "33.8688°S")
        self.assertEqual(to_lat(5.5), "05°30′00″N")

    def test_longitude(self):
        """Test longitude keeps three degree digits and E/W."""
        self.assertEqual(to_lon(-0.001475), "000°00′05″W")
        self.assertEqual(to_lon(151.2093, "d"), "151.2093°E")

    def test_bearing(self):
        """Test bearings are wrapped into 0 to 360 degrees."""
        self.assertEqual(to_brng(-90, "d"), "270.0000°")
        self.assertEqual(to_brng(450, "d", 0), "090°")

    def test_bearing_rounding_up_to_360(self):
        """Test a bearing that rounds up to 360 is shown as 0."""
        self.assertEqual(to_brng(359.99999, "d"), "000.0000°")
        self.assertEqual(to_brng(359.9999, "dms"), "000°00′00″")

    def test_bearing_containing_360_digits(self):
        """Test only a whole 360 degree field is replaced."""
        self.assertEqual(to_brng(136.036, "d"), "136.0360°")

    def test_placeholder_for_nan(self):
        """Test NaN renders as a placeholder."""
        self.assertEqual(to_lat(math.nan), "–")
        self.assertEqual(to_lon(math.nan), "–")
        self.assertEqual(to_brng(math.nan), "–")

    def test_format_degrees(self):
        """Test dispatch by kind."""
        self.assertEqual(format_degrees(51.5, "latitude", "d"), to_lat(51.5, "d"))
        self.assertEqual(format_degrees(-0.1, DmsKind.LONGITUDE), to_lon(-0.1))
        self.assertEqual(format_degrees(-90, DmsKind.BEARING, "dm"), to_brng(-90, "dm"))
        with self.assertRaises(ValueError):
            format_degrees(1, "altitude")


class TestRoundTrip(unittest.TestCase):
    """Test formatting then parsing recovers the value."""

    def test_latitude(self):
        """Test whole-second rounding stays within half a second."""
        for i in range(-180, 181):
            lat = i / 2 + 0.123456
            if abs(lat) > 90:
                continue
            self.assertLessEqual(abs(parse_dms(to_lat(lat)) - lat), 0.5 / 3600 + 1e-12)

    def test_longitude_with_decimal_places(self):
        """Test more decimal places shrink the error."""
        for i in range(-179, 180, 7):
            lon = i + 0.987654
            if lon >= 180:
                continue
            self.assertLessEqual(abs(parse_dms(to_lon(lon, "dms", 2)) - lon), 0.005 / 3600 + 1e-12)
            self.assertLessEqual(abs(parse_dms(to_lon(lon, "dm", 4)) - lon), 0.00005 / 60 + 1e-12)
            self.assertLessEqual(abs(parse_dms(to_lon(lon, "d")) - lon), 0.00005 + 1e-12)


if __name__ == '__main__':
    unittest.main()

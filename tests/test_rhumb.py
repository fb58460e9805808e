"""
Tests for rhumb-line calculations.
"""

import math
import unittest

from latlon.geo import LatLon, rhumb

DOVER = LatLon.from_dms("51 07 32N", "001 20 17E")
CALAIS = LatLon.from_dms("50 57 48N", "001 51 09E")


class TestRhumbDistance(unittest.TestCase):
    """Test distance along a rhumb line."""

    def test_dover_to_calais(self):
        """Test a short crossing."""
        self.assertAlmostEqual(DOVER.rhumb_distance_to(CALAIS), 40.23, delta=0.02)

    def test_four_significant_figures(self):
        """Test rhumb distances are reported to 4 significant figures."""
        d = DOVER.rhumb_distance_to(CALAIS)
        self.assertEqual(d, float(f"{d:.4g}"))

    def test_east_west_course(self):
        """Test a course along a parallel uses the cos(lat) stretch."""
        d = LatLon(40, 0).rhumb_distance_to(LatLon(40, 1))
        expected = 6371 * math.cos(math.radians(40)) * math.radians(1)
        self.assertAlmostEqual(d, expected, delta=0.01)

    def test_antimeridian(self):
        """Test the shorter way across the antimeridian is taken."""
        d = LatLon(0, 179).rhumb_distance_to(LatLon(0, -179))
        self.assertAlmostEqual(d, 222.4, delta=0.1)

    def test_longer_than_great_circle(self):
        """Test a rhumb line is never shorter than the great circle."""
        p1, p2 = LatLon(40.7128, -74.0060), LatLon(51.5074, -0.1278)
        self.assertGreater(p1.rhumb_distance_to(p2), p1.distance_to(p2))

    def test_meridian_matches_great_circle(self):
        """Test rhumb and great circle agree along a meridian."""
        p1, p2 = LatLon(10, 30), LatLon(50, 30)
        self.assertEqual(p1.rhumb_distance_to(p2), p1.distance_to(p2))


class TestRhumbBearing(unittest.TestCase):
    """Test constant rhumb bearing."""

    def test_dover_to_calais(self):
        """Test the bearing of a short crossing."""
        self.assertAlmostEqual(DOVER.rhumb_bearing_to(CALAIS), 116.636, delta=0.01)

    def test_cardinal(self):
        """Test due east, due west and due north."""
        self.assertAlmostEqual(LatLon(40, 0).rhumb_bearing_to(LatLon(40, 1)), 90)
        self.assertAlmostEqual(LatLon(40, 1).rhumb_bearing_to(LatLon(40, 0)), 270)
        self.assertAlmostEqual(LatLon(10, 5).rhumb_bearing_to(LatLon(20, 5)), 0)

    def test_antimeridian(self):
        """Test bearings take the shorter way across the antimeridian."""
        self.assertAlmostEqual(LatLon(0, 179).rhumb_bearing_to(LatLon(0, -179)), 90)
        self.assertAlmostEqual(LatLon(0, -179).rhumb_bearing_to(LatLon(0, 179)), 270)

    def test_range(self):
        """Test rhumb bearings fall in [0, 360)."""
        points = [LatLon(lat, lon) for lat in (-70, 0, 70) for lon in (-170, 0, 170)]
        for p1 in points:
            for p2 in points:
                bearing = p1.rhumb_bearing_to(p2)
                self.assertGreaterEqual(bearing, 0)
                self.assertLess(bearing, 360)


class TestRhumbDestination(unittest.TestCase):
    """Test destination along a rhumb line."""

    def test_dover_to_calais(self):
        """Test bearing and distance from Dover reach Calais."""
        p = DOVER.rhumb_destination_point(DOVER.rhumb_bearing_to(CALAIS), DOVER.rhumb_distance_to(CALAIS))
        self.assertAlmostEqual(p.latitude, CALAIS.latitude, delta=1e-3)
        self.assertAlmostEqual(p.longitude, CALAIS.longitude, delta=1e-3)

    def test_east_west_course(self):
        """Test travelling due east keeps the latitude."""
        p = LatLon(40, 0).rhumb_destination_point(90, 85.18)
        self.assertAlmostEqual(p.latitude, 40)
        self.assertAlmostEqual(p.longitude, 1, delta=1e-3)

    def test_past_the_pole(self):
        """Test latitude is reflected when the track runs over a pole."""
        p = LatLon(89, 0).rhumb_destination_point(0, 6371 * math.radians(2))
        self.assertAlmostEqual(p.latitude, 89, places=6)
        p = LatLon(-89, 0).rhumb_destination_point(180, 6371 * math.radians(2))
        self.assertAlmostEqual(p.latitude, -89, places=6)

    def test_normalises_longitude(self):
        """Test crossing the antimeridian wraps the longitude."""
        p = LatLon(0, 179.5).rhumb_destination_point(90, 6371 * math.radians(1))
        self.assertAlmostEqual(p.longitude, -179.5)


class TestRhumbMidpoint(unittest.TestCase):
    """Test loxodromic midpoint."""

    def test_dover_to_calais(self):
        """Test the midpoint is halfway along the rhumb line."""
        mid = DOVER.rhumb_midpoint_to(CALAIS)
        self.assertAlmostEqual(mid.latitude, (DOVER.latitude + CALAIS.latitude) / 2)
        self.assertAlmostEqual(
            DOVER.rhumb_distance_to(mid), mid.rhumb_distance_to(CALAIS), delta=0.02
        )
        self.assertAlmostEqual(DOVER.rhumb_bearing_to(mid), DOVER.rhumb_bearing_to(CALAIS), delta=0.01)

    def test_parallel_of_latitude(self):
        """Test points on the same parallel use the mean longitude."""
        mid = LatLon(40, 10).rhumb_midpoint_to(LatLon(40, 20))
        self.assertAlmostEqual(mid.latitude, 40)
        self.assertAlmostEqual(mid.longitude, 15)

    def test_antimeridian(self):
        """Test the midpoint of a crossing of the antimeridian."""
        mid = LatLon(0, 170).rhumb_midpoint_to(LatLon(0, -170))
        self.assertAlmostEqual(abs(mid.longitude), 180)


class TestStretchFactor(unittest.TestCase):
    """Test the ill-conditioned east-west fallback."""

    def test_threshold(self):
        """Test cos(phi1) is used at and below the tolerance."""
        phi1 = math.radians(40)
        self.assertEqual(rhumb.stretch_factor(0.0, 0.0, phi1), math.cos(phi1))
        self.assertEqual(rhumb.stretch_factor(1e-12, 1e-11, phi1), math.cos(phi1))
        self.assertEqual(rhumb.stretch_factor(1e-10, 2e-10, phi1), 0.5)

    def test_south_pole(self):
        """Test the south pole does not divide by zero."""
        self.assertEqual(rhumb.delta_psi(-math.pi / 2, 0.0), math.inf)
        self.assertTrue(math.isnan(rhumb.delta_psi(-math.pi / 2, -math.pi / 2)))


if __name__ == '__main__':
    unittest.main()

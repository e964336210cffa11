""" Test :mod:`rinexdata.lib.gnss`.

The conversions are checked against the start of GPS week 1886, 2016-03-01 is day 2 of that week.

"""

from datetime import datetime
import unittest

import pytest

from rinexdata.lib import exceptions
from rinexdata.lib import gnss


@pytest.mark.quick
class TestGnss(unittest.TestCase):
    def setUp(self):
        self.date = datetime(2016, 3, 1)
        self.week, self.tow = 1886, 172800.0

    def test_gps_to_datetime(self):
        self.assertEqual(gnss.gps_to_datetime(self.week, self.tow), self.date)

    def test_datetime_to_gps(self):
        week, tow = gnss.datetime_to_gps(self.date)
        self.assertEqual(week, self.week)
        self.assertAlmostEqual(tow, self.tow)

    def test_time_tag(self):
        tag = gnss.time_tag(self.week, self.tow)
        self.assertEqual(gnss.tag_to_gps(tag), (self.week, self.tow))

    def test_nav_time_tag(self):
        gps_tag = gnss.nav_time_tag("G", self.date)
        self.assertEqual(gnss.nav_time_tag("C", self.date), gps_tag + 14)
        self.assertEqual(gnss.nav_time_tag("R", self.date), gps_tag + 3 * 3600)
        self.assertEqual(gnss.nav_datetime("R", gnss.nav_time_tag("R", self.date)), self.date)

    def test_system(self):
        self.assertEqual(gnss.system("R").nav_lines, 4)
        self.assertEqual(gnss.system("J").nav_lines, 4)
        self.assertEqual(gnss.system("E").nav_lines, 8)
        self.assertEqual(gnss.V2_NAV_TYPES, {"N": "G", "G": "R", "H": "S"})
        with self.assertRaises(exceptions.RangeError):
            gnss.system("X")

    def test_time_systems(self):
        self.assertEqual(gnss.time_system_name("R"), "GLO")
        self.assertEqual(gnss.time_system_name("S"), "GPS")
        self.assertEqual(gnss.time_system_letter(" BDT "), "C")
        self.assertEqual(gnss.time_system_letter(""), "G")

    def test_full_year(self):
        self.assertEqual(gnss.full_year(16), 2016)
        self.assertEqual(gnss.full_year(80), 1980)
        self.assertEqual(gnss.full_year(2016), 2016)

    def test_make_datetime(self):
        self.assertEqual(gnss.make_datetime(16, 2, 29, 23, 59, 60.5), datetime(2016, 3, 1, 0, 0, 0, 500000))
        self.assertAlmostEqual(gnss.split_seconds(datetime(2016, 3, 1, 0, 0, 12, 250000)), 12.25)

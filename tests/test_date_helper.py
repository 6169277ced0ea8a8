import unittest
from datetime import date, datetime

from shared.helpers.date_helper import derive_expiry_date


class DeriveExpiryDateTests(unittest.TestCase):
    def test_string_in_string_out(self):
        self.assertEqual(derive_expiry_date("2023-01-01"), "2028-01-01")

    def test_date_in_date_out(self):
        self.assertEqual(derive_expiry_date(date(2021, 6, 15)), date(2026, 6, 15))

    def test_datetime_gives_date(self):
        self.assertEqual(derive_expiry_date(datetime(2020, 3, 1, 13, 45)), date(2025, 3, 1))

    def test_leap_day_rolls_back(self):
        self.assertEqual(derive_expiry_date("2024-02-29"), "2029-02-28")

    def test_custom_period(self):
        self.assertEqual(derive_expiry_date(date(2023, 1, 1), years=3), date(2026, 1, 1))

    def test_invalid_string_raises(self):
        with self.assertRaises(ValueError):
            derive_expiry_date("01/01/2023")

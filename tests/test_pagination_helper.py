import unittest

from shared.helpers.pagination_helper import page_count, paginate, parse_bool_filter, split_filter


class PageCountTests(unittest.TestCase):
    def test_rounds_up(self):
        self.assertEqual(page_count(23, 10), 3)
        self.assertEqual(page_count(30, 10), 3)
        self.assertEqual(page_count(1, 10), 1)

    def test_empty_has_no_pages(self):
        self.assertEqual(page_count(0, 10), 0)

    def test_rejects_non_positive_page_size(self):
        with self.assertRaises(ValueError):
            page_count(5, 0)


class PaginateTests(unittest.TestCase):
    def test_last_page_holds_remainder(self):
        rows, meta = paginate(list(range(23)), page=3)
        self.assertEqual(rows, [20, 21, 22])
        self.assertEqual(meta, {"total": 23, "page": 3, "page_size": 10, "total_pages": 3})

    def test_last_page_full_when_evenly_divisible(self):
        rows, meta = paginate(list(range(30)), page=3)
        self.assertEqual(len(rows), 10)
        self.assertEqual(meta["total_pages"], 3)

    def test_defaults_invalid_page_to_first(self):
        rows, meta = paginate(list(range(5)), page=0, page_size=None)
        self.assertEqual(rows, [0, 1, 2, 3, 4])
        self.assertEqual(meta["page"], 1)

    def test_export_returns_everything(self):
        rows, meta = paginate(list(range(25)), page=2, is_export=True)
        self.assertEqual(len(rows), 25)
        self.assertEqual(meta["total_pages"], 1)


class FilterParsingTests(unittest.TestCase):
    def test_split_filter_ignores_all_and_blanks(self):
        self.assertEqual(split_filter("ACTIVE, ,all,INACTIVE"), ["ACTIVE", "INACTIVE"])
        self.assertEqual(split_filter(None), [])

    def test_parse_bool_filter(self):
        self.assertTrue(parse_bool_filter("true"))
        self.assertFalse(parse_bool_filter("false"))
        self.assertIsNone(parse_bool_filter("all"))
        self.assertIsNone(parse_bool_filter(""))

from __future__ import annotations

import unittest

from access.levels import ADMIN, GM, MODERATOR, NONE, AccessLevel, UnknownAccessLevelError, level_by_name


class AccessLevelTests(unittest.TestCase):
    def test_levels_compare_by_priority(self) -> None:
        self.assertLess(NONE, GM)
        self.assertLess(MODERATOR, ADMIN)
        self.assertEqual(AccessLevel(5, "superuser", 64), ADMIN)

    def test_lookup_is_case_insensitive(self) -> None:
        self.assertIs(level_by_name("Admin"), ADMIN)
        self.assertIs(level_by_name(" moderator "), MODERATOR)
        self.assertIs(level_by_name("player"), NONE)

    def test_unknown_level_raises(self) -> None:
        with self.assertRaises(UnknownAccessLevelError):
            level_by_name("emperor")


if __name__ == "__main__":
    unittest.main()

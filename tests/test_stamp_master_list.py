from __future__ import annotations

import unittest

from stamp_analysis.constants import OFFICIAL_STAMP_MASTER_LIST, get_master_stamp_list, match_stamp


class TestMatchStamp(unittest.TestCase):
    def test_pattern_match(self) -> None:
        cases = {
            "OFFICER COMMANDING 14th BN A.P.S.P. ANANTHAPURAMU 15/03/2024": "stamp_1",
            "STATE OFFICER TO ADGP APSP HEAD OFFICE MANGALAGIRI 20 March 2024": "stamp_2",
            "Inspector General of Police APSP Bns, Amaravathi 22-03-2024": "stamp_3",
            "Dy. Inspector General of Police-IV APSP Battalions, Mangalagiri Mar 18, 2024": "stamp_4",
        }
        for text, expected in cases.items():
            with self.subTest(expected=expected):
                self.assertEqual(match_stamp(text).id, expected)

    def test_keyword_match_survives_line_breaks(self) -> None:
        # Pattern fails (keywords out of order) but every keyword is present.
        text = "AMARAVATHI\nAPSP   BNS\nInspector\nGeneral of POLICE"

        self.assertEqual(match_stamp(text).id, "stamp_3")

    def test_keyword_threshold(self) -> None:
        text = "SHANKHABRATA BAGCHI"  # 2 of 7 keywords

        self.assertIsNone(match_stamp(text))
        self.assertEqual(match_stamp(text, keyword_threshold=0.25).id, "stamp_6")

    def test_keywords_match_whole_words_only(self) -> None:
        # SD, IPS and DY occur inside WEDNESDAY, SHIPS and BODY; only
        # COMMISSIONER, POLICE and VIJAYAWADA count (3 of 6 for stamp_5).
        text = "BODY SHIPS WEDNESDAY COMMISSIONER POLICE VIJAYAWADA"

        self.assertIsNone(match_stamp(text))
        self.assertEqual(match_stamp(text, keyword_threshold=0.5).id, "stamp_5")

    def test_dotted_keyword_matches(self) -> None:
        text = "A.P.S.P ANANTHAPURAMU\nOFFICER COMMANDING"  # 3 of 4, pattern out of order

        self.assertEqual(match_stamp(text).id, "stamp_1")

    def test_unrelated_text(self) -> None:
        self.assertIsNone(match_stamp("OFFICIAL STAMP 14th March 2024 APPROVED"))
        self.assertIsNone(match_stamp(""))
        self.assertIsNone(match_stamp("   "))


class TestMasterList(unittest.TestCase):
    def test_public_list(self) -> None:
        listing = get_master_stamp_list()

        self.assertEqual(len(listing), 6)
        self.assertEqual([entry["id"] for entry in listing], [f"stamp_{i}" for i in range(1, 7)])
        self.assertEqual(set(listing[0]), {"id", "name"})

    def test_entries_match_their_own_name(self) -> None:
        for stamp in OFFICIAL_STAMP_MASTER_LIST:
            with self.subTest(stamp=stamp.id):
                self.assertEqual(match_stamp(stamp.name).id, stamp.id)


if __name__ == "__main__":
    unittest.main()

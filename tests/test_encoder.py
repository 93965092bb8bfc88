#!/usr/bin/env python3

import unittest

from rack_logic.code_table import build_code_table
from rack_logic.encoder import NOT_PLAYABLE, WordEncoding, encode_word


class TestEncodeWord(unittest.TestCase):
    def setUp(self):
        # C=2 A=3 T=5 S=7 D=11 O=13 G=17
        self.table = build_code_table("CATSDOG")

    def test_identity_and_points(self) -> None:
        encoding = encode_word("CAT", self.table)
        self.assertEqual(2 * 3 * 5, encoding.identity)
        self.assertEqual(3 + 1 + 1, encoding.points)

    def test_repeated_letters_multiply(self) -> None:
        encoding = encode_word("TATT", self.table)
        self.assertEqual(5 * 3 * 5 * 5, encoding.identity)

    def test_missing_letter_without_blanks(self) -> None:
        self.assertEqual(NOT_PLAYABLE, encode_word("CAR", self.table))
        self.assertFalse(NOT_PLAYABLE.is_playable)

    def test_blanks_cover_missing_letters_for_zero_points(self) -> None:
        table = build_code_table("AB     ")
        encoding = encode_word("HELLO", table)
        self.assertEqual(WordEncoding(identity=1, points=0), encoding)
        self.assertTrue(encoding.is_playable)

    def test_blank_budget_runs_out(self) -> None:
        table = build_code_table("CAT ")
        self.assertEqual(WordEncoding(2 * 3, 4), encode_word("CAB", table))
        self.assertEqual(NOT_PLAYABLE, encode_word("CRAB", table))

    def test_rack_encodes_against_itself(self) -> None:
        table = build_code_table("AB C")
        self.assertEqual(WordEncoding(2 * 3 * 7, 1 + 3 + 3),
                         encode_word("AB C", table))

    def test_encoding_is_deterministic(self) -> None:
        self.assertEqual(encode_word("DOGS", self.table),
                         encode_word("DOGS", self.table))

    def test_pack_layout(self) -> None:
        encoding = WordEncoding(identity=30, points=5)
        self.assertEqual((30 << 6) | 5, encoding.pack())
        self.assertEqual(encoding, WordEncoding.unpack(encoding.pack()))
        self.assertEqual(0, NOT_PLAYABLE.pack())

    def test_pack_rejects_wide_points(self) -> None:
        with self.assertRaises(OverflowError):
            WordEncoding(identity=2, points=64).pack()

    def test_points_are_not_capped(self) -> None:
        scores = {letter: 10 for letter in "QZXJKWY"}
        encoding = encode_word("QZXJKWY", build_code_table("QZXJKWY", scores))
        self.assertEqual(70, encoding.points)
        self.assertEqual(2 * 3 * 5 * 7 * 11 * 13 * 17, encoding.identity)
        with self.assertRaises(OverflowError):
            encoding.pack()

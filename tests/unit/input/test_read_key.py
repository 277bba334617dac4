"""Regression tests for raw-key decoding.

Covers ESC timing, editing-key sequences, UTF-8 input and SGR mouse tokens.
"""

import os
import time
import unittest

from passviewer.input import reader as reader_mod


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        reader_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        reader_mod._PENDING_BYTES.clear()

    def _read(self, data: bytes, count: int = 1) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, data)
            return [reader_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        self.assertEqual(self._read(b"\x1b"), ["ESC"])
        self.assertLess(time.monotonic() - started, 0.2)

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(self._read(b""), [""])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read(b"\x1bq", count=2), ["ESC", "q"])

    def test_arrow_and_editing_sequences(self) -> None:
        cases = {
            b"\x1b[A": "UP",
            b"\x1b[B": "DOWN",
            b"\x1b[C": "RIGHT",
            b"\x1b[D": "LEFT",
            b"\x1b[H": "HOME",
            b"\x1b[F": "END",
            b"\x1b[1~": "HOME",
            b"\x1b[4~": "END",
            b"\x1b[3~": "DELETE",
            b"\x1b[5~": "PAGE_UP",
            b"\x1b[6~": "PAGE_DOWN",
            b"\x1bOP": "F1",
            b"\x1b[11~": "F1",
            b"\x1bOH": "HOME",
        }
        for data, expected in cases.items():
            with self.subTest(data=data):
                self.assertEqual(self._read(data), [expected])

    def test_enter_and_backspace_are_normalized(self) -> None:
        self.assertEqual(self._read(b"\r\n\x7f\x08", count=4), ["ENTER", "ENTER", "BACKSPACE", "BACKSPACE"])

    def test_multibyte_character_is_read_whole(self) -> None:
        self.assertEqual(self._read("é€".encode("utf-8"), count=2), ["é", "€"])

    def test_modified_arrow_is_consumed_as_unknown_key(self) -> None:
        self.assertEqual(self._read(b"\x1b[1;5Cx", count=2), [reader_mod.UNKNOWN_KEY, "x"])

    def test_unsupported_sequences_are_not_escape(self) -> None:
        cases = (
            b"\x1bOQ",
            b"\x1b[12~",
            b"\x1b[24~",
            b"\x1b[Z",
            b"\x1b[1;2A",
            b"\x1b[3;5~",
            b"\x1b[200~",
        )
        for data in cases:
            with self.subTest(data=data):
                self.assertEqual(self._read(data), [reader_mod.UNKNOWN_KEY])

    def test_sgr_mouse_tokens(self) -> None:
        cases = {
            b"\x1b[<0;10;5M": "MOUSE_LEFT_DOWN:10:5",
            b"\x1b[<0;10;5m": "MOUSE_LEFT_UP:10:5",
            b"\x1b[<32;3;7M": "MOUSE_LEFT_DRAG:3:7",
            b"\x1b[<64;1;2M": "MOUSE_WHEEL_UP:1:2",
            b"\x1b[<65;1;2M": "MOUSE_WHEEL_DOWN:1:2",
            b"\x1b[<2;1;2M": "MOUSE",
        }
        for data, expected in cases.items():
            with self.subTest(data=data):
                self.assertEqual(self._read(data), [expected])

    def test_malformed_mouse_payload_is_unknown(self) -> None:
        self.assertEqual(self._read(b"\x1b[<0;x;5M"), [reader_mod.UNKNOWN_KEY])


if __name__ == "__main__":
    unittest.main()

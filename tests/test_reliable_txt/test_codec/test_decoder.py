"""Tests for ReliableTXT decoding."""

import pytest

from reliable_txt.character.encoding import ReliableTxtEncoding, detect_encoding
from reliable_txt.codec import decode, decode_payload, encode
from reliable_txt.shared.errors import InvalidEncodingError, MissingPreambleError

SAMPLE_TEXTS = [
    "",
    "A",
    "Hello\nWorld",
    "line\r\nwith CR",
    "\ufeffleading marker",
    "Gr\xfc\xdfe 世界",
    "\U0001D538\U0001F600\U0010FFFF",
    "\x00nul inside",
]


class TestDecode:
    """Test decoding of valid documents."""

    def test_utf8_example(self):
        """Test decoding a UTF-8 preamble followed by 'A'."""
        assert decode(bytes([0xEF, 0xBB, 0xBF, 0x41])) == (ReliableTxtEncoding.UTF_8, "A")

    def test_utf16_big_endian(self):
        """Test decoding UTF-16 big-endian."""
        assert decode(b"\xfe\xff\x00A\x00B") == (ReliableTxtEncoding.UTF_16, "AB")

    def test_utf16_little_endian(self):
        """Test decoding UTF-16 little-endian."""
        assert decode(b"\xff\xfeA\x00B\x00") == (ReliableTxtEncoding.UTF_16_REVERSE, "AB")

    def test_utf32_starts_after_preamble(self):
        """Test that UTF-32 decoding keeps the first code point after the preamble."""
        data = b"\x00\x00\xfe\xff\x00\x00\x00A\x00\x01\xd5\x38"

        assert decode(data) == (ReliableTxtEncoding.UTF_32, "A\U0001D538")

    def test_bare_preambles_decode_to_empty_text(self):
        """Test preamble-only inputs."""
        for encoding in ReliableTxtEncoding:
            assert decode(encoding.preamble) == (encoding, "")

    def test_accepts_bytearray(self):
        """Test bytearray input."""
        assert decode(bytearray(b"\xef\xbb\xbfok")) == (ReliableTxtEncoding.UTF_8, "ok")

    @pytest.mark.parametrize("encoding", list(ReliableTxtEncoding))
    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_round_trip(self, encoding, text):
        """Test that decode reverses encode and detection agrees."""
        data = encode(text, encoding)

        assert decode(data) == (encoding, text)
        assert detect_encoding(data) is encoding


class TestDecodeMissingPreamble:
    """Test inputs without a recognized preamble."""

    @pytest.mark.parametrize("data", [b"", b"\xef", b"AB", b"plain text"])
    def test_missing_preamble(self, data):
        """Test that decode propagates MissingPreambleError."""
        with pytest.raises(MissingPreambleError):
            decode(data)


class TestDecodeInvalidPayload:
    """Test malformed payloads after a recognized preamble."""

    def test_utf8_invalid_continuation_byte(self):
        """Test a lead byte followed by a non-continuation byte."""
        with pytest.raises(InvalidEncodingError) as exc_info:
            decode(b"\xef\xbb\xbf\xc3\x41")

        assert exc_info.value.encoding is ReliableTxtEncoding.UTF_8
        assert exc_info.value.position == 3

    @pytest.mark.parametrize("payload", [
        b"\x80",
        b"\xc0\xaf",
        b"\xed\xa0\x80",
        b"\xf4\x90\x80\x80",
        b"\xe2\x82",
        b"\xff",
    ])
    def test_utf8_malformed_sequences(self, payload):
        """Test stray continuation, overlong, surrogate, out-of-range and truncated input."""
        with pytest.raises(InvalidEncodingError, match="Invalid utf-8 data"):
            decode(b"\xef\xbb\xbf" + payload)

    def test_utf16_odd_byte_count(self):
        """Test a trailing odd byte in UTF-16."""
        with pytest.raises(InvalidEncodingError) as exc_info:
            decode(b"\xfe\xff\x00A\x00")

        assert exc_info.value.encoding is ReliableTxtEncoding.UTF_16
        assert exc_info.value.position == 4

    def test_utf16_unpaired_high_surrogate(self):
        """Test a high surrogate at the end of UTF-16 input."""
        with pytest.raises(InvalidEncodingError):
            decode(b"\xfe\xff\xd8\x35")

    def test_utf16_unpaired_low_surrogate(self):
        """Test a low surrogate without a preceding high surrogate."""
        with pytest.raises(InvalidEncodingError):
            decode(b"\xff\xfe\x38\xddA\x00")

    def test_utf32_byte_count_not_multiple_of_four(self):
        """Test truncated UTF-32 input."""
        with pytest.raises(InvalidEncodingError) as exc_info:
            decode(b"\x00\x00\xfe\xff\x00\x00\x00")

        assert exc_info.value.encoding is ReliableTxtEncoding.UTF_32

    def test_utf32_value_out_of_range(self):
        """Test a UTF-32 value above U+10FFFF."""
        with pytest.raises(InvalidEncodingError):
            decode(b"\x00\x00\xfe\xff\x00\x11\x00\x00")

    def test_utf32_surrogate_value(self):
        """Test a UTF-32 value in the surrogate range."""
        with pytest.raises(InvalidEncodingError):
            decode(b"\x00\x00\xfe\xff\x00\x00\xd8\x00")

    def test_error_is_chained_to_unicode_error(self):
        """Test that the original codec error is kept as the cause."""
        with pytest.raises(InvalidEncodingError) as exc_info:
            decode(b"\xef\xbb\xbf\x80")

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
        assert exc_info.value.reason


class TestDecodePayload:
    """Test decoding of payload bytes without a preamble."""

    def test_payload_only(self):
        """Test that the payload is decoded as-is."""
        assert decode_payload(b"\x00A", ReliableTxtEncoding.UTF_16) == "A"

    def test_position_counts_preamble(self):
        """Test that error positions include the preamble length."""
        with pytest.raises(InvalidEncodingError) as exc_info:
            decode_payload(b"\x00\x00\x00", ReliableTxtEncoding.UTF_32)

        assert exc_info.value.position == 4

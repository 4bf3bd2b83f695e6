"""
Tests for CredentialType wire encoding.

Test plan:
- Pass-through: hex-only labels returned unchanged (any case, odd length)
- Encoding: non-hex labels become lowercase hex of UTF-8 bytes, even
  length == 2 * byte length, decodes back exactly (ASCII + multibyte)
- Fixed point: re-encoding hex output returns it unchanged
- Ambiguity: "face" is passed through, not encoded, in default mode
- Explicit flag: already_encoded=True validates, False always encodes
"""

import pytest

from xrpl_credentials.credential_type import encode_label_hex, is_hex, to_wire_form
from xrpl_credentials.errors import EncodingError

NON_HEX_LABELS = [
    "KYC",
    "driver-license",
    "Verified Member",
    "über",
    "資格",
    "✓ ok",
    "0x1234",
]


class TestPassThrough:
    @pytest.mark.parametrize("label", ["4b5943", "ABCDEF", "aBcD12", "abc", "0"])
    def test_hex_labels_unchanged(self, label: str) -> None:
        assert to_wire_form(label) == label

    def test_uppercase_not_lowercased(self) -> None:
        assert to_wire_form("4B5943") == "4B5943"


class TestEncoding:
    @pytest.mark.parametrize("label", NON_HEX_LABELS)
    def test_encoded_is_hex(self, label: str) -> None:
        wire = to_wire_form(label)
        assert is_hex(wire)
        assert wire == wire.lower()

    @pytest.mark.parametrize("label", NON_HEX_LABELS)
    def test_length_is_twice_utf8_bytes(self, label: str) -> None:
        wire = to_wire_form(label)
        assert len(wire) == 2 * len(label.encode("utf-8"))
        assert len(wire) % 2 == 0

    @pytest.mark.parametrize("label", NON_HEX_LABELS)
    def test_decodes_back(self, label: str) -> None:
        assert bytes.fromhex(to_wire_form(label)).decode("utf-8") == label

    def test_known_value(self) -> None:
        assert to_wire_form("KYC") == "4b5943"

    def test_byte_order_preserved(self) -> None:
        assert to_wire_form("AZ") == "415a"
        assert encode_label_hex("AB") == "4142"

    def test_deterministic(self) -> None:
        assert to_wire_form("KYC") == to_wire_form("KYC")


class TestFixedPoint:
    @pytest.mark.parametrize("label", NON_HEX_LABELS)
    def test_reencoding_output_is_identity(self, label: str) -> None:
        once = to_wire_form(label)
        assert to_wire_form(once) == once
        assert to_wire_form(to_wire_form(once)) == once


class TestAmbiguity:
    def test_hex_looking_word_passed_through(self) -> None:
        """'face' is taken as the bytes 0xFA 0xCE, not the text 'face'."""
        assert to_wire_form("face") == "face"

    def test_hex_looking_word_forced_encoding(self) -> None:
        assert to_wire_form("face", already_encoded=False) == "66616365"


class TestExplicitFlag:
    def test_already_encoded_returns_unchanged(self) -> None:
        assert to_wire_form("4b5943", already_encoded=True) == "4b5943"

    def test_already_encoded_rejects_non_hex(self) -> None:
        with pytest.raises(EncodingError, match="even-length hex"):
            to_wire_form("KYC", already_encoded=True)

    def test_already_encoded_rejects_odd_length(self) -> None:
        with pytest.raises(EncodingError):
            to_wire_form("abc", already_encoded=True)

    def test_already_encoded_rejects_empty(self) -> None:
        with pytest.raises(EncodingError):
            to_wire_form("", already_encoded=True)

    def test_encoding_error_is_client_error(self) -> None:
        with pytest.raises(EncodingError) as exc_info:
            to_wire_form("xyz", already_encoded=True)
        assert exc_info.value.status_code == 400

    def test_force_encoding_non_hex(self) -> None:
        assert to_wire_form("KYC", already_encoded=False) == encode_label_hex("KYC")


class TestIsHex:
    def test_empty_is_not_hex(self) -> None:
        assert is_hex("") is False

    def test_prefixed_is_not_hex(self) -> None:
        assert is_hex("0xab") is False

    def test_mixed_case_is_hex(self) -> None:
        assert is_hex("aBcDeF09") is True

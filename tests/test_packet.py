"""Tests for magic packet construction: header, MAC encoding, layout."""

import pytest

from wakeonlan.errors import IncompletePacket, InvalidMACAddress, UnsupportedFeature
from wakeonlan.utils.packet import (
    HEADER,
    PACKET_SIZE,
    MagicPacket,
    build_header,
    build_magic_packet,
    encode_mac,
)


class TestHeader:
    def test_six_ff_bytes(self):
        assert build_header() == b"\xff\xff\xff\xff\xff\xff"

    def test_write_header_grows_payload(self):
        p = MagicPacket()
        assert len(p) == 0
        p.write_header()
        assert len(p) == 6
        assert p.payload == HEADER


class TestEncodeMac:
    @pytest.mark.parametrize(
        "text",
        [
            "00:11:22:33:44:55",
            "00-11-22-33-44-55",
        ],
    )
    def test_colon_and_hyphen(self, text):
        assert encode_mac(text) == bytes([0x00, 0x11, 0x22, 0x33, 0x44, 0x55])

    def test_case_insensitive(self):
        assert encode_mac("AA:bb:Cc:DD:ee:FF") == bytes.fromhex("aabbccddeeff")

    def test_all_zero_accepted(self):
        assert encode_mac("00:00:00:00:00:00") == b"\x00" * 6

    def test_all_ff_accepted(self):
        assert encode_mac("ff:ff:ff:ff:ff:ff") == b"\xff" * 6

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "bad-mac",
            "invalid",
            "00:11:22:33:44",
            "00:11:22:33:44:55:66",
            "0:11:22:33:44:55",
            "001122334455",
            "00.11.22.33.44.55",
            "0011.2233.4455",
            "00:11-22:33:44:55",
            "gg:11:22:33:44:55",
            " 00:11:22:33:44:55",
            "00:11:22:33:44:55\n",
        ],
    )
    def test_malformed_rejected(self, text):
        with pytest.raises(InvalidMACAddress) as exc_info:
            encode_mac(text)
        assert exc_info.value.value == text

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            encode_mac("nope")

    def test_error_mentions_input(self):
        with pytest.raises(InvalidMACAddress, match="bad-mac"):
            encode_mac("bad-mac")


class TestMagicPacket:
    def test_layout(self):
        p = MagicPacket()
        p.write_header()
        hw = p.write_mac("aa:bb:cc:dd:ee:ff")

        payload = p.payload
        assert hw == bytes.fromhex("aabbccddeeff")
        assert len(payload) == PACKET_SIZE == 102
        assert payload[:6] == b"\xff" * 6
        for k in range(16):
            assert payload[6 + 6 * k : 12 + 6 * k] == hw

    def test_complete_only_after_mac(self):
        p = MagicPacket()
        p.write_header()
        assert p.complete is False
        p.write_mac("00:11:22:33:44:55")
        assert p.complete is True

    def test_failed_mac_leaves_buffer_untouched(self):
        p = MagicPacket()
        p.write_header()
        with pytest.raises(InvalidMACAddress):
            p.write_mac("00:11:22")
        assert p.payload == HEADER

    def test_password_unsupported(self):
        p = MagicPacket()
        p.write_header()
        p.write_mac("00:11:22:33:44:55")
        with pytest.raises(UnsupportedFeature):
            p.write_password("secret")
        assert len(p) == PACKET_SIZE

    def test_payload_is_snapshot(self):
        p = MagicPacket()
        p.write_header()
        snapshot = p.payload
        p.write_mac("00:11:22:33:44:55")
        assert snapshot == HEADER


class TestSendUdp:
    def test_incomplete_packet_not_sent(self, mock_socket):
        p = MagicPacket()
        p.write_header()
        with pytest.raises(IncompletePacket):
            p.send_udp("255.255.255.255", "9")
        mock_socket.assert_not_called()

    def test_sends_payload(self, sent_socket):
        p = MagicPacket()
        p.write_header()
        p.write_mac("00:11:22:33:44:55")

        assert p.send_udp("192.168.1.255", "7") == ("192.168.1.255", 7)
        sent_socket.sendto.assert_called_once_with(p.payload, ("192.168.1.255", 7))

    def test_defaults(self, sent_socket):
        p = MagicPacket()
        p.write_header()
        p.write_mac("00:11:22:33:44:55")

        assert p.send_udp() == ("255.255.255.255", 9)


def test_build_magic_packet():
    pkt = build_magic_packet("00-11-22-33-44-55")
    assert pkt == b"\xff" * 6 + bytes.fromhex("001122334455") * 16


def test_build_magic_packet_fresh_each_call():
    first = build_magic_packet("00:11:22:33:44:55")
    second = build_magic_packet("aa:bb:cc:dd:ee:ff")
    assert len(first) == len(second) == PACKET_SIZE
    assert first[6:12] != second[6:12]

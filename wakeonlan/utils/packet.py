"""Magic packet construction.

A magic packet is 6 bytes of ``0xFF`` followed by the target MAC address
repeated 16 times, 102 bytes in total::

    FF FF FF FF FF FF
    M0 M1 M2 M3 M4 M5   (x16)
"""

from __future__ import annotations

import logging
import re

from wakeonlan.errors import IncompletePacket, InvalidMACAddress, UnsupportedFeature
from wakeonlan.utils import transport

logger = logging.getLogger(__name__)

HEADER = b"\xff" * 6
MAC_SIZE = 6
MAC_REPEAT = 16
PACKET_SIZE = len(HEADER) + MAC_REPEAT * MAC_SIZE  # 102

# Same delimiter throughout: "aa:bb:cc:dd:ee:ff" or "aa-bb-cc-dd-ee-ff"
_MAC_RE = re.compile(r"[0-9A-Fa-f]{2}([:-])[0-9A-Fa-f]{2}(?:\1[0-9A-Fa-f]{2}){4}")


def build_header() -> bytes:
    """Return the 6-byte synchronization header."""
    return HEADER


def encode_mac(text: str) -> bytes:
    """Parse a colon- or hyphen-separated MAC address into 6 raw octets.

    Raises:
        InvalidMACAddress: on empty input, wrong length, mixed or unknown
            delimiters, or non-hex characters.
    """
    if not isinstance(text, str) or _MAC_RE.fullmatch(text) is None:
        raise InvalidMACAddress(text)
    return bytes.fromhex(text.replace(text[2], ""))


class MagicPacket:
    """Incrementally built magic packet payload (header, then MAC x16)."""

    def __init__(self) -> None:
        self._payload = bytearray()

    def __len__(self) -> int:
        return len(self._payload)

    @property
    def payload(self) -> bytes:
        return bytes(self._payload)

    @property
    def complete(self) -> bool:
        return len(self._payload) == PACKET_SIZE

    def write_header(self) -> None:
        self._payload += build_header()

    def write_mac(self, text: str) -> bytes:
        """Append the MAC address 16 times; nothing is appended on failure."""
        hw = encode_mac(text)
        self._payload += hw * MAC_REPEAT
        return hw

    def write_password(self, password: str) -> None:
        # SecureON appends 4 or 6 password bytes after the MAC repetitions
        raise UnsupportedFeature("password-protected WoL")

    def send_udp(self, ip: str = "", port: str = "") -> tuple[str, int]:
        """Resolve the destination and transmit the payload as one datagram.

        Returns the ``(address, port)`` pair the datagram was sent to.
        """
        if not self.complete:
            raise IncompletePacket(len(self._payload), PACKET_SIZE)

        address = transport.resolve_destination_address(ip)
        port_num = transport.resolve_port(port)
        transport.send(self.payload, address, port_num)
        return str(address), port_num


def build_magic_packet(mac: str) -> bytes:
    """Build the complete 102-byte payload for ``mac``."""
    packet = MagicPacket()
    packet.write_header()
    packet.write_mac(mac)
    logger.debug("Built magic packet for %s (%d bytes)", mac, len(packet))
    return packet.payload

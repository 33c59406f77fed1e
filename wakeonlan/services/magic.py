"""Send a Wake-on-LAN magic packet in a single call."""

from __future__ import annotations

import logging

from wakeonlan.errors import UnsupportedFeature
from wakeonlan.utils.packet import MagicPacket

logger = logging.getLogger(__name__)


def send_magic_packet(mac_address: str, password: str = "", ip: str = "", port: str = "") -> None:
    """
    Build a magic packet for ``mac_address`` and send it over UDP/IPv4.

    Args:
        mac_address: Target MAC, "AA:BB:CC:DD:EE:FF" or "AA-BB-CC-DD-EE-FF"
        password: SecureON password; must be empty (not supported)
        ip: Destination IPv4 address, empty for 255.255.255.255
        port: Destination port "0", "7" or "9", empty for 9

    Raises:
        UnsupportedFeature: ``password`` is non-empty. No network I/O happens.
        InvalidMACAddress, InvalidDestinationAddress, InvalidPort: bad input,
            nothing is sent.
        TransmissionFailure: the socket could not be opened or written.
    """
    if password:
        raise UnsupportedFeature("password-protected WoL")

    packet = MagicPacket()
    packet.write_header()
    packet.write_mac(mac_address)

    address, port_num = packet.send_udp(ip, port)
    logger.debug("Magic packet for %s sent to %s:%d", mac_address, address, port_num)

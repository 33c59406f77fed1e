"""UDP/IPv4 transmission of magic packets."""

from __future__ import annotations

import ipaddress
import logging
import socket

from wakeonlan.errors import InvalidDestinationAddress, InvalidPort, TransmissionFailure

logger = logging.getLogger(__name__)

BROADCAST_ADDRESS = ipaddress.IPv4Address("255.255.255.255")
DEFAULT_PORT = 9
# 0: pass-through, 7: echo, 9: discard
ACCEPTED_PORTS = (0, 7, 9)


def resolve_destination_address(text: str) -> ipaddress.IPv4Address:
    """Parse a dotted-quad IPv4 address; empty input means limited broadcast."""
    if text == "":
        return BROADCAST_ADDRESS
    try:
        return ipaddress.IPv4Address(text)
    except (ipaddress.AddressValueError, TypeError) as e:
        raise InvalidDestinationAddress(text) from e


def resolve_port(text: str) -> int:
    """Parse the destination port; empty input means the discard port (9)."""
    if text == "":
        return DEFAULT_PORT
    if not isinstance(text, str) or not (text.isascii() and text.isdigit()):
        raise InvalidPort(text, ACCEPTED_PORTS)

    port = int(text)
    if port not in ACCEPTED_PORTS:
        raise InvalidPort(text, ACCEPTED_PORTS)
    return port


def send(payload: bytes, address: ipaddress.IPv4Address | str, port: int) -> None:
    """Write ``payload`` as a single UDP datagram to ``address:port``.

    The socket only lives for this call. Nothing is awaited from the remote
    side, so returning means the datagram reached the local network stack.

    Raises:
        TransmissionFailure: if the socket cannot be opened or the write fails.
    """
    dest = str(address)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            sent = sock.sendto(payload, (dest, port))
    except OSError as e:
        raise TransmissionFailure(dest, port, str(e)) from e

    if sent != len(payload):
        raise TransmissionFailure(dest, port, f"short write ({sent} of {len(payload)} bytes)")
    logger.debug("Sent %d byte datagram to %s:%d", sent, dest, port)

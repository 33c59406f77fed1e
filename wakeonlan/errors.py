"""Wake-on-LAN error taxonomy: every failure surfaces as one of these."""

from __future__ import annotations


class WakeOnLanError(Exception):
    """Base class for all magic packet failures."""


class InvalidMACAddress(WakeOnLanError, ValueError):
    """Textual MAC address is not six colon- or hyphen-separated hex pairs."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid MAC address {value!r}")


class InvalidDestinationAddress(WakeOnLanError, ValueError):
    """Destination is not a dotted-quad IPv4 address."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid destination address {value!r} (expected dotted-quad IPv4)")


class InvalidPort(WakeOnLanError, ValueError):
    def __init__(self, value: str, accepted: tuple[int, ...] = (0, 7, 9)):
        self.value = value
        self.accepted = accepted
        allowed = ", ".join(str(p) for p in accepted)
        super().__init__(f"invalid port {value!r} (use one of {allowed})")


class UnsupportedFeature(WakeOnLanError):
    """Requested feature is a known extension point that is not implemented."""

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"{feature} is not supported")


class IncompletePacket(WakeOnLanError):
    """Payload is not a complete magic packet and must not be transmitted."""

    def __init__(self, size: int, expected: int):
        self.size = size
        self.expected = expected
        super().__init__(f"magic packet is incomplete ({size} of {expected} bytes)")


class TransmissionFailure(WakeOnLanError):
    """Socket creation or the datagram write failed.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, address: str, port: int, reason: str):
        self.address = address
        self.port = port
        self.reason = reason
        super().__init__(f"failed to send magic packet to {address}:{port}: {reason}")

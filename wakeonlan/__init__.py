"""Wake-on-LAN magic packet sender."""

from wakeonlan.errors import (
    IncompletePacket,
    InvalidDestinationAddress,
    InvalidMACAddress,
    InvalidPort,
    TransmissionFailure,
    UnsupportedFeature,
    WakeOnLanError,
)
from wakeonlan.services.magic import send_magic_packet

__version__ = "1.0.0"

__all__ = [
    "IncompletePacket",
    "InvalidDestinationAddress",
    "InvalidMACAddress",
    "InvalidPort",
    "TransmissionFailure",
    "UnsupportedFeature",
    "WakeOnLanError",
    "send_magic_packet",
    "__version__",
]

"""Command-line front-end: ``wakeonlan -mac <address> [-ip <ip>] [-port <port>]``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from wakeonlan import __version__
from wakeonlan.config import settings
from wakeonlan.errors import WakeOnLanError
from wakeonlan.services.magic import send_magic_packet
from wakeonlan.utils.log import setup_logging

logger = logging.getLogger(__name__)

EXAMPLES = """\
Examples:
  # Send to a specific MAC address using default broadcast
  wakeonlan -mac 00:11:22:33:44:55

  # Send to a specific IP and port
  wakeonlan -mac 00:11:22:33:44:55 -ip 192.168.1.255 -port 9

  # Use dash-separated MAC format
  wakeonlan -mac 00-11-22-33-44-55 -ip 192.168.1.100
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wakeonlan",
        description="Wake-on-LAN Magic Packet Sender",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    p.add_argument(
        "-mac",
        default="",
        help="Target MAC address (required). Format: XX:XX:XX:XX:XX:XX or XX-XX-XX-XX-XX-XX",
    )
    p.add_argument(
        "-ip",
        default=settings.default_ip,
        help=f"Broadcast IP address (default: {settings.default_ip})",
    )
    p.add_argument(
        "-port",
        default=settings.default_port,
        help=f"Destination port: 0 (any), 7 (echo), or 9 (discard) (default: {settings.default_port})",
    )
    p.add_argument("-h", "-help", "--help", action="help", help="Show this help message")
    p.add_argument("-version", "--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(settings.log_level)

    if not args.mac:
        print("Error: MAC address is required\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    print("Sending Wake-on-LAN magic packet...")
    print(f"  MAC Address: {args.mac}")
    print(f"  Broadcast IP: {args.ip}")
    print(f"  Port: {args.port}")
    print()

    try:
        send_magic_packet(args.mac, "", args.ip, args.port)
    except WakeOnLanError as e:
        logger.debug("Send failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Magic packet sent successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

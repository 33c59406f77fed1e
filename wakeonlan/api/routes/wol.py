"""Wake-on-LAN route: validates input and sends the magic packet."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from wakeonlan.config import settings
from wakeonlan.errors import (
    InvalidDestinationAddress,
    InvalidMACAddress,
    InvalidPort,
    TransmissionFailure,
    UnsupportedFeature,
)
from wakeonlan.schemas.wol import WolRequest, WolResult
from wakeonlan.services.magic import send_magic_packet
from wakeonlan.utils.packet import build_magic_packet
from wakeonlan.utils.transport import resolve_destination_address, resolve_port

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/wol", response_model=WolResult)
async def wake_on_lan(body: WolRequest):
    """Send a magic packet to ``body.mac`` (validated only in dev mode)."""
    try:
        if body.password:
            raise UnsupportedFeature("password-protected WoL")
        payload = build_magic_packet(body.mac)
        address = resolve_destination_address(body.ip)
        port = resolve_port(body.port)

        if settings.is_dev_mode:
            logger.info("[DEV] WoL packet (not sent): %s -> %s:%d", body.mac, address, port)
        else:
            send_magic_packet(body.mac, body.password, body.ip, body.port)
            logger.info("WoL packet sent to %s via %s:%d", body.mac, address, port)
    except UnsupportedFeature as e:
        raise HTTPException(501, str(e))
    except (InvalidMACAddress, InvalidDestinationAddress, InvalidPort) as e:
        raise HTTPException(400, str(e))
    except TransmissionFailure as e:
        logger.error("WoL send failed: %s", e)
        raise HTTPException(502, str(e))

    return WolResult(
        wol_sent=not settings.is_dev_mode,
        mac=body.mac,
        ip=str(address),
        port=port,
        packet_size=len(payload),
        dry_run=settings.is_dev_mode,
    )

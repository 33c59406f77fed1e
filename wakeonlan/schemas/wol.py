"""Wake-on-LAN request/response schemas."""

from pydantic import BaseModel, Field


class WolRequest(BaseModel):
    """Magic packet request; empty ip/port fall back to broadcast:9."""
    mac: str = Field(..., examples=["00:11:22:33:44:55"])
    ip: str = ""
    port: str = ""
    password: str = ""  # SecureON, rejected with 501


class WolResult(BaseModel):
    """Outcome of a magic packet send."""
    wol_sent: bool
    mac: str
    ip: str
    port: int
    packet_size: int
    dry_run: bool = False

"""Wake-on-LAN orchestration."""

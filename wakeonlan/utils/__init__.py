"""Magic packet builder and UDP transmitter."""

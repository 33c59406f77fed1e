"""Test fixtures: socket stub and FastAPI test client."""

from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wakeonlan.main import create_app


@pytest.fixture
def mock_socket():
    """Replace the UDP socket so no datagram leaves the host.

    Yields the patched socket class; the socket used inside the ``with``
    block is ``mock_socket.return_value.__enter__.return_value``.
    """
    with patch("wakeonlan.utils.transport.socket.socket") as sock_cls:
        sock = sock_cls.return_value.__enter__.return_value
        sock.sendto.side_effect = lambda data, addr: len(data)
        yield sock_cls


@pytest.fixture
def sent_socket(mock_socket):
    """The socket object the transmitter writes to."""
    return mock_socket.return_value.__enter__.return_value


@pytest_asyncio.fixture
async def client():
    """Provide an async test client for the HTTP API."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

"""Transport interfaces."""

from __future__ import annotations

import socket
from typing import Protocol


class SocketFactory(Protocol):
    def __call__(self, family: int, type: int, proto: int = 0) -> socket.socket:
        """Allocate a platform socket handle."""

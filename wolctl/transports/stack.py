"""Reference-counted lifecycle of the host network subsystem.

Some platforms need an explicit start/stop of their socket layer around any
socket call. `NetworkStack` is the single process-wide owner of that state:
the startup hook runs when the first guard is acquired and the teardown hook
when the last one is released. The counter is guarded by a lock so guards
may be taken from several threads.
"""

from __future__ import annotations

import logging
import socket
import threading
from collections.abc import Callable
from types import TracebackType

from wolctl.core.errors import NetworkStackInitError

LOGGER = logging.getLogger(__name__)

_REQUIRED_SOCKET_ATTRS = ("AF_INET", "SOCK_DGRAM", "IPPROTO_UDP", "SOL_SOCKET", "SO_BROADCAST")


def _default_startup() -> None:
    missing = [name for name in _REQUIRED_SOCKET_ATTRS if not hasattr(socket, name)]
    if missing:
        raise NetworkStackInitError(
            f"This Python build does not expose IPv4 broadcast socket APIs ({'/'.join(missing)})."
        )
    LOGGER.debug("Network stack initialized")


def _default_teardown() -> None:
    LOGGER.debug("Network stack released")


class NetworkStack:
    def __init__(
        self,
        *,
        startup: Callable[[], None] = _default_startup,
        teardown: Callable[[], None] = _default_teardown,
    ) -> None:
        self._startup = startup
        self._teardown = teardown
        self._lock = threading.Lock()
        self._refcount = 0

    @property
    def refcount(self) -> int:
        with self._lock:
            return self._refcount

    def acquire(self) -> None:
        with self._lock:
            if self._refcount == 0:
                try:
                    self._startup()
                except NetworkStackInitError:
                    raise
                except Exception as exc:
                    raise NetworkStackInitError(f"Network stack initialization failed: {exc}") from exc
            self._refcount += 1

    def release(self) -> None:
        with self._lock:
            if self._refcount == 0:
                raise RuntimeError("NetworkStack released more times than acquired")
            self._refcount -= 1
            if self._refcount == 0:
                try:
                    self._teardown()
                except Exception as exc:
                    # Nothing can be recovered at this point.
                    LOGGER.warning("Network stack teardown failed: %s", exc)


_DEFAULT_STACK = NetworkStack()


def default_stack() -> NetworkStack:
    return _DEFAULT_STACK


class NetworkStackGuard:
    """Holds one reference on a `NetworkStack` for the duration of a `with` block."""

    def __init__(self, stack: NetworkStack | None = None) -> None:
        self._stack = stack or default_stack()
        self._held = False

    def __enter__(self) -> NetworkStackGuard:
        self._stack.acquire()
        self._held = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._held:
            self._held = False
            self._stack.release()

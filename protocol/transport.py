from __future__ import annotations

from pwnlib.exception import PwnlibException
from pwnlib.tubes.remote import remote

from game.errors import TransportError
from game.log import getLogger

log = getLogger(__name__)


class RemoteTransport:
    """
    Exactly-N-byte I/O over a TCP connection to the game server.

    Attributes:
        host: Server name or address.
        port: Server port.
        tube: The connected pwntools tube, None once closed.
    """

    def __init__(self, host: str, port: int, tube=None):
        self.host = host
        self.port = port
        self.tube = tube
        self._closed = False

    @classmethod
    def connect(cls, host: str, port: int) -> "RemoteTransport":
        """
        Open the connection.

        Raises:
            TransportError: If the server cannot be reached.
        """
        try:
            tube = remote(host, port)
        except (PwnlibException, OSError) as e:
            raise TransportError(f"connect to {host}:{port} failed: {e}") from e
        log.info("connected to %s:%d", host, port)
        return cls(host, port, tube=tube)

    def send(self, data: bytes) -> None:
        """
        Write all of data.

        Raises:
            TransportError: If the peer is gone or the write fails.
        """
        if self.tube is None:
            raise TransportError("send on closed connection")
        try:
            self.tube.send(data)
        except (EOFError, OSError) as e:
            raise TransportError(f"write to server failed: {e}") from e

    def recv(self, n: int) -> bytes:
        """
        Read exactly n bytes. A short read is fatal, nothing is retried.

        Raises:
            TransportError: On peer close, stall or socket error.
        """
        if self.tube is None:
            raise TransportError("recv on closed connection")
        try:
            data = self.tube.recvn(n)
        except (EOFError, OSError) as e:
            raise TransportError(f"read from server failed: {e}") from e
        if len(data) != n:
            raise TransportError(
                f"read from server stalled after {len(data)} of {n} bytes"
            )
        return data

    def abort(self) -> None:
        """
        Shut down the receiving side so a blocked recv() returns at once.

        Safe to call from a signal handler; the tube stays open for close().
        """
        if self.tube is not None:
            self.tube.shutdown("recv")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self.tube is not None:
            log.debug("closing connection to %s:%d", self.host, self.port)
            self.tube.close()
            self.tube = None


class BoardTransport:
    """
    The transport interface backed by an in-process referee Board.

    Requests are scored as soon as they are complete; the response byte is
    queued for the following recv().
    """

    def __init__(self, board):
        self.board = board
        self.sent = []
        self._pending = b""
        self._closed = False
        self.close_calls = 0

    def send(self, data: bytes) -> None:
        if self._closed:
            raise TransportError("send on closed connection")
        self.sent.append(bytes(data))
        self._pending += self.board.respond(bytes(data))

    def recv(self, n: int) -> bytes:
        if self._closed:
            raise TransportError("recv on closed connection")
        if len(self._pending) < n:
            raise TransportError(
                f"read from server stalled after {len(self._pending)} of {n} bytes"
            )
        data, self._pending = self._pending[:n], self._pending[n:]
        return data

    def abort(self) -> None:
        """Drop the queued response; the next recv() comes up short."""
        self._pending = b""

    def close(self) -> None:
        self.close_calls += 1
        self._closed = True

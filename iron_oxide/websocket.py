"""A small server-side WebSocket connection with frame encoding and decoding."""

from __future__ import annotations

import base64
import hashlib
import logging
import socket
from abc import ABC, abstractmethod
from collections import deque
from enum import IntEnum
from typing import Any

_log = logging.getLogger(__name__)

_GUID = b"258EAFA5-E914-47DA-95CA-C5AB0DC85B11"
_READ_SIZE = 8192
_READ_TIMEOUT = 1.0

_FIN = 0b1000_0000
_OP_CLOSE = 8
_OP_PING = 9
_OP_PONG = 10


class MessageDataType(IntEnum):
    """The data opcodes of a WebSocket frame."""

    CONTINUE = 0
    TEXT = 1
    BINARY = 2


class WebSocketInterface(ABC):
    """Callbacks for a connection driven by :meth:`WebSocket.run`."""

    @abstractmethod
    def on_message(self, data: bytes) -> None:
        """Handle one complete (possibly reassembled) message."""

    @abstractmethod
    def on_closed(self, address: Any) -> None:
        """Handle the connection to ``address`` going away."""

    @abstractmethod
    def websocket(self) -> WebSocket:
        """Return the connection these callbacks belong to."""


def accept_key(handshake_key: str) -> str:
    """Compute the ``Sec-WebSocket-Accept`` value for a client key."""
    digest = hashlib.sha1(handshake_key.encode("utf-8") + _GUID).digest()
    return base64.b64encode(digest).decode("ascii")


def encode_frame(message: bytes, msg_type: MessageDataType) -> bytes:
    """Encode an unmasked, final server frame carrying ``message``."""
    length = len(message)
    first = bytes([_FIN | int(msg_type)])
    if length <= 125:
        header = first + bytes([length])
    elif length <= 0xFFFF:
        header = first + bytes([126]) + length.to_bytes(2, "big")
    else:
        header = first + bytes([127]) + length.to_bytes(8, "big")
    return header + bytes(message)


def payload_length(data: bytes) -> int | None:
    """Return the total length of the masked frame at the start of ``data``.

    Returns None while too few header bytes are present to tell.
    """
    if len(data) < 3:
        return None
    length = data[1] & 0x7F
    if length == 126:
        if len(data) < 4:
            return None
        return int.from_bytes(data[2:4], "big") + 8
    if length == 127:
        if len(data) < 10:
            return None
        return int.from_bytes(data[2:10], "big") + 14
    return length + 6


def _control_frame(opcode: int, data: bytes) -> bytes:
    if len(data) > 125:
        raise ValueError("control frame payload must not exceed 125 bytes")
    return bytes([_FIN | opcode, len(data)]) + bytes(data)


class WebSocket:
    """One server-side WebSocket connection over a connected stream socket."""

    def __init__(self, stream: Any) -> None:
        self.stream = stream
        self.closed = False
        self._send_queue: deque[bytes] = deque()
        self._fragmenting = False
        self._fragments = bytearray()
        self._fragment_type: int | None = None

    @classmethod
    def try_connect(cls, stream: Any, handshake_key: str) -> WebSocket:
        """Answer the upgrade handshake on ``stream`` and wrap it."""
        response = (
            "HTTP/1.1 101 Switching Protocols\r\n"
            "Connection: Upgrade\r\n"
            "Upgrade: websocket\r\n"
            f"Sec-WebSocket-Accept: {accept_key(handshake_key)}\r\n\r\n"
        )
        stream.sendall(response.encode("ascii"))
        stream.settimeout(_READ_TIMEOUT)
        return cls(stream)

    def close(self) -> None:
        """Ask :meth:`run` to stop after its next flush."""
        self.closed = True

    def send_ping(self) -> None:
        self._send_queue.append(_control_frame(_OP_PING, b"_"))

    def send_pong(self, data: bytes) -> None:
        self._send_queue.append(_control_frame(_OP_PONG, data))

    def send(self, message: bytes, msg_type: MessageDataType) -> None:
        """Queue a message; it is written on the next :meth:`flush`."""
        self._send_queue.append(encode_frame(message, msg_type))

    @property
    def pending(self) -> list[bytes]:
        """Frames queued but not yet written."""
        return list(self._send_queue)

    def flush(self) -> None:
        """Write every queued frame; socket errors propagate."""
        while self._send_queue:
            self.stream.sendall(self._send_queue.popleft())

    def ip(self) -> Any:
        """The peer address of the underlying stream."""
        return self.stream.getpeername()

    def _reply(self, frame: bytes) -> None:
        try:
            self.stream.sendall(frame)
        except OSError:
            pass

    def process_frame(self, frame: bytes, interface: WebSocketInterface) -> None:
        """Decode one complete client frame and dispatch it."""
        if len(frame) < 2:
            raise ValueError("frame is shorter than its header")
        fin = bool(frame[0] & _FIN)
        opcode = frame[0] & 0x0F
        length = frame[1] & 0x7F
        if not frame[1] & 0x80:
            return

        offset = 2
        if length == 126:
            length = int.from_bytes(frame[2:4], "big")
            offset = 4
        elif length == 127:
            length = int.from_bytes(frame[2:10], "big")
            offset = 10
        if len(frame) < offset + 4:
            raise ValueError("frame is shorter than its header")
        mask = frame[offset:offset + 4]
        offset += 4
        data = bytes(b ^ mask[i % 4] for i, b in enumerate(frame[offset:offset + length]))

        if opcode == MessageDataType.CONTINUE:
            if not self._fragmenting:
                _log.warning("Received continuation frame without starting frame")
                return
            self._fragments += data
            if fin:
                message = bytes(self._fragments)
                self._fragments.clear()
                self._fragmenting = False
                self._fragment_type = None
                interface.on_message(message)
        elif opcode in (MessageDataType.TEXT, MessageDataType.BINARY):
            if self._fragmenting:
                _log.warning("Received new message while still processing fragments")
                return
            if fin:
                interface.on_message(data)
            else:
                self._fragments = bytearray(data)
                self._fragmenting = True
                self._fragment_type = opcode
        elif opcode in (_OP_CLOSE, _OP_PING):
            if len(data) > 125:
                _log.warning("Control frame with oversized payload ignored")
                return
            if opcode == _OP_CLOSE:
                self._reply(_control_frame(_OP_CLOSE, data))
                interface.on_closed(self.ip())
            else:
                self._reply(_control_frame(_OP_PONG, data))
        else:
            _log.warning("Unhandled opcode: %d", opcode)

    @staticmethod
    def run(interface: WebSocketInterface) -> None:
        """Read, dispatch and flush until the peer leaves or the socket closes."""
        ws = interface.websocket()
        address = ws.ip()
        pending = bytearray()
        while True:
            try:
                chunk = ws.stream.recv(_READ_SIZE)
            except (socket.timeout, BlockingIOError):
                chunk = None
            except OSError as error:
                _log.warning("Error occurred: %s", error)
                interface.on_closed(address)
                return
            if chunk is not None:
                if not chunk:
                    _log.info("Connection closed")
                    interface.on_closed(address)
                    return
                pending += chunk
                while True:
                    needed = payload_length(pending)
                    if needed is None or len(pending) < needed:
                        break
                    frame = bytes(pending[:needed])
                    del pending[:needed]
                    ws.process_frame(frame, interface)

            try:
                ws.flush()
            except OSError:
                interface.on_closed(address)
                return
            if ws.closed:
                return
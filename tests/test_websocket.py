import socket

import pytest

from iron_oxide.websocket import (
    MessageDataType,
    WebSocket,
    WebSocketInterface,
    accept_key,
    encode_frame,
    payload_length,
)

ADDRESS = ("127.0.0.1", 4242)


class FakeStream:
    def __init__(self, chunks=(), fail_send=False):
        self.chunks = list(chunks)
        self.sent = []
        self.timeout = None
        self.fail_send = fail_send

    def sendall(self, data):
        if self.fail_send:
            raise BrokenPipeError("gone")
        self.sent.append(bytes(data))

    def settimeout(self, value):
        self.timeout = value

    def getpeername(self):
        return ADDRESS

    def recv(self, size):
        item = self.chunks.pop(0) if self.chunks else b""
        if isinstance(item, BaseException):
            raise item
        return item


class Recorder(WebSocketInterface):
    def __init__(self, ws, echo=False):
        self.ws = ws
        self.echo = echo
        self.messages = []
        self.closed = []

    def on_message(self, data):
        self.messages.append(data)
        if self.echo:
            self.ws.send(data, MessageDataType.TEXT)

    def on_closed(self, address):
        self.closed.append(address)

    def websocket(self):
        return self.ws


def client_frame(payload, opcode=1, fin=True, mask=b"\x01\x02\x03\x04"):
    first = (0x80 if fin else 0) | opcode
    length = len(payload)
    if length <= 125:
        header = bytes([first, 0x80 | length])
    else:
        header = bytes([first, 0x80 | 126]) + length.to_bytes(2, "big")
    masked = bytes(b ^ mask[i % 4] for i, b in enumerate(payload))
    return header + mask + masked


def test_accept_key_known_example():
    assert accept_key("dGhlIHNhbXBsZSBub25jZQ==") == "s3pPLMBiTxaQ9kYGzzhZRbK+xOo="


def test_encode_small_frame():
    assert encode_frame(b"hello", MessageDataType.TEXT) == b"\x81\x05hello"


def test_encode_medium_frame():
    message = b"x" * 300
    frame = encode_frame(message, MessageDataType.BINARY)
    assert frame[0] == 0x82
    assert frame[1] == 126
    assert frame[2:4] == len(message).to_bytes(2, "big")
    assert frame[4:] == message


def test_encode_large_frame():
    message = b"y" * 70000
    frame = encode_frame(message, MessageDataType.TEXT)
    assert frame[1] == 127
    assert int.from_bytes(frame[2:10], "big") == len(message)
    assert len(frame) == len(message) + 10


@pytest.mark.parametrize("payload", [b"", b"abc", b"z" * 200])
def test_payload_length_matches_client_frame(payload):
    frame = client_frame(payload)
    assert payload_length(frame) == len(frame)


def test_payload_length_needs_header():
    assert payload_length(b"\x81") is None
    assert payload_length(bytes([0x81, 0x80 | 126, 1])) is None
    assert payload_length(bytes([0x81, 0x80 | 127, 0, 0])) is None


def test_try_connect_sends_handshake():
    stream = FakeStream()
    ws = WebSocket.try_connect(stream, "dGhlIHNhbXBsZSBub25jZQ==")
    response = stream.sent[0]
    assert response.startswith(b"HTTP/1.1 101 Switching Protocols\r\n")
    assert f"Sec-WebSocket-Accept: {accept_key('dGhlIHNhbXBsZSBub25jZQ==')}\r\n\r\n".encode() in response
    assert stream.timeout == 1.0
    assert ws.stream is stream


def test_send_queues_until_flush():
    stream = FakeStream()
    ws = WebSocket(stream)
    ws.send(b"hi", MessageDataType.TEXT)
    ws.send_ping()
    assert stream.sent == []
    ws.flush()
    assert stream.sent == [encode_frame(b"hi", MessageDataType.TEXT), b"\x89\x01_"]
    assert ws.pending == []


def test_send_pong_rejects_oversized():
    ws = WebSocket(FakeStream())
    with pytest.raises(ValueError):
        ws.send_pong(b"p" * 126)


def test_process_single_text_frame():
    ws = WebSocket(FakeStream())
    rec = Recorder(ws)
    ws.process_frame(client_frame(b"hello"), rec)
    assert rec.messages == [b"hello"]


def test_process_fragmented_message():
    ws = WebSocket(FakeStream())
    rec = Recorder(ws)
    ws.process_frame(client_frame(b"hel", opcode=1, fin=False), rec)
    assert rec.messages == []
    ws.process_frame(client_frame(b"lo", opcode=0, fin=True), rec)
    assert rec.messages == [b"hello"]


def test_stray_continuation_is_ignored():
    ws = WebSocket(FakeStream())
    rec = Recorder(ws)
    ws.process_frame(client_frame(b"lo", opcode=0), rec)
    assert rec.messages == []


def test_unmasked_frame_is_ignored():
    ws = WebSocket(FakeStream())
    rec = Recorder(ws)
    ws.process_frame(encode_frame(b"hello", MessageDataType.TEXT), rec)
    assert rec.messages == []


def test_ping_is_answered_with_pong():
    stream = FakeStream()
    ws = WebSocket(stream)
    ws.process_frame(client_frame(b"ab", opcode=9), Recorder(ws))
    assert stream.sent == [b"\x8a\x02ab"]


def test_close_frame_echoes_and_notifies():
    stream = FakeStream()
    ws = WebSocket(stream)
    rec = Recorder(ws)
    ws.process_frame(client_frame(b"\x03\xe8", opcode=8), rec)
    assert stream.sent == [b"\x88\x02\x03\xe8"]
    assert rec.closed == [ADDRESS]


def test_run_reassembles_split_frames_and_echoes():
    frames = client_frame(b"first") + client_frame(b"second" * 30)
    chunks = [frames[:4], socket.timeout(), frames[4:20], frames[20:], b""]
    stream = FakeStream(chunks)
    ws = WebSocket(stream)
    rec = Recorder(ws, echo=True)
    WebSocket.run(rec)
    assert rec.messages == [b"first", b"second" * 30]
    assert stream.sent == [
        encode_frame(b"first", MessageDataType.TEXT),
        encode_frame(b"second" * 30, MessageDataType.TEXT),
    ]
    assert rec.closed == [ADDRESS]


def test_run_stops_on_read_error():
    stream = FakeStream([ConnectionResetError("reset")])
    ws = WebSocket(stream)
    rec = Recorder(ws)
    WebSocket.run(rec)
    assert rec.closed == [ADDRESS]


def test_run_stops_when_flush_fails():
    stream = FakeStream([client_frame(b"x")], fail_send=True)
    ws = WebSocket(stream)
    rec = Recorder(ws, echo=True)
    WebSocket.run(rec)
    assert rec.messages == [b"x"]
    assert rec.closed == [ADDRESS]


def test_run_returns_after_close_without_callback():
    stream = FakeStream([socket.timeout()])
    ws = WebSocket(stream)
    ws.close()
    rec = Recorder(ws)
    WebSocket.run(rec)
    assert rec.closed == []
    assert stream.chunks == []
"""Minimal HTTP request parsing and response building for a static file server."""

from __future__ import annotations

import io
import os
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class GetRequest:
    """A GET request for ``path`` with an optional raw query string."""

    path: str
    query: str | None = None


@dataclass(frozen=True)
class PostRequest:
    """A POST request; its body is not interpreted."""


@dataclass(frozen=True)
class WebSocketUpgrade:
    """A request to upgrade the connection to a WebSocket.

    ``key`` holds the rest of the ``Sec-WebSocket-Key`` header line as received.
    """

    key: str


_Request = Union[GetRequest, PostRequest, WebSocketUpgrade]

_KEY_HEADER = "Sec-WebSocket-Key"


@dataclass
class HTTPRequest:
    """A parsed request line plus the optional host."""

    request: _Request
    host: str | None = None

    @classmethod
    def parse(cls, data: bytes | bytearray | memoryview) -> HTTPRequest:
        """Parse raw request bytes; undecodable bytes are replaced, never rejected."""
        text = bytes(data).decode("utf-8", errors="replace")
        request: _Request = GetRequest("", None)
        for line in text.split("\n"):
            line = line.removesuffix("\r")
            if line.startswith("GET "):
                target = next(
                    (token for token in line[4:].split() if token.startswith("/")), ""
                )
                target = target.replace("%20", " ")
                path, _, query = target.partition("?")
                request = GetRequest(path, query or None)
            elif line.startswith(_KEY_HEADER):
                request = WebSocketUpgrade(line[len(_KEY_HEADER):])
                break
        return cls(request)


_CONTENT_TYPES: dict[str, bytes] = {
    "apng": b"image/apng",
    "png": b"image/png",
    "webp": b"image/webp",
    "gif": b"image/gif",
    "jpeg": b"image/jpeg",
    "svh": b"image/svg+xml",
    "avif": b"image/avif",
    "zip": b"application/zip",
    "json": b"text/json",
    "js": b"text/javascript",
    "wasm": b"application/wasm",
    "html": b"text/html",
    "pdf": b"application/pdf",
    "mp3": b"audio/mpeg",
    "mp4": b"audio/mp4",
    "ogg": b"audio/ogg",
    "wav": b"audio/wav",
    "ico": b"image/vnd.microsoft.icon",
}


def format_response(content_type: bytes, content: bytes) -> bytes:
    """Build a ``200 OK`` response carrying ``content``."""
    return b"".join(
        (
            b"HTTP/1.1 200 OK\r\n",
            b"Content-Type: ",
            content_type,
            b"\r\ncharset=UTF-8\r\nContent-Length: ",
            str(len(content)).encode("ascii"),
            b"\r\n\r\n",
            content,
        )
    )


def content_type_for(path: str | os.PathLike[str]) -> bytes:
    """Pick a content type from the file extension; no extension means HTML."""
    suffix = Path(path).suffix
    if not suffix:
        return b"text/html"
    return _CONTENT_TYPES.get(suffix[1:], b"text/plain")


def _add_directory(archive: zipfile.ZipFile, directory: Path, base: Path) -> None:
    for entry in sorted(directory.iterdir()):
        relative = entry.relative_to(base).as_posix()
        if entry.is_dir():
            archive.writestr(zipfile.ZipInfo(relative + "/"), b"")
            _add_directory(archive, entry, base)
        else:
            archive.write(entry, relative)


def zip_directory(path: str | os.PathLike[str]) -> bytes:
    """Pack a directory tree, recursively and deflated, into ZIP bytes."""
    base = Path(path)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        _add_directory(archive, base, base)
    return buffer.getvalue()


def format_content(path: str | os.PathLike[str]) -> bytes | None:
    """Build a full response for a file, or a ZIP download for a directory.

    Returns None when the path cannot be read.
    """
    target = Path(path)
    if target.is_dir():
        try:
            data = zip_directory(target)
        except OSError:
            return None
        if not target.name:
            return None
        headers = (
            "HTTP/1.1 200 OK\r\n"
            "Content-Type: application/zip\r\n"
            f'Content-Disposition: attachment; filename="{target.name}.zip"\r\n'
            f"Content-Length: {len(data)}\r\n\r\n"
        )
        return headers.encode("utf-8") + data

    try:
        content = target.read_bytes()
    except OSError:
        return None
    return format_response(content_type_for(target), content)
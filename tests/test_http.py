import io
import zipfile

from iron_oxide.http import (
    GetRequest,
    HTTPRequest,
    WebSocketUpgrade,
    content_type_for,
    format_content,
    format_response,
    zip_directory,
)


def test_parse_get_with_query_and_space():
    raw = b"GET /my%20file.html?a=1 HTTP/1.1\r\nHost: localhost\r\n\r\n"
    parsed = HTTPRequest.parse(raw)
    assert parsed.request == GetRequest("/my file.html", "a=1")
    assert parsed.host is None


def test_parse_get_without_query():
    parsed = HTTPRequest.parse(b"GET /index.html HTTP/1.1\r\n\r\n")
    assert parsed.request == GetRequest("/index.html", None)


def test_parse_without_request_line_defaults_to_empty_get():
    parsed = HTTPRequest.parse(b"Host: localhost\r\n\r\n")
    assert parsed.request == GetRequest("", None)


def test_parse_get_without_path_token():
    parsed = HTTPRequest.parse(b"GET index HTTP/1.1\r\n")
    assert parsed.request == GetRequest("", None)


def test_parse_websocket_upgrade_keeps_rest_of_line():
    raw = b"GET /chat HTTP/1.1\r\nSec-WebSocket-Key: abc==\r\nHost: x\r\n\r\n"
    parsed = HTTPRequest.parse(raw)
    assert isinstance(parsed.request, WebSocketUpgrade)
    assert parsed.request.key == ": abc=="


def test_parse_tolerates_invalid_utf8():
    parsed = HTTPRequest.parse(b"GET /a\xff HTTP/1.1\r\n")
    assert parsed.request.path.startswith("/a")


def test_format_response_layout():
    response = format_response(b"text/plain", b"hi there")
    assert response.startswith(b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n")
    assert b"Content-Length: 8\r\n\r\n" in response
    assert response.endswith(b"\r\n\r\nhi there")


def test_content_type_for_known_and_unknown():
    assert content_type_for("a/b/picture.png") == b"image/png"
    assert content_type_for("script.js") == b"text/javascript"
    assert content_type_for("notes.txt") == b"text/plain"
    assert content_type_for("README") == b"text/html"


def test_format_content_file(tmp_path):
    page = tmp_path / "page.html"
    page.write_bytes(b"<p>x</p>")
    assert format_content(page) == format_response(b"text/html", b"<p>x</p>")


def test_format_content_missing_file(tmp_path):
    assert format_content(tmp_path / "missing.png") is None


def test_zip_directory_round_trip(tmp_path):
    root = tmp_path / "site"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"alpha")
    (root / "sub" / "b.txt").write_bytes(b"beta")
    data = zip_directory(root)
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        assert set(archive.namelist()) == {"a.txt", "sub/", "sub/b.txt"}
        assert archive.read("sub/b.txt") == b"beta"
        assert archive.getinfo("a.txt").compress_type == zipfile.ZIP_DEFLATED


def test_format_content_directory(tmp_path):
    root = tmp_path / "docs"
    root.mkdir()
    (root / "x.txt").write_bytes(b"xx")
    response = format_content(root)
    head, _, body = response.partition(b"\r\n\r\n")
    assert b'filename="docs.zip"' in head
    assert f"Content-Length: {len(body)}".encode() in head
    with zipfile.ZipFile(io.BytesIO(body)) as archive:
        assert archive.read("x.txt") == b"xx"
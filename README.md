# iron_oxide

A small toolbox of plain-Python building blocks with no third-party
dependencies.

## Modules

- `iron_oxide.fixed_vec` – `FixedVec`, a sequence whose elements can change
  but whose length cannot. Build one with `FixedVec(values)`,
  `FixedVec.zeros(n)`, `FixedVec.with_value(n, value)` or
  `FixedVec.default(n, factory)` (the constructors other than `FixedVec(...)`
  reject a length below 1), or with the `fixed_vec(*elements)` helper.
  Indexing is bounds-checked (negative indices raise `IndexError`), `+` and
  `+=` work element-wise on vectors of equal length (otherwise `ValueError`),
  and `last()`, `zero()`, `copy()` and `to_list()` are available.
- `iron_oxide.matrix` – `Matrix`, a row-major float matrix. `m[r, c]` reads
  or writes one element, `m[r]` returns a copy of a row and `m[r] = [...]`
  replaces one. It offers `mul` (also `@`), `transpose`, `add`,
  `add_inplace`, `add_inplace_scaled`, `sub_inplace`, `hadamard`,
  `hadamard_new`, `concat_horizontal`, `row_mul`, `scale`, `clip`, `clear`,
  `sigmoid` and `tanh`, plus `Matrix.zeros`, `Matrix.random` (values uniform
  in [-1, 1) times `scale`) and `Matrix.from_list`. Shape mismatches raise
  `ValueError`.
- `iron_oxide.vec3d` – `Vec3D`, a dense three-dimensional float grid,
  zero-filled on creation and addressed as `grid[depth, row, col]` or with
  `get` / `set`.
- `iron_oxide.formats` – frozen `RGB`, `RGBA` and `Color` values with named
  constants (`RGBA.TRANSPARENT`, `Color.WHITE`, …), conversions
  (`as_color`, `to_rgb`, `RGBA.as_u32`) and `Color.rgb` / `Color.rgba` for
  building float colours from 8-bit channels.
- `iron_oxide.byte_io` – `ByteReader` reads big- and little-endian integers,
  booleans, strings and raw bytes while advancing `position`; reading past the
  end raises `EOFError`. `ByteWriter` appends the matching encodings and
  returns the result from `finish()`.
- `iron_oxide.http` – `HTTPRequest.parse` turns raw request bytes into a
  `GetRequest(path, query)` or a `WebSocketUpgrade(key)` (`key` is the rest of
  the `Sec-WebSocket-Key` header line as received). `format_response` builds a
  `200 OK` response, `content_type_for` picks a content type from a file
  extension, `zip_directory` packs a directory tree into ZIP bytes, and
  `format_content` returns a complete response for a file, a ZIP download for
  a directory, or `None` when the path cannot be read.
- `iron_oxide.websocket` – `accept_key` for the handshake, `encode_frame` and
  `payload_length` for frames, and `WebSocket`, which answers the upgrade
  (`WebSocket.try_connect`), queues outgoing messages (`send`, `send_ping`,
  `send_pong`, written by `flush`), decodes masked client frames
  (`process_frame`, reassembling fragmented messages and answering pings and
  close frames) and drives a connection with `WebSocket.run(interface)`.
  Subclass `WebSocketInterface` to receive `on_message` and `on_closed`
  callbacks.

## Examples

```python
from iron_oxide.fixed_vec import FixedVec, fixed_vec

a = FixedVec.with_value(3, 2)
a += fixed_vec(1, 1, 1)
print(a.to_list())          # [3, 3, 3]
```

```python
from iron_oxide.matrix import Matrix

m = Matrix.from_list([1.0, 2.0, 3.0, 4.0], 2, 2)
print((m @ m.transpose()).to_list())   # [5.0, 11.0, 11.0, 25.0]
```

```python
from iron_oxide.byte_io import ByteReader, ByteWriter

writer = ByteWriter()
writer.write_be_u16(0x1234)
writer.write_u32(7)
reader = ByteReader(writer.finish())
assert reader.read_be_u16() == 0x1234
assert reader.read_le_u32() == 7
```

```python
from iron_oxide.websocket import accept_key, encode_frame, MessageDataType

print(accept_key("dGhlIHNhbXBsZSBub25jZQ=="))   # s3pPLMBiTxaQ9kYGzzhZRbK+xOo=
frame = encode_frame(b"hello", MessageDataType.TEXT)
```

## What it does not do

There is no server here: nothing opens a listening socket or accepts
connections. The HTTP helpers only parse requests and build response bytes,
and `WebSocket` works on a stream socket the caller has already connected and
upgraded. Only GET requests and WebSocket upgrades are recognised by
`HTTPRequest.parse`; request bodies are not read.

## Running the tests

```
pip install iron_oxide[test]
pytest
```
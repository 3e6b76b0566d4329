"""String helpers: padding, UTF-8 coding, validation and trimming."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_FORBIDDEN_FILENAME_CHARS = frozenset('/\\<>:"|?*')


def lfill(s: str, length: int, c: str) -> str:
    """Pad s on the left with c up to length characters."""
    if len(s) >= length:
        return s
    return c * (length - len(s)) + s


def rfill(s: str, length: int, c: str) -> str:
    """Pad s on the right with c up to length characters."""
    if len(s) >= length:
        return s
    return s + c * (length - len(s))


def encode_utf8(c: int) -> bytes:
    """Encode one code point as 1 to 4 UTF-8 bytes."""
    if c < 0x80:
        return bytes([c & 0x7F])
    if c < 0x0800:
        return bytes([((c >> 6) & 0x1F) | 0xC0, (c & 0x3F) | 0x80])
    if c < 0x010000:
        return bytes([
            ((c >> 12) & 0x0F) | 0xE0,
            ((c >> 6) & 0x3F) | 0x80,
            (c & 0x3F) | 0x80,
        ])
    return bytes([
        ((c >> 18) & 0x07) | 0xF0,
        ((c >> 12) & 0x3F) | 0x80,
        ((c >> 6) & 0x3F) | 0x80,
        (c & 0x3F) | 0x80,
    ])


def _sequence_length(lead: int) -> tuple[int, int]:
    if lead < 0x80:
        return 1, 0x7F
    if lead & 0xE0 == 0xC0:
        return 2, 0x1F
    if lead & 0xF0 == 0xE0:
        return 3, 0x0F
    if lead & 0xF8 == 0xF0:
        return 4, 0x07
    raise ValueError("utf-8 decode error")


def decode_utf8(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode the code point starting at offset; return (code point, byte count)."""
    size, mask = _sequence_length(data[offset])
    if offset + size > len(data):
        raise ValueError("utf-8 decode error")
    code = data[offset] & mask
    for byte in data[offset + 1:offset + size]:
        if byte & 0xC0 != 0x80:
            raise ValueError("utf-8 decode error")
        code = (code << 6) | (byte & 0x3F)
    return code, size


def wstr2str_utf8(ws: str) -> bytes:
    """Encode a string to UTF-8 bytes character by character."""
    return b"".join(encode_utf8(ord(ch)) for ch in ws)


def str2wstr_utf8(data: bytes) -> str:
    """Decode UTF-8 bytes into a string."""
    chars = []
    pos = 0
    while pos < len(data):
        code, size = decode_utf8(data, pos)
        chars.append(chr(code))
        pos += size
    return "".join(chars)


def is_integer(text: str) -> bool:
    """Return True if every character is an ASCII decimal digit."""
    return all("0" <= ch <= "9" for ch in text)


def is_valid_filename(name: str) -> bool:
    """Return False if name holds control or path-reserved characters."""
    return not any(
        ord(ch) < 31 or ch in _FORBIDDEN_FILENAME_CHARS for ch in name
    )


def ltrim(s: str) -> str:
    """Strip leading ASCII whitespace."""
    return s.lstrip(_WHITESPACE)


def rtrim(s: str) -> str:
    """Strip trailing ASCII whitespace."""
    return s.rstrip(_WHITESPACE)


def trim(s: str) -> str:
    """Strip ASCII whitespace on both sides."""
    return ltrim(rtrim(s))
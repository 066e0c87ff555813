"""Byte-buffer memory primitives in the style of memcpy, memset, strlen and friends."""

from __future__ import annotations

_NUL = b"\0"


def _check_region(buf_len: int, offset: int, n: int, what: str) -> None:
    if n < 0 or offset < 0 or offset + n > buf_len:
        raise IndexError(
            f"{what} region [{offset}, {offset + n}) out of bounds for length {buf_len}"
        )


def memcpy(
    dst: bytearray,
    src: bytes | bytearray,
    n: int,
    dst_offset: int = 0,
    src_offset: int = 0,
) -> bytearray:
    """Copy ``n`` bytes from ``src`` to ``dst`` at the given offsets; return ``dst``."""
    _check_region(len(dst), dst_offset, n, "destination")
    _check_region(len(src), src_offset, n, "source")
    dst[dst_offset : dst_offset + n] = src[src_offset : src_offset + n]
    return dst


def memset(dst: bytearray, c: int, n: int, offset: int = 0) -> bytearray:
    """Set ``n`` bytes of ``dst`` starting at ``offset`` to ``c``; return ``dst``."""
    if not 0 <= c <= 0xFF:
        raise ValueError(f"byte value out of range: {c}")
    _check_region(len(dst), offset, n, "destination")
    dst[offset : offset + n] = bytes([c]) * n
    return dst


def memmove(
    dst: bytearray,
    src: bytes | bytearray,
    n: int,
    dst_offset: int = 0,
    src_offset: int = 0,
) -> bytearray:
    """Copy ``n`` bytes like memcpy, correct even when both regions share a buffer."""
    _check_region(len(dst), dst_offset, n, "destination")
    _check_region(len(src), src_offset, n, "source")
    # Slicing takes a snapshot of the source first, so overlap is harmless.
    dst[dst_offset : dst_offset + n] = bytes(src[src_offset : src_offset + n])
    return dst


def strlen(s: bytes | bytearray) -> int:
    """Return the length of a NUL-terminated byte string, not counting the NUL."""
    position = s.find(_NUL)
    if position < 0:
        raise ValueError("byte string is not NUL-terminated")
    return position


def strcmp(s1: bytes | bytearray, s2: bytes | bytearray) -> int:
    """Compare two NUL-terminated byte strings.

    Returns 0 when equal, otherwise the difference of the first differing bytes.
    """
    left = bytes(s1[: strlen(s1) + 1])
    right = bytes(s2[: strlen(s2) + 1])
    return next((a - b for a, b in zip(left, right) if a != b), 0)
"""Helpers for building disk images: sizes, UUIDs, holes and file writes."""

import os
import re
import stat
import uuid

_U64 = (1 << 64) - 1

_NUMBER = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_HOLE = re.compile(r"\s*\(\s*([0-9skKMG]+)\s*;\s*([0-9skKMG]+)\s*\)\s*")
_DASHES = frozenset((8, 13, 18, 23))
_HEX = frozenset("0123456789abcdefABCDEF")


def _parse_unsigned(text):
    """Read a leading number the way strtoull does with base 0.

    Returns the value (wrapped to 64 bits) and the index just past it.
    """
    match = _NUMBER.match(text)
    if not match:
        return 0, 0
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    value = min(value, _U64)
    if sign == "-":
        value = -value & _U64
    return value, match.end()


def parse_size(text, allow_percent=False):
    """Parse a size with an optional G, M, K/k (binary) or s (512-byte sector) suffix.

    With ``allow_percent`` a trailing ``%`` is accepted and the result is a
    ``(value, is_percent)`` pair; otherwise the plain value is returned.
    """
    value, end = _parse_unsigned(text)
    suffix = text[end:end + 1]
    percent = False
    if suffix in ("G", "M", "K", "k"):
        value *= 1024 ** ("KkMG".index(suffix) // 2 + 1 if suffix in "MG" else 1)
        if suffix == "M":
            value = _parse_unsigned(text)[0] * 1024 * 1024
        elif suffix == "G":
            value = _parse_unsigned(text)[0] * 1024 * 1024 * 1024
    elif suffix == "s":
        value *= 512
    elif suffix == "":
        pass
    elif suffix == "%" and allow_percent:
        percent = True
    else:
        raise ValueError(f"Invalid size suffix '{text[end:]}' in '{text}'")
    value &= _U64
    if allow_percent:
        return value, percent
    return value


def uuid_validate(text):
    """Return True if ``text`` is a 36-character dashed hexadecimal UUID."""
    if len(text) != 36:
        return False
    return all(
        (char == "-") if pos in _DASHES else (char in _HEX)
        for pos, char in enumerate(text)
    )


def uuid_parse(text):
    """Convert a UUID string to the 16 mixed-endian bytes stored in a GPT."""
    if not uuid_validate(text):
        raise ValueError(f"invalid UUID: {text}")
    return uuid.UUID(text).bytes_le


def uuid_random():
    """Return a new random (version 4) UUID string."""
    return str(uuid.uuid4())


def parse_hole(spec):
    """Parse a hole specification ``(<start>;<end>)`` into a ``(start, end)`` pair."""
    match = _HOLE.fullmatch(spec)
    if not match:
        raise ValueError(
            f"invalid hole specification '{spec}', use '(<start>;<end>)'"
        )
    start, end = match.groups()
    return parse_size(start), parse_size(end)


def _round_up(value, align):
    return -(-value // align) * align


def _scan_size(path, blocksize):
    try:
        entries = list(os.scandir(path))
    except OSError:
        return 0
    size = 0
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            size += _scan_size(entry.path, blocksize)
        elif entry.is_file(follow_symlinks=False):
            try:
                size += _round_up(entry.stat(follow_symlinks=False).st_size, blocksize)
            except OSError:
                continue
    return size + blocksize


def dir_size(path, blocksize=4096):
    """Estimate the space a directory tree needs, counting whole blocks.

    Every directory costs one block and every regular file its size rounded up
    to a block; symbolic links and special files are not counted.
    """
    if not os.path.isdir(path):
        raise FileNotFoundError(f"failed to open '{os.fspath(path)}'")
    return _scan_size(path, blocksize)


def _is_block_device(path):
    try:
        return stat.S_ISBLK(os.stat(path).st_mode)
    except OSError:
        return False


def _open_output(path):
    flags = os.O_WRONLY | getattr(os, "O_BINARY", 0)
    flags |= os.O_EXCL if _is_block_device(path) else os.O_CREAT
    return os.fdopen(os.open(path, flags, 0o666), "wb")


def extend_file(path, size):
    """Grow the file at ``path`` to ``size`` bytes, padding with zeros."""
    with _open_output(path) as out:
        current = out.seek(0, os.SEEK_END)
        if current > size:
            raise ValueError("output file is larger than requested size")
        if current < size:
            out.truncate(size)


def insert_data(path, data, offset):
    """Write ``data`` into the file at ``path`` starting at ``offset``."""
    with _open_output(path) as out:
        out.seek(offset)
        out.write(bytes(data))
"""RC6-32/r/b block cipher with little-endian words."""

import struct

_P32 = 0xB7E15163
_Q32 = 0x9E3779B9
_MASK = 0xFFFFFFFF
_LG_W = 5
_BLOCK = struct.Struct("<4I")

BLOCK_SIZE = 16


def rotl32(a, n):
    """Rotate a 32-bit word left by n (taken modulo 32)."""
    n &= 0x1F
    a &= _MASK
    return ((a << n) | (a >> (32 - n))) & _MASK


def rotr32(a, n):
    """Rotate a 32-bit word right by n (taken modulo 32)."""
    n &= 0x1F
    a &= _MASK
    return ((a >> n) | (a << (32 - n))) & _MASK


class RC6:
    """RC6 with a key schedule built from ``key`` and a chosen round count."""

    def __init__(self, key, rounds=20):
        key = bytes(key)
        if rounds < 0 or rounds > 125:
            raise ValueError("RC6 supports between 0 and 125 rounds")
        if not key:
            raise ValueError("RC6 key must not be empty")
        if len(key) * 8 > 0xFFFF:
            raise ValueError("RC6 key is too long")
        self.rounds = rounds

        padded = key + b"\0" * (-len(key) % 4)
        words = list(struct.unpack(f"<{len(padded) // 4}I", padded))
        c = len(words)
        t = 2 * rounds + 4

        s = [_P32]
        for _ in range(1, t):
            s.append((s[-1] + _Q32) & _MASK)

        a = b = i = j = 0
        for _ in range(3 * max(c, t)):
            a = s[i] = rotl32(s[i] + a + b, 3)
            b = words[j] = rotl32(words[j] + a + b, a + b)
            i = (i + 1) % t
            j = (j + 1) % c
        self._s = s

    def encrypt_block(self, block):
        """Encrypt one 16-byte block."""
        a, b, c, d = self._unpack(block)
        s = self._s
        b = (b + s[0]) & _MASK
        d = (d + s[1]) & _MASK
        for i in range(1, self.rounds + 1):
            t = rotl32(b * (2 * b + 1), _LG_W)
            u = rotl32(d * (2 * d + 1), _LG_W)
            a = (rotl32(a ^ t, u) + s[2 * i]) & _MASK
            c = (rotl32(c ^ u, t) + s[2 * i + 1]) & _MASK
            a, b, c, d = b, c, d, a
        a = (a + s[2 * self.rounds + 2]) & _MASK
        c = (c + s[2 * self.rounds + 3]) & _MASK
        return _BLOCK.pack(a, b, c, d)

    def decrypt_block(self, block):
        """Decrypt one 16-byte block."""
        a, b, c, d = self._unpack(block)
        s = self._s
        c = (c - s[2 * self.rounds + 3]) & _MASK
        a = (a - s[2 * self.rounds + 2]) & _MASK
        for i in range(self.rounds, 0, -1):
            a, b, c, d = d, a, b, c
            u = rotl32(d * (2 * d + 1), _LG_W)
            t = rotl32(b * (2 * b + 1), _LG_W)
            c = rotr32((c - s[2 * i + 1]) & _MASK, t) ^ u
            a = rotr32((a - s[2 * i]) & _MASK, u) ^ t
        d = (d - s[1]) & _MASK
        b = (b - s[0]) & _MASK
        return _BLOCK.pack(a, b, c, d)

    def encrypt(self, data):
        """Encrypt every whole block of ``data``; a trailing partial block is kept as is."""
        return self._apply(self.encrypt_block, data)

    def decrypt(self, data):
        """Decrypt every whole block of ``data``; a trailing partial block is kept as is."""
        return self._apply(self.decrypt_block, data)

    @staticmethod
    def _unpack(block):
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"RC6 block must be {BLOCK_SIZE} bytes")
        return _BLOCK.unpack(bytes(block))

    @staticmethod
    def _apply(func, data):
        data = bytes(data)
        whole = len(data) - len(data) % BLOCK_SIZE
        parts = [
            func(data[pos:pos + BLOCK_SIZE])
            for pos in range(0, whole, BLOCK_SIZE)
        ]
        parts.append(data[whole:])
        return b"".join(parts)
"""Twofish block cipher with the fixed round-key table used by IMAGEWTY images."""

import struct

_MASK = 0xFFFFFFFF
_BLOCK = struct.Struct("<4I")

BLOCK_SIZE = 16

# Round subkeys. The key schedule only derives the S-box key from the user
# key; the whitening and round subkeys always come from this table.
_L_KEY = (
    0x4F1A3415, 0xBF541F51,
    0x86FDCE14, 0xE354F4A1,
    0x616AADF9, 0xF310EE3F,
    0xAC74403F, 0xC562A030,
    0xB76FF9F8, 0xE9B06896,
    0x70C408A2, 0xFE3AEDAC,
    0x5FA06E5E, 0x61FEE97A,
    0xA15CBA01, 0x3583FAFA,
    0xCDB4985A, 0xE7172864,
    0x7C003D57, 0xBF9F1B71,
    0xCFF1F4AB, 0xBDFF4376,
    0x57BC905D, 0xE3131A0E,
    0x1007C7EA, 0x4D054E0E,
    0x76BAA279, 0x35AEB6C0,
    0x398F5E03, 0x3A2C1D70,
    0xD6DFBCF8, 0xCAF94CF4,
    0xF67C3460, 0xC808ECD0,
    0xD4360D82, 0x5168CF37,
    0xF7A02DBF, 0xDF8968AF,
    0x27135EF4, 0x41234D48,
)

# GF(2^8) with modular polynomial x^8 + x^6 + x^5 + x^3 + 1.
_G_M = 0x0169
_TAB_5B = (0, _G_M >> 2, _G_M >> 1, (_G_M >> 1) ^ (_G_M >> 2))
_TAB_EF = (0, (_G_M >> 1) ^ (_G_M >> 2), _G_M >> 1, _G_M >> 2)

# Reed-Solomon generator modulus.
_G_MOD = 0x0000014D

_ROR4 = (0, 8, 1, 9, 2, 10, 3, 11, 4, 12, 5, 13, 6, 14, 7, 15)
_ASHX = (0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12, 5, 14, 7)

_QT0 = ((8, 1, 7, 13, 6, 15, 3, 2, 0, 11, 5, 9, 14, 12, 10, 4),
        (2, 8, 11, 13, 15, 7, 6, 14, 3, 1, 9, 4, 0, 10, 12, 5))
_QT1 = ((14, 12, 11, 8, 1, 2, 3, 5, 15, 4, 10, 6, 7, 0, 9, 13),
        (1, 14, 2, 11, 4, 12, 3, 7, 6, 13, 10, 5, 15, 9, 0, 8))
_QT2 = ((11, 10, 5, 14, 6, 13, 9, 0, 12, 8, 15, 3, 2, 4, 7, 1),
        (4, 12, 7, 5, 1, 6, 9, 10, 0, 14, 13, 8, 2, 11, 3, 15))
_QT3 = ((13, 7, 15, 4, 1, 2, 6, 14, 9, 11, 3, 0, 8, 5, 12, 10),
        (11, 9, 5, 1, 12, 3, 13, 14, 6, 4, 7, 15, 2, 0, 8, 10))

# Which q permutation (per byte column) is applied before XOR with s_key[k].
_STAGES = {
    3: (1, 0, 0, 1),
    2: (1, 1, 0, 0),
    1: (0, 1, 0, 1),
    0: (0, 0, 1, 1),
}


def qp(n, x):
    """Evaluate the Twofish q0 (n=0) or q1 (n=1) byte permutation."""
    a0 = x >> 4
    b0 = x & 15
    a1 = a0 ^ b0
    b1 = _ROR4[b0] ^ _ASHX[a0]
    a2 = _QT0[n][a1]
    b2 = _QT1[n][b1]
    a3 = a2 ^ b2
    b3 = _ROR4[b2] ^ _ASHX[a2]
    a4 = _QT2[n][a3]
    b4 = _QT3[n][b3]
    return ((b4 << 4) | a4) & 0xFF


_Q = tuple(tuple(qp(n, i) for i in range(256)) for n in (0, 1))


def _ffm_5b(x):
    return x ^ (x >> 2) ^ _TAB_5B[x & 3]


def _ffm_ef(x):
    return x ^ (x >> 1) ^ (x >> 2) ^ _TAB_EF[x & 3]


def _gen_mtab():
    m0, m1, m2, m3 = [], [], [], []
    for i in range(256):
        f01 = _Q[1][i]
        f5b = _ffm_5b(f01)
        fef = _ffm_ef(f01)
        m0.append(f01 + (f5b << 8) + (fef << 16) + (fef << 24))
        m2.append(f5b + (fef << 8) + (f01 << 16) + (fef << 24))

        f01 = _Q[0][i]
        f5b = _ffm_5b(f01)
        fef = _ffm_ef(f01)
        m1.append(fef + (fef << 8) + (f5b << 16) + (f01 << 24))
        m3.append(f5b + (f01 << 8) + (fef << 16) + (f5b << 24))
    return tuple(tuple(col) for col in (m0, m1, m2, m3))


_M = _gen_mtab()


def _byte(x, n):
    return (x >> (8 * n)) & 0xFF


def _rotl(x, n):
    x &= _MASK
    return ((x << n) | (x >> (32 - n))) & _MASK


def _rotr(x, n):
    x &= _MASK
    return ((x >> n) | (x << (32 - n))) & _MASK


def mds_rem(p0, p1):
    """Reed-Solomon remainder of the 64-bit value (p1:p0), used for the S-box key."""
    p0 &= _MASK
    p1 &= _MASK
    for _ in range(8):
        t = p1 >> 24
        p1 = ((p1 << 8) | (p0 >> 24)) & _MASK
        p0 = (p0 << 8) & _MASK
        u = t << 1
        if t & 0x80:
            u ^= _G_MOD
        p1 ^= t ^ ((u << 16) & _MASK)
        u ^= t >> 1
        if t & 0x01:
            u ^= _G_MOD >> 1
        p1 ^= ((u << 24) | (u << 8)) & _MASK
    return p1 & _MASK


class Twofish:
    """Twofish keyed by a list of 32-bit words; ``key_len`` is the key size in bits."""

    def __init__(self, key, key_len=None):
        words = [w & _MASK for w in key]
        if key_len is None:
            key_len = 32 * len(words)
        k_len = key_len // 64
        if k_len not in (2, 3, 4):
            raise ValueError("Twofish key length must be 128, 192 or 256 bits")
        if len(words) < 2 * k_len:
            raise ValueError("Twofish key has fewer words than the key length requires")
        self.k_len = k_len

        s_key = [0] * k_len
        for i in range(k_len):
            s_key[k_len - i - 1] = mds_rem(words[2 * i], words[2 * i + 1])
        self.s_key = tuple(s_key)
        self.round_keys = _L_KEY

        self._mk = tuple(
            tuple(_M[col][self._sbox(col, i)] for i in range(256))
            for col in range(4)
        )

    def _sbox(self, col, x):
        for k in reversed(range(self.k_len)):
            x = _Q[_STAGES[k][col]][x] ^ _byte(self.s_key[k], col)
        return x

    def h(self, x):
        """The key-dependent h function applied to a 32-bit word with the S-box key."""
        result = 0
        for col in range(4):
            result ^= _M[col][self._sbox(col, _byte(x, col))]
        return result

    def _g0(self, x):
        mk = self._mk
        return (mk[0][_byte(x, 0)] ^ mk[1][_byte(x, 1)]
                ^ mk[2][_byte(x, 2)] ^ mk[3][_byte(x, 3)])

    def _g1(self, x):
        mk = self._mk
        return (mk[0][_byte(x, 3)] ^ mk[1][_byte(x, 0)]
                ^ mk[2][_byte(x, 1)] ^ mk[3][_byte(x, 2)])

    def encrypt_block(self, block):
        """Encrypt one 16-byte block."""
        lk = self.round_keys
        b0, b1, b2, b3 = self._unpack(block)
        blk = [b0 ^ lk[0], b1 ^ lk[1], b2 ^ lk[2], b3 ^ lk[3]]
        for i in range(8):
            t1 = self._g1(blk[1])
            t0 = self._g0(blk[0])
            blk[2] = _rotr(blk[2] ^ ((t0 + t1 + lk[4 * i + 8]) & _MASK), 1)
            blk[3] = _rotl(blk[3], 1) ^ ((t0 + 2 * t1 + lk[4 * i + 9]) & _MASK)
            t1 = self._g1(blk[3])
            t0 = self._g0(blk[2])
            blk[0] = _rotr(blk[0] ^ ((t0 + t1 + lk[4 * i + 10]) & _MASK), 1)
            blk[1] = _rotl(blk[1], 1) ^ ((t0 + 2 * t1 + lk[4 * i + 11]) & _MASK)
        return _BLOCK.pack(blk[2] ^ lk[4], blk[3] ^ lk[5],
                           blk[0] ^ lk[6], blk[1] ^ lk[7])

    def decrypt_block(self, block):
        """Decrypt one 16-byte block."""
        lk = self.round_keys
        b0, b1, b2, b3 = self._unpack(block)
        blk = [b0 ^ lk[4], b1 ^ lk[5], b2 ^ lk[6], b3 ^ lk[7]]
        for i in range(7, -1, -1):
            t1 = self._g1(blk[1])
            t0 = self._g0(blk[0])
            blk[2] = _rotl(blk[2], 1) ^ ((t0 + t1 + lk[4 * i + 10]) & _MASK)
            blk[3] = _rotr(blk[3] ^ ((t0 + 2 * t1 + lk[4 * i + 11]) & _MASK), 1)
            t1 = self._g1(blk[3])
            t0 = self._g0(blk[2])
            blk[0] = _rotl(blk[0], 1) ^ ((t0 + t1 + lk[4 * i + 8]) & _MASK)
            blk[1] = _rotr(blk[1] ^ ((t0 + 2 * t1 + lk[4 * i + 9]) & _MASK), 1)
        return _BLOCK.pack(blk[2] ^ lk[0], blk[3] ^ lk[1],
                           blk[0] ^ lk[2], blk[1] ^ lk[3])

    @staticmethod
    def _unpack(block):
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"Twofish block must be {BLOCK_SIZE} bytes")
        return _BLOCK.unpack(bytes(block))
import pytest

from openixcard.twofish import Twofish, mds_rem, qp


def _fib_key():
    key = [5, 4]
    while len(key) < 32:
        key.append((key[-2] + key[-1]) & 0xFFFFFFFF)
    return key


@pytest.mark.parametrize("n", [0, 1])
def test_qp_is_permutation(n):
    assert sorted(qp(n, i) for i in range(256)) == list(range(256))


def test_qp_first_entries_match_twofish_tables():
    assert qp(0, 0) == 0xA9
    assert qp(1, 0) == 0x75


def test_mds_rem_of_zero_is_zero():
    assert mds_rem(0, 0) == 0


@pytest.mark.parametrize(
    "a, b, c, d",
    [
        (0x01234567, 0x89ABCDEF, 0xDEADBEEF, 0x0BADF00D),
        (0xFFFFFFFF, 0, 0, 0xFFFFFFFF),
        (1, 2, 3, 4),
    ],
)
def test_mds_rem_is_linear(a, b, c, d):
    assert mds_rem(a ^ c, b ^ d) == mds_rem(a, b) ^ mds_rem(c, d)


def test_mds_rem_fits_32_bits():
    for p0, p1 in [(0xFFFFFFFF, 0xFFFFFFFF), (0x80000000, 0x80000000)]:
        assert 0 <= mds_rem(p0, p1) <= 0xFFFFFFFF


@pytest.mark.parametrize("key_len", [128, 192, 256])
def test_zero_key_gives_zero_sbox_key(key_len):
    cipher = Twofish([0] * (key_len // 32), key_len)
    assert cipher.s_key == (0,) * (key_len // 64)


@pytest.mark.parametrize("key_len", [128, 192, 256])
def test_round_trip(key_len):
    cipher = Twofish(_fib_key(), key_len)
    for plain in (bytes(16), bytes(range(16)), b"\xff" * 16, b"IMAGEWTY-blocks!"):
        cipher_text = cipher.encrypt_block(plain)
        assert len(cipher_text) == 16
        assert cipher.decrypt_block(cipher_text) == plain


def test_encrypt_changes_block_and_decrypts_back():
    cipher = Twofish(_fib_key(), 256)
    plain = bytes(range(16))
    cipher_text = cipher.encrypt_block(plain)
    assert cipher_text != plain
    assert cipher.decrypt_block(cipher_text) == plain


def test_key_affects_ciphertext():
    plain = bytes(range(16))
    first = Twofish([0] * 4, 128)
    second = Twofish([1, 2, 3, 4], 128)
    c1 = first.encrypt_block(plain)
    c2 = second.encrypt_block(plain)
    assert c1 != c2
    assert first.decrypt_block(c1) == second.decrypt_block(c2) == plain


def test_h_depends_only_on_sbox_key():
    a = Twofish([1, 2, 3, 4, 5, 6, 7, 8], 256)
    b = Twofish([1, 2, 3, 4, 5, 6, 7, 8], 256)
    values = [0, 1, 0x01010101, 0xDEADBEEF, 0xFFFFFFFF]
    assert [a.h(x) for x in values] == [b.h(x) for x in values]
    assert all(0 <= a.h(x) <= 0xFFFFFFFF for x in values)


def test_key_len_defaults_to_word_count():
    explicit = Twofish([9, 8, 7, 6], 128)
    implicit = Twofish([9, 8, 7, 6])
    assert explicit.s_key == implicit.s_key
    assert explicit.encrypt_block(bytes(16)) == implicit.encrypt_block(bytes(16))


@pytest.mark.parametrize("key_len", [64, 100, 320])
def test_invalid_key_length(key_len):
    with pytest.raises(ValueError):
        Twofish([0] * 10, key_len)


def test_key_too_short_for_length():
    with pytest.raises(ValueError):
        Twofish([0, 0], 256)


@pytest.mark.parametrize("size", [0, 15, 17])
def test_bad_block_size(size):
    cipher = Twofish([0] * 4, 128)
    with pytest.raises(ValueError):
        cipher.encrypt_block(bytes(size))
    with pytest.raises(ValueError):
        cipher.decrypt_block(bytes(size))
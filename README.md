# openixcard

Building blocks for working with Allwinner IMAGEWTY firmware images (the
`.img` files produced by the Allwinner BSP): the two block ciphers the format
uses, helpers for writing disk images, and coloured console messages.

The package needs nothing beyond the Python standard library (Python 3.10 or
later).

```
pip install .
```

## Modules

### `openixcard.rc6`

RC6-32/r/b with little-endian 32-bit words.

- `RC6(key, rounds=20)` builds the key schedule from a non-empty byte string
  (0 to 125 rounds; `ValueError` otherwise).
- `encrypt_block(block)` / `decrypt_block(block)` work on exactly 16 bytes.
- `encrypt(data)` / `decrypt(data)` process every whole 16-byte block and keep
  a trailing partial block unchanged.
- `rotl32(a, n)` and `rotr32(a, n)` rotate 32-bit words; `BLOCK_SIZE` is 16.

```python
from openixcard.rc6 import RC6

cipher = RC6(b"placeholder")
ciphertext = cipher.encrypt(b"sixteen byte blk")
assert cipher.decrypt(ciphertext) == b"sixteen byte blk"
```

### `openixcard.twofish`

Twofish in the variant used by IMAGEWTY images: the user key only determines
the S-box key (`s_key`); the whitening and round subkeys (`round_keys`) always
come from a fixed table.

- `Twofish(key, key_len=None)` takes a list of 32-bit words and a key size in
  bits (128, 192 or 256; by default 32 bits per word given).
- `encrypt_block(block)` / `decrypt_block(block)` work on 16 bytes.
- `h(x)` is the key-dependent h function on a 32-bit word.
- `qp(n, x)` evaluates the q0/q1 byte permutations; `mds_rem(p0, p1)` gives
  the Reed-Solomon remainder used for the S-box key.

```python
from openixcard.twofish import Twofish

cipher = Twofish(list(range(8)), 256)
block = bytes(range(16))
assert cipher.decrypt_block(cipher.encrypt_block(block)) == block
```

### `openixcard.genutil`

- `parse_size(text, allow_percent=False)` reads a number (decimal, `0x` hex or
  leading-`0` octal) with an optional `K`/`k`, `M`, `G` (binary multiples) or
  `s` (512-byte sectors) suffix. With `allow_percent` a trailing `%` is also
  accepted and a `(value, is_percent)` pair is returned. Any other suffix
  raises `ValueError`.
- `uuid_validate(text)` checks for a 36-character dashed hexadecimal UUID;
  `uuid_parse(text)` returns its 16 bytes in the mixed-endian order stored in
  a GPT; `uuid_random()` returns a new version 4 UUID string.
- `parse_hole(spec)` turns `"(<start>;<end>)"` into a `(start, end)` pair of
  sizes.
- `dir_size(path, blocksize=4096)` estimates the space a directory tree needs:
  one block per directory plus each regular file rounded up to whole blocks.
- `insert_data(path, data, offset)` writes bytes into a file at an offset,
  creating the file if needed; `extend_file(path, size)` zero-pads a file to
  `size` bytes and raises `ValueError` if it is already larger.

```python
from openixcard.genutil import parse_size, parse_hole

parse_size("4M")            # 4194304
parse_size("50%", True)     # (50, True)
parse_hole("(0;1k)")        # (0, 1024)
```

### `openixcard.log`

`data`, `info`, `debug`, `warning` and `error` print one coloured line to
standard output, prefixed with `[OpenixCard INFO]`, `[OpenixCard DEBUG]` and
so on (`data` prints the message alone, in green).

## What this package does not do

It has no command-line program, and it does not itself unpack IMAGEWTY
images, read their partition tables or convert them into regular disk
images. It provides the ciphers and file helpers such tools are built from.

## Running the tests

```
pip install .[test]
pytest
```
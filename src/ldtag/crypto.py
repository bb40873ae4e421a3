"""UID mixing function and the password/TEA key derivation built on it."""

from collections.abc import Sequence

from .bits import pack_le, reverse_byte_order, rotate_right, u32, unpack_le

UID_LENGTH = 7

# 32-byte password seed; the first 7 bytes are replaced by the UID
PASSWORD_SEED = b"UUUUUUU(c) Copyright LEGO 2014AA"

# 24-byte key seed, one scramble() call per key word
KEY_SEED = bytes([
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xB7,
    0xD5, 0xD7, 0xE6, 0xE7, 0xBA, 0x3C, 0xA8, 0xD8,
    0x75, 0x47, 0x68, 0xCF, 0x23, 0xE9, 0xFE, 0xAA,
])

SENTINEL = 0xAA
MAX_WORDS = 8

# scramble() word counts for key words 0..3
KEY_WORD_COUNTS = (3, 4, 5, 6)


class InvalidArgument(ValueError):
    """Raised for malformed input: bad UID, word count or record size."""


def check_uid(uid: Sequence[int]) -> bytes:
    """Return the UID as bytes, raising InvalidArgument unless it is 7 bytes."""
    if len(uid) != UID_LENGTH:
        raise InvalidArgument(f"UID must be {UID_LENGTH} bytes, got {len(uid)}")
    try:
        return bytes(uid)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"UID must contain byte values: {e}") from e


def mix(seed: bytes, word_count: int) -> int:
    """
    Fold the first word_count little-endian words of seed into one word.

    acc = b + ror(acc, 25) + ror(acc, 10) - acc, wrapping at 32 bits.
    Not a hash in any useful sense; only bit-exact output matters.
    """
    if not 0 <= word_count <= MAX_WORDS:
        raise InvalidArgument(f"word count must be 0..{MAX_WORDS}, got {word_count}")
    if len(seed) < word_count * 4:
        raise InvalidArgument(
            f"seed of {len(seed)}B is too short for {word_count} words"
        )

    acc = 0
    for i in range(word_count):
        b = pack_le(seed[i * 4:i * 4 + 4])
        v4 = rotate_right(acc, 25)
        v5 = rotate_right(acc, 10)
        acc = u32(b + v4 + v5 - acc)
    return acc


def derive_password(uid: Sequence[int]) -> bytes:
    """4-byte PWD_AUTH password for a tag."""
    seed = bytearray(PASSWORD_SEED)
    assert len(seed) == 32
    seed[:UID_LENGTH] = check_uid(uid)
    seed[30] = SENTINEL
    seed[31] = SENTINEL
    return unpack_le(mix(seed, 8))


def derive_password_int(uid: Sequence[int]) -> int:
    """Password as a word (first password byte least significant)."""
    return pack_le(derive_password(uid))


def scramble(uid: Sequence[int], count: int) -> int:
    """
    Run the mixer over the key seed with the UID spliced in.

    The sentinel lands on the last byte of the last consumed word, so
    each count sees a different seed. count=0 places no sentinel.
    """
    if not 0 <= count <= MAX_WORDS:
        raise InvalidArgument(f"scramble count must be 0..{MAX_WORDS}, got {count}")

    seed = bytearray(KEY_SEED)
    assert len(seed) == 24
    seed[:UID_LENGTH] = check_uid(uid)
    if count > 0:
        # Counts 7 and 8 run past the 24-byte seed
        if count * 4 > len(seed):
            seed.extend(bytes(count * 4 - len(seed)))
        seed[count * 4 - 1] = SENTINEL
    return mix(seed, count)


def derive_tea_key(uid: Sequence[int]) -> tuple[int, int, int, int]:
    """128-bit TEA key as four words, each byte-reversed."""
    uid = check_uid(uid)
    k0, k1, k2, k3 = (
        reverse_byte_order(scramble(uid, count)) for count in KEY_WORD_COUNTS
    )
    return k0, k1, k2, k3

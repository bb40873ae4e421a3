"""Encrypt and decrypt the 8-byte item record stored on a tag.

Record plaintext is the item id twice: [item_id, item_id]. After TEA
decryption the two words must agree, otherwise the pages are blank,
corrupted or were written for a different UID.
"""

import logging
from collections.abc import Sequence

from .bits import MASK32, pack_le, reverse_byte_order, unpack_le
from .crypto import InvalidArgument, check_uid, derive_tea_key
from .tea import tea_decrypt, tea_encrypt

logger = logging.getLogger(__name__)

RECORD_LENGTH = 8


def _cipher_key(uid: Sequence[int]) -> tuple[int, ...]:
    """
    Key as consumed by TEA.

    derive_tea_key() byte-reverses every word; the codec reverses them
    back, so TEA runs on the raw scramble() output.
    """
    return tuple(reverse_byte_order(k) for k in derive_tea_key(uid))


def encrypt_record(uid: Sequence[int], item_id: int) -> tuple[int, int]:
    """Encrypt item_id into the two record words for this UID."""
    if not 0 <= item_id <= MASK32:
        raise InvalidArgument(f"item id must fit in 32 bits, got {item_id}")
    key = _cipher_key(uid)
    v0, v1 = tea_encrypt((item_id, item_id), key)
    return reverse_byte_order(v0), reverse_byte_order(v1)


def decrypt_record(uid: Sequence[int], record: Sequence[int]) -> int | None:
    """
    Decrypt two record words.

    Returns the item id, or None when the decrypted words differ. That is
    the normal result for blank or foreign tags, not an error.
    """
    if len(record) != 2:
        raise InvalidArgument(f"record must be 2 words, got {len(record)}")
    key = _cipher_key(uid)
    block = (reverse_byte_order(record[0]), reverse_byte_order(record[1]))
    v0, v1 = tea_decrypt(block, key)
    if v0 != v1:
        logger.debug(f"[decrypt] mismatch v0=0x{v0:08x} v1=0x{v1:08x}")
        return None
    return v0


def record_to_bytes(record: Sequence[int]) -> bytes:
    """Record words to the 8 bytes written across two pages."""
    if len(record) != 2:
        raise InvalidArgument(f"record must be 2 words, got {len(record)}")
    return unpack_le(record[0]) + unpack_le(record[1])


def record_from_bytes(data: bytes) -> tuple[int, int]:
    """8 page bytes back to record words."""
    if len(data) != RECORD_LENGTH:
        raise InvalidArgument(f"record must be {RECORD_LENGTH} bytes, got {len(data)}")
    return pack_le(data[0:4]), pack_le(data[4:8])


def encrypt_record_bytes(uid: Sequence[int], item_id: int) -> bytes:
    """Encrypted record as page bytes."""
    return record_to_bytes(encrypt_record(uid, item_id))


def decrypt_record_bytes(uid: Sequence[int], data: bytes) -> int | None:
    """Decrypt 8 page bytes; None if they do not hold a valid record."""
    check_uid(uid)
    return decrypt_record(uid, record_from_bytes(data))

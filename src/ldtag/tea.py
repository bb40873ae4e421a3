"""Tiny Encryption Algorithm (TEA) over one 64-bit block.

Plain 32-round TEA as published by Wheeler and Needham: no padding, no
chaining, just the block transform used for the two tag record pages.
"""

from collections.abc import Sequence

from .bits import MASK32

TEA_DELTA = 0x9E3779B9
TEA_ROUNDS = 32

# Initial decrypt sum: TEA_ROUNDS * TEA_DELTA wrapped to 32 bits
TEA_DECRYPT_SUM = (TEA_ROUNDS * TEA_DELTA) & MASK32


def _unpack(block: Sequence[int], key: Sequence[int]) -> tuple[int, int, list[int]]:
    if len(block) != 2:
        raise ValueError(f"TEA block must be 2 words, got {len(block)}")
    if len(key) != 4:
        raise ValueError(f"TEA key must be 4 words, got {len(key)}")
    return block[0] & MASK32, block[1] & MASK32, [k & MASK32 for k in key]


def tea_encrypt(block: Sequence[int], key: Sequence[int]) -> tuple[int, int]:
    """Encrypt a 2-word block with a 4-word key."""
    v0, v1, (k0, k1, k2, k3) = _unpack(block, key)
    total = 0
    for _ in range(TEA_ROUNDS):
        total = (total + TEA_DELTA) & MASK32
        v0 = (v0 + ((((v1 << 4) + k0) ^ (v1 + total) ^ ((v1 >> 5) + k1)) & MASK32)) & MASK32
        v1 = (v1 + ((((v0 << 4) + k2) ^ (v0 + total) ^ ((v0 >> 5) + k3)) & MASK32)) & MASK32
    return v0, v1


def tea_decrypt(block: Sequence[int], key: Sequence[int]) -> tuple[int, int]:
    """Inverse of tea_encrypt for the same key."""
    v0, v1, (k0, k1, k2, k3) = _unpack(block, key)
    total = TEA_DECRYPT_SUM
    for _ in range(TEA_ROUNDS):
        v1 = (v1 - ((((v0 << 4) + k2) ^ (v0 + total) ^ ((v0 >> 5) + k3)) & MASK32)) & MASK32
        v0 = (v0 - ((((v1 << 4) + k0) ^ (v1 + total) ^ ((v1 >> 5) + k1)) & MASK32)) & MASK32
        total = (total - TEA_DELTA) & MASK32
    return v0, v1

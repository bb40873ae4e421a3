"""32-bit word primitives shared by the key derivation and the cipher."""

MASK32 = 0xFFFFFFFF


def u32(value: int) -> int:
    """Wrap an integer into an unsigned 32-bit word."""
    return value & MASK32


def rotate_right(value: int, amount: int) -> int:
    """Rotate a 32-bit word right. Amount is taken modulo 32."""
    amount %= 32
    value &= MASK32
    return ((value >> amount) | (value << (32 - amount))) & MASK32


def pack_le(data: bytes) -> int:
    """Pack 4 bytes into a word, data[0] least significant."""
    if len(data) != 4:
        raise ValueError(f"expected 4 bytes, got {len(data)}")
    return int.from_bytes(bytes(data), 'little')


def unpack_le(value: int) -> bytes:
    """Inverse of pack_le."""
    return (value & MASK32).to_bytes(4, 'little')


def reverse_byte_order(value: int) -> int:
    """Swap bytes 0<->3 and 1<->2 of a 32-bit word."""
    return int.from_bytes((value & MASK32).to_bytes(4, 'little'), 'big')

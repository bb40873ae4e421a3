"""Unit tests for the UID mixer and key derivation using known values."""

import pytest

from ldtag.crypto import (
    KEY_SEED,
    PASSWORD_SEED,
    InvalidArgument,
    derive_password,
    derive_password_int,
    derive_tea_key,
    mix,
    scramble,
)

UID = bytes.fromhex("04a4e12a5a4180")


def test_seed_constants():
    """Seed buffers have the fixed sizes the scheme expects."""
    assert len(PASSWORD_SEED) == 32
    assert len(KEY_SEED) == 24
    assert KEY_SEED[-1] == 0xAA


def test_mix_zero_words():
    """No words consumed leaves the accumulator at 0."""
    assert mix(b"abcd", 0) == 0


def test_mix_single_word():
    """First round reduces to the little-endian word itself."""
    assert mix(b"abcd", 1) == 0x64636261


@pytest.mark.parametrize("count", [-1, 9, 100])
def test_mix_rejects_word_count(count):
    """Word counts outside 0..8 are rejected instead of returning 0."""
    with pytest.raises(InvalidArgument):
        mix(bytes(64), count)


def test_mix_rejects_short_seed():
    """Seed must cover every consumed word."""
    with pytest.raises(InvalidArgument):
        mix(bytes(8), 3)


def test_derive_password():
    """UID 04a4e12a5a4180 -> password 0436b4f1."""
    assert derive_password(UID).hex() == "0436b4f1"
    assert derive_password_int(UID) == 0xF1B43604


def test_derive_password_accepts_int_list():
    """UIDs can be any sequence of byte values."""
    assert derive_password(list(UID)) == derive_password(UID)


def test_scramble_words():
    """Raw scramble() outputs for the four key word counts."""
    assert [scramble(UID, c) for c in (3, 4, 5, 6)] == [
        0xDF570955, 0x0F1CF3B5, 0xE914759A, 0x0DA8C5AD,
    ]


def test_scramble_zero_count():
    """count=0 places no sentinel and mixes nothing."""
    assert scramble(UID, 0) == 0


def test_scramble_sentinel():
    """count=1 puts the sentinel in byte 3 of the only word."""
    assert scramble(UID, 1) == 0xAAE1A404


def test_scramble_past_seed():
    """Counts 7 and 8 read zero padding beyond the 24-byte seed."""
    assert scramble(UID, 7) == 0xDBFD7B0A
    assert scramble(UID, 8) == 0x394C896C
    with pytest.raises(InvalidArgument):
        scramble(UID, 9)


def test_derive_tea_key():
    """TEA key words are the byte-reversed scramble() outputs."""
    assert derive_tea_key(UID) == (0x550957DF, 0xB5F31C0F, 0x9A7514E9, 0xADC5A80D)


def test_derivation_is_deterministic():
    """Same UID always derives the same material."""
    assert derive_password(UID) == derive_password(bytearray(UID))
    assert derive_tea_key(UID) == derive_tea_key(UID)


def test_different_uids_differ():
    """A one-byte UID change alters password and key."""
    other = UID[:-1] + b"\x81"
    assert derive_password(other) != derive_password(UID)
    assert derive_tea_key(other) != derive_tea_key(UID)


@pytest.mark.parametrize("uid", [b"", bytes(6), bytes(8), [0, 0, 0, 0, 0, 0, 256]])
def test_bad_uid(uid):
    """UID must be exactly 7 byte values."""
    with pytest.raises(InvalidArgument):
        derive_password(uid)
    with pytest.raises(InvalidArgument):
        derive_tea_key(uid)

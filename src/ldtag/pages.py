"""Tag page layout for the item record and the access password.

Tags are NTAG213-style: 4-byte pages, the item record on pages
0x24..0x25, the write password on page 0x2B.
"""

import string

from .codec import decrypt_record_bytes, encrypt_record_bytes
from .crypto import UID_LENGTH, InvalidArgument, check_uid, derive_password

PAGE_SIZE = 4
CHARACTER_PAGE = 0x24
PASSWORD_PAGE = 0x2B

# Pages holding the encrypted record, in record order
RECORD_PAGES = (CHARACTER_PAGE, CHARACTER_PAGE + 1)


def parse_uid(text: str) -> bytes:
    """
    Parse a UID written as hex.

    Accepts "04a4e12a5a4180", "04:A4:E1:2A:5A:41:80", "04-a4-..." or
    space separated bytes.
    """
    cleaned = text.strip()
    for sep in (":", "-", " "):
        cleaned = cleaned.replace(sep, "")
    if len(cleaned) != UID_LENGTH * 2 or not all(c in string.hexdigits for c in cleaned):
        raise InvalidArgument(f"not a {UID_LENGTH}-byte hex UID: {text!r}")
    return bytes.fromhex(cleaned)


def build_character_pages(uid: bytes, item_id: int) -> dict[int, bytes]:
    """Page writes {page: 4 bytes} storing item_id for this UID."""
    data = encrypt_record_bytes(uid, item_id)
    return {
        page: data[i * PAGE_SIZE:(i + 1) * PAGE_SIZE]
        for i, page in enumerate(RECORD_PAGES)
    }


def build_password_page(uid: bytes) -> dict[int, bytes]:
    """Page write setting the tag's access password."""
    return {PASSWORD_PAGE: derive_password(uid)}


def parse_character_pages(uid: bytes, pages: dict[int, bytes]) -> int | None:
    """
    Recover the item id from a page dump.

    Returns None if a record page is missing or the record does not
    validate for this UID.
    """
    check_uid(uid)
    if any(page not in pages for page in RECORD_PAGES):
        return None
    data = b"".join(bytes(pages[page]) for page in RECORD_PAGES)
    return decrypt_record_bytes(uid, data)

"""Fake NTAG213-style tag for provisioning tests."""

import logging

from .crypto import check_uid, derive_password
from .pages import PAGE_SIZE, PASSWORD_PAGE

logger = logging.getLogger(__name__)

PAGE_COUNT = 45


class FakeTag:
    """
    In-memory tag simulator.

    Acts like the reader-side view of a real tag: pages are read and
    written 4 bytes at a time, writes at or above auth0 need a prior
    successful authenticate() with the password derived from the UID.
    The password page always reads back as zeros.
    """

    def __init__(self, uid: bytes, auth0: int = 0x04):
        self.uid = check_uid(uid)
        self.auth0 = auth0
        self.pages = [bytearray(PAGE_SIZE) for _ in range(PAGE_COUNT)]
        self.authenticated = False
        self.writes: list[tuple[int, bytes]] = []

        # UID with BCC check bytes in pages 0..2
        bcc0 = 0x88 ^ self.uid[0] ^ self.uid[1] ^ self.uid[2]
        bcc1 = self.uid[3] ^ self.uid[4] ^ self.uid[5] ^ self.uid[6]
        self.pages[0][:] = self.uid[0:3] + bytes([bcc0])
        self.pages[1][:] = self.uid[3:7]
        self.pages[2][0] = bcc1

        self.pages[PASSWORD_PAGE][:] = derive_password(self.uid)

    def _check_page(self, page: int):
        if not 0 <= page < PAGE_COUNT:
            raise IndexError(f"page 0x{page:02x} out of range")

    def read_page(self, page: int) -> bytes:
        """Read one page."""
        self._check_page(page)
        if page == PASSWORD_PAGE:
            return bytes(PAGE_SIZE)
        return bytes(self.pages[page])

    def write_page(self, page: int, data: bytes) -> None:
        """Write one page, enforcing password protection."""
        self._check_page(page)
        if len(data) != PAGE_SIZE:
            raise ValueError(f"page data must be {PAGE_SIZE} bytes, got {len(data)}")
        if page < 3:
            raise PermissionError(f"page 0x{page:02x} is read-only")
        if page >= self.auth0 and not self.authenticated:
            raise PermissionError(f"page 0x{page:02x} is password protected")
        logger.debug(f"[write] page=0x{page:02x} data={bytes(data).hex()}")
        self.pages[page][:] = data
        self.writes.append((page, bytes(data)))

    def authenticate(self, password: bytes) -> bool:
        """PWD_AUTH: unlock writes when password matches."""
        self.authenticated = bytes(password) == bytes(self.pages[PASSWORD_PAGE])
        logger.debug(f"[auth] {'ok' if self.authenticated else 'rejected'}")
        return self.authenticated

    def read_uid(self) -> bytes:
        """UID as stored in pages 0..1 (BCC0 skipped)."""
        return bytes(self.pages[0][0:3] + self.pages[1])

    def dump(self, pages) -> dict[int, bytes]:
        """Read several pages into a {page: data} mapping."""
        return {page: self.read_page(page) for page in pages}

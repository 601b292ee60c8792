"""Obfuscated in-memory container for sensitive strings.

``SecureString`` keeps each character's code point XOR-masked with a random
pad from :mod:`secrets`, so the plaintext never sits in the object as a
``str`` and is not exposed by ``str()``, ``repr()``, equality or pickling.
The only way to read it back is :meth:`SecureString.reveal`.

Caveats:
- This is obfuscation, not encryption. Anyone with the object can call
  ``reveal()``, and anyone with a memory dump holds both mask and data.
- The ``str`` passed to :func:`to_secure_string` is immutable and cannot be
  scrubbed; it stays in memory until the interpreter frees it.
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING, NoReturn

from stringext.errors import (
    DisposedSecureStringError,
    InvalidArgumentError,
    ReadOnlySecureStringError,
)

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

CHAR_WIDTH = 4  # bytes per code point (max 0x10FFFF)


class SecureString:
    """Append-constructed, caller-owned holder for a sensitive string.

    Example:
        ```py
        with to_secure_string(password) as secret:
            client.login(user, secret.reveal())
        ```
    """

    __slots__ = ("_data", "_pad", "_read_only", "_disposed")

    def __init__(self) -> None:
        self._data = bytearray()
        self._pad = bytearray()
        self._read_only = False
        self._disposed = False

    # ------------------------------------------------------------------
    # state guards
    # ------------------------------------------------------------------

    def _check_alive(self) -> None:
        if self._disposed:
            raise DisposedSecureStringError

    def _check_writable(self) -> None:
        self._check_alive()
        if self._read_only:
            raise ReadOnlySecureStringError

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------

    def append_char(self, char: str) -> None:
        """Append a single character.

        Args:
            char: A string of length one.

        Raises:
            InvalidArgumentError: If ``char`` is not exactly one character.
            ReadOnlySecureStringError: If the string was made read-only.
            DisposedSecureStringError: If the string was disposed.
        """
        self._check_writable()
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidArgumentError("char", "Expected exactly one character")
        pad = secrets.token_bytes(CHAR_WIDTH)
        raw = ord(char).to_bytes(CHAR_WIDTH, "little")
        self._pad.extend(pad)
        self._data.extend(b ^ p for b, p in zip(raw, pad))

    def clear(self) -> None:
        """Zero and remove all characters."""
        self._check_writable()
        self._wipe()

    def make_read_only(self) -> None:
        """Prevent further modification. Irreversible."""
        self._check_alive()
        self._read_only = True

    @property
    def is_read_only(self) -> bool:
        """Return True if the string can no longer be modified."""
        self._check_alive()
        return self._read_only

    def copy(self) -> SecureString:
        """Return a new, writable SecureString with the same characters.

        The copy gets fresh random pads.
        """
        self._check_alive()
        duplicate = SecureString()
        for code_point in self._code_points():
            duplicate.append_char(chr(code_point))
        return duplicate

    def dispose(self) -> None:
        """Zero the storage and mark the string unusable. Safe to call twice."""
        if self._disposed:
            return
        self._wipe()
        self._disposed = True

    # ------------------------------------------------------------------
    # access
    # ------------------------------------------------------------------

    def reveal(self) -> str:
        """Return the plaintext.

        Every call materializes a new ``str``; keep its lifetime short.
        """
        self._check_alive()
        return "".join(chr(code_point) for code_point in self._code_points())

    def _code_points(self):
        for offset in range(0, len(self._data), CHAR_WIDTH):
            chunk = bytes(
                d ^ p
                for d, p in zip(
                    self._data[offset : offset + CHAR_WIDTH],
                    self._pad[offset : offset + CHAR_WIDTH],
                )
            )
            yield int.from_bytes(chunk, "little")

    def _wipe(self) -> None:
        for buffer in (self._data, self._pad):
            for i in range(len(buffer)):
                buffer[i] = 0
            buffer.clear()

    # ------------------------------------------------------------------
    # dunder protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        self._check_alive()
        return len(self._data) // CHAR_WIDTH

    def __repr__(self) -> str:
        if self._disposed:
            return "<SecureString disposed>"
        return f"<SecureString length={len(self)}>"

    __str__ = __repr__

    def __bool__(self) -> bool:
        return not self._disposed and bool(self._data)

    def __enter__(self) -> SecureString:
        self._check_alive()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()

    def __reduce__(self) -> NoReturn:
        raise TypeError("SecureString cannot be pickled")

    def __del__(self) -> None:
        # attributes may be missing if __init__ never ran
        if getattr(self, "_data", None) is not None:
            self._wipe()


def to_secure_string(value: str | None) -> SecureString:
    """Transform a string into a :class:`SecureString`.

    Args:
        value: Plaintext to protect. Must not be empty.

    Returns:
        SecureString: A new, writable container owned by the caller.

    Raises:
        InvalidArgumentError: If ``value`` is ``None`` or empty.
    """
    if not value:
        raise InvalidArgumentError(
            "value",
            "Input string is empty and cannot be converted into a SecureString",
        )

    secure = SecureString()
    for char in value:
        secure.append_char(char)

    logger.debug("Converted %d characters into a SecureString", len(secure))
    return secure

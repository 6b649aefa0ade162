"""Stream helpers that encrypt on write and decrypt on read."""

from __future__ import annotations

import io
from typing import BinaryIO

from .crypto import Key, decrypt, encrypt


class EncryptWriter:
    """Buffers written data; on close it is encrypted and written to the stream."""

    def __init__(self, key: Key, stream: BinaryIO) -> None:
        self._key = key
        self._stream = stream
        self._buffer = bytearray()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def writable(self) -> bool:
        return not self._closed

    def write(self, data: bytes) -> int:
        if self._closed:
            raise ValueError("write() called on closed writer")
        view = memoryview(data).cast("B")
        self._buffer += view
        return view.nbytes

    def close(self) -> None:
        if self._closed:
            raise ValueError("close() called on already closed writer")
        self._closed = True

        ciphertext = encrypt(self._key, bytes(self._buffer))
        self._buffer.clear()
        written = self._stream.write(ciphertext)
        if written is not None and written != len(ciphertext):
            raise OSError("not all bytes written")

    def __enter__(self) -> EncryptWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._closed:
            return
        if exc_type is None:
            self.close()
        else:
            self._closed = True
            self._buffer.clear()


def encrypt_to(key: Key, stream: BinaryIO) -> EncryptWriter:
    """Return a writer whose data is encrypted into stream when it is closed."""
    return EncryptWriter(key, stream)


def decrypt_from(key: Key, stream: BinaryIO) -> io.BytesIO:
    """Read all of stream, verify and decrypt it, and return the plaintext as a reader."""
    return io.BytesIO(decrypt(key, stream.read()))
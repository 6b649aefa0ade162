"""Authenticated encryption of repository data: AES-256-CTR with Poly1305-AES."""

from __future__ import annotations

import base64
import hmac
import os
from dataclasses import dataclass, field
from typing import Any

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt
from cryptography.hazmat.primitives.poly1305 import Poly1305

AES_KEY_SIZE = 32
MAC_KEY_SIZE_K = 16
MAC_KEY_SIZE_R = 16
MAC_KEY_SIZE = MAC_KEY_SIZE_K + MAC_KEY_SIZE_R
IV_SIZE = 16
MAC_SIZE = 16
EXTENSION = IV_SIZE + MAC_SIZE

_POLY1305_KEY_MASK = bytes(
    [
        0xFF, 0xFF, 0xFF, 0x0F,
        0xFC, 0xFF, 0xFF, 0x0F,
        0xFC, 0xFF, 0xFF, 0x0F,
        0xFC, 0xFF, 0xFF, 0x0F,
    ]
)


class UnauthenticatedError(Exception):
    """Raised when ciphertext verification has failed."""

    def __init__(self, message: str = "ciphertext verification failed") -> None:
        super().__init__(message)


def _fit(data: bytes, size: int) -> bytes:
    """Truncate or zero-pad data to exactly size bytes."""
    return bytes(data[:size]).ljust(size, b"\x00")


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _unb64(text: str | None) -> bytes:
    if text is None:
        return b""
    return base64.b64decode(text)


@dataclass
class MACKey:
    """Poly1305-AES key: k for AES-128, r for Poly1305."""

    k: bytes = bytes(MAC_KEY_SIZE_K)
    r: bytes = bytes(MAC_KEY_SIZE_R)
    masked: bool = field(default=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        self.k = bytes(self.k)
        self.r = bytes(self.r)
        if len(self.k) != MAC_KEY_SIZE_K or len(self.r) != MAC_KEY_SIZE_R:
            raise ValueError("MAC key parts must be 16 bytes each")

    def mask(self) -> None:
        """Clamp r as Poly1305 requires; does nothing once applied."""
        if self.masked:
            return
        self.r = bytes(a & b for a, b in zip(self.r, _POLY1305_KEY_MASK))
        self.masked = True

    def valid(self) -> bool:
        """Return True if neither k nor r is all zero."""
        return any(self.k) and any(self.r)

    def to_dict(self) -> dict[str, str]:
        return {"k": _b64(self.k), "r": _b64(self.r)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MACKey:
        return cls(
            k=_fit(_unb64(data.get("k")), MAC_KEY_SIZE_K),
            r=_fit(_unb64(data.get("r")), MAC_KEY_SIZE_R),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> MACKey:
        """Build a masked key from the concatenation k || r."""
        key = cls(k=data[:16], r=data[16:32])
        key.mask()
        return key


@dataclass
class Key:
    """Encryption and message authentication keys for a repository."""

    mac: MACKey = field(default_factory=MACKey)
    encrypt: bytes = bytes(AES_KEY_SIZE)

    def __post_init__(self) -> None:
        self.encrypt = bytes(self.encrypt)
        if len(self.encrypt) != AES_KEY_SIZE:
            raise ValueError("encryption key must be 32 bytes")

    def valid(self) -> bool:
        """Return True if both keys are non-zero."""
        return any(self.encrypt) and self.mac.valid()

    def to_dict(self) -> dict[str, Any]:
        return {"mac": self.mac.to_dict(), "encrypt": _b64(self.encrypt)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Key:
        return cls(
            mac=MACKey.from_dict(data.get("mac") or {}),
            encrypt=_fit(_unb64(data.get("encrypt")), AES_KEY_SIZE),
        )


def new_random_key() -> Key:
    """Return new random encryption and message authentication keys."""
    key = Key(
        mac=MACKey(k=os.urandom(MAC_KEY_SIZE_K), r=os.urandom(MAC_KEY_SIZE_R)),
        encrypt=os.urandom(AES_KEY_SIZE),
    )
    key.mac.mask()
    return key


def _poly1305_key(nonce: bytes, key: MACKey) -> bytes:
    key.mask()
    encryptor = Cipher(algorithms.AES(key.k), modes.ECB()).encryptor()
    s = encryptor.update(_fit(nonce, IV_SIZE)) + encryptor.finalize()
    return key.r + s


def poly1305_mac(msg: bytes, nonce: bytes, key: MACKey) -> bytes:
    """Compute the Poly1305-AES tag of msg under nonce."""
    return Poly1305.generate_tag(_poly1305_key(nonce, key), bytes(msg))


def poly1305_verify(msg: bytes, nonce: bytes, key: MACKey, mac: bytes) -> bool:
    """Return True if mac is the valid tag of msg under nonce."""
    expected = poly1305_mac(msg, nonce, key)
    return hmac.compare_digest(expected, _fit(mac, MAC_SIZE))


def _ctr(key: Key, iv: bytes, data: bytes) -> bytes:
    cipher = Cipher(algorithms.AES(key.encrypt), modes.CTR(iv)).encryptor()
    return cipher.update(data) + cipher.finalize()


def encrypt(key: Key, plaintext: bytes) -> bytes:
    """Encrypt and authenticate plaintext, returning IV || ciphertext || MAC."""
    iv = os.urandom(IV_SIZE)
    ciphertext = _ctr(key, iv, bytes(plaintext))
    return iv + ciphertext + poly1305_mac(ciphertext, iv, key.mac)


def decrypt(key: Key, ciphertext: bytes) -> bytes:
    """Verify and decrypt data of the form IV || ciphertext || MAC."""
    data = bytes(ciphertext)
    if len(data) < EXTENSION:
        raise ValueError("trying to decrypt invalid data: ciphertext too small")

    iv, body, mac = data[:IV_SIZE], data[IV_SIZE:-MAC_SIZE], data[-MAC_SIZE:]
    if not poly1305_verify(body, iv, key.mac, mac):
        raise UnauthenticatedError()
    return _ctr(key, iv, body)


def kdf(n: int, r: int, p: int, salt: bytes, password: str) -> Key:
    """Derive keys from password with scrypt parameters n, r, p and salt."""
    if not salt:
        raise ValueError("scrypt() called with empty salt")

    length = MAC_KEY_SIZE + AES_KEY_SIZE
    try:
        derived = Scrypt(salt=bytes(salt), length=length, n=n, r=r, p=p).derive(
            password.encode("utf-8")
        )
    except (ValueError, TypeError, MemoryError) as exc:
        raise ValueError(f"error deriving keys from password: {exc}") from exc

    if len(derived) != length:
        raise ValueError(
            f"invalid numbers of bytes expanded from scrypt(): {len(derived)}"
        )

    return Key(
        mac=MACKey.from_bytes(derived[AES_KEY_SIZE:]),
        encrypt=derived[:AES_KEY_SIZE],
    )
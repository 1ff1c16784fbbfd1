"""
sshkeys_core.utils
------------------
Base64 helpers and OpenSSH-style fingerprints.
"""

from __future__ import annotations
from typing import Union
import base64, binascii, hashlib


def as_bytes(v: Union[bytes, str, None]) -> bytes:
    """Passphrases and comments may be given as str; they are UTF-8 encoded."""
    if v is None:
        return b""
    if isinstance(v, str):
        return v.encode("utf-8")
    return bytes(v)


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def b64d(s: str) -> bytes:
    # validate=True rejects stray characters instead of silently dropping them
    return base64.b64decode(s.encode("ascii"), validate=True)


def split_authorized_key(line: bytes):
    """Split an authorized-key line into (key_type, blob, comment)."""
    parts = line.strip().split(b" ", 2)
    if len(parts) < 2:
        raise ValueError("authorized key line needs a type and a blob")
    comment = parts[2] if len(parts) == 3 else b""
    try:
        blob = base64.b64decode(parts[1], validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid key blob: {exc}") from exc
    return parts[0].decode("ascii"), blob, comment


def compute_fingerprint(authorized_key: bytes) -> str:
    """
    OpenSSH SHA256 fingerprint of an authorized-key line.

    Same value as ``ssh-keygen -lf <file>.pub``: sha256 over the decoded
    key blob, base64 without padding, prefixed with ``SHA256:``.
    """
    _, blob, _ = split_authorized_key(authorized_key)
    digest = hashlib.sha256(blob).digest()
    return "SHA256:" + b64e(digest).rstrip("=")

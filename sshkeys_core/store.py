# sshkeys_core/store.py

"""
Read and write a key pair under ``<dir>/<name>`` and ``<dir>/<name>.pub``.

The two files are written one after the other with no rollback: if the
second write fails the first file stays on disk. Concurrent writers to the
same path are not coordinated; the last writer wins.
"""

from __future__ import annotations
import os
from .constants import DIR_MODE, FILE_MODE, PUBLIC_KEY_SUFFIX
from .crypto import decode_private, decode_public
from .errors import MkdirError, ReadError, WriteError
from .logger import get_logger
from .models import KeyMaterial

log = get_logger("sshkeys.store")


def private_key_path(directory: str, filename: str) -> str:
    return os.path.join(directory, filename)


def public_key_path(directory: str, filename: str) -> str:
    return os.path.join(directory, filename + PUBLIC_KEY_SUFFIX)


def ensure_dir(directory: str) -> None:
    """Create directory and every missing parent, each with mode 0700."""
    if os.path.isdir(directory):
        return
    # os.makedirs only applies mode to the leaf, so walk up to the first
    # existing ancestor and create the missing segments one by one
    missing = []
    path = os.path.abspath(directory)
    while not os.path.exists(path):
        missing.append(path)
        parent = os.path.dirname(path)
        if parent == path:
            break
        path = parent
    if not missing:
        raise MkdirError(f"error creating directory {directory}: not a directory", path=directory)
    for segment in reversed(missing):
        try:
            os.mkdir(segment, DIR_MODE)
        except FileExistsError:
            if not os.path.isdir(segment):
                raise MkdirError(f"error creating directory {segment}: not a directory", path=segment)
        except OSError as exc:
            raise MkdirError(f"error creating directory {segment}: {exc}", path=segment) from exc
    log.debug(f"created directory {directory}")


def _write_file(path: str, data: bytes) -> None:
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise WriteError(f"error writing {path}: {exc}", path=path) from exc


def _read_file(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise ReadError(f"error reading {path}: {exc}", path=path) from exc


def save(directory: str, filename: str, material: KeyMaterial) -> None:
    ensure_dir(directory)
    priv = private_key_path(directory, filename)
    pub = public_key_path(directory, filename)
    _write_file(priv, material.private_key)
    _write_file(pub, material.public_key)
    log.debug(f"saved key pair to {priv} and {pub}")


def load(directory: str, filename: str, passphrase: bytes = b"", strict: bool = False) -> KeyMaterial:
    """
    Read a key pair back from disk.

    The private key is run through decode_private so a malformed file or a
    wrong passphrase is reported here. The returned material holds the bytes
    exactly as read, never the decrypted form.
    """
    priv = private_key_path(directory, filename)
    pub = public_key_path(directory, filename)
    private_key = _read_file(priv)
    public_key = decode_public(_read_file(pub))
    decode_private(private_key, passphrase, strict=strict)
    log.debug(f"loaded key pair from {priv}")
    return KeyMaterial(private_key=private_key, public_key=public_key)

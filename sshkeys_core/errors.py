# sshkeys_core/errors.py

from __future__ import annotations
from typing import Optional


class SSHKeysError(Exception):
    pass


class GenerationError(SSHKeysError):
    pass


class EncodeError(SSHKeysError):
    pass


class DecodeError(SSHKeysError):
    pass


class InvalidFormatError(DecodeError):
    pass


class WrongPassphraseError(DecodeError):
    """Decryption failed. A wrong passphrase and a corrupt payload look the same."""
    pass


class PassphraseRequiredError(DecodeError):
    pass


class KeyIOError(SSHKeysError):
    """Filesystem failure. ``path`` names the file or directory involved."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class MkdirError(KeyIOError):
    pass


class ReadError(KeyIOError):
    pass


class WriteError(KeyIOError):
    pass

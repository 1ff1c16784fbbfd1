"""
sshkeys_core
============
Generate, encode, save and reload SSH key pairs.

Provides:
- Immutable key configuration built from option functions
- RSA key generation with optional passphrase-encrypted PEM output
- OpenSSH authorized-key public lines with optional comment
- Directory store writing ``<name>`` and ``<name>.pub`` with owner-only modes
"""

from .constants import KeyType
from .crypto import (
    generate, generate_private_key, encode_private, decode_private,
    encode_public, decode_public, parse_pem,
)
from .errors import (
    SSHKeysError, GenerationError, EncodeError, DecodeError, InvalidFormatError,
    WrongPassphraseError, PassphraseRequiredError, KeyIOError, MkdirError,
    ReadError, WriteError,
)
from .keys import SSHKeys
from .models import KeyMaterial, PemBlock
from .options import (
    Config, new, with_filename, with_key_type, with_key_length, with_dir,
    with_passphrase, with_comment,
)
from .store import save, load

__all__ = [
    "KeyType",
    "generate", "generate_private_key", "encode_private", "decode_private",
    "encode_public", "decode_public", "parse_pem",
    "SSHKeysError", "GenerationError", "EncodeError", "DecodeError",
    "InvalidFormatError", "WrongPassphraseError", "PassphraseRequiredError",
    "KeyIOError", "MkdirError", "ReadError", "WriteError",
    "SSHKeys", "KeyMaterial", "PemBlock",
    "Config", "new", "with_filename", "with_key_type", "with_key_length",
    "with_dir", "with_passphrase", "with_comment",
    "save", "load",
]

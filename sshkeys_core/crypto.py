"""
sshkeys_core.crypto
-------------------
Key generation and the two on-disk encodings:

- Private key: PKCS#1 DER in a PEM block labelled ``RSA PRIVATE KEY``.
  With a passphrase the payload is AES-256-CBC encrypted the legacy OpenSSL
  way (``Proc-Type: 4,ENCRYPTED`` and ``DEK-Info: AES-256-CBC,<iv>``), the
  cipher key being derived from the passphrase and the IV.
- Public key: one authorized-key line, ``ssh-rsa <base64>[ <comment>]\\n``.

Everything here is pure; reading and writing files lives in store.py.
"""

from __future__ import annotations
from typing import Optional
import binascii, re
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from .constants import KeyType, PEM_LABELS, RSA_PUBLIC_EXPONENT
from .errors import (
    GenerationError, EncodeError, InvalidFormatError, WrongPassphraseError,
    PassphraseRequiredError,
)
from .logger import get_logger
from .models import KeyMaterial, PemBlock
from .options import Config
from .utils import as_bytes, b64d

log = get_logger("sshkeys.crypto")

_PEM_RE = re.compile(
    r"-----BEGIN (?P<begin>[A-Z0-9 ]+)-----\r?\n(?P<inner>.*?)-----END (?P<end>[A-Z0-9 ]+)-----",
    re.DOTALL,
)


# --------- Generator ----------
def generate_private_key(key_length: int, key_type: KeyType = KeyType.RSA) -> rsa.RSAPrivateKey:
    if key_type is not KeyType.RSA:
        raise GenerationError(f"Unsupported key type: {key_type}")
    try:
        key = rsa.generate_private_key(public_exponent=RSA_PUBLIC_EXPONENT, key_size=key_length)
    except Exception as exc:
        raise GenerationError(f"error generating {key_length}-bit RSA key: {exc}") from exc
    log.debug(f"generated {key_length}-bit {key_type.value} key")
    return key


def generate(config: Config) -> KeyMaterial:
    """Generate a fresh key pair and encode it according to config."""
    key = generate_private_key(config.key_length, config.key_type)
    return KeyMaterial(
        private_key=encode_private(key, config.passphrase),
        public_key=encode_public(key.public_key(), config.comment),
    )


# --------- Private key container ----------
def encode_private(key: rsa.RSAPrivateKey, passphrase: bytes = b"") -> bytes:
    passphrase = as_bytes(passphrase)
    if passphrase:
        encryption = serialization.BestAvailableEncryption(passphrase)
    else:
        encryption = serialization.NoEncryption()
    try:
        pem = key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=encryption,
        )
    except (ValueError, TypeError) as exc:
        raise EncodeError(f"error encoding private key: {exc}") from exc
    log.debug(f"encoded private key (encrypted={bool(passphrase)})")
    return pem


def parse_pem(data: bytes) -> PemBlock:
    """Parse the first PEM block in data. Raises InvalidFormatError."""
    try:
        text = data.decode("ascii")
    except UnicodeDecodeError as exc:
        raise InvalidFormatError("private key is not ASCII PEM") from exc

    m = _PEM_RE.search(text)
    if not m:
        raise InvalidFormatError("no PEM block found")
    if m.group("begin") != m.group("end"):
        raise InvalidFormatError(
            f"PEM BEGIN/END labels differ: {m.group('begin')!r} vs {m.group('end')!r}")

    lines = m.group("inner").splitlines()
    headers = {}
    i = 0
    while i < len(lines) and ":" in lines[i]:
        k, v = lines[i].split(":", 1)
        headers[k.strip()] = v.strip()
        i += 1
    if headers:
        # RFC 1421: headers end with a blank line
        if i >= len(lines) or lines[i].strip():
            raise InvalidFormatError("PEM headers not terminated by a blank line")
        i += 1

    try:
        body = b64d("".join(line.strip() for line in lines[i:]))
    except (binascii.Error, ValueError) as exc:
        raise InvalidFormatError(f"invalid base64 in PEM body: {exc}") from exc
    if not body:
        raise InvalidFormatError("empty PEM body")
    return PemBlock(label=m.group("begin"), body=body, headers=headers)


def decode_private(data: bytes, passphrase: bytes = b"", strict: bool = False,
                   key_type: KeyType = KeyType.RSA) -> bytes:
    """
    Parse, and when a passphrase is given decrypt, a private key container.
    A str passphrase is UTF-8 encoded first.

    - Malformed or mislabelled block -> InvalidFormatError
    - Passphrase given: returns the plaintext PKCS#1 DER, or raises
      WrongPassphraseError when decryption or parsing fails
    - No passphrase: returns the block payload as stored. An encrypted block
      is returned still encrypted unless ``strict`` is set, in which case
      PassphraseRequiredError is raised.
    """
    passphrase = as_bytes(passphrase)
    block = parse_pem(data)
    if block.label != PEM_LABELS[key_type]:
        raise InvalidFormatError(f"unexpected PEM label {block.label!r}")

    if not passphrase:
        if block.encrypted and strict:
            raise PassphraseRequiredError("private key is encrypted and no passphrase was supplied")
        if block.encrypted:
            log.debug("no passphrase supplied, skipping decryption of encrypted key")
        return block.body

    try:
        key = serialization.load_pem_private_key(data, password=passphrase)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise WrongPassphraseError(f"error decrypting private key: {exc}") from exc
    return key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


# --------- Public key line ----------
def encode_public(public_key: rsa.RSAPublicKey, comment: Optional[bytes] = b"") -> bytes:
    line = public_key.public_bytes(
        encoding=serialization.Encoding.OpenSSH,
        format=serialization.PublicFormat.OpenSSH,
    ) + b"\n"
    if comment:
        line = line[:-1] + b" " + as_bytes(comment) + b"\n"  # swap the newline for a space
    return line


def decode_public(data: bytes) -> bytes:
    # opaque: the line is stored and returned as-is
    return data

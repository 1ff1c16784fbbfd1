# sshkeys_core/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict
from .utils import compute_fingerprint


@dataclass(frozen=True)
class KeyMaterial:
    """
    Encoded key pair as it is written to and read from disk.

    private_key is the PEM container (encrypted or plaintext); public_key is
    the newline-terminated authorized-key line. The bytes are not wiped when
    the object goes away.
    """
    private_key: bytes
    public_key: bytes

    def fingerprint(self) -> str:
        return compute_fingerprint(self.public_key)


@dataclass
class PemBlock:
    label: str
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def encrypted(self) -> bool:
        return "ENCRYPTED" in self.headers.get("Proc-Type", "")

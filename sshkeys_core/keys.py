from __future__ import annotations
from typing import Optional
from . import crypto, store
from .models import KeyMaterial
from .options import Config, Option, new


class SSHKeys:
    """
    A key configuration plus the last generated or loaded key pair.

        keys = SSHKeys.new(with_dir("keys"), with_comment(b"me@example.com"))
        keys.generate()
        keys.save()

    generate() and read() replace the held key pair.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.private_key: bytes = b""
        self.public_key: bytes = b""

    @classmethod
    def new(cls, *options: Option) -> "SSHKeys":
        return cls(new(*options))

    @property
    def private_key_file(self) -> str:
        return store.private_key_path(self.config.directory, self.config.filename)

    @property
    def public_key_file(self) -> str:
        return store.public_key_path(self.config.directory, self.config.filename)

    @property
    def material(self) -> KeyMaterial:
        return KeyMaterial(private_key=self.private_key, public_key=self.public_key)

    def generate(self) -> KeyMaterial:
        self._hold(crypto.generate(self.config))
        return self.material

    def save(self) -> None:
        store.save(self.config.directory, self.config.filename, self.material)

    def read(self, strict: bool = False) -> KeyMaterial:
        self._hold(store.load(
            self.config.directory, self.config.filename, self.config.passphrase, strict=strict))
        return self.material

    def _hold(self, m: KeyMaterial) -> None:
        self.private_key, self.public_key = m.private_key, m.public_key

"""
sshkeys_core.options
--------------------
Immutable key configuration and the option functions that build it.

    cfg = new(with_dir("keys"), with_passphrase(b"secret"))

Options are applied in call order over a config pre-filled with defaults,
so a later option wins over an earlier one for the same field.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict, replace
from typing import Any, Callable, Dict, Union
from .constants import (
    KeyType, DEFAULT_KEY_TYPE, DEFAULT_KEY_LENGTH, DEFAULT_DIR, DEFAULT_FILENAME,
)
from .utils import as_bytes


@dataclass(frozen=True)
class Config:
    key_type: KeyType = DEFAULT_KEY_TYPE
    key_length: int = DEFAULT_KEY_LENGTH
    directory: str = DEFAULT_DIR
    filename: str = DEFAULT_FILENAME
    passphrase: bytes = b""     # empty -> private key stored in plaintext
    comment: bytes = b""        # empty -> no trailing comment on the public line

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["key_type"] = self.key_type.value
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Build a config from a plain mapping (inverse of to_dict).

        Each key is routed through its option function so the same
        clamping and blank-value rules apply as in code.
        """
        unknown = set(data) - set(_DICT_OPTIONS)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return new(*(_DICT_OPTIONS[k](v) for k, v in data.items()))


Option = Callable[[Config], Config]


def new(*options: Option) -> Config:
    cfg = Config()
    for opt in options:
        cfg = opt(cfg)
    return cfg


def with_filename(name: str) -> Option:
    """Set the private key file name. A blank name keeps the current one."""
    def apply(cfg: Config) -> Config:
        if not name:
            return cfg
        return replace(cfg, filename=name)
    return apply


def with_key_type(name: Union[str, KeyType]) -> Option:
    """Select the key algorithm.

    Only RSA is supported, so the argument is ignored and the config is
    always pinned to ``KeyType.RSA``.
    """
    # TODO: map name onto KeyType once a second algorithm exists in crypto.py
    return lambda cfg: replace(cfg, key_type=KeyType.RSA)


def with_key_length(bits: int) -> Option:
    bits = max(int(bits), 0)
    return lambda cfg: replace(cfg, key_length=bits)


def with_dir(path: str) -> Option:
    """Directory the keys are saved to and read from. Created on save if missing."""
    path = path or DEFAULT_DIR
    return lambda cfg: replace(cfg, directory=path)


def with_passphrase(passphrase: Union[bytes, str]) -> Option:
    passphrase = as_bytes(passphrase)
    return lambda cfg: replace(cfg, passphrase=passphrase)


def with_comment(comment: Union[bytes, str]) -> Option:
    """Comment appended to the public key line, usually a mail address."""
    comment = as_bytes(comment)
    return lambda cfg: replace(cfg, comment=comment)


_DICT_OPTIONS: Dict[str, Callable[[Any], Option]] = {
    "key_type": with_key_type,
    "key_length": with_key_length,
    "directory": with_dir,
    "filename": with_filename,
    "passphrase": with_passphrase,
    "comment": with_comment,
}

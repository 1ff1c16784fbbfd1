# tests/test_options.py

import dataclasses
import pytest
from sshkeys_core.constants import KeyType
from sshkeys_core.options import (
    Config, new, with_filename, with_key_type, with_key_length, with_dir,
    with_passphrase, with_comment,
)


def test_defaults():
    cfg = new()
    assert cfg.filename == "id_rsa"
    assert cfg.key_length == 2048
    assert cfg.directory == "."
    assert cfg.key_type is KeyType.RSA
    assert cfg.passphrase == b""
    assert cfg.comment == b""


def test_all_options():
    cfg = new(
        with_key_type("RSA"),
        with_key_length(4096),
        with_dir("hoge/fuga/hogefuga"),
        with_passphrase(b"hogefugao"),
        with_comment(b"hoge@example.com"),
        with_filename("deploy_key"),
    )
    assert cfg.key_length == 4096
    assert cfg.directory == "hoge/fuga/hogefuga"
    assert cfg.passphrase == b"hogefugao"
    assert cfg.comment == b"hoge@example.com"
    assert cfg.filename == "deploy_key"


def test_later_option_wins():
    cfg = new(with_key_length(1024), with_dir("a"), with_key_length(3072))
    assert cfg.key_length == 3072
    assert cfg.directory == "a"


def test_blank_values_keep_defaults():
    cfg = new(with_filename(""), with_dir(""))
    assert cfg.filename == "id_rsa"
    assert cfg.directory == "."

    # blank filename keeps an earlier explicit value too
    assert new(with_filename("k"), with_filename("")).filename == "k"


def test_negative_key_length_clamps_to_zero():
    assert new(with_key_length(-5)).key_length == 0


def test_key_type_is_pinned_to_rsa():
    assert new(with_key_type("ed25519")).key_type is KeyType.RSA


def test_str_passphrase_and_comment_are_encoded():
    cfg = new(with_passphrase("pässword"), with_comment("me@example.com"))
    assert cfg.passphrase == "pässword".encode("utf-8")
    assert cfg.comment == b"me@example.com"


def test_config_is_immutable():
    cfg = new()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.filename = "other"


def test_config_dict_roundtrip():
    cfg = new(with_dir("keys"), with_comment(b"a@b.com"), with_key_length(3072))
    d = cfg.to_dict()
    assert d["key_type"] == "RSA"
    assert Config.from_dict(d) == cfg


def test_from_dict_applies_option_rules():
    cfg = Config.from_dict({"key_length": -1, "directory": "", "filename": ""})
    assert cfg.key_length == 0
    assert cfg.directory == "."
    assert cfg.filename == "id_rsa"


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="bogus"):
        Config.from_dict({"bogus": 1})

from enum import Enum


class KeyType(str, Enum):
    """Supported key algorithms. Only RSA is implemented."""
    RSA = "RSA"


DEFAULT_KEY_TYPE = KeyType.RSA
DEFAULT_KEY_LENGTH = 2048
DEFAULT_DIR = "."
DEFAULT_FILENAME = "id_rsa"

RSA_PUBLIC_EXPONENT = 65537

# PEM labels per key type
PEM_LABELS = {
    KeyType.RSA: "RSA PRIVATE KEY",
}

PUBLIC_KEY_SUFFIX = ".pub"

DIR_MODE = 0o700
FILE_MODE = 0o600

import pytest
from sshkeys_core.crypto import generate_private_key


@pytest.fixture(scope="session")
def rsa_key():
    # 1024 is the smallest size the backend accepts; keeps the suite fast
    return generate_private_key(1024)

"""PEM key file loading."""

from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.types import (
    PrivateKeyTypes,
    PublicKeyTypes,
)


def load_public_key(path: str | Path) -> PublicKeyTypes:
    """Load a SubjectPublicKeyInfo or PKCS#1 PEM public key from disk."""
    return serialization.load_pem_public_key(Path(path).read_bytes())


def load_private_key(path: str | Path) -> PrivateKeyTypes:
    """Load an unencrypted PKCS#8 or PKCS#1 PEM private key from disk."""
    return serialization.load_pem_private_key(Path(path).read_bytes(), password=None)

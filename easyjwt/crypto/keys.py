"""Key material construction and signing credential selection."""

import os
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from easyjwt.core.errors import (
    KeyFileNotFoundError,
    KeyMaterialInvalidError,
    MissingArgumentError,
)
from easyjwt.crypto import pem
from easyjwt.crypto.types import (
    AsymmetricKey,
    KeyHandle,
    KeyRole,
    SharedSecretKey,
    SigningAlgorithm,
    SigningCredentials,
)


def build_shared_secret_key(secret: str | None) -> SharedSecretKey:
    """Build an HS256 key from a UTF-8 secret of at least 128 bits."""
    if not secret:
        raise MissingArgumentError("secret")
    return SharedSecretKey(secret=secret.encode("utf-8"))


def build_asymmetric_key(
    path: str | os.PathLike[str] | None, role: KeyRole
) -> AsymmetricKey:
    """Load an RSA public or private key from a PEM file."""
    if not path:
        raise MissingArgumentError("path")
    key_path = Path(path)
    if not key_path.is_file():
        raise KeyFileNotFoundError(key_path)

    loader = pem.load_private_key if role is KeyRole.PRIVATE else pem.load_public_key
    try:
        loaded = loader(key_path)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyMaterialInvalidError(
            f"Cannot load {role} key from {key_path}: {exc}"
        ) from exc

    expected = RSAPrivateKey if role is KeyRole.PRIVATE else RSAPublicKey
    if not isinstance(loaded, expected):
        raise KeyMaterialInvalidError(
            f"Expected an RSA {role} key in {key_path}, "
            f"got {type(loaded).__name__}"
        )
    return AsymmetricKey(role=role, key=loaded)


def signing_credentials_for(key: KeyHandle) -> SigningCredentials:
    """Pair a key with the algorithm implied by its kind."""
    if isinstance(key, SharedSecretKey):
        return SigningCredentials(key=key, algorithm=SigningAlgorithm.HS256)
    if key.role is not KeyRole.PRIVATE:
        raise KeyMaterialInvalidError("A public key cannot sign tokens")
    return SigningCredentials(key=key, algorithm=SigningAlgorithm.RS512)

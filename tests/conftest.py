"""Shared test fixtures for easy-jwt."""

from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from pydantic import BaseModel

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537


class KeyFiles(BaseModel):
    """Paths of an RSA keypair written as PEM files."""

    private_key_path: Path
    public_key_path: Path


def write_rsa_keypair(directory: Path) -> KeyFiles:
    """Generate an RSA-2048 keypair and write it as PEM files."""
    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_SIZE,
    )
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    directory.mkdir(parents=True, exist_ok=True)
    files = KeyFiles(
        private_key_path=directory / "jwtRS512.key",
        public_key_path=directory / "jwtRS512.key.pub",
    )
    files.private_key_path.write_bytes(private_pem)
    files.public_key_path.write_bytes(public_pem)
    return files


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep EASYJWT_* variables from the host out of test settings."""
    monkeypatch.delenv("EASYJWT_LEEWAY_SECONDS", raising=False)
    monkeypatch.delenv("EASYJWT_LOG_CLAIM_VALUES", raising=False)


@pytest.fixture(scope="session")
def rsa_keys(tmp_path_factory: pytest.TempPathFactory) -> KeyFiles:
    """An RSA keypair shared by the whole test session."""
    return write_rsa_keypair(tmp_path_factory.mktemp("keys"))


@pytest.fixture(scope="session")
def other_rsa_keys(tmp_path_factory: pytest.TempPathFactory) -> KeyFiles:
    """A second, unrelated RSA keypair."""
    return write_rsa_keypair(tmp_path_factory.mktemp("other-keys"))


@pytest.fixture
def private_key_path(rsa_keys: KeyFiles) -> Path:
    return rsa_keys.private_key_path


@pytest.fixture
def public_key_path(rsa_keys: KeyFiles) -> Path:
    return rsa_keys.public_key_path


@pytest.fixture
def other_public_key_path(other_rsa_keys: KeyFiles) -> Path:
    return other_rsa_keys.public_key_path

"""Type definitions for key handles and signing credentials."""

from enum import StrEnum
from typing import Any

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from pydantic import BaseModel, ConfigDict, SecretBytes

from easyjwt.core.errors import WeakKeyError

MINIMUM_SHARED_KEY_BITS = 128


class SigningAlgorithm(StrEnum):
    """JWS algorithms issued and accepted by this library."""

    HS256 = "HS256"
    RS512 = "RS512"


class KeyRole(StrEnum):
    """Which half of an RSA keypair a handle carries."""

    PUBLIC = "public"
    PRIVATE = "private"


class SharedSecretKey(BaseModel):
    """Symmetric key derived from a caller-supplied secret."""

    model_config = ConfigDict(frozen=True)

    secret: SecretBytes

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        if self.bit_length < MINIMUM_SHARED_KEY_BITS:
            raise WeakKeyError(self.bit_length, MINIMUM_SHARED_KEY_BITS)

    @property
    def bit_length(self) -> int:
        return 8 * len(self.secret.get_secret_value())

    @property
    def algorithm(self) -> SigningAlgorithm:
        return SigningAlgorithm.HS256

    def material(self) -> bytes:
        """Raw key bytes for the token engine."""
        return self.secret.get_secret_value()


class AsymmetricKey(BaseModel):
    """RSA key loaded from PEM material, tagged with its role."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    role: KeyRole
    key: RSAPublicKey | RSAPrivateKey

    def __repr_args__(self) -> Any:
        yield "role", self.role

    @property
    def algorithm(self) -> SigningAlgorithm:
        return SigningAlgorithm.RS512

    def material(self) -> RSAPublicKey | RSAPrivateKey:
        """Key object for the token engine."""
        return self.key


KeyHandle = SharedSecretKey | AsymmetricKey


class SigningCredentials(BaseModel):
    """A key paired with the algorithm it signs with."""

    model_config = ConfigDict(frozen=True)

    key: KeyHandle
    algorithm: SigningAlgorithm

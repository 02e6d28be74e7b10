"""Type definitions for validation inputs and trust policies."""

from pydantic import BaseModel, ConfigDict

from easyjwt.crypto.types import KeyHandle, SigningAlgorithm


class ValidationParameters(BaseModel):
    """Caller-facing validation options.

    An empty issuer or audience disables that check.
    """

    valid_issuer: str | None = None
    valid_audience: str | None = None
    validate_lifetime: bool = True

    @classmethod
    def default(cls, issuer: str | None) -> "ValidationParameters":
        """Issuer and lifetime checks, no audience check."""
        return cls(valid_issuer=issuer, validate_lifetime=True)


class TrustPolicy(BaseModel):
    """Checks a single validation call applies to a token."""

    model_config = ConfigDict(frozen=True)

    issuer: str | None = None
    audience: str | None = None
    validate_lifetime: bool = True
    keys: tuple[KeyHandle, ...]

    @property
    def validate_issuer(self) -> bool:
        return self.issuer is not None

    @property
    def validate_audience(self) -> bool:
        return self.audience is not None

    @property
    def algorithms(self) -> list[SigningAlgorithm]:
        """Algorithms implied by the key set, in key order."""
        return list(dict.fromkeys(key.algorithm for key in self.keys))

"""Trust policy construction."""

from collections.abc import Sequence

from easyjwt.core.errors import NoVerificationKeyError
from easyjwt.crypto.types import KeyHandle
from easyjwt.validation.types import TrustPolicy, ValidationParameters


def build_policy(
    parameters: ValidationParameters, keys: Sequence[KeyHandle]
) -> TrustPolicy:
    """Build a trust policy accepting a signature from any of ``keys``."""
    if not keys:
        raise NoVerificationKeyError("At least one verification key is required")
    return TrustPolicy(
        issuer=parameters.valid_issuer or None,
        audience=parameters.valid_audience or None,
        validate_lifetime=parameters.validate_lifetime,
        keys=tuple(keys),
    )

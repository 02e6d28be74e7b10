"""PyJWT adapter: signing, unverified parsing, and policy-driven verification."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

import jwt
from jwt.types import Options
from pydantic import BaseModel

from easyjwt.claims.codec import parse_claim_value
from easyjwt.claims.types import Claim, ClaimValueType
from easyjwt.core.errors import (
    AudienceMismatchError,
    EasyJWTError,
    InvalidSignatureError,
    IssuerMismatchError,
    KeyMaterialInvalidError,
    MalformedTokenError,
    TokenExpiredError,
    TokenLifetimeError,
    TokenNotYetValidError,
    TokenValidationError,
    UnsupportedAlgorithmError,
)
from easyjwt.crypto.types import SigningCredentials
from easyjwt.tokens.payload import claims_to_payload, payload_to_claims
from easyjwt.validation.types import TrustPolicy

logger = logging.getLogger(__name__)

LIFETIME_CLAIMS = frozenset({"exp", "nbf", "iat"})
NUMERIC_DATE_CLAIMS = frozenset({"nbf", "iat"})

# Order matters: InvalidSignatureError subclasses DecodeError.
_ERROR_MAP: list[tuple[type[jwt.PyJWTError], type[EasyJWTError]]] = [
    (jwt.InvalidSignatureError, InvalidSignatureError),
    (jwt.ExpiredSignatureError, TokenExpiredError),
    (jwt.ImmatureSignatureError, TokenNotYetValidError),
    (jwt.InvalidIssuedAtError, TokenLifetimeError),
    (jwt.InvalidIssuerError, IssuerMismatchError),
    (jwt.InvalidAudienceError, AudienceMismatchError),
    (jwt.InvalidKeyError, KeyMaterialInvalidError),
    (jwt.DecodeError, MalformedTokenError),
]


class UnverifiedToken(BaseModel):
    """Header and claims read without checking the signature."""

    header: dict[str, Any]
    claims: list[Claim]

    @property
    def algorithm(self) -> Any:
        return self.header.get("alg")


def translate_error(exc: jwt.PyJWTError, algorithm: Any = None) -> EasyJWTError:
    """Map a PyJWT failure onto the easyjwt error taxonomy."""
    if isinstance(exc, jwt.MissingRequiredClaimError):
        if exc.claim == "iss":
            return IssuerMismatchError(str(exc))
        if exc.claim == "aud":
            return AudienceMismatchError(str(exc))
        if exc.claim in LIFETIME_CLAIMS:
            return TokenLifetimeError(str(exc))
        return TokenValidationError(str(exc))
    if isinstance(exc, jwt.InvalidAlgorithmError):
        return UnsupportedAlgorithmError(algorithm)
    for source, target in _ERROR_MAP:
        if isinstance(exc, source):
            return target(str(exc))
    return TokenValidationError(str(exc))


def expiry_timestamp(expires_at: datetime) -> int:
    """Epoch seconds for ``expires_at``; naive values are taken as UTC."""
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=UTC)
    return int(expires_at.timestamp())


def _as_numeric_date(claim: Claim) -> Claim:
    """Rewrite a timestamp ``nbf``/``iat`` claim as epoch seconds."""
    if claim.name not in NUMERIC_DATE_CLAIMS:
        return claim
    if claim.value_type != ClaimValueType.DATE_TIME:
        return claim
    value = parse_claim_value(claim)
    if not isinstance(value, datetime):
        return claim
    return Claim(
        name=claim.name,
        value=str(expiry_timestamp(value)),
        value_type=ClaimValueType.INTEGER64,
    )


class TokenEngine:
    """Frames, signs, and verifies compact JWS tokens through PyJWT."""

    def __init__(self, leeway: int = 0) -> None:
        self._leeway = leeway

    def sign(
        self,
        claims: Iterable[Claim],
        credentials: SigningCredentials,
        *,
        issuer: str,
        audience: str,
        expires_at: datetime,
    ) -> str:
        """Sign application claims plus the registered exp/iss/aud claims."""
        registered = {
            "exp": expiry_timestamp(expires_at),
            "iss": issuer,
            "aud": audience,
        }
        application = claims_to_payload(_as_numeric_date(c) for c in claims)
        payload = {
            name: value
            for name, value in application.items()
            if name not in registered
        }
        payload.update(registered)
        try:
            return jwt.encode(
                payload,
                credentials.key.material(),
                algorithm=str(credentials.algorithm),
            )
        except jwt.PyJWTError as exc:
            raise translate_error(exc, credentials.algorithm) from exc

    def parse_unverified(self, token: str) -> UnverifiedToken:
        """Read header and claims without any signature or claim checks."""
        try:
            header = jwt.get_unverified_header(token)
            payload = jwt.decode(token, options={"verify_signature": False})
        except jwt.PyJWTError as exc:
            raise MalformedTokenError(str(exc)) from exc
        return UnverifiedToken(header=header, claims=payload_to_claims(payload))

    def verify(self, token: str, policy: TrustPolicy) -> list[Claim]:
        """Verify ``token`` against ``policy`` and return its claims.

        Each policy key is tried in turn. A key whose signature or algorithm
        does not match moves on to the next key; any other failure is raised
        immediately.
        """
        try:
            algorithm = jwt.get_unverified_header(token).get("alg")
        except jwt.PyJWTError as exc:
            raise MalformedTokenError(str(exc)) from exc

        options: Options = {
            "verify_signature": True,
            "verify_exp": policy.validate_lifetime,
            "verify_nbf": policy.validate_lifetime,
            "verify_iat": policy.validate_lifetime,
            "verify_iss": policy.validate_issuer,
            "verify_aud": policy.validate_audience,
            "verify_sub": False,
            "verify_jti": False,
            "require": ["exp"] if policy.validate_lifetime else [],
        }
        signature_error: jwt.PyJWTError | None = None
        algorithm_error: jwt.PyJWTError | None = None
        for key in policy.keys:
            try:
                payload = jwt.decode(
                    token,
                    key.material(),
                    algorithms=[str(key.algorithm)],
                    issuer=policy.issuer,
                    audience=policy.audience,
                    options=options,
                    leeway=self._leeway,
                )
            except jwt.InvalidSignatureError as exc:
                signature_error = exc
                continue
            except jwt.InvalidAlgorithmError as exc:
                algorithm_error = exc
                continue
            except jwt.PyJWTError as exc:
                raise translate_error(exc, algorithm) from exc
            logger.debug("Token verified with %s key", key.algorithm)
            return payload_to_claims(payload)

        failure = signature_error or algorithm_error
        if failure is None:
            raise InvalidSignatureError("Trust policy has no verification keys")
        raise translate_error(failure, algorithm) from failure

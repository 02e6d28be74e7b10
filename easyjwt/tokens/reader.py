"""JWT reading, with optional signature and claim validation."""

import logging
import os

from easyjwt.claims.codec import decode_claims
from easyjwt.claims.types import TypedClaimMap
from easyjwt.core.settings import JWTSettings
from easyjwt.crypto.keys import build_asymmetric_key, build_shared_secret_key
from easyjwt.crypto.types import KeyHandle, KeyRole
from easyjwt.tokens.engine import TokenEngine
from easyjwt.validation.dispatch import select_validation_path
from easyjwt.validation.policy import build_policy
from easyjwt.validation.types import ValidationParameters

logger = logging.getLogger(__name__)


class JWTReader:
    """Reads token claims into typed maps.

    ``read`` trusts nothing and checks nothing. The ``read_and_validate*``
    methods verify the signature and the checks enabled in
    ``ValidationParameters`` before decoding.
    """

    def __init__(self, settings: JWTSettings | None = None) -> None:
        self._settings = settings or JWTSettings()
        self._engine = TokenEngine(leeway=self._settings.leeway_seconds)

    def read(self, token: str) -> TypedClaimMap:
        """Decode claims without verifying the token."""
        unverified = self._engine.parse_unverified(token)
        return self._report(decode_claims(unverified.claims))

    def read_and_validate(
        self,
        token: str,
        parameters: ValidationParameters,
        shared_key: str | None,
        public_key_path: str | os.PathLike[str] | None,
    ) -> TypedClaimMap:
        """Validate with whichever key matches the token's ``alg`` header."""
        algorithm = self._engine.parse_unverified(token).algorithm
        path = select_validation_path(algorithm, shared_key, public_key_path)
        return self._validate(token, parameters, path.key)

    def read_and_validate_symmetric(
        self, token: str, parameters: ValidationParameters, shared_key: str
    ) -> TypedClaimMap:
        """Validate an HS256 token against a shared secret."""
        return self._validate(token, parameters, build_shared_secret_key(shared_key))

    def read_and_validate_asymmetric(
        self,
        token: str,
        parameters: ValidationParameters,
        public_key_path: str | os.PathLike[str],
    ) -> TypedClaimMap:
        """Validate an RS512 token against a PEM public key."""
        key = build_asymmetric_key(public_key_path, KeyRole.PUBLIC)
        return self._validate(token, parameters, key)

    def _validate(
        self, token: str, parameters: ValidationParameters, key: KeyHandle
    ) -> TypedClaimMap:
        policy = build_policy(parameters, [key])
        claims = self._engine.verify(token, policy)
        return self._report(decode_claims(claims))

    def _report(self, claims: TypedClaimMap) -> TypedClaimMap:
        if self._settings.log_claim_values:
            logger.debug("Read token claims %r", claims)
        else:
            logger.debug("Read token claims %s", sorted(claims))
        return claims

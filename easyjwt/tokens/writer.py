"""JWT issuance with shared-secret or RSA private keys."""

import logging
import os
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from easyjwt.claims.codec import encode_claims
from easyjwt.core.errors import MissingArgumentError
from easyjwt.core.settings import JWTSettings
from easyjwt.crypto.keys import (
    build_asymmetric_key,
    build_shared_secret_key,
    signing_credentials_for,
)
from easyjwt.crypto.types import KeyRole, SigningCredentials
from easyjwt.tokens.engine import TokenEngine

logger = logging.getLogger(__name__)


class JWTWriter:
    """Creates HS256- or RS512-signed tokens from typed claim maps."""

    def __init__(self, settings: JWTSettings | None = None) -> None:
        self._settings = settings or JWTSettings()
        self._engine = TokenEngine(leeway=self._settings.leeway_seconds)

    def write_symmetric(
        self,
        issuer: str,
        audience: str,
        expires_at: datetime,
        shared_key: str,
        claims: Mapping[str, Any] | None = None,
    ) -> str:
        """Write a token signed with HMAC-SHA256 over ``shared_key``."""
        if not shared_key:
            raise MissingArgumentError("shared_key")
        credentials = signing_credentials_for(build_shared_secret_key(shared_key))
        return self._write(issuer, audience, expires_at, credentials, claims)

    def write_asymmetric(
        self,
        issuer: str,
        audience: str,
        expires_at: datetime,
        private_key_path: str | os.PathLike[str],
        claims: Mapping[str, Any] | None = None,
    ) -> str:
        """Write a token signed with RSA-SHA512 using a PEM private key."""
        if not private_key_path:
            raise MissingArgumentError("private_key_path")
        key = build_asymmetric_key(private_key_path, KeyRole.PRIVATE)
        credentials = signing_credentials_for(key)
        return self._write(issuer, audience, expires_at, credentials, claims)

    def _write(
        self,
        issuer: str,
        audience: str,
        expires_at: datetime,
        credentials: SigningCredentials,
        claims: Mapping[str, Any] | None,
    ) -> str:
        if not issuer:
            raise MissingArgumentError("issuer")
        if not audience:
            raise MissingArgumentError("audience")

        encoded = encode_claims(claims)
        logger.debug(
            "Issuing %s token with claims %s",
            credentials.algorithm,
            sorted({claim.name for claim in encoded}),
        )
        return self._engine.sign(
            encoded,
            credentials,
            issuer=issuer,
            audience=audience,
            expires_at=expires_at,
        )

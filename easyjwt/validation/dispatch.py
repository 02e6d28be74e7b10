"""Selection of the symmetric or asymmetric validation path.

The choice is made from the token's unverified ``alg`` header. Only the key
for the chosen path is built, so a caller may pass both a shared secret and a
public key path and the unused one is never read.
"""

import logging
import os
from typing import Any

from pydantic import BaseModel, ConfigDict

from easyjwt.core.errors import UnsupportedAlgorithmError
from easyjwt.crypto.keys import build_asymmetric_key, build_shared_secret_key
from easyjwt.crypto.types import (
    AsymmetricKey,
    KeyRole,
    SharedSecretKey,
    SigningAlgorithm,
)

logger = logging.getLogger(__name__)


class SymmetricPath(BaseModel):
    """Validate with a shared secret (HS256)."""

    model_config = ConfigDict(frozen=True)

    key: SharedSecretKey


class AsymmetricPath(BaseModel):
    """Validate with an RSA public key (RS512)."""

    model_config = ConfigDict(frozen=True)

    key: AsymmetricKey


ValidationPath = SymmetricPath | AsymmetricPath


def select_validation_path(
    algorithm: Any,
    shared_key: str | None,
    public_key_path: str | os.PathLike[str] | None,
) -> ValidationPath:
    """Build the key for the path named by ``algorithm``."""
    if algorithm == SigningAlgorithm.HS256:
        logger.debug("Dispatching %s token to symmetric validation", algorithm)
        return SymmetricPath(key=build_shared_secret_key(shared_key))
    if algorithm == SigningAlgorithm.RS512:
        logger.debug("Dispatching %s token to asymmetric validation", algorithm)
        return AsymmetricPath(
            key=build_asymmetric_key(public_key_path, KeyRole.PUBLIC)
        )
    raise UnsupportedAlgorithmError(algorithm)

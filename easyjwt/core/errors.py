"""Error taxonomy for token issuance, key material, and validation.

Argument and key errors also derive from the matching builtin so callers can
catch them as ``ValueError`` / ``FileNotFoundError``. Validation failures share
``TokenValidationError`` so a trust boundary can reject on a single type.
"""

from pathlib import Path


class EasyJWTError(Exception):
    """Base class for every error raised by easyjwt."""


class MissingArgumentError(EasyJWTError, ValueError):
    """A required issuer, audience, secret, or key path was empty."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Argument '{argument}' must not be empty")
        self.argument = argument


class WeakKeyError(EasyJWTError, ValueError):
    """A shared secret is shorter than the minimum key size."""

    def __init__(self, bit_length: int, minimum: int) -> None:
        super().__init__(
            f"Symmetric shared key must be at least {minimum} bits. "
            f"Given key has {bit_length} bits."
        )
        self.bit_length = bit_length
        self.minimum = minimum


class KeyFileNotFoundError(EasyJWTError, FileNotFoundError):
    """No PEM key file exists at the given path."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"RSA key not found in path {path}")
        self.path = str(path)


class KeyMaterialInvalidError(EasyJWTError, ValueError):
    """Key material could not be loaded or is unusable for the operation."""


class UnsupportedAlgorithmError(EasyJWTError, ValueError):
    """The token declares a signing algorithm this library does not accept."""

    def __init__(self, algorithm: object) -> None:
        super().__init__(f"Unknown signing algorithm {algorithm}")
        self.algorithm = algorithm


class NoVerificationKeyError(EasyJWTError, ValueError):
    """A trust policy was requested without any verification key."""


class MalformedTokenError(EasyJWTError, ValueError):
    """The token string is not a structurally valid JWT."""


class TokenValidationError(EasyJWTError):
    """Base class for signature and claim validation failures."""


class InvalidSignatureError(TokenValidationError):
    """No key in the trust policy verifies the token signature."""


class IssuerMismatchError(TokenValidationError):
    """The ``iss`` claim is missing or differs from the expected issuer."""


class AudienceMismatchError(TokenValidationError):
    """The ``aud`` claim is missing or differs from the expected audience."""


class TokenLifetimeError(TokenValidationError):
    """The token lifetime could not be established or is out of range."""


class TokenExpiredError(TokenLifetimeError):
    """The ``exp`` claim is in the past."""


class TokenNotYetValidError(TokenLifetimeError):
    """The ``nbf`` or ``iat`` claim is in the future."""

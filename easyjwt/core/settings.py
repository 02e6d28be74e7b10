"""Library settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

LEEWAY_SECONDS_DEFAULT = 0


class JWTSettings(BaseSettings):
    """Reader and writer behaviour shared across calls."""

    model_config = SettingsConfigDict(env_prefix="EASYJWT_", frozen=True)

    leeway_seconds: int = LEEWAY_SECONDS_DEFAULT
    log_claim_values: bool = False

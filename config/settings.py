from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_CONFIG = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


class AppSettings(BaseSettings):
    """General application settings."""

    model_config = ENV_CONFIG

    name: str = Field("Token Standard Adapters", validation_alias="APP_NAME")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


class EthereumSettings(BaseSettings):
    """Settings related to the Ethereum JSON-RPC node."""

    model_config = ENV_CONFIG

    provider_uri: str = Field(
        default="https://cloudflare-eth.com",
        validation_alias="PROVIDER_URI",
        description="Ethereum Node JSON-RPC URL",
    )
    # Chain id the provider is pinned to (answered locally, never asked from the node)
    chain_id: int = Field(default=1, gt=0, validation_alias="CHAIN_ID")
    # Timeout for RPC calls (seconds)
    rpc_timeout: int = Field(default=60, gt=0, validation_alias="RPC_TIMEOUT")


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Each sub-settings reads its own flat env vars.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    ethereum: EthereumSettings = Field(default_factory=EthereumSettings)

    model_config = ENV_CONFIG


# Singleton instance
settings = Settings()

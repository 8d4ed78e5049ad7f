from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from constants.system_contract_addresses import (
    DEPLOYER_PROXY_ADDRESS,
    GOVERNANCE_ADDRESS,
    RUNTIME_UPGRADE_ADDRESS,
    STAKING_ADDRESS,
)
from utils.formatter_utils import to_normalized_address

_ENV_CONFIG = SettingsConfigDict(
    env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
)


class AppSettings(BaseSettings):
    """General application settings."""

    model_config = _ENV_CONFIG

    name: str = Field("Chain Governance Client", validation_alias="APP_NAME")
    debug: bool = Field(False, validation_alias="DEBUG")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


class EthereumSettings(BaseSettings):
    """Settings related to the node connection used for calls and transactions."""

    model_config = _ENV_CONFIG

    provider_uri: str = Field(
        default="http://127.0.0.1:8545",
        validation_alias="PROVIDER_URI",
        description="JSON-RPC URL of the chain node",
    )
    # Timeout for RPC calls (seconds)
    rpc_timeout: int = Field(default=60, gt=0, validation_alias="RPC_TIMEOUT")
    # Sender of governance transactions, must be unlocked on the node.
    # Falls back to the node's first account when unset.
    from_address: Optional[str] = Field(default=None, validation_alias="FROM_ADDRESS")

    @field_validator("from_address")
    @classmethod
    def _checksum_from_address(cls, value: Optional[str]) -> Optional[str]:
        return to_normalized_address(value) if value else None


class ContractSettings(BaseSettings):
    """Addresses of the system contracts targeted by governance."""

    model_config = _ENV_CONFIG

    governance_address: str = Field(GOVERNANCE_ADDRESS, validation_alias="GOVERNANCE_ADDRESS")
    staking_address: str = Field(STAKING_ADDRESS, validation_alias="STAKING_ADDRESS")
    deployer_proxy_address: str = Field(DEPLOYER_PROXY_ADDRESS, validation_alias="DEPLOYER_PROXY_ADDRESS")
    runtime_upgrade_address: str = Field(RUNTIME_UPGRADE_ADDRESS, validation_alias="RUNTIME_UPGRADE_ADDRESS")

    @field_validator("governance_address", "staking_address", "deployer_proxy_address", "runtime_upgrade_address")
    @classmethod
    def _checksum_address(cls, value: str) -> str:
        return to_normalized_address(value)


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Each sub-settings class reads its own flat env vars (and the .env file).
    """

    app: AppSettings = Field(default_factory=AppSettings)
    ethereum: EthereumSettings = Field(default_factory=EthereumSettings)
    contracts: ContractSettings = Field(default_factory=ContractSettings)

    model_config = _ENV_CONFIG


# Singleton instance
settings = Settings()

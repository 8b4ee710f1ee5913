from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SUI_PACKAGE_ID = "0x7c1a7e8776126c07a4dabfb1ac02a11740018ea6d310cb4a784f6d43b4e9e73c"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    blob_store: str = "walrus"
    walrus_publisher_url: str = "https://publisher.walrus-testnet.walrus.space"
    walrus_aggregator_url: str = "https://aggregator.walrus-testnet.walrus.space"
    upload_base_timeout_seconds: float = 30.0
    upload_timeout_per_mib_seconds: float = 2.0
    download_timeout_seconds: float = 30.0

    signer: str = "example"
    sui_cli_path: str = "sui"
    sui_package_id: str = DEFAULT_SUI_PACKAGE_ID
    sui_module: str = "walrus_stamp"
    sui_function: str = "stamp_file"
    sui_chain: str = "sui:testnet"
    sui_gas_budget: int = 10_000_000
    sui_explorer_url: str = "https://suiscan.xyz/testnet"

    @field_validator("sui_package_id", mode="before")
    @classmethod
    def _default_blank_package_id(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_SUI_PACKAGE_ID
        return value

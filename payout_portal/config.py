"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    base_url: str = "https://api-staging.muralpay.com"
    api_key: str = ""
    transfer_api_key: str = ""  # Only sent when executing payouts
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "MURALPAY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def missing_credentials(self) -> list[str]:
        """Names of the credential settings that are not configured."""
        missing = []
        if not self.api_key:
            missing.append("MURALPAY_API_KEY")
        if not self.transfer_api_key:
            missing.append("MURALPAY_TRANSFER_API_KEY")
        return missing


settings = Settings()

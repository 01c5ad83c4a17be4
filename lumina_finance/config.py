"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from lumina_finance.domain.models import SitePolicy


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "lumina-finance"
    log_level: str = "INFO"

    # Site finance policy
    default_interest_rate: float = 13.5
    max_balloon_percent: float = 40.0
    default_balloon_percent: float = 0.0
    catalog_deposit_percent: float = 10.0

    # Deal finalization defaults (pass-through fees, in rand)
    default_external_admin_fee: float = 7000.0
    default_bank_initiation_fee: float = 1207.0

    def site_policy(self) -> SitePolicy:
        """Site policy struct handed to the domain layer"""
        return SitePolicy(
            default_interest_rate=self.default_interest_rate,
            max_balloon_percent=self.max_balloon_percent,
            default_balloon_percent=self.default_balloon_percent,
            catalog_deposit_percent=self.catalog_deposit_percent,
        )


settings = Settings()

"""Process configuration loaded from the environment and ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.application.authentication import TokenSettings


class Settings(BaseSettings):
    JWT_SECRET: str
    JWT_EXPIRESIN: int = Field(300, gt=0, description="Token lifetime in seconds")
    JWT_ALGORITHM: str = "HS256"
    DATA_DIR: Path = Path("data")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def token_settings(self) -> TokenSettings:
        return TokenSettings(
            secret=self.JWT_SECRET,
            expires_in=self.JWT_EXPIRESIN,
            algorithm=self.JWT_ALGORITHM,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()

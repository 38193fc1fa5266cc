import os
from typing import Any, Union
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings."""
    PROJECT_NAME: str = "SalesDash"
    API_PREFIX: str = "/api"

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./salesdash.db")
    DATABASE_ECHO: bool = False

    # Seed data
    SEED_DATA_URL: str = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
    SEED_TIMEOUT_SECONDS: float = 30.0

    # Charts are always drawn for a single calendar year
    SALES_YEAR: int = 2023

    # Pagination
    DEFAULT_PER_PAGE: int = 10

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = os.getenv("DEBUG", "0") == "1"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 9999

    # CORS
    BACKEND_CORS_ORIGINS: Union[list[str], str] = ["*"]

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Any) -> list:
        """Parse the CORS origins from a string or return the list as is."""
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env")


settings = Settings()

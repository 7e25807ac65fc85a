"""Application configuration"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from decimal import Decimal


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Cinema API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Movie catalog with verified accounts and purchases"

    # Security
    SECRET_KEY: str = Field(...)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60)
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(default=7)
    ALGORITHM: str = "HS256"

    # One-time verification codes
    OTP_LENGTH: int = Field(default=6, ge=4, le=12)
    OTP_EXPIRE_MINUTES: int = Field(default=10, gt=0)

    # Database
    DATABASE_URL: str = Field(default="sqlite:///./cinema.db")

    # Email SMTP Configuration
    EMAIL_ENABLED: bool = Field(default=False)
    SMTP_HOST: str = Field(default="localhost")
    SMTP_PORT: int = Field(default=587)
    SMTP_USERNAME: str = Field(default="")
    SMTP_PASSWORD: str = Field(default="")
    SMTP_USE_TLS: bool = Field(default=True)
    FROM_EMAIL: str = Field(default="noreply@cinema.local")
    FROM_NAME: str = Field(default="Cinema")

    # CORS
    ALLOWED_HOSTS: list[str] = Field(default=["http://localhost:3000"])

    # Pricing
    MOVIE_PRICE: Decimal = Field(default=Decimal("9.99"))  # flat price for every title

    # Catalog
    SEED_SAMPLE_MOVIES: bool = Field(default=True)

    # Development
    LOG_LEVEL: str = Field(default="INFO")
    DEBUG: bool = Field(default=False)
    TESTING: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="development")


settings = Settings()

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field, model_validator
from urllib.parse import quote_plus
from pathlib import Path
from enum import Enum

INSECURE_SECRET_KEY = "your-secret-key-change-in-production"


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    # Environment Configuration
    ENVIRONMENT: Environment = Environment.DEVELOPMENT

    # Project Information
    PROJECT_NAME: str = "VitalCheck"
    VERSION: str = "1.0.0"

    # Server settings
    SERVER_HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Database
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "vitalcheck"
    SQLALCHEMY_DATABASE_URI: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SQLALCHEMY_DATABASE_URI", "DATABASE_URL"),
    )

    # Security
    SECRET_KEY: str = INSECURE_SECRET_KEY
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    BCRYPT_ROUNDS: int = 10

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Static pages (public form and admin panel)
    STATIC_DIR: str = str(Path(__file__).resolve().parents[1] / "static")

    # Timezone used to render export dates and times
    DEFAULT_TIMEZONE: str = "UTC"

    # Listings
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 1000
    RECENT_ASSESSMENTS_LIMIT: int = 5

    @model_validator(mode="after")
    def _finalize_and_validate(self) -> "Settings":
        # Derive SQLALCHEMY_DATABASE_URI if not provided
        if not self.SQLALCHEMY_DATABASE_URI:
            safe_user = quote_plus(self.POSTGRES_USER)
            if self.POSTGRES_PASSWORD:
                safe_password = quote_plus(self.POSTGRES_PASSWORD)
                self.SQLALCHEMY_DATABASE_URI = (
                    f"postgresql://{safe_user}:{safe_password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
                )
            else:
                self.SQLALCHEMY_DATABASE_URI = (
                    f"postgresql://{safe_user}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
                )

        # The fallback secret is public; only development may sign tokens with it
        if not self.is_development:
            if not self.SECRET_KEY or self.SECRET_KEY == INSECURE_SECRET_KEY:
                raise ValueError(
                    f"SECRET_KEY must be set to a private value in the {self.ENVIRONMENT.value} environment"
                )
        return self

    # Environment-specific properties
    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == Environment.DEVELOPMENT

    @property
    def is_staging(self) -> bool:
        return self.ENVIRONMENT == Environment.STAGING

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION

    @property
    def uses_insecure_secret(self) -> bool:
        return self.SECRET_KEY == INSECURE_SECRET_KEY

    model_config = SettingsConfigDict(
        case_sensitive=True, env_file=".env", extra="ignore", populate_by_name=True
    )


settings = Settings()

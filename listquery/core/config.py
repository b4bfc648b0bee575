
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Configuration loaded from environment variables / .env file."""

    app_env: str = Field(default="development", alias="APP_ENV")
    log_level: Optional[str] = Field(
        default=None, alias="LOG_LEVEL",
    )  # unset -> DEBUG in development, INFO otherwise

    # List query defaults
    default_sort_field: str = Field(
        default="createdAt", min_length=1, alias="DEFAULT_SORT_FIELD",
    )
    default_page: int = Field(default=1, ge=1, alias="DEFAULT_PAGE")
    default_page_size: int = Field(default=10, ge=1, alias="DEFAULT_PAGE_SIZE")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()

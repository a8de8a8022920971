"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = getenv("APP_NAME", "Restaurant List")
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    database_url: str = getenv("DATABASE_URL", "sqlite:///./restaurant_list.db")
    log_level: str = getenv("LOG_LEVEL", "INFO")
    seed_data: bool = getenv("SEED_DATA", "1") == "1"
    currency_symbol: str = getenv("CURRENCY_SYMBOL", "Rs.")


settings: Settings = Settings()

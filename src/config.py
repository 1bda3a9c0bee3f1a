"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "account-fraud-scorer"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    # "console" for local runs, "json" for log shipping
    log_format: str = "console"

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()

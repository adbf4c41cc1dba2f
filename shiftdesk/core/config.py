from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./schedule.db"
    DATABASE_ECHO: bool = False
    CREATE_TABLES: bool = True

    # Employee directory
    EMPLOYEE_API_BASE_URL: str = "http://planday-employee-api-techtest.westeurope.azurecontainer.io:5000"
    # fallback credential when the caller sends no Authorization header
    EMPLOYEE_API_TOKEN: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
